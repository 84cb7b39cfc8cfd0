from typing import List, Optional
from urllib.parse import urlencode

from catalog.schemas.product import ProductQueryParameters

# Listing option -> query string name used in generated links
WIRE_NAMES = {
    "category": "Category",
    "min_price": "MinPrice",
    "max_price": "MaxPrice",
    "on_sale": "OnSale",
    "featured": "Featured",
    "sort_by": "SortBy",
    "sort_desc": "SortDesc",
    "page": "PageNumber",
    "page_size": "PageSize",
}


def page_numbers(current_page: int, total_pages: int, max_pages: int = 5) -> List[Optional[int]]:
    """
    Page links to show in a pagination bar.

    All pages are listed when there are at most ``max_pages``. Otherwise the
    first and last pages are always present, the pages around the
    current one fill the middle, and ``None`` marks a gap (an ellipsis).

    >>> page_numbers(1, 10)
    [1, 2, 3, 4, None, 10]
    >>> page_numbers(5, 10)
    [1, None, 4, 5, 6, None, 10]
    """
    if total_pages <= max_pages:
        return list(range(1, total_pages + 1))

    start = max(2, current_page - 1)
    end = min(total_pages - 1, current_page + 1)

    if current_page <= 3:
        end = min(total_pages - 1, 4)
    if current_page >= total_pages - 2:
        start = max(2, total_pages - 3)

    pages: List[Optional[int]] = [1]
    if start > 2:
        pages.append(None)
    pages.extend(range(start, end + 1))
    if end < total_pages - 1:
        pages.append(None)
    pages.append(total_pages)
    return pages


def query_string(params: ProductQueryParameters, **overrides) -> str:
    """Encode listing options as a query string, skipping unset values."""
    values = params.model_dump()
    values.update(overrides)

    pairs = []
    for field, wire_name in WIRE_NAMES.items():
        value = values.get(field)
        if value is None or value == "":
            continue
        if field == "sort_desc" and not value:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        pairs.append((wire_name, value))
    return urlencode(pairs)


def sort_query(params: ProductQueryParameters, sort_by: str) -> str:
    """
    Query string for a column header link.

    Clicking the active column flips the direction; any other column sorts
    ascending. Either way the listing goes back to the first page.
    """
    if (params.sort_by or "").lower() == sort_by:
        sort_desc = not params.sort_desc
    else:
        sort_desc = False
    return query_string(params, sort_by=sort_by, sort_desc=sort_desc, page=1)
