"""
Query composition for product listings.

A listing is built in three steps over a SQLAlchemy ``Select``:

1. ``apply_filters`` - AND of the optional category / price / flag predicates
2. ``apply_sorting`` - one sort key chosen by name, ties broken by ascending id
3. ``paginate`` - 1-based page offset and limit

Price filters and price sorting both use the effective price
(discount price when set, otherwise the list price).
"""
from typing import Optional, List, Tuple

from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session

from catalog.models.product import Product
from catalog.schemas.product import ProductQueryParameters

SORT_COLUMNS = {
    "price": Product.effective_price,
    "name": Product.name,
    "rating": Product.rating,
    "date": Product.date_added,
}


def apply_filters(
    stmt: Select,
    category: Optional[str] = None,
    min_price: Optional[float] = None,
    max_price: Optional[float] = None,
    on_sale: Optional[bool] = None,
    featured: Optional[bool] = None,
) -> Select:
    """Restrict a product selection; every given predicate must hold."""
    if category and category.strip():
        stmt = stmt.where(Product.category == category)

    if min_price is not None:
        stmt = stmt.where(Product.effective_price >= min_price)

    if max_price is not None:
        stmt = stmt.where(Product.effective_price <= max_price)

    if on_sale is not None:
        stmt = stmt.where(Product.is_on_sale == on_sale)

    if featured is not None:
        stmt = stmt.where(Product.is_featured == featured)

    return stmt


def apply_sorting(stmt: Select, sort_by: Optional[str] = None, sort_desc: bool = False) -> Select:
    """
    Order a product selection.

    Unknown or missing keys fall back to ordering by id. Equal keys keep
    ascending id order whatever the direction.
    """
    column = SORT_COLUMNS.get((sort_by or "").lower())

    if column is None:
        return stmt.order_by(Product.id.desc() if sort_desc else Product.id.asc())

    ordering = column.desc() if sort_desc else column.asc()
    return stmt.order_by(ordering, Product.id.asc())


def paginate(stmt: Select, page: int, page_size: int) -> Select:
    """Slice out a 1-based page. Pages past the end select nothing."""
    offset = (page - 1) * page_size
    return stmt.offset(offset).limit(page_size)


def count_matching(db: Session, stmt: Select) -> int:
    """Number of rows a filtered (unsorted, unpaginated) selection matches."""
    return db.scalar(select(func.count()).select_from(stmt.subquery()))


def list_products(db: Session, params: ProductQueryParameters) -> Tuple[List[Product], int]:
    """
    Run a filtered, sorted and paginated listing.

    Args:
        db: Database session
        params: Filter, sort and paging options

    Returns:
        Tuple of (products on the requested page, total matching count)
    """
    stmt = select(Product)

    stmt = apply_filters(
        stmt,
        category=params.category,
        min_price=params.min_price,
        max_price=params.max_price,
        on_sale=params.on_sale,
        featured=params.featured,
    )
    total = count_matching(db, stmt)

    stmt = apply_sorting(stmt, params.sort_by, params.sort_desc)
    products = db.scalars(paginate(stmt, params.page, params.page_size)).all()

    return list(products), total
