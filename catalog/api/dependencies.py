from typing import Mapping

from fastapi import Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.orm import Session

from catalog.database import get_db
from catalog.schemas.product import ProductQueryParameters
from catalog.services.product_service import ProductService

# Query string names, lowercased with underscores removed, mapped to fields.
# "Page" is accepted as an alias of "PageNumber".
QUERY_FIELDS = {
    "category": "category",
    "minprice": "min_price",
    "maxprice": "max_price",
    "onsale": "on_sale",
    "featured": "featured",
    "sortby": "sort_by",
    "sortdesc": "sort_desc",
    "pagenumber": "page",
    "page": "page",
    "pagesize": "page_size",
}


def parse_query_parameters(query_params: Mapping[str, str], **defaults) -> ProductQueryParameters:
    """
    Bind listing options from a query string, ignoring the case of the names.

    Empty values count as absent. ``defaults`` override the schema defaults
    for options the query string does not set.

    Raises:
        RequestValidationError: If a value is malformed or out of range
    """
    raw = dict(defaults)
    sources = {}

    for key, value in query_params.items():
        normalized = key.replace("_", "").lower()
        field = QUERY_FIELDS.get(normalized)
        if field is None or value == "":
            continue
        # PageNumber wins over Page
        if normalized == "page" and sources.get(field, "").replace("_", "").lower() == "pagenumber":
            continue
        raw[field] = value
        sources[field] = key

    try:
        return ProductQueryParameters(**raw)
    except ValidationError as e:
        errors = []
        for error in e.errors(include_url=False):
            loc = error["loc"]
            name = sources.get(loc[0], loc[0]) if loc else "query"
            errors.append({**error, "loc": ("query", name, *loc[1:])})
        raise RequestValidationError(errors)


def get_query_parameters(request: Request) -> ProductQueryParameters:
    """Dependency binding listing options from the request's query string."""
    return parse_query_parameters(request.query_params)


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    """Dependency providing a catalog store bound to the request's session."""
    return ProductService(db)
