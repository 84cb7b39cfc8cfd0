from pathlib import Path
import logging
import math

from fastapi import APIRouter, Depends, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from catalog.api.dependencies import get_product_service, parse_query_parameters
from catalog.api.errors import format_validation_errors
from catalog.config import get_settings
from catalog.schemas.product import ProductQueryParameters, MAX_INT
from catalog.services.product_service import ProductService
from catalog.web.pagination import page_numbers, query_string, sort_query

logger = logging.getLogger(__name__)
settings = get_settings()

TEMPLATES_DIR = Path(__file__).parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.globals["placeholder_image"] = "/assets/placeholder-product.jpg"

router = APIRouter(prefix="/shop", tags=["Shop"], include_in_schema=False)

SORT_OPTIONS = [("name", "Name"), ("price", "Price"), ("rating", "Rating"), ("date", "Newest")]


@router.get("", response_class=HTMLResponse)
def home_page(request: Request, service: ProductService = Depends(get_product_service)):
    """Landing page with the featured products."""
    params = ProductQueryParameters(featured=True, sort_by="rating", sort_desc=True, page_size=4)
    featured, _ = service.get_all(params)

    return templates.TemplateResponse(
        request,
        "home.html",
        {"app_name": settings.APP_NAME, "featured": featured},
    )


@router.get("/products", response_class=HTMLResponse)
def product_list_page(request: Request, service: ProductService = Depends(get_product_service)):
    """
    Product listing with filters, sortable columns and a pagination bar.

    Invalid filter values are dropped and reported on the page instead of
    failing the request.
    """
    defaults = {"page_size": settings.UI_PAGE_SIZE, "sort_by": "name"}
    errors = {}
    try:
        params = parse_query_parameters(request.query_params, **defaults)
    except RequestValidationError as e:
        errors = format_validation_errors(e.errors())
        logger.info(f"Ignoring invalid listing filters: {errors}")
        params = ProductQueryParameters(**defaults)

    products, total = service.get_all(params)
    total_pages = math.ceil(total / params.page_size)

    return templates.TemplateResponse(
        request,
        "product_list.html",
        {
            "app_name": settings.APP_NAME,
            "products": products,
            "params": params,
            "errors": errors,
            "categories": service.get_categories(),
            "total": total,
            "total_pages": total_pages,
            "pages": page_numbers(params.page, total_pages),
            "sort_options": [(key, label, sort_query(params, key)) for key, label in SORT_OPTIONS],
            "page_query": lambda page: query_string(params, page=page),
        },
    )


@router.get("/products/{product_id}", response_class=HTMLResponse)
def product_detail_page(
    request: Request,
    product_id: int,
    service: ProductService = Depends(get_product_service)
):
    """Product detail page; unknown ids render a not-found page."""
    product = service.get_by_id(product_id) if 1 <= product_id <= MAX_INT else None

    if not product:
        return templates.TemplateResponse(
            request,
            "not_found.html",
            {"app_name": settings.APP_NAME, "product_id": product_id},
            status_code=status.HTTP_404_NOT_FOUND,
        )

    return templates.TemplateResponse(
        request,
        "product_detail.html",
        {"app_name": settings.APP_NAME, "product": product},
    )
