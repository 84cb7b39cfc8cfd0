from fastapi import APIRouter, Depends, HTTPException, Path, Request, Response, status

from catalog.api.dependencies import get_product_service, get_query_parameters
from catalog.services.product_service import ProductService, ProductIdMismatchError
from catalog.schemas.product import (
    ProductCreate,
    ProductUpdate,
    ProductResponse,
    ProductListResponse,
    ProductQueryParameters,
    MAX_INT,
)

router = APIRouter(prefix="/products", tags=["Products"])


def _not_found(product_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Product with ID {product_id} not found"
    )


@router.get(
    "",
    response_model=ProductListResponse,
    summary="List products",
    description="""
    Get a paginated list of products with optional filtering and sorting.

    Query parameter names are case-insensitive: `Category`, `MinPrice`, `MaxPrice`,
    `OnSale`, `Featured`, `SortBy`, `SortDesc`, `PageNumber` (or `Page`), `PageSize`.
    Price filters and price sorting use the discount price when one is set.
    """
)
def list_products(
    params: ProductQueryParameters = Depends(get_query_parameters),
    service: ProductService = Depends(get_product_service)
):
    """Get a filtered, sorted, paginated list of products."""
    products, total = service.get_all(params)
    return ProductListResponse.build(products, total, params.page, params.page_size)


@router.get(
    "/categories",
    response_model=list[str],
    summary="List categories",
    description="Get the distinct categories present in the catalog."
)
def list_categories(service: ProductService = Depends(get_product_service)):
    """Get all product categories."""
    return service.get_categories()


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    summary="Get product by ID",
    description="Get detailed information about a specific product."
)
def get_product(
    product_id: int = Path(..., ge=1, le=MAX_INT, description="Product ID"),
    service: ProductService = Depends(get_product_service)
):
    """Get a product by ID."""
    product = service.get_by_id(product_id)

    if not product:
        raise _not_found(product_id)

    return product


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new product",
    description="Create a new product. The id is assigned by the catalog."
)
def create_product(
    product_data: ProductCreate,
    request: Request,
    response: Response,
    service: ProductService = Depends(get_product_service)
):
    """
    Create a new product.

    - **name**: Product name, up to 100 characters (required)
    - **description**: Up to 1000 characters (required)
    - **price**: Between 0.01 and 10000 (required)
    - **category**: Up to 50 characters (required)
    """
    product = service.create(product_data)
    response.headers["Location"] = str(request.url_for("get_product", product_id=product.id))
    return product


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    summary="Replace a product",
    description="Replace every field of a product. The body id must match the URL id."
)
def update_product(
    product_data: ProductUpdate,
    product_id: int = Path(..., ge=1, le=MAX_INT, description="Product ID"),
    service: ProductService = Depends(get_product_service)
):
    """
    Update a product.

    The whole product is sent; omitted optional fields are reset to their
    defaults, except `dateAdded`, which is kept when omitted.
    """
    try:
        product = service.update(product_id, product_data)
    except ProductIdMismatchError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    if not product:
        raise _not_found(product_id)

    return product


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a product",
    description="Delete a product by ID."
)
def delete_product(
    product_id: int = Path(..., ge=1, le=MAX_INT, description="Product ID"),
    service: ProductService = Depends(get_product_service)
):
    """Delete a product."""
    deleted = service.delete(product_id)

    if not deleted:
        raise _not_found(product_id)

    return None
