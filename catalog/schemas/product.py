from pydantic import BaseModel, Field, ConfigDict, field_validator
from pydantic.alias_generators import to_camel
from datetime import datetime, timezone
from typing import Optional
import math

# Ids and page numbers are 32-bit signed integers
MAX_INT = 2147483647


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Convert an offset-aware time to UTC; naive times are taken to be UTC already."""
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc)
    return value


class CamelModel(BaseModel):
    """Base schema that speaks camelCase on the wire and snake_case in Python."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProductBase(CamelModel):
    """Base schema for Product with common attributes."""
    name: str = Field(..., min_length=1, max_length=100, description="Product name")
    description: str = Field(..., min_length=1, max_length=1000, description="Product description")
    price: float = Field(..., ge=0.01, le=10000, description="List price")
    discount_price: Optional[float] = Field(None, description="Sale price, if the product is discounted")
    image_url: str = Field("", max_length=500, description="Product image path or URL")
    category: str = Field(..., min_length=1, max_length=50, description="Category name")
    brand: str = Field("", max_length=50, description="Brand name")
    stock_quantity: int = Field(0, ge=0, le=10000, description="Units in stock")
    rating: float = Field(0, ge=0, le=5, description="Average rating (0-5)")
    is_featured: bool = Field(False, description="Featured on the home page")
    is_on_sale: bool = Field(False, description="Currently on sale")


class ProductCreate(ProductBase):
    """Schema for creating a new product. Any client-supplied id is ignored."""
    date_added: Optional[datetime] = Field(None, description="Defaults to the creation time")

    @field_validator("date_added")
    @classmethod
    def date_added_to_utc(cls, value):
        return as_utc(value)


class ProductUpdate(ProductBase):
    """
    Schema for replacing an existing product.

    The body must carry the product id, which has to match the id in the URL.
    """
    id: int = Field(..., description="Product ID, must match the URL")
    date_added: Optional[datetime] = Field(None, description="Kept unchanged when omitted")

    @field_validator("date_added")
    @classmethod
    def date_added_to_utc(cls, value):
        return as_utc(value)


class ProductResponse(ProductBase):
    """Schema for product response including all fields."""
    id: int
    date_added: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_validator("date_added")
    @classmethod
    def stored_time_is_utc(cls, value: datetime) -> datetime:
        """SQLite returns stored UTC times without an offset."""
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class ProductListResponse(CamelModel):
    """Schema for paginated product list response."""
    items: list[ProductResponse]
    total_items: int
    page_number: int
    page_size: int
    total_pages: int
    has_previous_page: bool
    has_next_page: bool

    @classmethod
    def build(cls, products, total: int, page: int, page_size: int) -> "ProductListResponse":
        """Assemble the envelope, deriving the page counters from the totals."""
        total_pages = math.ceil(total / page_size)
        return cls(
            items=[ProductResponse.model_validate(p) for p in products],
            total_items=total,
            page_number=page,
            page_size=page_size,
            total_pages=total_pages,
            has_previous_page=page > 1,
            has_next_page=page < total_pages,
        )


class ProductQueryParameters(BaseModel):
    """Filtering, sorting and paging options for product listings."""
    category: Optional[str] = Field(None, description="Exact category match")
    min_price: Optional[float] = Field(None, ge=0, le=10000, description="Minimum effective price")
    max_price: Optional[float] = Field(None, ge=0, le=10000, description="Maximum effective price")
    on_sale: Optional[bool] = Field(None, description="Filter by sale status")
    featured: Optional[bool] = Field(None, description="Filter by featured status")
    sort_by: Optional[str] = Field(None, description="price, name, rating or date; id otherwise")
    sort_desc: bool = Field(False, description="Sort in descending order")
    page: int = Field(1, ge=1, le=MAX_INT, description="Page number, starting from 1")
    page_size: int = Field(10, ge=1, le=50, description="Items per page")
