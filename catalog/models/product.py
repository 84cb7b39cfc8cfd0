from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, Integer, String, Float, DateTime, CheckConstraint, func
from sqlalchemy.ext.hybrid import hybrid_property

from catalog.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Product(Base):
    """
    Product model representing an item in the catalog.

    Attributes:
        id: Unique identifier, assigned on insert and never reused
        name: Product name
        description: Long-form product description
        price: List price
        discount_price: Sale price, if any
        image_url: Path or URL of the product image
        category: Category the product is listed under
        brand: Brand name
        stock_quantity: Units available
        rating: Average customer rating (0-5)
        is_featured: Shown on the home page
        is_on_sale: Currently on sale
        date_added: Timestamp when the product was added to the catalog
    """
    __tablename__ = "products"

    # sqlite_autoincrement keeps ids monotonic even after deletes
    __table_args__ = (
        CheckConstraint('price >= 0.01 AND price <= 10000', name='check_price_range'),
        CheckConstraint('stock_quantity >= 0 AND stock_quantity <= 10000', name='check_stock_range'),
        CheckConstraint('rating >= 0 AND rating <= 5', name='check_rating_range'),
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(100), nullable=False, index=True)
    description = Column(String(1000), nullable=False)
    price = Column(Float, nullable=False)
    discount_price = Column(Float, nullable=True)
    image_url = Column(String(500), nullable=False, default="")
    category = Column(String(50), nullable=False, index=True)
    brand = Column(String(50), nullable=False, default="")
    stock_quantity = Column(Integer, nullable=False, default=0)
    rating = Column(Float, nullable=False, default=0)
    is_featured = Column(Boolean, nullable=False, default=False)
    is_on_sale = Column(Boolean, nullable=False, default=False)
    date_added = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    @hybrid_property
    def effective_price(self):
        """Discount price when set, otherwise the list price."""
        if self.discount_price is not None:
            return self.discount_price
        return self.price

    @effective_price.expression
    def effective_price(cls):
        return func.coalesce(cls.discount_price, cls.price)

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', category='{self.category}')>"
