from datetime import timedelta
import logging

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from catalog.models.product import Product, utcnow

logger = logging.getLogger(__name__)

# (days since added, product fields)
SEED_PRODUCTS = [
    (30, dict(
        name="Divine Luxury Watch",
        description="Elegant luxury watch with diamond embellishments and a gold-plated finish.",
        price=599.99, discount_price=499.99, image_url="/images/luxury-watch.jpg",
        category="Watches", brand="Divine Luxury", stock_quantity=10, rating=4.8,
        is_featured=True, is_on_sale=True,
    )),
    (15, dict(
        name="Divine Premium Headphones",
        description="Noise-cancelling wireless headphones with premium sound quality and comfort.",
        price=349.99, discount_price=299.99, image_url="/images/headphones.jpg",
        category="Electronics", brand="Divine Audio", stock_quantity=25, rating=4.6,
        is_featured=True, is_on_sale=True,
    )),
    (7, dict(
        name="Divine Leather Handbag",
        description="Handcrafted luxury leather handbag with gold accents.",
        price=899.99, discount_price=None, image_url="/images/leather-handbag.jpg",
        category="Fashion", brand="Divine Fashion", stock_quantity=5, rating=4.9,
        is_featured=True, is_on_sale=False,
    )),
    (10, dict(
        name="Divine Smart Watch",
        description="Smart watch with health monitoring features and premium design.",
        price=299.99, discount_price=249.99, image_url="/images/smart-watch.jpg",
        category="Electronics", brand="Divine Tech", stock_quantity=50, rating=4.5,
        is_featured=False, is_on_sale=True,
    )),
    (20, dict(
        name="Divine Perfume",
        description="Luxury fragrance with notes of jasmine, sandalwood, and vanilla.",
        price=199.99, discount_price=None, image_url="/images/perfume.jpg",
        category="Beauty", brand="Divine Scents", stock_quantity=30, rating=4.7,
        is_featured=False, is_on_sale=False,
    )),
    (25, dict(
        name="Divine Designer Sunglasses",
        description="Polarized designer sunglasses with UV protection.",
        price=249.99, discount_price=199.99, image_url="/images/sunglasses.jpg",
        category="Fashion", brand="Divine Eyewear", stock_quantity=15, rating=4.4,
        is_featured=False, is_on_sale=True,
    )),
    (5, dict(
        name="Divine Smartphone",
        description="Flagship smartphone with high-resolution camera and fast processor.",
        price=999.99, discount_price=899.99, image_url="/images/smartphone.jpg",
        category="Electronics", brand="Divine Tech", stock_quantity=40, rating=4.7,
        is_featured=True, is_on_sale=True,
    )),
    (12, dict(
        name="Divine Skincare Set",
        description="Premium skincare set with anti-aging formula.",
        price=149.99, discount_price=None, image_url="/images/skincare-set.jpg",
        category="Beauty", brand="Divine Skincare", stock_quantity=20, rating=4.6,
        is_featured=False, is_on_sale=False,
    )),
]


def seed_products(db: Session) -> int:
    """
    Load the demo catalog into an empty products table.

    Returns:
        Number of products inserted (0 if the catalog already had rows)
    """
    existing = db.scalar(select(func.count()).select_from(Product))
    if existing:
        logger.info(f"Catalog already holds {existing} products, skipping seed")
        return 0

    now = utcnow()
    for days_ago, fields in SEED_PRODUCTS:
        db.add(Product(date_added=now - timedelta(days=days_ago), **fields))
    db.commit()

    logger.info(f"Seeded catalog with {len(SEED_PRODUCTS)} products")
    return len(SEED_PRODUCTS)
