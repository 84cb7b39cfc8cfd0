from sqlalchemy.orm import Session
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from typing import Optional, List, Tuple
import logging
import threading

from catalog.models.product import Product
from catalog.schemas.product import ProductCreate, ProductUpdate, ProductQueryParameters
from catalog.services import product_query

logger = logging.getLogger(__name__)

# Serializes catalog writes across requests
_write_lock = threading.Lock()


class ProductIdMismatchError(Exception):
    """Exception raised when the id in an update body differs from the target id."""
    pass


class ProductService:
    """
    Service class for the product catalog.

    This service handles:
    - Creating new products (the store assigns ids)
    - Reading single products
    - Filtered, sorted and paginated listings
    - Replacing and deleting products
    - Listing distinct categories

    Writes take a process-wide lock and select the target row FOR UPDATE,
    so concurrent edits of the same product cannot interleave. A failed
    write is rolled back before the error propagates.
    """

    def __init__(self, db: Session):
        self.db = db

    def create(self, product_data: ProductCreate) -> Product:
        """
        Create a new product.

        Args:
            product_data: Product creation data

        Returns:
            Created product instance with its assigned id
        """
        values = product_data.model_dump()
        if values["date_added"] is None:
            del values["date_added"]

        with _write_lock:
            try:
                product = Product(**values)
                self.db.add(product)
                self.db.commit()
                self.db.refresh(product)
            except IntegrityError as e:
                self.db.rollback()
                logger.error(f"Integrity error creating product: {e}")
                raise
            except Exception as e:
                self.db.rollback()
                logger.error(f"Error creating product: {e}")
                raise

        logger.info(f"Product #{product.id} created in category '{product.category}'")
        return product

    def get_by_id(self, product_id: int) -> Optional[Product]:
        """
        Get a product by ID.

        Args:
            product_id: Product ID to look up

        Returns:
            Product instance or None if not found
        """
        return self.db.get(Product, product_id)

    def get_all(self, params: ProductQueryParameters) -> Tuple[List[Product], int]:
        """
        Get a filtered, sorted and paginated list of products.

        Args:
            params: Filter, sort and paging options

        Returns:
            Tuple of (products list, total matching count)
        """
        return product_query.list_products(self.db, params)

    def update(self, product_id: int, product_data: ProductUpdate) -> Optional[Product]:
        """
        Replace every mutable field of an existing product.

        Args:
            product_id: ID of product to update
            product_data: Full product data; its id must equal product_id

        Returns:
            Updated product or None if not found

        Raises:
            ProductIdMismatchError: If product_data.id differs from product_id
        """
        if product_data.id != product_id:
            raise ProductIdMismatchError("ID in URL must match ID in request body")

        update_data = product_data.model_dump(exclude={"id"})
        if update_data["date_added"] is None:
            del update_data["date_added"]

        with _write_lock:
            try:
                product = self._get_for_update(product_id)

                if not product:
                    return None

                for field, value in update_data.items():
                    setattr(product, field, value)

                self.db.commit()
                self.db.refresh(product)
            except IntegrityError as e:
                self.db.rollback()
                logger.error(f"Integrity error updating product #{product_id}: {e}")
                raise
            except Exception as e:
                self.db.rollback()
                logger.error(f"Error updating product #{product_id}: {e}")
                raise

        logger.info(f"Product #{product_id} updated")
        return product

    def delete(self, product_id: int) -> bool:
        """
        Delete a product.

        Args:
            product_id: ID of product to delete

        Returns:
            True if deleted, False if not found
        """
        with _write_lock:
            try:
                product = self._get_for_update(product_id)

                if not product:
                    return False

                self.db.delete(product)
                self.db.commit()
            except Exception as e:
                self.db.rollback()
                logger.error(f"Error deleting product #{product_id}: {e}")
                raise

        logger.info(f"Product #{product_id} deleted")
        return True

    def get_categories(self) -> List[str]:
        """Get the distinct categories currently present in the catalog."""
        stmt = select(Product.category).distinct().order_by(Product.category)
        return list(self.db.scalars(stmt).all())

    def _get_for_update(self, product_id: int) -> Optional[Product]:
        """Load a product with a row lock (ignored by SQLite)."""
        return (
            self.db.query(Product)
            .filter(Product.id == product_id)
            .with_for_update()
            .first()
        )
