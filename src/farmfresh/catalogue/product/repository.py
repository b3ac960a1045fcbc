"""Repository for the Product aggregate. Holds the catalogue's read and stock paths."""

import threading

import structlog

from farmfresh.catalogue.product.product import Product
from farmfresh.domain import farmfresh

logger = structlog.get_logger(__name__)

# Held across every stock check-then-write. Re-entrant so checkout can hold
# it around the whole placement while the decrements take it again.
stock_lock = threading.RLock()


@farmfresh.repository(part_of=Product)
class ProductRepository:
    """Catalogue queries on top of the standard get/add operations."""

    def all_products(self) -> list[Product]:
        return self._dao.query.order_by("name").all().items

    def by_category(self, category_id) -> list[Product]:
        return self._dao.query.filter(category_id=str(category_id)).order_by("name").all().items

    def by_seller(self, seller_id) -> list[Product]:
        return self._dao.query.filter(seller_id=str(seller_id)).order_by("name").all().items

    def featured(self) -> list[Product]:
        return self._dao.query.filter(featured=True).order_by("name").all().items

    def remove(self, product_id) -> bool:
        """Delete the product record. Returns False when no such record exists."""
        matches = self._dao.query.filter(id=str(product_id)).all().items
        if not matches:
            return False

        self._dao.delete(matches[0])
        logger.info("Product removed", product_id=str(product_id), seller_id=str(matches[0].seller_id))
        return True

    def decrement_stock(self, product_id, quantity) -> Product:
        """Decrement stock atomically with the sufficiency check.

        Raises ``InsufficientStock`` and leaves stock untouched when the
        product holds fewer than ``quantity`` units.
        """
        with stock_lock:
            product = self.get(product_id)
            product.decrement_stock(quantity)
            self.add(product)

        logger.info(
            "Stock decremented",
            product_id=str(product_id),
            quantity=quantity,
            remaining=product.stock,
        )
        return product
