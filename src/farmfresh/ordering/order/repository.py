"""Order queries for customers and sellers."""

from farmfresh.domain import farmfresh
from farmfresh.ordering.order.order import Order, OrderItem


@farmfresh.repository(part_of=Order)
class OrderRepository:
    def _newest_first(self, **filters) -> list[Order]:
        query = self._dao.query.filter(**filters) if filters else self._dao.query
        return query.order_by("-created_at").all().items

    def for_customer(self, customer_id) -> list[Order]:
        return self._newest_first(customer_id=str(customer_id))

    def for_seller(self, seller_id) -> list[Order]:
        """Orders holding at least one of the seller's lines, newest first."""
        return [order for order in self._newest_first() if order.has_seller(seller_id)]

    def lines_for_seller(self, seller_id) -> list[OrderItem]:
        return [item for order in self.for_seller(seller_id) for item in order.items_for_seller(seller_id)]

    def has_purchased(self, customer_id, product_id) -> bool:
        return any(order.contains_product(product_id) for order in self.for_customer(customer_id))
