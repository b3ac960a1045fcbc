from farmfresh.domain import farmfresh
from farmfresh.ordering.cart.cart import CartItem, ShoppingCart


@farmfresh.repository(part_of=ShoppingCart)
class ShoppingCartRepository:
    def for_customer(self, customer_id) -> ShoppingCart | None:
        carts = self._dao.query.filter(customer_id=str(customer_id)).all().items
        return carts[0] if carts else None

    def for_customer_or_new(self, customer_id) -> ShoppingCart:
        return self.for_customer(customer_id) or ShoppingCart.create(customer_id=customer_id)

    def lines_for(self, customer_id) -> list[CartItem]:
        cart = self.for_customer(customer_id)
        return list(cart.items) if cart else []
