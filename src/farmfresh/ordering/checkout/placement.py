"""Checkout. Turns the customer's cart into an order.

Every check runs before the first write: an empty cart, a vanished product
or a stock shortfall aborts checkout with nothing changed. The order, the
stock decrements and the cart clear are then written in the handler's unit
of work.

``place_order`` holds the stock lock around command processing so that the
commit, not just the validation, is serialized against other checkouts.
"""

import structlog
from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from farmfresh.catalogue.product.product import Product
from farmfresh.catalogue.product.repository import stock_lock
from farmfresh.domain import farmfresh
from farmfresh.exceptions import EmptyCart, InsufficientStock
from farmfresh.ordering.cart.cart import ShoppingCart
from farmfresh.ordering.order.order import Order

logger = structlog.get_logger(__name__)


@farmfresh.command(part_of="Order")
class PlaceOrder:
    customer_id = Identifier(required=True)
    address = String(required=True, max_length=255)
    city = String(required=True, max_length=100)
    state = String(required=True, max_length=100)
    zip_code = String(required=True, max_length=20)
    phone = String(required=True, max_length=30)
    payment_method = String(max_length=50, default="card")


def place_order(command: PlaceOrder) -> str:
    """Process a PlaceOrder command under the stock lock. Returns the order id."""
    with stock_lock:
        return current_domain.process(command, asynchronous=False)


@farmfresh.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place(self, command):
        cart_repo = current_domain.repository_for(ShoppingCart)
        product_repo = current_domain.repository_for(Product)
        order_repo = current_domain.repository_for(Order)

        with stock_lock:
            cart = cart_repo.for_customer(command.customer_id)
            lines = list(cart.items) if cart else []
            if not lines:
                raise EmptyCart(command.customer_id)

            products = {str(line.product_id): product_repo.get(line.product_id) for line in lines}

            for line in lines:
                product = products[str(line.product_id)]
                if line.quantity > product.stock:
                    raise InsufficientStock(
                        product_id=product.id,
                        available=product.stock,
                        requested=line.quantity,
                    )

            order = Order.place(
                customer_id=command.customer_id,
                shipping_address={
                    "address": command.address,
                    "city": command.city,
                    "state": command.state,
                    "zip_code": command.zip_code,
                },
                phone=command.phone,
                payment_method=command.payment_method,
                lines=[
                    {
                        "product_id": line.product_id,
                        "seller_id": products[str(line.product_id)].seller_id,
                        "product_name": products[str(line.product_id)].name,
                        "quantity": line.quantity,
                        "unit_price": products[str(line.product_id)].price,
                    }
                    for line in lines
                ],
            )
            order_repo.add(order)

            for line in lines:
                product_repo.decrement_stock(line.product_id, line.quantity)

            cart.clear()
            cart_repo.add(cart)

        logger.info(
            "Order placed",
            order_id=str(order.id),
            customer_id=str(command.customer_id),
            total=order.total,
            item_count=len(lines),
        )
        return str(order.id)
