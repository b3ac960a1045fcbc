"""Cart item management — commands and handler.

Quantities are checked against the product's current stock whenever they
grow, so a cart never holds more than the catalogue can supply at the time.
"""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from farmfresh.catalogue.product.product import Product
from farmfresh.domain import farmfresh
from farmfresh.exceptions import InsufficientStock
from farmfresh.ordering.cart.cart import ShoppingCart


@farmfresh.command(part_of="ShoppingCart")
class AddToCart:
    customer_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@farmfresh.command(part_of="ShoppingCart")
class UpdateCartQuantity:
    customer_id = Identifier(required=True)
    item_id = Identifier(required=True)
    new_quantity = Integer(required=True, min_value=1)


@farmfresh.command(part_of="ShoppingCart")
class RemoveFromCart:
    customer_id = Identifier(required=True)
    item_id = Identifier(required=True)


@farmfresh.command(part_of="ShoppingCart")
class ClearCart:
    customer_id = Identifier(required=True)


def _ensure_stock(product, quantity):
    if quantity > product.stock:
        raise InsufficientStock(product_id=product.id, available=product.stock, requested=quantity)


@farmfresh.command_handler(part_of=ShoppingCart)
class ManageCartItemsHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        product = current_domain.repository_for(Product).get(command.product_id)

        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.for_customer_or_new(command.customer_id)
        _ensure_stock(product, cart.quantity_of(product.id) + command.quantity)

        item = cart.add_item(
            product_id=product.id,
            quantity=command.quantity,
            unit_price=product.price,
        )
        repo.add(cart)
        return str(item.id)

    @handle(UpdateCartQuantity)
    def update_cart_quantity(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = self._cart_of(repo, command.customer_id)
        item = cart.line(command.item_id)

        product = current_domain.repository_for(Product).get(item.product_id)
        _ensure_stock(product, command.new_quantity)

        cart.update_item_quantity(
            item_id=command.item_id,
            new_quantity=command.new_quantity,
        )
        repo.add(cart)

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = self._cart_of(repo, command.customer_id)
        cart.remove_item(item_id=command.item_id)
        repo.add(cart)

    @handle(ClearCart)
    def clear_cart(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.for_customer(command.customer_id)
        if cart is None or not cart.clear():
            return False
        repo.add(cart)
        return True

    @staticmethod
    def _cart_of(repo, customer_id):
        cart = repo.for_customer(customer_id)
        if cart is None:
            raise ObjectNotFoundError({"_entity": f"No cart for customer {customer_id}"})
        return cart
