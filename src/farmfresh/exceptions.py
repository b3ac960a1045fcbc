"""Marketplace error types.

``EmptyCart`` and ``InsufficientStock`` are Protean ``ValidationError``
subclasses so they surface wherever validation failures do. Missing
entities keep using Protean's ``ObjectNotFoundError``.
"""

from protean.exceptions import ValidationError


class EmptyCart(ValidationError):
    """Checkout attempted on a cart with no lines."""

    def __init__(self, customer_id):
        self.customer_id = str(customer_id)
        super().__init__({"cart": ["Your cart is empty"]})


class InsufficientStock(ValidationError):
    """Requested quantity exceeds the stock available for a product."""

    def __init__(self, product_id, available, requested):
        self.product_id = str(product_id)
        self.available = available
        self.requested = requested
        super().__init__(
            {
                "stock": [
                    f"Not enough stock for product {product_id}. Available: {available}, Requested: {requested}"
                ]
            }
        )


class Forbidden(Exception):
    """Caller lacks the role or ownership required for the operation."""

    def __init__(self, message):
        self.messages = {"_permission": [message]}
        super().__init__(message)
