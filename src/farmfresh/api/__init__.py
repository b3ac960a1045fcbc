"""FarmFresh HTTP API package."""

from farmfresh.api.cart import cart_router
from farmfresh.api.catalogue import category_router, product_router
from farmfresh.api.errors import register_error_handlers
from farmfresh.api.orders import order_router
from farmfresh.api.reviews import review_router

__all__ = [
    "cart_router",
    "category_router",
    "order_router",
    "product_router",
    "review_router",
    "register_error_handlers",
]
