"""Ordering: carts, checkout and orders."""

from farmfresh.ordering import cart, checkout, order  # noqa: F401
