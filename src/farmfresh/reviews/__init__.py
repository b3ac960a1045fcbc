"""Reviews: product ratings from customers who bought them."""

from farmfresh.reviews import review  # noqa: F401
