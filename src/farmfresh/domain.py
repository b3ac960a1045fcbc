"""FarmFresh domain: catalogue, ordering and reviews for the marketplace.

A single domain keeps the product catalogue, carts, orders and reviews in
one Unit of Work boundary, so checkout can validate stock and commit the
order, the stock decrements and the cart clear together.

PROTEAN_ENV selects the config overlay from domain.toml:
  - "test"       → testing mode, events processed synchronously
  - "production" → debug off
"""

from protean.domain import Domain

from farmfresh.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

farmfresh = Domain(name="farmfresh")
