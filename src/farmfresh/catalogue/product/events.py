"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from farmfresh.domain import farmfresh


@farmfresh.event(part_of="Product")
class ProductAdded:
    """A seller listed a new product."""

    __version__ = 1

    product_id = Identifier(required=True)
    seller_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    price = Float(required=True)
    stock = Integer(required=True)
    category_id = Identifier()
    added_at = DateTime(required=True)


@farmfresh.event(part_of="Product")
class ProductUpdated:
    """A seller edited a product's details, price or stock."""

    __version__ = 1

    product_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    price = Float(required=True)
    stock = Integer(required=True)


@farmfresh.event(part_of="Product")
class StockDecremented:
    """Units of a product were sold at checkout."""

    __version__ = 1

    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    previous_stock = Integer(required=True)
    new_stock = Integer(required=True)


@farmfresh.event(part_of="Product")
class ProductRatingRecalculated:
    """The product's aggregate rating changed after a review."""

    __version__ = 1

    product_id = Identifier(required=True)
    rating = Float(required=True)
    review_count = Integer(required=True)

