"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from farmfresh.domain import farmfresh


@farmfresh.event(part_of="Order")
class OrderPlaced:
    """A customer checked out their cart."""

    __version__ = 1

    order_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    total = Float(required=True)
    item_count = Integer(required=True)
    payment_method = String(max_length=50)
    placed_at = DateTime(required=True)


@farmfresh.event(part_of="Order")
class OrderStatusChanged:
    """A seller moved the order (and its lines) to a new status."""

    __version__ = 1

    order_id = Identifier(required=True)
    previous_status = String(required=True, max_length=50)
    new_status = String(required=True, max_length=50)
    changed_by = Identifier(required=True)
    changed_at = DateTime(required=True)
