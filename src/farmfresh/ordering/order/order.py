"""Order aggregate: a placed checkout with its purchased lines.

Status values:
    pending, processing, shipped, delivered, cancelled

Any recognized status may follow any other; sellers drive the order through
them by hand. Each line carries its own status, which always mirrors the
order's.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, ValueObject

from farmfresh.domain import farmfresh
from farmfresh.ordering.order.events import OrderPlaced, OrderStatusChanged


class OrderStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @classmethod
    def values(cls):
        return [status.value for status in cls]


@farmfresh.value_object(part_of="Order")
class ShippingAddress:
    """Where the order ships. Recorded at checkout and never changed."""

    address = String(required=True, max_length=255)
    city = String(required=True, max_length=100)
    state = String(required=True, max_length=100)
    zip_code = String(required=True, max_length=20)


@farmfresh.entity(part_of="Order")
class OrderItem:
    """A purchased line. Product name and price are frozen at purchase."""

    product_id = Identifier(required=True)
    seller_id = Identifier(required=True)
    product_name = String(required=True, max_length=255)
    quantity = Integer(required=True, min_value=1)
    unit_price = Float(required=True, min_value=0.0)
    item_status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)

    @property
    def line_total(self):
        return self.quantity * self.unit_price


@farmfresh.aggregate
class Order:
    customer_id = Identifier(required=True)
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    total = Float(required=True, min_value=0.0)
    items = HasMany(OrderItem)
    shipping_address = ValueObject(ShippingAddress)
    phone = String(required=True, max_length=30)
    payment_method = String(max_length=50, default="card")
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def place(cls, customer_id, shipping_address, phone, lines, payment_method="card"):
        """Create a pending order from purchase lines.

        Args:
            customer_id: The customer placing the order.
            shipping_address: Dict with address, city, state, zip_code.
            phone: Contact number for delivery.
            lines: List of dicts with product_id, seller_id, product_name,
                   quantity, unit_price.
            payment_method: Recorded as given; no payment is taken.
        """
        if not lines:
            raise ValidationError({"items": ["An order needs at least one item"]})

        now = datetime.now(UTC)
        items = [OrderItem(item_status=OrderStatus.PENDING.value, **line) for line in lines]
        total = round(sum(item.line_total for item in items), 2)

        order = cls(
            customer_id=customer_id,
            status=OrderStatus.PENDING.value,
            total=total,
            items=items,
            shipping_address=ShippingAddress(**shipping_address),
            phone=phone,
            payment_method=payment_method or "card",
            created_at=now,
            updated_at=now,
        )
        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                customer_id=str(customer_id),
                total=total,
                item_count=len(items),
                payment_method=order.payment_method,
                placed_at=now,
            )
        )
        return order

    def has_seller(self, seller_id):
        return any(str(item.seller_id) == str(seller_id) for item in self.items)

    def items_for_seller(self, seller_id):
        return [item for item in self.items if str(item.seller_id) == str(seller_id)]

    def contains_product(self, product_id):
        return any(str(item.product_id) == str(product_id) for item in self.items)

    def change_status(self, new_status, changed_by):
        if new_status not in OrderStatus.values():
            raise ValidationError({"status": [f"Invalid status. Must be one of: {', '.join(OrderStatus.values())}"]})

        previous_status = self.status
        now = datetime.now(UTC)
        self.status = new_status
        for item in self.items:
            item.item_status = new_status
        self.updated_at = now

        self.raise_(
            OrderStatusChanged(
                order_id=str(self.id),
                previous_status=previous_status,
                new_status=new_status,
                changed_by=str(changed_by),
                changed_at=now,
            )
        )
