"""Order status updates by sellers."""

import structlog
from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from farmfresh.domain import farmfresh
from farmfresh.exceptions import Forbidden
from farmfresh.ordering.order.order import Order

logger = structlog.get_logger(__name__)


@farmfresh.command(part_of="Order")
class UpdateOrderStatus:
    order_id = Identifier(required=True)
    seller_id = Identifier(required=True)
    status = String(required=True, max_length=50)


@farmfresh.command_handler(part_of=Order)
class UpdateOrderStatusHandler:
    @handle(UpdateOrderStatus)
    def update_order_status(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        if not order.has_seller(command.seller_id):
            raise Forbidden("You can only update orders containing your products")

        previous_status = order.status
        order.change_status(command.status, changed_by=command.seller_id)
        repo.add(order)

        logger.info(
            "Order status changed",
            order_id=str(order.id),
            seller_id=str(command.seller_id),
            previous_status=previous_status,
            new_status=order.status,
        )
        return order.status
