"""FastAPI endpoints for checkout and order history.

Customers see their own orders. Farmers see orders holding at least one of
their products, with only their own lines listed.
"""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from farmfresh.api.identity import Identity, current_identity, require_farmer
from farmfresh.api.schemas import OrderResponse, PlaceOrderRequest, UpdateOrderStatusRequest
from farmfresh.exceptions import Forbidden
from farmfresh.ordering.checkout.placement import PlaceOrder, place_order
from farmfresh.ordering.order.order import Order
from farmfresh.ordering.order.status import UpdateOrderStatus

order_router = APIRouter(prefix="/orders", tags=["orders"])


def _visible_to(order, identity: Identity) -> OrderResponse:
    if identity.is_farmer:
        lines = order.items_for_seller(identity.user_id)
        if not lines:
            raise Forbidden("This order contains none of your products")
        return OrderResponse.from_aggregate(order, items=lines)

    if str(order.customer_id) != identity.user_id:
        raise Forbidden("You can only view your own orders")
    return OrderResponse.from_aggregate(order)


@order_router.post("", status_code=201, response_model=OrderResponse)
async def checkout(body: PlaceOrderRequest, identity: Identity = Depends(current_identity)) -> OrderResponse:
    command = PlaceOrder(
        customer_id=identity.user_id,
        address=body.address,
        city=body.city,
        state=body.state,
        zip_code=body.zip_code,
        phone=body.phone,
        payment_method=body.payment_method,
    )
    order_id = place_order(command)
    return OrderResponse.from_aggregate(current_domain.repository_for(Order).get(order_id))


@order_router.get("", response_model=list[OrderResponse])
async def list_orders(identity: Identity = Depends(current_identity)) -> list[OrderResponse]:
    repo = current_domain.repository_for(Order)
    if identity.is_farmer:
        orders = repo.for_seller(identity.user_id)
    else:
        orders = repo.for_customer(identity.user_id)
    return [_visible_to(order, identity) for order in orders]


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str, identity: Identity = Depends(current_identity)) -> OrderResponse:
    return _visible_to(current_domain.repository_for(Order).get(order_id), identity)


@order_router.put("/{order_id}/status", response_model=OrderResponse)
async def update_order_status(
    order_id: str, body: UpdateOrderStatusRequest, identity: Identity = Depends(require_farmer)
) -> OrderResponse:
    command = UpdateOrderStatus(order_id=order_id, seller_id=identity.user_id, status=body.status)
    current_domain.process(command, asynchronous=False)
    return _visible_to(current_domain.repository_for(Order).get(order_id), identity)
