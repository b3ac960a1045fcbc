"""FastAPI endpoints for the caller's shopping cart."""

from fastapi import APIRouter, Depends
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from farmfresh.api.identity import Identity, current_identity
from farmfresh.api.schemas import (
    AddToCartRequest,
    CartItemIdResponse,
    CartItemResponse,
    CartResponse,
    ProductResponse,
    StatusResponse,
    UpdateCartItemRequest,
)
from farmfresh.catalogue.product.product import Product
from farmfresh.ordering.cart.cart import ShoppingCart
from farmfresh.ordering.cart.items import AddToCart, ClearCart, RemoveFromCart, UpdateCartQuantity

cart_router = APIRouter(prefix="/cart", tags=["cart"])


@cart_router.get("", response_model=CartResponse)
async def get_cart(identity: Identity = Depends(current_identity)) -> CartResponse:
    """The cart with each line's add-time price beside the product's current price.

    A line whose product has since been removed stays listed with
    ``available`` false and no current price.
    """
    lines = current_domain.repository_for(ShoppingCart).lines_for(identity.user_id)
    product_repo = current_domain.repository_for(Product)

    items = []
    for line in lines:
        try:
            product = product_repo.get(line.product_id)
        except ObjectNotFoundError:
            product = None
        items.append(
            CartItemResponse(
                id=str(line.id),
                product_id=str(line.product_id),
                quantity=line.quantity,
                unit_price=line.unit_price,
                current_price=product.price if product else None,
                available=product is not None,
                product=ProductResponse.from_aggregate(product) if product else None,
            )
        )

    total = round(sum(line.quantity * line.unit_price for line in lines), 2)
    return CartResponse(items=items, total=total)


@cart_router.post("/items", status_code=201, response_model=CartItemIdResponse)
async def add_to_cart(body: AddToCartRequest, identity: Identity = Depends(current_identity)) -> CartItemIdResponse:
    command = AddToCart(
        customer_id=identity.user_id,
        product_id=body.product_id,
        quantity=body.quantity,
    )
    item_id = current_domain.process(command, asynchronous=False)
    return CartItemIdResponse(item_id=item_id)


@cart_router.put("/items/{item_id}", response_model=StatusResponse)
async def update_cart_item(
    item_id: str, body: UpdateCartItemRequest, identity: Identity = Depends(current_identity)
) -> StatusResponse:
    command = UpdateCartQuantity(
        customer_id=identity.user_id,
        item_id=item_id,
        new_quantity=body.quantity,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@cart_router.delete("/items/{item_id}", response_model=StatusResponse)
async def remove_cart_item(item_id: str, identity: Identity = Depends(current_identity)) -> StatusResponse:
    command = RemoveFromCart(customer_id=identity.user_id, item_id=item_id)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@cart_router.delete("", response_model=StatusResponse)
async def clear_cart(identity: Identity = Depends(current_identity)) -> StatusResponse:
    current_domain.process(ClearCart(customer_id=identity.user_id), asynchronous=False)
    return StatusResponse()
