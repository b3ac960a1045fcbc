"""Pydantic request/response schemas for the FarmFresh API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

# --- Catalogue ---


class CreateCategoryRequest(BaseModel):
    name: str = Field(..., max_length=100)
    slug: str = Field(..., max_length=100)
    description: str | None = None
    image_url: str | None = Field(None, max_length=500)


class CategoryResponse(BaseModel):
    id: str
    name: str
    slug: str
    description: str | None = None
    image_url: str | None = None

    @classmethod
    def from_aggregate(cls, category) -> CategoryResponse:
        return cls(
            id=str(category.id),
            name=category.name,
            slug=category.slug,
            description=category.description,
            image_url=category.image_url,
        )


class CreateProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Organic Tomatoes",
                    "description": "Fresh, locally grown organic tomatoes. Perfect for salads and cooking.",
                    "price": 4.99,
                    "unit": "lb",
                    "stock": 50,
                    "category_id": "cat-vegetables",
                    "featured": True,
                }
            ]
        }
    }

    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    price: float = Field(..., ge=0)
    unit: str = Field(..., min_length=1, max_length=50)
    image_url: str | None = Field(None, max_length=500)
    stock: int = Field(0, ge=0)
    category_id: str | None = None
    featured: bool = False


class UpdateProductRequest(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    price: float | None = Field(None, ge=0)
    unit: str | None = Field(None, min_length=1, max_length=50)
    image_url: str | None = Field(None, max_length=500)
    stock: int | None = Field(None, ge=0)
    category_id: str | None = None
    featured: bool | None = None


class ProductResponse(BaseModel):
    id: str
    name: str
    description: str | None = None
    price: float
    unit: str
    image_url: str | None = None
    stock: int
    seller_id: str
    category_id: str | None = None
    featured: bool
    rating: float
    review_count: int

    @classmethod
    def from_aggregate(cls, product) -> ProductResponse:
        return cls(
            id=str(product.id),
            name=product.name,
            description=product.description,
            price=product.price,
            unit=product.unit,
            image_url=product.image_url,
            stock=product.stock,
            seller_id=str(product.seller_id),
            category_id=str(product.category_id) if product.category_id else None,
            featured=bool(product.featured),
            rating=product.rating or 0.0,
            review_count=product.review_count or 0,
        )


class ProductIdResponse(BaseModel):
    product_id: str


# --- Reviews ---


class SubmitReviewRequest(BaseModel):
    rating: int = Field(..., ge=1, le=5)
    comment: str | None = None


class ReviewResponse(BaseModel):
    id: str
    customer_id: str
    product_id: str
    rating: int
    comment: str | None = None
    created_at: datetime | None = None

    @classmethod
    def from_aggregate(cls, review) -> ReviewResponse:
        return cls(
            id=str(review.id),
            customer_id=str(review.customer_id),
            product_id=str(review.product_id),
            rating=review.rating,
            comment=review.comment,
            created_at=review.created_at,
        )


# --- Cart ---


class AddToCartRequest(BaseModel):
    product_id: str
    quantity: int = Field(1, ge=1)


class UpdateCartItemRequest(BaseModel):
    quantity: int = Field(..., ge=1)


class CartItemResponse(BaseModel):
    id: str
    product_id: str
    quantity: int
    unit_price: float
    current_price: float | None = None
    available: bool = True
    product: ProductResponse | None = None


class CartResponse(BaseModel):
    items: list[CartItemResponse] = []
    total: float = 0.0


class CartItemIdResponse(BaseModel):
    item_id: str


class StatusResponse(BaseModel):
    status: str = "ok"


# --- Orders ---


class PlaceOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "address": "12 Orchard Lane",
                    "city": "Springfield",
                    "state": "OR",
                    "zip_code": "97477",
                    "phone": "555-0134",
                    "payment_method": "card",
                }
            ]
        }
    }

    address: str = Field(..., min_length=1, max_length=255)
    city: str = Field(..., min_length=1, max_length=100)
    state: str = Field(..., min_length=1, max_length=100)
    zip_code: str = Field(..., min_length=1, max_length=20)
    phone: str = Field(..., min_length=1, max_length=30)
    payment_method: str = Field("card", max_length=50)


class UpdateOrderStatusRequest(BaseModel):
    status: str


class OrderItemResponse(BaseModel):
    id: str
    product_id: str
    seller_id: str
    product_name: str
    quantity: int
    unit_price: float
    status: str


class OrderResponse(BaseModel):
    id: str
    customer_id: str
    status: str
    total: float
    address: str
    city: str
    state: str
    zip_code: str
    phone: str
    payment_method: str | None = None
    created_at: datetime | None = None
    items: list[OrderItemResponse] = []

    @classmethod
    def from_aggregate(cls, order, items=None) -> OrderResponse:
        """Build the response; ``items`` narrows the lines shown (seller view)."""
        lines = order.items if items is None else items
        return cls(
            id=str(order.id),
            customer_id=str(order.customer_id),
            status=order.status,
            total=order.total,
            address=order.shipping_address.address,
            city=order.shipping_address.city,
            state=order.shipping_address.state,
            zip_code=order.shipping_address.zip_code,
            phone=order.phone,
            payment_method=order.payment_method,
            created_at=order.created_at,
            items=[
                OrderItemResponse(
                    id=str(item.id),
                    product_id=str(item.product_id),
                    seller_id=str(item.seller_id),
                    product_name=item.product_name,
                    quantity=item.quantity,
                    unit_price=item.unit_price,
                    status=item.item_status,
                )
                for item in lines
            ],
        )
