"""Product aggregate root: a sellable farm product with stock and rating."""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, Identifier, Integer, String, Text

from farmfresh.catalogue.product.events import (
    ProductAdded,
    ProductRatingRecalculated,
    ProductUpdated,
    StockDecremented,
)
from farmfresh.domain import farmfresh
from farmfresh.exceptions import InsufficientStock

# Fields a seller may change through an update
EDITABLE_FIELDS = ("name", "description", "price", "unit", "image_url", "stock", "category_id", "featured")


@farmfresh.aggregate
class Product:
    """A product listed by a seller.

    ``rating`` and ``review_count`` are denormalized from the product's
    reviews and only refreshed when a review is submitted.
    """

    name = String(required=True, max_length=255)
    description = Text()
    price = Float(required=True, min_value=0.0)
    unit = String(required=True, max_length=50)
    image_url = String(max_length=500)
    stock = Integer(default=0, min_value=0)
    seller_id = Identifier(required=True)
    category_id = Identifier()
    featured = Boolean(default=False)
    rating = Float(default=0.0)
    review_count = Integer(default=0)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def add(
        cls,
        seller_id,
        name,
        price,
        unit,
        stock=None,
        description=None,
        image_url=None,
        category_id=None,
        featured=False,
    ):
        now = datetime.now(UTC)
        product = cls(
            seller_id=seller_id,
            name=name,
            price=price,
            unit=unit,
            stock=stock or 0,
            description=description,
            image_url=image_url,
            category_id=category_id,
            featured=bool(featured),
            rating=0.0,
            review_count=0,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductAdded(
                product_id=str(product.id),
                seller_id=str(seller_id),
                name=name,
                price=product.price,
                stock=product.stock,
                category_id=str(category_id) if category_id else None,
                added_at=now,
            )
        )
        return product

    def is_owned_by(self, seller_id):
        return str(self.seller_id) == str(seller_id)

    def update(self, **changes):
        """Merge the supplied fields into the product.

        ``stock`` here is an absolute overwrite by the seller, unlike
        ``decrement_stock`` which is relative.
        """
        unknown = set(changes) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValidationError({field: ["Field cannot be updated"] for field in sorted(unknown)})

        for field, value in changes.items():
            if value is not None:
                setattr(self, field, value)

        self.updated_at = datetime.now(UTC)

        self.raise_(
            ProductUpdated(
                product_id=str(self.id),
                name=self.name,
                price=self.price,
                stock=self.stock,
            )
        )

    def decrement_stock(self, quantity):
        """Remove sold units from stock, leaving it unchanged on a shortfall."""
        if quantity <= 0:
            raise ValidationError({"quantity": ["Quantity must be positive"]})
        if quantity > self.stock:
            raise InsufficientStock(product_id=self.id, available=self.stock, requested=quantity)

        previous_stock = self.stock
        self.stock = previous_stock - quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            StockDecremented(
                product_id=str(self.id),
                quantity=quantity,
                previous_stock=previous_stock,
                new_stock=self.stock,
            )
        )

    def record_rating(self, ratings):
        """Refresh rating (mean, one decimal) and review count from all ratings."""
        ratings = list(ratings)
        self.review_count = len(ratings)
        self.rating = round(sum(ratings) / len(ratings), 1) if ratings else 0.0

        self.raise_(
            ProductRatingRecalculated(
                product_id=str(self.id),
                rating=self.rating,
                review_count=self.review_count,
            )
        )

