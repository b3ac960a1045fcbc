"""Review aggregate. A customer's star rating and comment on a product.

Reviews are write-once. Submitting one refreshes the reviewed product's
rating and review count.
"""

from datetime import UTC, datetime

from protean.fields import DateTime, Identifier, Integer, Text

from farmfresh.domain import farmfresh


@farmfresh.event(part_of="Review")
class ReviewSubmitted:
    __version__ = 1

    review_id = Identifier(required=True)
    product_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    rating = Integer(required=True)
    submitted_at = DateTime(required=True)


@farmfresh.aggregate
class Review:
    customer_id = Identifier(required=True)
    product_id = Identifier(required=True)
    rating = Integer(required=True, min_value=1, max_value=5)
    comment = Text()
    created_at = DateTime()

    @classmethod
    def submit(cls, customer_id, product_id, rating, comment=None):
        now = datetime.now(UTC)
        review = cls(
            customer_id=customer_id,
            product_id=product_id,
            rating=rating,
            comment=comment,
            created_at=now,
        )
        review.raise_(
            ReviewSubmitted(
                review_id=str(review.id),
                product_id=str(product_id),
                customer_id=str(customer_id),
                rating=rating,
                submitted_at=now,
            )
        )
        return review


@farmfresh.repository(part_of=Review)
class ReviewRepository:
    def for_product(self, product_id) -> list[Review]:
        return self._dao.query.filter(product_id=str(product_id)).order_by("-created_at").all().items
