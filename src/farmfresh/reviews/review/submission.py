"""SubmitReview: rate a purchased product.

Only customers with an order containing the product may review it. The
product's rating is recomputed from all of its reviews, the new one
included, and saved in the same unit of work as the review.
"""

import structlog
from protean import handle
from protean.fields import Identifier, Integer, Text
from protean.utils.globals import current_domain

from farmfresh.catalogue.product.product import Product
from farmfresh.domain import farmfresh
from farmfresh.exceptions import Forbidden
from farmfresh.ordering.order.order import Order
from farmfresh.reviews.review.review import Review

logger = structlog.get_logger(__name__)


@farmfresh.command(part_of="Review")
class SubmitReview:
    product_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    rating = Integer(required=True, min_value=1, max_value=5)
    comment = Text()


@farmfresh.command_handler(part_of=Review)
class SubmitReviewHandler:
    @handle(SubmitReview)
    def submit_review(self, command):
        product_repo = current_domain.repository_for(Product)
        product = product_repo.get(command.product_id)

        if not current_domain.repository_for(Order).has_purchased(command.customer_id, product.id):
            raise Forbidden("You can only review products you have purchased")

        review = Review.submit(
            customer_id=command.customer_id,
            product_id=product.id,
            rating=command.rating,
            comment=command.comment,
        )

        repo = current_domain.repository_for(Review)
        reviews = {str(r.id): r for r in repo.for_product(product.id)}
        reviews[str(review.id)] = review
        repo.add(review)

        product.record_rating(r.rating for r in reviews.values())
        product_repo.add(product)

        logger.info(
            "Review submitted",
            review_id=str(review.id),
            product_id=str(product.id),
            rating=review.rating,
            product_rating=product.rating,
            review_count=product.review_count,
        )
        return str(review.id)
