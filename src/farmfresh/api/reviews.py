"""FastAPI endpoints for product reviews."""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from farmfresh.api.identity import Identity, current_identity
from farmfresh.api.schemas import ReviewResponse, SubmitReviewRequest
from farmfresh.catalogue.product.product import Product
from farmfresh.reviews.review.review import Review
from farmfresh.reviews.review.submission import SubmitReview

review_router = APIRouter(prefix="/products/{product_id}/reviews", tags=["reviews"])


@review_router.get("", response_model=list[ReviewResponse])
async def list_reviews(product_id: str) -> list[ReviewResponse]:
    current_domain.repository_for(Product).get(product_id)
    reviews = current_domain.repository_for(Review).for_product(product_id)
    return [ReviewResponse.from_aggregate(r) for r in reviews]


@review_router.post("", status_code=201, response_model=ReviewResponse)
async def submit_review(
    product_id: str, body: SubmitReviewRequest, identity: Identity = Depends(current_identity)
) -> ReviewResponse:
    command = SubmitReview(
        product_id=product_id,
        customer_id=identity.user_id,
        rating=body.rating,
        comment=body.comment,
    )
    review_id = current_domain.process(command, asynchronous=False)
    return ReviewResponse.from_aggregate(current_domain.repository_for(Review).get(review_id))
