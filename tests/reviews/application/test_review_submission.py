"""Application tests for review submission and product rating aggregation."""

import pytest
from factories import add_product, add_to_cart, checkout, get_product
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError

from farmfresh.exceptions import Forbidden
from farmfresh.reviews.review.review import Review
from farmfresh.reviews.review.submission import SubmitReview


def _buy(customer_id, product_id):
    add_to_cart(customer_id, product_id, 1)
    checkout(customer_id)


def _review(customer_id, product_id, rating, comment=None):
    return current_domain.process(
        SubmitReview(customer_id=customer_id, product_id=product_id, rating=rating, comment=comment),
        asynchronous=False,
    )


@pytest.fixture()
def product_id():
    return add_product(stock=10)


class TestSubmitReview:
    def test_review_persists(self, product_id):
        _buy("cust-001", product_id)
        review_id = _review("cust-001", product_id, 5, "Crisp and sweet")

        review = current_domain.repository_for(Review).get(review_id)
        assert review.rating == 5
        assert review.comment == "Crisp and sweet"

    def test_first_review_sets_rating(self, product_id):
        _buy("cust-001", product_id)
        _review("cust-001", product_id, 4)

        product = get_product(product_id)
        assert product.rating == 4.0
        assert product.review_count == 1

    def test_rating_is_mean_of_all_reviews(self, product_id):
        for customer_id, rating in (("cust-001", 5), ("cust-002", 3), ("cust-003", 4)):
            _buy(customer_id, product_id)
            _review(customer_id, product_id, rating)

        product = get_product(product_id)
        assert product.rating == 4.0
        assert product.review_count == 3

    def test_rating_rounded_to_one_decimal(self, product_id):
        for customer_id, rating in (("cust-001", 5), ("cust-002", 4), ("cust-003", 4)):
            _buy(customer_id, product_id)
            _review(customer_id, product_id, rating)

        assert get_product(product_id).rating == 4.3

    def test_listed_newest_first(self, product_id):
        _buy("cust-001", product_id)
        first = _review("cust-001", product_id, 3)
        second = _review("cust-001", product_id, 5)

        reviews = current_domain.repository_for(Review).for_product(product_id)
        assert [str(r.id) for r in reviews] == [second, first]


class TestRejectedReviews:
    def test_unknown_product(self):
        with pytest.raises(ObjectNotFoundError):
            _review("cust-001", "missing", 4)

    @pytest.mark.parametrize("rating", [0, 6])
    def test_rating_out_of_range(self, product_id, rating):
        _buy("cust-001", product_id)
        with pytest.raises(ValidationError):
            _review("cust-001", product_id, rating)
        assert get_product(product_id).review_count == 0

    def test_requires_purchase(self, product_id):
        with pytest.raises(Forbidden):
            _review("cust-001", product_id, 5)

        assert current_domain.repository_for(Review).for_product(product_id) == []
        assert get_product(product_id).review_count == 0
