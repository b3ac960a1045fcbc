"""Tests for the Product aggregate: listing, edits, stock and rating."""

import pytest
from protean.exceptions import ValidationError

from farmfresh.catalogue.product.events import (
    ProductAdded,
    ProductRatingRecalculated,
    ProductUpdated,
    StockDecremented,
)
from farmfresh.catalogue.product.product import Product
from farmfresh.exceptions import InsufficientStock


def _make_product(**overrides):
    defaults = {
        "seller_id": "farmer-001",
        "name": "Fresh Carrots",
        "price": 2.49,
        "unit": "kg",
        "stock": 5,
    }
    defaults.update(overrides)
    return Product.add(**defaults)


class TestAddProduct:
    def test_defaults(self):
        product = Product.add(seller_id="farmer-001", name="Eggs", price=4.5, unit="dozen")
        assert product.id is not None
        assert product.stock == 0
        assert product.rating == 0.0
        assert product.review_count == 0
        assert product.featured is False

    def test_raises_product_added(self):
        product = _make_product()
        events = [e for e in product._events if isinstance(e, ProductAdded)]
        assert len(events) == 1
        assert events[0].product_id == str(product.id)
        assert events[0].stock == 5

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            _make_product(price=-1.0)

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError):
            _make_product(stock=-3)

    def test_ownership(self):
        product = _make_product(seller_id="farmer-001")
        assert product.is_owned_by("farmer-001")
        assert not product.is_owned_by("farmer-002")


class TestUpdateProduct:
    def test_merges_supplied_fields(self):
        product = _make_product()
        product.update(price=2.99, stock=40, name=None)
        assert product.price == 2.99
        assert product.stock == 40
        assert product.name == "Fresh Carrots"

    def test_raises_product_updated(self):
        product = _make_product()
        product.update(name="Heirloom Carrots")
        events = [e for e in product._events if isinstance(e, ProductUpdated)]
        assert events[-1].name == "Heirloom Carrots"

    def test_rating_cannot_be_set_directly(self):
        product = _make_product()
        with pytest.raises(ValidationError) as exc:
            product.update(rating=5.0)
        assert "rating" in exc.value.messages


class TestDecrementStock:
    def test_decrement(self):
        product = _make_product(stock=5)
        product.decrement_stock(3)
        assert product.stock == 2

    def test_decrement_to_zero(self):
        product = _make_product(stock=5)
        product.decrement_stock(5)
        assert product.stock == 0

    def test_raises_stock_decremented(self):
        product = _make_product(stock=5)
        product.decrement_stock(2)
        event = [e for e in product._events if isinstance(e, StockDecremented)][-1]
        assert event.previous_stock == 5
        assert event.new_stock == 3
        assert event.quantity == 2

    def test_shortfall_leaves_stock_unchanged(self):
        product = _make_product(stock=2)
        with pytest.raises(InsufficientStock) as exc:
            product.decrement_stock(3)
        assert product.stock == 2
        assert exc.value.available == 2
        assert exc.value.requested == 3
        assert exc.value.product_id == str(product.id)

    def test_insufficient_stock_is_a_validation_error(self):
        product = _make_product(stock=0)
        with pytest.raises(ValidationError):
            product.decrement_stock(1)

    def test_non_positive_quantity_rejected(self):
        product = _make_product(stock=5)
        with pytest.raises(ValidationError):
            product.decrement_stock(0)
        assert product.stock == 5


class TestRecordRating:
    def test_mean_to_one_decimal(self):
        product = _make_product()
        product.record_rating([5, 3, 4])
        assert product.rating == 4.0
        assert product.review_count == 3

    def test_rounding(self):
        product = _make_product()
        product.record_rating([5, 4, 4])
        assert product.rating == 4.3

    def test_no_ratings(self):
        product = _make_product()
        product.record_rating([])
        assert product.rating == 0.0
        assert product.review_count == 0

    def test_raises_rating_recalculated(self):
        product = _make_product()
        product.record_rating([2, 4])
        event = [e for e in product._events if isinstance(e, ProductRatingRecalculated)][-1]
        assert event.rating == 3.0
        assert event.review_count == 2
