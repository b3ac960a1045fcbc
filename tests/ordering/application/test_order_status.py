"""Application tests for seller order views and status updates."""

import pytest
from factories import add_product, add_to_cart, checkout
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError

from farmfresh.exceptions import Forbidden
from farmfresh.ordering.order.order import Order
from farmfresh.ordering.order.status import UpdateOrderStatus


@pytest.fixture()
def mixed_order():
    """cust-001 buys from farmer-001 and farmer-002; cust-002 buys only from farmer-002."""
    apples = add_product(seller_id="farmer-001", name="Apples", stock=10)
    honey = add_product(seller_id="farmer-002", name="Honey", stock=10)
    add_to_cart("cust-001", apples, 1)
    add_to_cart("cust-001", honey, 2)
    mixed = checkout("cust-001")

    add_to_cart("cust-002", honey, 1)
    honey_only = checkout("cust-002")
    return {"mixed": mixed, "honey_only": honey_only, "apples": apples, "honey": honey}


def _repo():
    return current_domain.repository_for(Order)


class TestSellerScoping:
    def test_for_seller_only_orders_with_own_lines(self, mixed_order):
        assert [str(o.id) for o in _repo().for_seller("farmer-001")] == [mixed_order["mixed"]]

    def test_for_seller_newest_first(self, mixed_order):
        ids = [str(o.id) for o in _repo().for_seller("farmer-002")]
        assert ids == [mixed_order["honey_only"], mixed_order["mixed"]]

    def test_lines_for_seller(self, mixed_order):
        lines = _repo().lines_for_seller("farmer-001")
        assert [str(line.product_id) for line in lines] == [mixed_order["apples"]]
        assert all(str(line.seller_id) == "farmer-001" for line in lines)

    def test_unknown_seller_sees_nothing(self, mixed_order):
        assert _repo().for_seller("farmer-404") == []
        assert _repo().lines_for_seller("farmer-404") == []

    def test_for_customer(self, mixed_order):
        assert [str(o.id) for o in _repo().for_customer("cust-002")] == [mixed_order["honey_only"]]

    def test_has_purchased(self, mixed_order):
        assert _repo().has_purchased("cust-001", mixed_order["apples"])
        assert not _repo().has_purchased("cust-002", mixed_order["apples"])


class TestUpdateOrderStatusCommand:
    def test_seller_updates_status_and_lines(self, mixed_order):
        current_domain.process(
            UpdateOrderStatus(order_id=mixed_order["mixed"], seller_id="farmer-001", status="shipped"),
            asynchronous=False,
        )
        order = _repo().get(mixed_order["mixed"])
        assert order.status == "shipped"
        assert {item.item_status for item in order.items} == {"shipped"}

    def test_seller_without_lines_forbidden(self, mixed_order):
        with pytest.raises(Forbidden):
            current_domain.process(
                UpdateOrderStatus(order_id=mixed_order["honey_only"], seller_id="farmer-001", status="shipped"),
                asynchronous=False,
            )
        assert _repo().get(mixed_order["honey_only"]).status == "pending"

    def test_unknown_status_rejected(self, mixed_order):
        with pytest.raises(ValidationError):
            current_domain.process(
                UpdateOrderStatus(order_id=mixed_order["mixed"], seller_id="farmer-001", status="teleported"),
                asynchronous=False,
            )

    def test_unknown_order(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(
                UpdateOrderStatus(order_id="missing", seller_id="farmer-001", status="shipped"),
                asynchronous=False,
            )
