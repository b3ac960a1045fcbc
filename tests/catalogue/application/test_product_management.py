"""Application tests for seller product commands and catalogue queries."""

import threading

import pytest
from factories import add_product, get_product
from protean import current_domain
from protean.exceptions import ObjectNotFoundError

from farmfresh.catalogue.product.management import RemoveProduct, UpdateProduct
from farmfresh.catalogue.product.product import Product
from farmfresh.domain import farmfresh
from farmfresh.exceptions import Forbidden, InsufficientStock


class TestAddProductCommand:
    def test_add_persists(self):
        product_id = add_product(name="Organic Honey", price=8.99, unit="500g", stock=50)
        product = get_product(product_id)
        assert product.name == "Organic Honey"
        assert product.stock == 50
        assert product.rating == 0.0
        assert product.review_count == 0

    def test_stock_defaults_to_zero(self):
        product_id = add_product(stock=None)
        assert get_product(product_id).stock == 0

    def test_fresh_ids(self):
        assert add_product() != add_product()


class TestUpdateProductCommand:
    def test_owner_can_update(self):
        product_id = add_product(seller_id="farmer-001", price=3.99)
        current_domain.process(
            UpdateProduct(product_id=product_id, seller_id="farmer-001", price=4.49, stock=25),
            asynchronous=False,
        )
        product = get_product(product_id)
        assert product.price == 4.49
        assert product.stock == 25
        assert product.name == "Organic Apples"

    def test_other_seller_forbidden(self):
        product_id = add_product(seller_id="farmer-001", price=3.99)
        with pytest.raises(Forbidden):
            current_domain.process(
                UpdateProduct(product_id=product_id, seller_id="farmer-002", price=0.99),
                asynchronous=False,
            )
        assert get_product(product_id).price == 3.99

    def test_unknown_product(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(
                UpdateProduct(product_id="missing", seller_id="farmer-001", price=1.0),
                asynchronous=False,
            )


class TestRemoveProductCommand:
    def test_owner_can_remove(self):
        product_id = add_product(seller_id="farmer-001")
        removed = current_domain.process(
            RemoveProduct(product_id=product_id, seller_id="farmer-001"),
            asynchronous=False,
        )
        assert removed is True
        with pytest.raises(ObjectNotFoundError):
            get_product(product_id)

    def test_other_seller_forbidden(self):
        product_id = add_product(seller_id="farmer-001")
        with pytest.raises(Forbidden):
            current_domain.process(
                RemoveProduct(product_id=product_id, seller_id="farmer-002"),
                asynchronous=False,
            )
        assert get_product(product_id) is not None

    def test_removing_twice_is_not_found(self):
        product_id = add_product(seller_id="farmer-001")
        command = RemoveProduct(product_id=product_id, seller_id="farmer-001")
        current_domain.process(command, asynchronous=False)
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(command, asynchronous=False)

    def test_repository_remove_reports_whether_a_record_existed(self):
        product_id = add_product()
        repo = current_domain.repository_for(Product)

        assert repo.remove(product_id) is True
        assert repo.remove(product_id) is False
        assert repo.remove("no-such-product") is False


class TestCatalogueQueries:
    def test_by_category(self):
        add_product(name="Apples", category_id="cat-fruits")
        add_product(name="Pears", category_id="cat-fruits")
        add_product(name="Carrots", category_id="cat-vegetables")

        products = current_domain.repository_for(Product).by_category("cat-fruits")
        assert [p.name for p in products] == ["Apples", "Pears"]

    def test_by_seller(self):
        add_product(name="Apples", seller_id="farmer-001")
        add_product(name="Honey", seller_id="farmer-002")

        products = current_domain.repository_for(Product).by_seller("farmer-002")
        assert [p.name for p in products] == ["Honey"]

    def test_featured(self):
        add_product(name="Apples", featured=True)
        add_product(name="Carrots")

        products = current_domain.repository_for(Product).featured()
        assert [p.name for p in products] == ["Apples"]

    def test_all_products(self):
        add_product(name="Carrots")
        add_product(name="Apples")

        products = current_domain.repository_for(Product).all_products()
        assert [p.name for p in products] == ["Apples", "Carrots"]

    def test_unknown_category_is_empty(self):
        add_product(category_id="cat-fruits")
        assert current_domain.repository_for(Product).by_category("cat-none") == []


class TestDecrementStock:
    def test_decrement_persists(self):
        product_id = add_product(stock=10)
        current_domain.repository_for(Product).decrement_stock(product_id, 4)
        assert get_product(product_id).stock == 6

    def test_shortfall_leaves_stock(self):
        product_id = add_product(stock=3)
        with pytest.raises(InsufficientStock):
            current_domain.repository_for(Product).decrement_stock(product_id, 4)
        assert get_product(product_id).stock == 3

    def test_concurrent_decrements_never_oversell(self):
        product_id = add_product(stock=5)
        outcomes = []

        def buy():
            with farmfresh.domain_context():
                try:
                    current_domain.repository_for(Product).decrement_stock(product_id, 1)
                    outcomes.append("sold")
                except InsufficientStock:
                    outcomes.append("short")

        threads = [threading.Thread(target=buy) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert outcomes.count("sold") == 5
        assert outcomes.count("short") == 3
        assert get_product(product_id).stock == 0
