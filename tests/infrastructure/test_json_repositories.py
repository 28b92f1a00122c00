"""Tests for the JSON-file repositories, against a temporary directory."""

import json
from decimal import Decimal

from catalog.domain.model.discount import DiscountKind, DiscountRule
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Percent
from catalog.infrastructure.persistence.json_discount_repository import (
    JsonDiscountRepository,
)
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def _product(id="1", name="Dune", **kwargs):
    return Product.create(id=id, name=name, category="books", price="12.50", **kwargs)


class TestJsonProductRepository:

    def test_creates_missing_file(self, tmp_path):
        path = tmp_path / "nested" / "products.json"
        repo = JsonProductRepository(path)
        assert path.exists()
        assert repo.list_all() == []
        assert repo.next_id() == "1"

    def test_save_and_reload(self, tmp_path):
        path = tmp_path / "products.json"
        JsonProductRepository(path).save(_product(description="Spice", stock_quantity=3))

        loaded = JsonProductRepository(path).get_by_name("Dune")
        assert loaded.name == "Dune"
        assert loaded.price == Decimal("12.50")
        assert loaded.description == "Spice"
        assert loaded.stock_quantity == 3

    def test_price_stored_as_string(self, tmp_path):
        path = tmp_path / "products.json"
        JsonProductRepository(path).save(_product())
        assert json.loads(path.read_text())[0]["price"] == "12.50"

    def test_get_by_name_ignores_case(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(_product())
        assert repo.get_by_name("DUNE").id == "1"
        assert repo.get_by_name("Emma") is None

    def test_next_id_is_max_plus_one(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(_product(id="1"))
        repo.save(_product(id="7", name="Emma"))
        assert repo.next_id() == "8"

    def test_soft_deleted_products_hidden_but_kept(self, tmp_path):
        path = tmp_path / "products.json"
        repo = JsonProductRepository(path)
        product = _product()
        product.deactivate()
        repo.save(product)

        assert repo.list_all() == []
        assert repo.get_by_name("Dune") is None
        assert repo.next_id() == "2"
        assert json.loads(path.read_text())[0]["is_active"] is False

    def test_save_replaces_existing(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        product = _product()
        repo.save(product)
        product.update_stock(0)
        repo.save(product)
        assert len(repo.list_all()) == 1
        assert repo.get_by_name("Dune").stock_quantity == 0


class TestJsonDiscountRepository:

    def test_save_and_reload(self, tmp_path):
        path = tmp_path / "discounts.json"
        repo = JsonDiscountRepository(path)
        repo.save(DiscountRule.category_rule("1", "books", Percent.of("0.10")))
        repo.save(DiscountRule.coupon_rule("2", Percent.of("0.05")))

        rules = JsonDiscountRepository(path).list_all()
        assert [r.kind for r in rules] == [DiscountKind.CATEGORY, DiscountKind.COUPON]
        assert rules[0].category == "books"
        assert rules[0].percent.value == Decimal("0.10")
        assert rules[1].category is None

    def test_percent_stored_as_fraction(self, tmp_path):
        path = tmp_path / "discounts.json"
        JsonDiscountRepository(path).save(DiscountRule.coupon_rule("1", Percent.of("0.05")))
        assert json.loads(path.read_text())[0]["percent"] == "0.05"

    def test_next_id(self, tmp_path):
        repo = JsonDiscountRepository(tmp_path / "discounts.json")
        assert repo.next_id() == "1"
        repo.save(DiscountRule.coupon_rule("4", Percent.of("0.05")))
        assert repo.next_id() == "5"

    def test_delete(self, tmp_path):
        repo = JsonDiscountRepository(tmp_path / "discounts.json")
        repo.save(DiscountRule.coupon_rule("1", Percent.of("0.05")))
        assert repo.delete("1") is True
        assert repo.delete("1") is False
        assert repo.list_all() == []

    def test_clear(self, tmp_path):
        repo = JsonDiscountRepository(tmp_path / "discounts.json")
        repo.save(DiscountRule.coupon_rule("1", Percent.of("0.05")))
        repo.save(DiscountRule.coupon_rule("2", Percent.of("0.10")))
        assert repo.clear() == 2
        assert repo.list_all() == []
