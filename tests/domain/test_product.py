"""Unit tests for the Product aggregate and categories."""

from decimal import Decimal

import pytest

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.category import Category, same_category
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money


class TestCategory:

    def test_values(self):
        assert Category.values() == ["electronics", "books", "food"]

    def test_from_string_normalises(self):
        assert Category.from_string(" ELECTRONICS ") is Category.ELECTRONICS

    def test_from_string_lists_valid_categories(self):
        with pytest.raises(ValidationError, match="Valid categories: electronics, books, food"):
            Category.from_string("toys")

    def test_display_name(self):
        assert Category.display_name("books") == "Books"
        assert Category.display_name("toys") == "toys"

    def test_same_category(self):
        assert same_category("Books", "books")
        assert not same_category("books", "food")
        assert not same_category(None, "books")


class TestProductCreate:

    def test_create_valid_product(self):
        p = Product.create(
            id="1", name="  Kindle ", category="Electronics", price="99.90",
            description=" e-reader ", sku="K-1", stock_quantity=3,
        )
        assert p.name == "Kindle"
        assert p.category == "electronics"
        assert p.price == Decimal("99.90")
        assert p.description == "e-reader"
        assert p.stock_quantity == 3
        assert p.is_active

    def test_name_required(self):
        with pytest.raises(ValidationError, match="name is required"):
            Product.create(id="1", name="  ", category="books", price="10")

    def test_zero_price_rejected(self):
        with pytest.raises(ValidationError, match="greater than zero"):
            Product.create(id="1", name="Book", category="books", price="0")

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Product.create(id="1", name="Book", category="books", price="-5")

    def test_unknown_category_rejected(self):
        with pytest.raises(ValidationError, match="Invalid category"):
            Product.create(id="1", name="Yo-yo", category="toys", price="5")

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Product.create(id="1", name="Book", category="books", price="5", stock_quantity=-1)

    def test_plain_init_does_not_validate(self):
        p = Product(id="1", name="Broken", category="toys", price=Decimal("-3"))
        assert p.price == Decimal("-3")


class TestProductMutations:

    def _product(self) -> Product:
        return Product.create(id="1", name="Book", category="books", price="10")

    def test_update_price(self):
        p = self._product()
        p.update_price(Money.of("12.50"))
        assert p.price == Decimal("12.50")

    def test_update_price_to_zero_rejected(self):
        p = self._product()
        with pytest.raises(ValidationError, match="greater than zero"):
            p.update_price(Money.of("0"))

    def test_update_category(self):
        p = self._product()
        p.update_category("FOOD")
        assert p.category == "food"

    def test_update_stock(self):
        p = self._product()
        p.update_stock(7)
        assert p.in_stock

    def test_deactivate_twice_rejected(self):
        p = self._product()
        p.deactivate()
        assert not p.is_active
        with pytest.raises(ValidationError, match="already removed"):
            p.deactivate()

    def test_in_stock_treats_missing_quantity_as_zero(self):
        p = Product(id="1", name="X", category="books", price=Decimal("1"), stock_quantity=None)
        assert not p.in_stock
