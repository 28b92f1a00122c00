"""Unit tests for the price calculator chain."""

from decimal import Decimal

import pytest

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.discount import DiscountRule
from catalog.domain.model.value_objects import Percent
from catalog.domain.service.price_calculators import (
    AdditivePercentOff,
    BasicPrice,
    CategoryPercentOff,
    CouponPercentOff,
    ShippingAdjustment,
)
from tests.fakes import make_product


class TestBasicPrice:

    @pytest.mark.parametrize("price", ["0.01", "19.99", "200", "100000.50"])
    def test_returns_product_price(self, price):
        product = make_product("A", price=price)
        assert BasicPrice().total(product) == Decimal(price)

    def test_negative_price_propagates(self):
        product = make_product("Broken", price="-10")
        assert BasicPrice().total(product) == Decimal("-10")

    def test_nan_price_propagates(self):
        product = make_product("Broken", price="NaN")
        assert BasicPrice().total(product).is_nan()


class TestCategoryPercentOff:

    def test_discounts_matching_category(self):
        calc = CategoryPercentOff(BasicPrice(), "books", "0.10")
        assert calc.total(make_product("A", "books", "50")) == Decimal("45")

    def test_leaves_other_categories_alone(self):
        calc = CategoryPercentOff(BasicPrice(), "books", "0.10")
        assert calc.total(make_product("A", "food", "50")) == Decimal("50")

    def test_category_match_ignores_case(self):
        calc = CategoryPercentOff(BasicPrice(), "Books", "0.10")
        assert calc.total(make_product("A", "books", "50")) == Decimal("45")

    def test_full_discount(self):
        calc = CategoryPercentOff(BasicPrice(), "books", 1)
        assert calc.total(make_product("A", "books", "50")) == Decimal("0")

    def test_zero_discount(self):
        calc = CategoryPercentOff(BasicPrice(), "books", 0)
        assert calc.total(make_product("A", "books", "50")) == Decimal("50")

    def test_percent_above_one_rejected_at_construction(self):
        with pytest.raises(ValidationError, match="between 0 and 1"):
            CategoryPercentOff(BasicPrice(), "books", "1.5")

    def test_negative_percent_rejected_at_construction(self):
        with pytest.raises(ValidationError, match="between 0 and 1"):
            CategoryPercentOff(BasicPrice(), "books", "-0.1")


class TestCouponPercentOff:

    def test_applies_to_every_category(self):
        calc = CouponPercentOff(BasicPrice(), Percent.of("0.20"))
        assert calc.total(make_product("A", "books", "10")) == Decimal("8")
        assert calc.total(make_product("B", "anything", "10")) == Decimal("8")

    def test_invalid_percent_rejected(self):
        with pytest.raises(ValidationError):
            CouponPercentOff(BasicPrice(), "abc")


class TestChainCompounding:

    def test_discounts_multiply_not_add(self):
        calc = CouponPercentOff(CategoryPercentOff(BasicPrice(), "books", "0.10"), "0.05")
        product = make_product("A", "books", "100")
        total = calc.total(product)
        assert total == Decimal("100") * Decimal("0.90") * Decimal("0.95")
        assert total == Decimal("85.5")
        # An additive model would give 85.
        assert total != Decimal("85")

    def test_electronics_scenario(self):
        calc = CouponPercentOff(
            CategoryPercentOff(BasicPrice(), "electronics", "0.10"), "0.05"
        )
        product = make_product("TV", "electronics", "200")
        assert calc.total(product) == Decimal("171.0")

    def test_coupon_only_for_other_category(self):
        calc = CouponPercentOff(
            CategoryPercentOff(BasicPrice(), "electronics", "0.10"), "0.05"
        )
        assert calc.total(make_product("Book", "books", "200")) == Decimal("190")

    def test_same_kind_decorators_stack(self):
        calc = CategoryPercentOff(
            CategoryPercentOff(BasicPrice(), "books", "0.50"), "food", "0.50"
        )
        assert calc.total(make_product("A", "books", "10")) == Decimal("5")
        assert calc.total(make_product("B", "food", "10")) == Decimal("5")
        assert calc.total(make_product("C", "electronics", "10")) == Decimal("10")

    def test_same_category_twice_compounds(self):
        calc = CategoryPercentOff(
            CategoryPercentOff(BasicPrice(), "books", "0.50"), "books", "0.50"
        )
        assert calc.total(make_product("A", "books", "10")) == Decimal("2.5")

    def test_negative_price_propagates_through_chain(self):
        calc = CouponPercentOff(BasicPrice(), "0.50")
        assert calc.total(make_product("Broken", price="-10")) == Decimal("-5")

    def test_describe(self):
        calc = CouponPercentOff(CategoryPercentOff(BasicPrice(), "books", "0.10"), "0.05")
        assert calc.describe() == "base price + 10% off books + 5% coupon"


class TestShippingAdjustment:

    @pytest.mark.parametrize(
        "category, expected",
        [("electronics", "125.00"), ("books", "110.00"), ("food", "115.00"), ("toys", "100")],
    )
    def test_default_rates(self, category, expected):
        calc = ShippingAdjustment(BasicPrice())
        assert calc.total(make_product("A", category, "100")) == Decimal(expected)

    def test_added_after_discounts(self):
        calc = ShippingAdjustment(CouponPercentOff(BasicPrice(), "0.50"))
        assert calc.total(make_product("A", "books", "100")) == Decimal("60.00")

    def test_custom_rates(self):
        calc = ShippingAdjustment(BasicPrice(), {"books": "3"})
        assert calc.total(make_product("A", "Books", "10")) == Decimal("13")
        assert calc.total(make_product("B", "food", "10")) == Decimal("10")

    def test_negative_rate_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            ShippingAdjustment(BasicPrice(), {"books": "-1"})


class TestAdditivePercentOff:

    def _rules(self):
        return [
            DiscountRule.category_rule("1", "books", Percent.of("0.10")),
            DiscountRule.coupon_rule("2", Percent.of("0.05")),
        ]

    def test_percentages_are_summed(self):
        calc = AdditivePercentOff(BasicPrice(), self._rules())
        assert calc.total(make_product("A", "books", "100")) == Decimal("85")

    def test_only_coupon_for_other_categories(self):
        calc = AdditivePercentOff(BasicPrice(), self._rules())
        assert calc.total(make_product("A", "food", "100")) == Decimal("95")

    def test_only_first_matching_rule_of_each_kind(self):
        rules = self._rules() + [
            DiscountRule.category_rule("3", "books", Percent.of("0.30")),
            DiscountRule.coupon_rule("4", Percent.of("0.30")),
        ]
        calc = AdditivePercentOff(BasicPrice(), rules)
        assert calc.percent_for(make_product("A", "books", "100")).value == Decimal("0.15")

    def test_sum_capped_at_one_hundred_percent(self):
        rules = [
            DiscountRule.category_rule("1", "books", Percent.of("0.80")),
            DiscountRule.coupon_rule("2", Percent.of("0.50")),
        ]
        calc = AdditivePercentOff(BasicPrice(), rules)
        assert calc.total(make_product("A", "books", "100")) == Decimal("0")

    def test_no_rules_is_identity(self):
        calc = AdditivePercentOff(BasicPrice(), [])
        assert calc.total(make_product("A", "books", "100")) == Decimal("100")
        assert calc.describe() == "base price + no discounts"
