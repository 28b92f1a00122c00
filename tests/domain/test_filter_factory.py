"""Unit tests for FilterFactory."""

from decimal import Decimal

import pytest

from catalog.domain.exceptions import ValidationError
from catalog.domain.service.filter_factory import FilterCriteria, FilterFactory
from catalog.domain.service.price_calculators import BasicPrice, CouponPercentOff
from catalog.domain.service.product_filters import (
    BaseFilter,
    CategoryFilter,
    DiscountFilter,
    PriceRangeFilter,
    SearchFilter,
    StockFilter,
)
from tests.fakes import make_product


def _chain_types(f):
    """Outermost-first list of filter classes in a chain."""
    types = []
    while True:
        types.append(type(f))
        if isinstance(f, BaseFilter):
            return types
        f = f.inner


class TestFilterFactoryComposition:

    def test_empty_criteria_gives_base_filter(self):
        f = FilterFactory.create(FilterCriteria())
        assert isinstance(f, BaseFilter)
        assert f.describe() == "no filtering"

    def test_category_and_search_description(self):
        f = FilterFactory.create(FilterCriteria(category="books", search="tolkien"))
        assert f.describe() == 'Category: books + Search: "tolkien"'

    def test_full_chain_order(self):
        f = FilterFactory.create(
            FilterCriteria(
                category="books",
                search="x",
                min_price=Decimal("1"),
                max_price=Decimal("9"),
                in_stock_only=True,
                only_with_discount=True,
                price_fn=BasicPrice().total,
            )
        )
        assert _chain_types(f) == [
            DiscountFilter,
            StockFilter,
            PriceRangeFilter,
            SearchFilter,
            CategoryFilter,
            BaseFilter,
        ]
        assert f.describe() == (
            'Category: books + Search: "x" + Price: $1.00 - $9.00'
            " + In stock only + Discounted only"
        )

    def test_absent_stages_are_skipped(self):
        f = FilterFactory.create(FilterCriteria(search="  ", max_price=Decimal("5")))
        assert _chain_types(f) == [PriceRangeFilter, BaseFilter]

    def test_discount_stage_needs_price_function(self):
        f = FilterFactory.create(FilterCriteria(only_with_discount=True))
        assert isinstance(f, BaseFilter)

    def test_inverted_range_fails_at_construction(self):
        with pytest.raises(ValidationError):
            FilterFactory.create(
                FilterCriteria(min_price=Decimal("10"), max_price=Decimal("1"))
            )


class TestFilterCriteria:

    def test_is_empty(self):
        assert FilterCriteria().is_empty
        assert FilterCriteria(category=" ").is_empty
        assert FilterCriteria(only_with_discount=True).is_empty
        assert not FilterCriteria(in_stock_only=True).is_empty
        assert not FilterCriteria(min_price=Decimal("0")).is_empty


class TestFilterFactoryScenarios:

    def test_category_then_min_price(self):
        products = [
            make_product("A", "electronics", "100"),
            make_product("B", "electronics", "50"),
            make_product("C", "books", "20"),
        ]
        f = FilterFactory.create(
            FilterCriteria(category="electronics", min_price=Decimal("60"))
        )
        assert f.filter(products) == [products[0]]

    def test_discount_filter_with_coupon_keeps_everything_positive(self):
        products = [make_product("A", price="10"), make_product("B", price="20")]
        f = FilterFactory.create(
            FilterCriteria(
                only_with_discount=True,
                price_fn=CouponPercentOff(BasicPrice(), "0.05").total,
            )
        )
        assert f.filter(products) == products

    def test_category_and_search_builder(self):
        f = FilterFactory.create_category_and_search("books", None)
        assert f.describe() == "Category: books"

    def test_price_builder(self):
        f = FilterFactory.create_price_filter(max_price=Decimal("30"))
        assert f.describe() == "Price: <= $30.00"
