"""Domain service: build a filter chain from flat criteria.

The stages are always stacked in the same order: category, search, price
range, stock, discount. Cheap and highly selective filters come first.
A stage whose criterion is absent is left out of the chain entirely
rather than added as a pass-through, so ``describe()`` only lists the
filters that actually apply.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from catalog.domain.service.product_filters import (
    BaseFilter,
    CategoryFilter,
    DiscountFilter,
    PriceFunction,
    PriceRangeFilter,
    ProductFilter,
    SearchFilter,
    StockFilter,
)


@dataclass(frozen=True)
class FilterCriteria:
    """Everything a caller may ask the catalog to filter on."""

    category: str | None = None
    search: str | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    in_stock_only: bool = False
    only_with_discount: bool = False
    price_fn: PriceFunction | None = None

    @property
    def has_category(self) -> bool:
        return bool(self.category and self.category.strip())

    @property
    def has_search(self) -> bool:
        return bool(self.search and self.search.strip())

    @property
    def has_price_range(self) -> bool:
        return self.min_price is not None or self.max_price is not None

    @property
    def has_discount(self) -> bool:
        return self.only_with_discount and self.price_fn is not None

    @property
    def is_empty(self) -> bool:
        return not (
            self.has_category
            or self.has_search
            or self.has_price_range
            or self.in_stock_only
            or self.has_discount
        )


class FilterFactory:

    @staticmethod
    def create(criteria: FilterCriteria) -> ProductFilter:
        """Build the complete chain for *criteria*.

        Raises ValidationError when the price range is inverted or negative.
        """
        chain: ProductFilter = BaseFilter()
        if criteria.is_empty:
            return chain

        if criteria.has_category:
            chain = CategoryFilter(chain, criteria.category)

        if criteria.has_search:
            chain = SearchFilter(chain, criteria.search)

        if criteria.has_price_range:
            chain = PriceRangeFilter(chain, criteria.min_price, criteria.max_price)

        if criteria.in_stock_only:
            chain = StockFilter(chain, True)

        if criteria.has_discount:
            chain = DiscountFilter(chain, True, criteria.price_fn)

        return chain

    @staticmethod
    def create_category_and_search(
        category: str | None, search: str | None
    ) -> ProductFilter:
        return FilterFactory.create(FilterCriteria(category=category, search=search))

    @staticmethod
    def create_price_filter(
        min_price: Decimal | None = None, max_price: Decimal | None = None
    ) -> ProductFilter:
        return FilterFactory.create(
            FilterCriteria(min_price=min_price, max_price=max_price)
        )
