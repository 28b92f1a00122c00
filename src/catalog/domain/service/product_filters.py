"""Product filters: composable predicates over a list of products.

Same shape as the price calculators. ``BaseFilter`` is the leaf and keeps
everything. Each ``FilterDecorator`` lets its inner filter narrow the list
first, then removes whatever fails its own predicate, so a chain is the
logical AND of its predicates.

Each filter also describes itself. A decorator's description is its
inner description and its own fragment joined by ``" + "``; the leaf's
``"no filtering"`` sentinel is dropped once anything is stacked on it.

Filters are never mutated. The ``with_*`` methods return a new decorator
around the same inner filter.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from decimal import Decimal

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.category import same_category
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money

NO_FILTERING = "no filtering"

PriceFunction = Callable[[Product], Decimal | float | int]


class ProductFilter(ABC):

    @abstractmethod
    def filter(self, products: Sequence[Product]) -> list[Product]:
        """Return the products that pass this filter, in input order."""

    @abstractmethod
    def describe(self) -> str:
        """Human-readable trace of the active predicates."""


class BaseFilter(ProductFilter):

    def filter(self, products: Sequence[Product]) -> list[Product]:
        return list(products)

    def describe(self) -> str:
        return NO_FILTERING


class FilterDecorator(ProductFilter):

    def __init__(self, inner: ProductFilter) -> None:
        self._inner = inner

    @property
    def inner(self) -> ProductFilter:
        return self._inner

    def filter(self, products: Sequence[Product]) -> list[Product]:
        return [p for p in self._inner.filter(products) if self._accepts(p)]

    def describe(self) -> str:
        inner = self._inner.describe()
        own = self._own_description()
        if inner == NO_FILTERING:
            return own
        return f"{inner} + {own}"

    @abstractmethod
    def _accepts(self, product: Product) -> bool: ...

    @abstractmethod
    def _own_description(self) -> str: ...


class CategoryFilter(FilterDecorator):
    """Keeps products of one category. No category keeps everything."""

    def __init__(self, inner: ProductFilter, category: str | None = None) -> None:
        super().__init__(inner)
        self._category = category.strip() if category and category.strip() else None

    @property
    def category(self) -> str | None:
        return self._category

    def with_category(self, category: str | None) -> CategoryFilter:
        return CategoryFilter(self._inner, category)

    def _accepts(self, product: Product) -> bool:
        if self._category is None:
            return True
        return same_category(product.category, self._category)

    def _own_description(self) -> str:
        return f"Category: {self._category}" if self._category else "Category: all"


class SearchFilter(FilterDecorator):
    """Case-insensitive substring match on name or description."""

    def __init__(self, inner: ProductFilter, term: str | None = "") -> None:
        super().__init__(inner)
        self._term = (term or "").strip()
        self._needle = self._term.casefold()

    @property
    def term(self) -> str:
        return self._term

    def with_search_term(self, term: str | None) -> SearchFilter:
        return SearchFilter(self._inner, term)

    def _accepts(self, product: Product) -> bool:
        if not self._needle:
            return True
        if self._needle in product.name.casefold():
            return True
        return bool(product.description) and self._needle in product.description.casefold()

    def _own_description(self) -> str:
        return f'Search: "{self._term}"' if self._term else "Search: empty"


class PriceRangeFilter(FilterDecorator):
    """Keeps products priced within ``[min_price, max_price]``.

    A missing bound leaves that side open. A NaN price fails any bound.
    """

    def __init__(
        self,
        inner: ProductFilter,
        min_price: Decimal | None = None,
        max_price: Decimal | None = None,
    ) -> None:
        super().__init__(inner)
        self._min = _bound(min_price, "Minimum price")
        self._max = _bound(max_price, "Maximum price")
        if self._min is not None and self._max is not None and self._min > self._max:
            raise ValidationError(
                f"Minimum price {Money(self._min)} is greater than "
                f"maximum price {Money(self._max)}"
            )

    @property
    def min_price(self) -> Decimal | None:
        return self._min

    @property
    def max_price(self) -> Decimal | None:
        return self._max

    def with_price_range(
        self, min_price: Decimal | None, max_price: Decimal | None
    ) -> PriceRangeFilter:
        return PriceRangeFilter(self._inner, min_price, max_price)

    def _accepts(self, product: Product) -> bool:
        if self._min is None and self._max is None:
            return True
        if product.price.is_nan():
            return False
        if self._min is not None and product.price < self._min:
            return False
        if self._max is not None and product.price > self._max:
            return False
        return True

    def _own_description(self) -> str:
        if self._min is not None and self._max is not None:
            return f"Price: {Money(self._min)} - {Money(self._max)}"
        if self._min is not None:
            return f"Price: >= {Money(self._min)}"
        if self._max is not None:
            return f"Price: <= {Money(self._max)}"
        return "Price: any"


class StockFilter(FilterDecorator):

    def __init__(self, inner: ProductFilter, in_stock_only: bool = True) -> None:
        super().__init__(inner)
        self._in_stock_only = in_stock_only

    @property
    def in_stock_only(self) -> bool:
        return self._in_stock_only

    def with_in_stock_only(self, in_stock_only: bool) -> StockFilter:
        return StockFilter(self._inner, in_stock_only)

    def _accepts(self, product: Product) -> bool:
        return product.in_stock or not self._in_stock_only

    def _own_description(self) -> str:
        return "In stock only" if self._in_stock_only else "Including out of stock"


class DiscountFilter(FilterDecorator):
    """Keeps products whose computed price is below their list price.

    Needs a pricing function to know the computed price; without one the
    filter keeps everything. The function may return a Decimal, int or
    float.
    """

    def __init__(
        self,
        inner: ProductFilter,
        only_with_discount: bool = False,
        price_fn: PriceFunction | None = None,
    ) -> None:
        super().__init__(inner)
        self._only_with_discount = only_with_discount
        self._price_fn = price_fn

    @property
    def only_with_discount(self) -> bool:
        return self._only_with_discount

    def with_discount_only(self, only_with_discount: bool) -> DiscountFilter:
        return DiscountFilter(self._inner, only_with_discount, self._price_fn)

    def with_price_function(self, price_fn: PriceFunction | None) -> DiscountFilter:
        return DiscountFilter(self._inner, self._only_with_discount, price_fn)

    def _accepts(self, product: Product) -> bool:
        if not self._only_with_discount or self._price_fn is None:
            return True
        final = Decimal(str(self._price_fn(product)))
        if final.is_nan() or product.price.is_nan():
            return False
        return final < product.price

    def _own_description(self) -> str:
        return "Discounted only" if self._only_with_discount else "All products"


def _bound(value: Decimal | str | int | float | None, label: str) -> Decimal | None:
    if value is None:
        return None
    try:
        return Money.of(value).amount
    except ValidationError as exc:
        raise ValidationError(f"{label} must be a non-negative amount, got {value}") from exc
