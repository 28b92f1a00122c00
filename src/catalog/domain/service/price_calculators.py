"""Price calculators: a chain of wrappers around a base price.

``BasicPrice`` is the leaf. Every ``PriceDecorator`` wraps exactly one
inner calculator, asks it for a price first, then applies its own rule
to that intermediate value. Discounts therefore compound in the order the
chain was built::

    calc = CouponPercentOff(CategoryPercentOff(BasicPrice(), "books", "0.10"), "0.05")
    calc.total(book)   # price * 0.90 * 0.95

``total()`` never validates the product: a negative price comes out as a
negative total. Rule parameters are validated when the chain is built.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from decimal import Decimal

from catalog.domain.model.category import same_category
from catalog.domain.model.discount import DiscountKind, DiscountRule
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money, Percent

DEFAULT_SHIPPING_RATES: dict[str, Decimal] = {
    "electronics": Decimal("25.00"),
    "books": Decimal("10.00"),
    "food": Decimal("15.00"),
}


class PriceCalculator(ABC):

    @abstractmethod
    def total(self, product: Product) -> Decimal:
        """Return the effective price of *product*."""

    @abstractmethod
    def describe(self) -> str:
        """Human-readable trace of the rules in this chain."""


class BasicPrice(PriceCalculator):

    def total(self, product: Product) -> Decimal:
        return product.price

    def describe(self) -> str:
        return "base price"


class PriceDecorator(PriceCalculator):
    """Base for calculators that adjust the price of an inner calculator."""

    def __init__(self, inner: PriceCalculator) -> None:
        self._inner = inner

    @property
    def inner(self) -> PriceCalculator:
        return self._inner

    def total(self, product: Product) -> Decimal:
        return self._adjust(product, self._inner.total(product))

    def describe(self) -> str:
        return f"{self._inner.describe()} + {self._own_description()}"

    @abstractmethod
    def _adjust(self, product: Product, base: Decimal) -> Decimal:
        """Apply this rule to the price computed so far."""

    @abstractmethod
    def _own_description(self) -> str: ...


class CategoryPercentOff(PriceDecorator):
    """Percentage off for products of one category."""

    def __init__(
        self,
        inner: PriceCalculator,
        category: str,
        percent: Percent | str | float | int | Decimal,
    ) -> None:
        super().__init__(inner)
        self._category = category
        self._percent = Percent.of(percent)

    def _adjust(self, product: Product, base: Decimal) -> Decimal:
        if same_category(product.category, self._category):
            return base * self._percent.complement
        return base

    def _own_description(self) -> str:
        return f"{self._percent} off {self._category}"


class CouponPercentOff(PriceDecorator):
    """Percentage off every product, regardless of category."""

    def __init__(
        self,
        inner: PriceCalculator,
        percent: Percent | str | float | int | Decimal,
    ) -> None:
        super().__init__(inner)
        self._percent = Percent.of(percent)

    def _adjust(self, product: Product, base: Decimal) -> Decimal:
        return base * self._percent.complement

    def _own_description(self) -> str:
        return f"{self._percent} coupon"


class ShippingAdjustment(PriceDecorator):
    """Adds a flat shipping surcharge keyed by category.

    The result is no longer a discounted price but a delivered price, so
    this wrapper belongs at the outside of the chain.
    """

    def __init__(
        self,
        inner: PriceCalculator,
        rates: Mapping[str, Decimal] | None = None,
    ) -> None:
        super().__init__(inner)
        if rates is None:
            rates = DEFAULT_SHIPPING_RATES
        self._rates = {
            category: Money.of(rate).amount for category, rate in rates.items()
        }

    def rate_for(self, category: str) -> Decimal:
        for key, rate in self._rates.items():
            if same_category(key, category):
                return rate
        return Decimal("0")

    def _adjust(self, product: Product, base: Decimal) -> Decimal:
        return base + self.rate_for(product.category)

    def _own_description(self) -> str:
        return "shipping"


class AdditivePercentOff(PriceDecorator):
    """Sums applicable percentages and applies them once.

    Takes the first category rule matching the product and the first
    coupon rule, adds their percentages, caps the sum at 100% and applies
    it to the inner price. 10% + 5% is 15% off, not 14.5%.
    """

    def __init__(self, inner: PriceCalculator, rules: Iterable[DiscountRule]) -> None:
        super().__init__(inner)
        self._rules = list(rules)

    def percent_for(self, product: Product) -> Percent:
        category_rule = next(
            (
                r for r in self._rules
                if r.kind is DiscountKind.CATEGORY and r.applies_to(product)
            ),
            None,
        )
        coupon_rule = next(
            (r for r in self._rules if r.kind is DiscountKind.COUPON), None
        )
        total = Decimal("0")
        for rule in (category_rule, coupon_rule):
            if rule is not None:
                total += rule.percent.value
        return Percent(min(total, Decimal("1")))

    def _adjust(self, product: Product, base: Decimal) -> Decimal:
        return base * self.percent_for(product).complement

    def _own_description(self) -> str:
        if not self._rules:
            return "no discounts"
        return "sum of (" + ", ".join(str(r) for r in self._rules) + ")"
