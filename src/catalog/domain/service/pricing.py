"""Domain service: turn the active discount rules into a price calculator.

Also computes price quotes, the before and after view of one product under
a calculator.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from catalog.domain.model.discount import DiscountKind, DiscountMode, DiscountRule
from catalog.domain.model.product import Product
from catalog.domain.service.price_calculators import (
    AdditivePercentOff,
    BasicPrice,
    CategoryPercentOff,
    CouponPercentOff,
    PriceCalculator,
    ShippingAdjustment,
)


def build_price_calculator(
    rules: Iterable[DiscountRule],
    mode: DiscountMode = DiscountMode.COMPOUND,
    include_shipping: bool = False,
) -> PriceCalculator:
    """Build a fresh calculator chain for *rules*.

    In COMPOUND mode every rule becomes its own decorator, stacked in the
    order the rules were added. In SIMPLE mode all rules feed a single
    additive decorator. Shipping, when requested, is always outermost.
    """
    calc: PriceCalculator = BasicPrice()
    rules = list(rules)

    if mode is DiscountMode.SIMPLE:
        if rules:
            calc = AdditivePercentOff(calc, rules)
    else:
        for rule in rules:
            if rule.kind is DiscountKind.CATEGORY:
                calc = CategoryPercentOff(calc, rule.category, rule.percent)
            else:
                calc = CouponPercentOff(calc, rule.percent)

    if include_shipping:
        calc = ShippingAdjustment(calc)

    return calc


@dataclass(frozen=True)
class PriceQuote:
    original_price: Decimal
    final_price: Decimal
    discount: Decimal
    discount_percent: Decimal

    @property
    def has_discount(self) -> bool:
        if self.final_price.is_nan() or self.original_price.is_nan():
            return False
        return self.final_price < self.original_price


def quote(calculator: PriceCalculator, product: Product) -> PriceQuote:
    """Price *product* with *calculator* and report the savings."""
    original = product.price
    final = calculator.total(product)
    discount = original - final
    if not original.is_nan() and original > 0:
        discount_percent = discount / original * Decimal("100")
    else:
        discount_percent = Decimal("0")
    return PriceQuote(
        original_price=original,
        final_price=final,
        discount=discount,
        discount_percent=discount_percent,
    )
