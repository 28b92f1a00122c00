"""Discount rules: the persistent description of active promotions.

A rule only records *what* discount is active. Turning a set of rules into
a price is the job of ``catalog.domain.service.pricing``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.category import Category, same_category
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Percent


class DiscountKind(Enum):
    CATEGORY = "category"
    COUPON = "coupon"


class DiscountMode(Enum):
    """How several active rules combine into one price.

    COMPOUND applies each rule to the result of the previous one
    (10% then 5% is 14.5% off). SIMPLE adds the percentages of the first
    matching category rule and the first coupon, capped at 100%
    (10% and 5% is 15% off).
    """

    COMPOUND = "compound"
    SIMPLE = "simple"


@dataclass(frozen=True)
class DiscountRule:
    id: str
    kind: DiscountKind
    percent: Percent
    category: str | None = None

    @staticmethod
    def category_rule(id: str, category: str, percent: Percent) -> DiscountRule:
        if percent.value == 0:
            raise ValidationError("Discount percent must be greater than zero")
        return DiscountRule(
            id=id,
            kind=DiscountKind.CATEGORY,
            percent=percent,
            category=Category.from_string(category).value,
        )

    @staticmethod
    def coupon_rule(id: str, percent: Percent) -> DiscountRule:
        if percent.value == 0:
            raise ValidationError("Discount percent must be greater than zero")
        return DiscountRule(id=id, kind=DiscountKind.COUPON, percent=percent)

    def applies_to(self, product: Product) -> bool:
        if self.kind is DiscountKind.COUPON:
            return True
        return same_category(product.category, self.category)

    def __str__(self) -> str:
        if self.kind is DiscountKind.COUPON:
            return f"{self.percent} coupon"
        return f"{self.percent} off {self.category}"
