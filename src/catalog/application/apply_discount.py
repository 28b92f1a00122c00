"""Application service: Apply Discount use cases.

Percentages arrive in the 0-100 convention used at the command line and
are stored as fractions.  Rules are applied in the order they are added.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from catalog.application.dto import DiscountDTO
from catalog.domain.model.discount import DiscountRule
from catalog.domain.model.value_objects import Percent
from catalog.domain.repository.discount_repository import DiscountRepository

logger = logging.getLogger(__name__)


class ApplyCategoryDiscountHandler:

    def __init__(self, discount_repo: DiscountRepository) -> None:
        self._discount_repo = discount_repo

    def handle(self, category: str, percent: str | int | Decimal) -> DiscountDTO:
        rule = DiscountRule.category_rule(
            id=self._discount_repo.next_id(),
            category=category,
            percent=Percent.from_whole(percent),
        )
        self._discount_repo.save(rule)
        logger.info("Applied discount #%s: %s", rule.id, rule)
        return to_discount_dto(rule)


class ApplyCouponDiscountHandler:

    def __init__(self, discount_repo: DiscountRepository) -> None:
        self._discount_repo = discount_repo

    def handle(self, percent: str | int | Decimal) -> DiscountDTO:
        rule = DiscountRule.coupon_rule(
            id=self._discount_repo.next_id(),
            percent=Percent.from_whole(percent),
        )
        self._discount_repo.save(rule)
        logger.info("Applied discount #%s: %s", rule.id, rule)
        return to_discount_dto(rule)


def to_discount_dto(rule: DiscountRule) -> DiscountDTO:
    return DiscountDTO(
        id=rule.id,
        kind=rule.kind.value,
        percent=str(rule.percent),
        category=rule.category,
    )
