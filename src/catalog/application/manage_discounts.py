"""Application services: list, remove and clear discount rules."""

from __future__ import annotations

import logging

from catalog.application.apply_discount import to_discount_dto
from catalog.application.dto import DiscountDTO
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.repository.discount_repository import DiscountRepository

logger = logging.getLogger(__name__)


class ListDiscountsHandler:

    def __init__(self, discount_repo: DiscountRepository) -> None:
        self._discount_repo = discount_repo

    def handle(self) -> list[DiscountDTO]:
        return [to_discount_dto(r) for r in self._discount_repo.list_all()]


class RemoveDiscountHandler:

    def __init__(self, discount_repo: DiscountRepository) -> None:
        self._discount_repo = discount_repo

    def handle(self, rule_id: str) -> None:
        if not self._discount_repo.delete(rule_id):
            raise EntityNotFoundError(f"Discount #{rule_id} not found")
        logger.info("Removed discount #%s", rule_id)


class ClearDiscountsHandler:

    def __init__(self, discount_repo: DiscountRepository) -> None:
        self._discount_repo = discount_repo

    def handle(self) -> int:
        """Remove every active rule; return how many were removed."""
        removed = self._discount_repo.clear()
        logger.info("Cleared %d discount(s)", removed)
        return removed
