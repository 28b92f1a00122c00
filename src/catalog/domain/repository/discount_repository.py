"""Abstract repository for active discount rules."""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.discount import DiscountRule


class DiscountRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate the next unique rule ID."""

    @abstractmethod
    def list_all(self) -> list[DiscountRule]:
        """Return every active rule, oldest first."""

    @abstractmethod
    def save(self, rule: DiscountRule) -> None:
        """Persist a new or updated rule."""

    @abstractmethod
    def delete(self, rule_id: str) -> bool:
        """Remove a rule. Return False if it did not exist."""

    @abstractmethod
    def clear(self) -> int:
        """Remove every rule and return how many were removed."""
