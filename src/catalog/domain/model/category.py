"""Product categories.

The set of categories a new product may be filed under. Pricing rules and
filters never depend on this enum directly: they compare category strings
through ``same_category`` so catalogs carrying legacy or future tags keep
working.
"""

from __future__ import annotations

from enum import Enum

from catalog.domain.exceptions import ValidationError


class Category(Enum):
    ELECTRONICS = "electronics"
    BOOKS = "books"
    FOOD = "food"

    @classmethod
    def values(cls) -> list[str]:
        return [c.value for c in cls]

    @classmethod
    def from_string(cls, value: str | None) -> Category:
        """Resolve a raw tag to a Category, ignoring case and whitespace."""
        for c in cls:
            if same_category(c.value, value):
                return c
        raise ValidationError(
            f"Invalid category: {value!r}. "
            f"Valid categories: {', '.join(cls.values())}"
        )

    @classmethod
    def display_name(cls, value: str) -> str:
        for c in cls:
            if same_category(c.value, value):
                return _DISPLAY_NAMES[c]
        return value


_DISPLAY_NAMES = {
    Category.ELECTRONICS: "Electronics",
    Category.BOOKS: "Books",
    Category.FOOD: "Food",
}


def same_category(a: str | None, b: str | None) -> bool:
    """Case-insensitive category match. ``None`` matches nothing."""
    if a is None or b is None:
        return False
    return a.strip().casefold() == b.strip().casefold()
