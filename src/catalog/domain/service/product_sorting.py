"""Domain service: order a product list for display."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import Product


class SortOrder(Enum):
    PRICE = "price"
    PRICE_DESC = "-price"
    NAME = "name"

    @classmethod
    def from_string(cls, value: str) -> SortOrder:
        for order in cls:
            if order.value == value.strip().lower():
                return order
        raise ValidationError(
            f"Invalid sort order: {value!r}. "
            f"Valid orders: {', '.join(o.value for o in cls)}"
        )


def sort_products(products: Sequence[Product], order: SortOrder) -> list[Product]:
    """Return a sorted copy of *products*. The sort is stable.

    Products with a NaN price go last for either price order.
    """
    if order is SortOrder.NAME:
        return sorted(products, key=lambda p: p.name.casefold())

    priced = [p for p in products if not p.price.is_nan()]
    unpriced = [p for p in products if p.price.is_nan()]
    ordered = sorted(
        priced, key=lambda p: p.price, reverse=order is SortOrder.PRICE_DESC
    )
    return ordered + unpriced
