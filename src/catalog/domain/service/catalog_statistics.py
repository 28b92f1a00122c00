"""Domain service: summary figures for a list of products."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field
from decimal import Decimal

from catalog.domain.model.product import Product
from catalog.domain.service.product_filters import PriceFunction


@dataclass(frozen=True)
class CatalogStatistics:
    total: int = 0
    average_price: Decimal = Decimal("0")
    min_price: Decimal = Decimal("0")
    max_price: Decimal = Decimal("0")
    total_value: Decimal = Decimal("0")
    categories_count: int = 0
    in_stock_count: int = 0
    out_of_stock_count: int = 0
    most_expensive: str | None = None
    cheapest: str | None = None
    by_category: dict[str, int] = field(default_factory=dict)
    discounted_count: int = 0
    total_savings: Decimal = Decimal("0")


def summarize(
    products: Sequence[Product], price_fn: PriceFunction | None = None
) -> CatalogStatistics:
    """Compute statistics over *products*; an empty list gives all zeros.

    Products with a NaN price are counted but left out of every price
    figure. Ties for most expensive / cheapest go to the first product
    listed.

    With *price_fn*, also count the products it prices below their list
    price and add up what they save.
    """
    if not products:
        return CatalogStatistics()

    priced = [p for p in products if not p.price.is_nan()]
    in_stock = sum(1 for p in products if p.in_stock)
    by_category = Counter(p.category for p in products)
    discounted, savings = _savings(priced, price_fn) if price_fn else (0, Decimal("0"))

    common = dict(
        total=len(products),
        categories_count=len(by_category),
        in_stock_count=in_stock,
        out_of_stock_count=len(products) - in_stock,
        by_category=dict(sorted(by_category.items())),
        discounted_count=discounted,
        total_savings=savings,
    )
    if not priced:
        return CatalogStatistics(**common)

    total_value = sum((p.price for p in priced), Decimal("0"))
    most_expensive = max(priced, key=lambda p: p.price)
    cheapest = min(priced, key=lambda p: p.price)
    return CatalogStatistics(
        average_price=total_value / len(priced),
        min_price=cheapest.price,
        max_price=most_expensive.price,
        total_value=total_value,
        most_expensive=most_expensive.name,
        cheapest=cheapest.name,
        **common,
    )


def _savings(products: Sequence[Product], price_fn: PriceFunction) -> tuple[int, Decimal]:
    count = 0
    total = Decimal("0")
    for product in products:
        saved = product.price - Decimal(str(price_fn(product)))
        if saved.is_nan() or saved <= 0:
            continue
        count += 1
        total += saved
    return count, total
