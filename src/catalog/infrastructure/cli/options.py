"""Shared click options."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

import click

from catalog.application.dto import FilterSpec


class DecimalType(click.ParamType):
    name = "decimal"

    def convert(self, value, param, ctx):
        if isinstance(value, Decimal):
            return value
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            self.fail(f"{value!r} is not a valid amount", param, ctx)
        if not result.is_finite():
            self.fail(f"{value!r} is not a valid amount", param, ctx)
        return result


DECIMAL = DecimalType()


def filter_options(func):
    """Attach the catalog filter options to a command."""
    options = [
        click.option("--category", default=None, help="Only this category."),
        click.option("--search", default=None, help="Text in name or description."),
        click.option("--min-price", type=DECIMAL, default=None, help="Lowest price."),
        click.option("--max-price", type=DECIMAL, default=None, help="Highest price."),
        click.option("--in-stock", is_flag=True, help="Only products in stock."),
        click.option("--discounted", is_flag=True, help="Only discounted products."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def build_filter_spec(
    category: str | None,
    search: str | None,
    min_price: Decimal | None,
    max_price: Decimal | None,
    in_stock: bool,
    discounted: bool,
) -> FilterSpec:
    return FilterSpec(
        category=category,
        search=search,
        min_price=min_price,
        max_price=max_price,
        in_stock_only=in_stock,
        only_with_discount=discounted,
    )
