"""CLI commands for discount rules.

Percentages are given as whole numbers: ``--percent 10`` is ten percent.
"""

from __future__ import annotations

import click

from catalog.application.apply_discount import (
    ApplyCategoryDiscountHandler,
    ApplyCouponDiscountHandler,
)
from catalog.application.manage_discounts import (
    ClearDiscountsHandler,
    ListDiscountsHandler,
    RemoveDiscountHandler,
)
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import discount_repository
from catalog.infrastructure.config import Settings


@click.command("category")
@click.option("--category", required=True, help="Category to discount.")
@click.option("--percent", required=True, help="Percent off, 1-100.")
@click.pass_obj
def discount_category(settings: Settings, category: str, percent: str) -> None:
    """Discount every product in one category."""
    handler = ApplyCategoryDiscountHandler(discount_repo=discount_repository(settings))

    try:
        dto = handler.handle(category=category, percent=percent)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Discount #{dto.id}: {dto.percent} off {dto.category}")


@click.command("coupon")
@click.option("--percent", required=True, help="Percent off, 1-100.")
@click.pass_obj
def discount_coupon(settings: Settings, percent: str) -> None:
    """Discount every product in the catalog."""
    handler = ApplyCouponDiscountHandler(discount_repo=discount_repository(settings))

    try:
        dto = handler.handle(percent=percent)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Discount #{dto.id}: {dto.percent} coupon on all products")


@click.command("list")
@click.pass_obj
def discount_list(settings: Settings) -> None:
    """Show active discounts, in the order they apply."""
    handler = ListDiscountsHandler(discount_repo=discount_repository(settings))
    discounts = handler.handle()

    if not discounts:
        click.echo("No active discounts.")
        return

    click.echo(f"Mode: {settings.discount_mode.value}")
    click.echo(f"{'ID':<6} {'Kind':<10} {'Percent':>8} {'Category':<14}")
    click.echo("-" * 41)
    for d in discounts:
        click.echo(f"{d.id:<6} {d.kind:<10} {d.percent:>8} {d.category or '-':<14}")


@click.command("remove")
@click.option("--id", "rule_id", required=True, help="Discount ID.")
@click.pass_obj
def discount_remove(settings: Settings, rule_id: str) -> None:
    """Remove one discount."""
    handler = RemoveDiscountHandler(discount_repo=discount_repository(settings))

    try:
        handler.handle(rule_id=rule_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Discount #{rule_id} removed")


@click.command("clear")
@click.pass_obj
def discount_clear(settings: Settings) -> None:
    """Remove every active discount."""
    handler = ClearDiscountsHandler(discount_repo=discount_repository(settings))
    removed = handler.handle()

    if removed == 0:
        click.echo("No active discounts to remove.")
    else:
        click.echo(f"Removed {removed} discount(s)")
