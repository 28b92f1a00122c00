"""CLI commands for the Product aggregate."""

from __future__ import annotations

from decimal import Decimal

import click

from catalog.application.add_product import AddProductHandler
from catalog.application.list_products import ListProductsHandler
from catalog.application.quote_price import QuotePriceHandler
from catalog.application.remove_product import ClearProductsHandler, RemoveProductHandler
from catalog.application.show_statistics import ShowStatisticsHandler
from catalog.application.update_product import UpdateProductHandler
from catalog.domain.exceptions import DomainException
from catalog.domain.model.value_objects import Money
from catalog.domain.service.product_sorting import SortOrder
from catalog.infrastructure.bootstrap import discount_repository, product_repository
from catalog.infrastructure.cli.options import build_filter_spec, filter_options
from catalog.infrastructure.config import Settings


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--category", required=True, help="Category (e.g. books).")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--description", default="", help="Free-text description.")
@click.option("--sku", default=None, help="Stock keeping unit.")
@click.option("--stock", type=int, default=0, show_default=True, help="Units in stock.")
@click.pass_obj
def product_add(
    settings: Settings,
    name: str,
    category: str,
    price: str,
    description: str,
    sku: str | None,
    stock: int,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository(settings))

    try:
        product = handler.handle(
            name=name,
            category=category,
            price=price,
            description=description,
            sku=sku,
            stock_quantity=stock,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} '{product.name}' added to {product.category} "
        f"at {Money(product.price)}"
    )


@click.command("list")
@filter_options
@click.option("--limit", type=int, default=None, help="Page size.")
@click.option("--offset", type=int, default=0, show_default=True, help="Rows to skip.")
@click.option(
    "--sort",
    type=click.Choice([o.value for o in SortOrder]),
    default=None,
    help="Order by price, -price (highest first) or name.",
)
@click.pass_obj
def product_list(
    settings: Settings,
    category: str | None,
    search: str | None,
    min_price: Decimal | None,
    max_price: Decimal | None,
    in_stock: bool,
    discounted: bool,
    limit: int | None,
    offset: int,
    sort: str | None,
) -> None:
    """List products, optionally filtered and sorted."""
    handler = ListProductsHandler(
        product_repo=product_repository(settings),
        discount_repo=discount_repository(settings),
        mode=settings.discount_mode,
        include_shipping=settings.include_shipping,
    )
    spec = build_filter_spec(category, search, min_price, max_price, in_stock, discounted)

    try:
        page = handler.handle(spec, limit=limit, offset=offset, sort=sort)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Filter: {page.filter_description}")
    if not page.items:
        click.echo("No products found.")
        return

    click.echo(
        f"{'ID':<6} {'Name':<24} {'Category':<12} {'Price':>10} {'Final':>10} {'Stock':>6}"
    )
    click.echo("-" * 73)
    for p in page.items:
        click.echo(
            f"{p.id:<6} {p.name:<24} {p.category:<12} "
            f"{p.price:>10} {p.final_price:>10} {p.stock_quantity:>6}"
        )
    click.echo()
    click.echo(f"Showing {len(page.items)} of {page.total} matching ({page.original} in catalog)")
    if page.pagination is not None and page.pagination.has_next:
        next_offset = page.pagination.offset + page.pagination.limit
        click.echo(f"More results: --offset {next_offset}")


@click.command("update")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--category", default=None, help="New category.")
@click.option("--stock", type=int, default=None, help="New stock level.")
@click.option("--description", default=None, help="New description.")
@click.pass_obj
def product_update(
    settings: Settings,
    name: str,
    price: str | None,
    category: str | None,
    stock: int | None,
    description: str | None,
) -> None:
    """Update a product's price, category, stock or description."""
    handler = UpdateProductHandler(product_repo=product_repository(settings))

    try:
        product = handler.handle(
            name=name,
            price=price,
            category=category,
            stock_quantity=stock,
            description=description,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' updated")


@click.command("remove")
@click.option("--name", required=True, help="Product name.")
@click.pass_obj
def product_remove(settings: Settings, name: str) -> None:
    """Remove a product from the catalog."""
    handler = RemoveProductHandler(product_repo=product_repository(settings))

    try:
        handler.handle(name=name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product '{name}' removed")


@click.command("stats")
@filter_options
@click.pass_obj
def product_stats(
    settings: Settings,
    category: str | None,
    search: str | None,
    min_price: Decimal | None,
    max_price: Decimal | None,
    in_stock: bool,
    discounted: bool,
) -> None:
    """Show statistics for the (filtered) catalog."""
    handler = ShowStatisticsHandler(
        product_repo=product_repository(settings),
        discount_repo=discount_repository(settings),
        mode=settings.discount_mode,
    )
    spec = build_filter_spec(category, search, min_price, max_price, in_stock, discounted)

    try:
        stats = handler.handle(spec)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Filter:          {stats.filter_description}")
    click.echo(f"Products:        {stats.total}")
    click.echo(f"Average price:   {stats.average_price}")
    click.echo(f"Price range:     {stats.min_price} - {stats.max_price}")
    click.echo(f"Total value:     {stats.total_value}")
    click.echo(f"In stock:        {stats.in_stock_count}")
    click.echo(f"Out of stock:    {stats.out_of_stock_count}")
    click.echo(f"Most expensive:  {stats.most_expensive or '-'}")
    click.echo(f"Cheapest:        {stats.cheapest or '-'}")
    click.echo(f"Discounted:      {stats.discounted_count}")
    click.echo(f"Total savings:   {stats.total_savings}")
    click.echo(f"Categories:      {stats.categories_count}")
    for name, count in stats.by_category.items():
        click.echo(f"  {name:<14} {count:>5}")


@click.command("quote")
@click.option("--name", required=True, help="Product name.")
@click.pass_obj
def product_quote(settings: Settings, name: str) -> None:
    """Show a product's price after active discounts."""
    handler = QuotePriceHandler(
        product_repo=product_repository(settings),
        discount_repo=discount_repository(settings),
        mode=settings.discount_mode,
        include_shipping=settings.include_shipping,
    )

    try:
        q = handler.handle(product_name=name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product:   {q.product_name}")
    click.echo(f"Pricing:   {q.pricing}")
    click.echo(f"Original:  {q.original_price}")
    click.echo(f"Final:     {q.final_price}")
    click.echo(f"You save:  {q.discount} ({q.discount_percent})")


@click.command("clear")
@click.confirmation_option(prompt="Remove every product from the catalog?")
@click.pass_obj
def product_clear(settings: Settings) -> None:
    """Remove every product from the catalog."""
    handler = ClearProductsHandler(product_repo=product_repository(settings))
    removed = handler.handle()

    if removed == 0:
        click.echo("No products to remove.")
    else:
        click.echo(f"Removed {removed} product(s)")
