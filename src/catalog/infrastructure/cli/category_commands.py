"""CLI commands for categories."""

from __future__ import annotations

import click

from catalog.application.list_categories import ListCategoriesHandler
from catalog.infrastructure.bootstrap import product_repository
from catalog.infrastructure.config import Settings


@click.command("list")
@click.option("--all", "include_empty", is_flag=True, help="Include empty categories.")
@click.pass_obj
def category_list(settings: Settings, include_empty: bool) -> None:
    """List product categories."""
    handler = ListCategoriesHandler(product_repo=product_repository(settings))
    categories = handler.handle(include_empty=include_empty)

    if not categories:
        click.echo("No categories found.")
        return

    click.echo(f"{'Category':<14} {'Name':<14} {'Products':>8}")
    click.echo("-" * 38)
    for c in categories:
        click.echo(f"{c.name:<14} {c.display_name:<14} {c.product_count:>8}")
