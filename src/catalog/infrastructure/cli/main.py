import click

from catalog.infrastructure.cli.category_commands import category_list
from catalog.infrastructure.cli.discount_commands import (
    discount_category,
    discount_clear,
    discount_coupon,
    discount_list,
    discount_remove,
)
from catalog.infrastructure.cli.product_commands import (
    product_add,
    product_clear,
    product_list,
    product_quote,
    product_remove,
    product_stats,
    product_update,
)
from catalog.infrastructure.config import ConfigurationError, load_settings
from catalog.infrastructure.logger import configure_logging


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Product Catalog"""
    try:
        settings = load_settings()
    except ConfigurationError as exc:
        raise click.ClickException(str(exc))

    configure_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = settings


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def category() -> None:
    """Browse categories."""


@cli.group()
def discount() -> None:
    """Manage active discounts."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_clear)
product.add_command(product_list)
product.add_command(product_quote)
product.add_command(product_remove)
product.add_command(product_stats)
product.add_command(product_update)
category.add_command(category_list)
discount.add_command(discount_category)
discount.add_command(discount_clear)
discount.add_command(discount_coupon)
discount.add_command(discount_list)
discount.add_command(discount_remove)
