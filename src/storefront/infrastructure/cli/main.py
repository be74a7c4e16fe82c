import click

from storefront.infrastructure.bootstrap import settings
from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_remove,
    cart_show,
    cart_update,
)
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_force_delete,
    product_list,
    product_restore,
    product_seed,
    product_update,
)
from storefront.infrastructure.config import ConfigurationError
from storefront.infrastructure.logging import configure_logging


@click.group()
def cli() -> None:
    """Storefront: catalog, cart and product admin"""
    try:
        configure_logging(settings())
    except ConfigurationError as exc:
        raise click.ClickException(str(exc))


@cli.group()
def product() -> None:
    """Browse and manage products."""


@cli.group()
def cart() -> None:
    """Manage the session cart."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_force_delete)
product.add_command(product_list)
product.add_command(product_restore)
product.add_command(product_seed)
product.add_command(product_update)
cart.add_command(cart_add)
cart.add_command(cart_clear)
cart.add_command(cart_remove)
cart.add_command(cart_show)
cart.add_command(cart_update)
