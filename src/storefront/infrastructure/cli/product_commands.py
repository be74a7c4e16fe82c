"""CLI commands for the Product aggregate (public catalog and admin)."""

from __future__ import annotations

import click

from storefront.application.create_product import CreateProductHandler
from storefront.application.delete_product import (
    ForceDeleteProductHandler,
    SoftDeleteProductHandler,
)
from storefront.application.list_products import (
    ListActiveProductsHandler,
    ListAllProductsHandler,
)
from storefront.application.restore_product import RestoreProductHandler
from storefront.application.seed_catalog import SeedCatalogHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import DomainException, ValidationError
from storefront.infrastructure.bootstrap import fallback_actor_id, product_repository


def _fail(exc: DomainException) -> click.ClickException:
    """Turn a domain error into a CLI error, listing field messages."""
    message = str(exc)
    if isinstance(exc, ValidationError):
        for field_name, messages in exc.errors.items():
            for msg in messages:
                message += f"\n  {field_name}: {msg}"
    return click.ClickException(message)


@click.command("list")
@click.option("--all", "show_all", is_flag=True, default=False,
              help="Admin view: include inactive and trashed products.")
def product_list(show_all: bool) -> None:
    """List products in the catalog."""
    repo = product_repository()
    if show_all:
        products = ListAllProductsHandler(repo).handle()
    else:
        products = ListActiveProductsHandler(repo).handle()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>12} {'Status':<10} {'Trashed':<7}")
    click.echo("-" * 59)
    for p in products:
        trashed = "yes" if p.is_trashed else "no"
        click.echo(
            f"{p.id:<6} {p.name:<20} {str(p.price):>12} {p.status.value:<10} {trashed:<7}"
        )


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 55000.00).")
@click.option("--status", default=None, help="active, inactive or deleted (default active).")
@click.option("--image", default=None, help="Image path or URL.")
@click.option("--actor", "actor_id", type=int, default=None, help="Acting user ID.")
def product_add(
    name: str, price: str, status: str | None, image: str | None, actor_id: int | None
) -> None:
    """Add a new product to the catalog."""
    handler = CreateProductHandler(
        product_repo=product_repository(),
        fallback_actor_id=fallback_actor_id(),
    )

    try:
        product = handler.handle(
            name=name, price=price, status=status, actor_id=actor_id, image=image
        )
    except DomainException as exc:
        raise _fail(exc)

    click.echo(f"Product created: #{product.id} '{product.name}' at {product.price}")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
@click.option("--status", default=None, help="active, inactive or deleted (unchanged if omitted).")
@click.option("--actor", "actor_id", type=int, default=None, help="Acting user ID.")
def product_update(
    product_id: int, name: str, price: str, status: str | None, actor_id: int | None
) -> None:
    """Update a product's name, price and status."""
    handler = UpdateProductHandler(
        product_repo=product_repository(),
        fallback_actor_id=fallback_actor_id(),
    )

    try:
        handler.handle(
            product_id=product_id, name=name, price=price, status=status, actor_id=actor_id
        )
    except DomainException as exc:
        raise _fail(exc)

    click.echo(f"Product updated: #{product_id}")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_delete(product_id: int) -> None:
    """Move a product to the trash."""
    try:
        SoftDeleteProductHandler(product_repository()).handle(product_id)
    except DomainException as exc:
        raise _fail(exc)

    click.echo(f"Product moved to trash: #{product_id}")


@click.command("restore")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_restore(product_id: int) -> None:
    """Restore a trashed product (its status is left unchanged)."""
    try:
        RestoreProductHandler(product_repository()).handle(product_id)
    except DomainException as exc:
        raise _fail(exc)

    click.echo(f"Product restored: #{product_id}")


@click.command("force-delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_force_delete(product_id: int) -> None:
    """Permanently delete a product."""
    try:
        ForceDeleteProductHandler(product_repository()).handle(product_id)
    except DomainException as exc:
        raise _fail(exc)

    click.echo(f"Product permanently deleted: #{product_id}")


@click.command("seed")
def product_seed() -> None:
    """Seed the demo catalog."""
    create = CreateProductHandler(
        product_repo=product_repository(),
        fallback_actor_id=fallback_actor_id(),
    )
    products = SeedCatalogHandler(create).handle()
    click.echo(f"Seeded {len(products)} products.")
