"""CLI commands for the session cart.

Every command prints the JSON result body the storefront pages consume,
and exits with status 1 when the operation was rejected.
"""

from __future__ import annotations

import json
from dataclasses import asdict

import click

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.dto import ErrorResult
from storefront.application.remove_from_cart import RemoveFromCartHandler
from storefront.application.update_cart import UpdateCartQuantityHandler
from storefront.application.view_cart import ClearCartHandler, ViewCartHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import cart_repository, product_repository

session_option = click.option(
    "--session",
    "session_id",
    envvar="STOREFRONT_SESSION",
    default="default",
    show_default=True,
    help="Session whose cart to use.",
)


def _emit(payload) -> None:
    click.echo(json.dumps(asdict(payload), indent=2))


def _emit_error(exc: DomainException) -> None:
    _emit(ErrorResult.from_exception(exc))
    click.get_current_context().exit(1)


@click.command("add")
@session_option
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def cart_add(session_id: str, product_id: int) -> None:
    """Add one unit of a product to the cart."""
    handler = AddToCartHandler(
        cart_repo=cart_repository(),
        product_repo=product_repository(),
    )

    try:
        result = handler.handle(session_id, product_id)
    except DomainException as exc:
        _emit_error(exc)
        return

    _emit(result)


@click.command("show")
@session_option
def cart_show(session_id: str) -> None:
    """Show the cart with its total."""
    _emit(ViewCartHandler(cart_repository()).handle(session_id))


@click.command("update")
@session_option
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="New quantity; 0 or less removes.")
def cart_update(session_id: str, product_id: int, quantity: int) -> None:
    """Set the quantity of a cart line."""
    try:
        result = UpdateCartQuantityHandler(cart_repository()).handle(
            session_id, product_id, quantity
        )
    except DomainException as exc:
        _emit_error(exc)
        return

    _emit(result)


@click.command("remove")
@session_option
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def cart_remove(session_id: str, product_id: int) -> None:
    """Remove a line from the cart."""
    try:
        result = RemoveFromCartHandler(cart_repository()).handle(session_id, product_id)
    except DomainException as exc:
        _emit_error(exc)
        return

    _emit(result)


@click.command("clear")
@session_option
def cart_clear(session_id: str) -> None:
    """Discard the session's cart."""
    ClearCartHandler(cart_repository()).handle(session_id)
    click.echo(json.dumps({"status": "success", "message": "Cart cleared"}, indent=2))
