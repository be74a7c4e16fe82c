"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world. Cart results mirror
the JSON bodies the storefront returns to its pages.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.exceptions import DomainException, ValidationError
from storefront.domain.model.cart import CartState


@dataclass(frozen=True)
class CartLineDTO:
    product_id: int
    name: str
    price: str  # formatted, e.g. "55000.00"
    quantity: int
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    items: list[CartLineDTO]
    cart_count: int
    total: str


@dataclass(frozen=True)
class CartActionResult:
    """Output of a successful cart mutation."""

    message: str
    cart_count: int
    cart: CartDTO
    status: str = "success"


@dataclass(frozen=True)
class ErrorResult:
    """What the boundary reports when an operation is rejected."""

    message: str
    status_code: int
    errors: dict[str, list[str]] = field(default_factory=dict)
    status: str = "error"

    @staticmethod
    def from_exception(exc: DomainException) -> ErrorResult:
        errors = exc.errors if isinstance(exc, ValidationError) else {}
        return ErrorResult(message=str(exc), status_code=exc.status_code, errors=errors)


def to_cart_dto(cart: CartState) -> CartDTO:
    return CartDTO(
        items=[
            CartLineDTO(
                product_id=line.product_id,
                name=line.name,
                price=str(line.price),
                quantity=line.quantity,
                line_total=str(line.line_total),
            )
            for line in cart.lines.values()
        ],
        cart_count=cart.item_count,
        total=str(cart.total),
    )


def cart_result(message: str, cart: CartState) -> CartActionResult:
    return CartActionResult(
        message=message,
        cart_count=cart.item_count,
        cart=to_cart_dto(cart),
    )
