"""Cart state for one shopping session.

A CartState is an immutable value: every operation returns a new state and
leaves the original untouched. The session layer decides where states are
kept between requests.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from storefront.domain.exceptions import (
    NotInCartError,
    UnavailableError,
    ValidationError,
)
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money

MAX_LINE_QUANTITY = 9999


@dataclass(frozen=True)
class CartLine:
    """Name and price are copied from the product when first added.

    Later catalog edits do not reach lines already in a cart.
    """

    product_id: int
    name: str
    price: Money
    quantity: int

    @property
    def line_total(self) -> Money:
        return self.price * self.quantity


@dataclass(frozen=True)
class CartState:
    """Cart lines keyed by product id."""

    lines: dict[int, CartLine] = field(default_factory=dict)

    # --- Operations -----------------------------------------------------------

    def add(self, product: Product | None) -> CartState:
        """Add one unit of ``product``.

        ``product`` is whatever the catalog's active-only lookup returned,
        so None means the id is unknown or not for sale.
        """
        if product is None or not product.is_available:
            raise UnavailableError("Product unavailable.")

        lines = dict(self.lines)
        existing = lines.get(product.id)  # type: ignore[arg-type]
        if existing is not None:
            _check_quantity(existing.quantity + 1)
            lines[existing.product_id] = replace(existing, quantity=existing.quantity + 1)
        else:
            lines[product.id] = CartLine(  # type: ignore[index]
                product_id=product.id,  # type: ignore[arg-type]
                name=product.name,
                price=product.price,
                quantity=1,
            )
        return CartState(lines)

    def set_quantity(self, product_id: int, quantity: int) -> CartState:
        """Set an absolute quantity; zero or less drops the line."""
        line = self._line(product_id)
        lines = dict(self.lines)
        if quantity > 0:
            _check_quantity(quantity)
            lines[product_id] = replace(line, quantity=quantity)
        else:
            del lines[product_id]
        return CartState(lines)

    def remove(self, product_id: int) -> CartState:
        self._line(product_id)
        lines = dict(self.lines)
        del lines[product_id]
        return CartState(lines)

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        result = Money.zero()
        for line in self.lines.values():
            result = result + line.line_total
        return result

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self.lines.values())

    @property
    def is_empty(self) -> bool:
        return not self.lines

    # --- Internal helpers -----------------------------------------------------

    def _line(self, product_id: int) -> CartLine:
        line = self.lines.get(product_id)
        if line is None:
            raise NotInCartError("Product not in cart")
        return line


def _check_quantity(quantity: int) -> None:
    if quantity > MAX_LINE_QUANTITY:
        raise ValidationError(
            "The given data was invalid.",
            {"quantity": [f"The quantity field must not be greater than {MAX_LINE_QUANTITY}."]},
        )
