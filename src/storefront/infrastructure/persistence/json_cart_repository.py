"""JSON-file-backed implementation of CartSessionRepository.

All sessions share one file, ``{session_id: [line, ...]}``. Since every
save rewrites the whole file, ``locked()`` takes the file-wide lock: it
covers the session asked for and, with it, every other session's lines
in the same document.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.cart import CartLine, CartState
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.cart_repository import CartSessionRepository
from storefront.infrastructure.persistence.json_files import (
    ensure_json_file,
    lock_for,
    read_json,
    write_json_atomic,
)


class JsonCartSessionRepository(CartSessionRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path.resolve()
        ensure_json_file(self._file_path, {})

    # --- CartSessionRepository interface --------------------------------------

    def locked(self, session_id: str) -> AbstractContextManager:
        return lock_for(self._file_path)

    def load(self, session_id: str) -> CartState:
        raw_lines = read_json(self._file_path).get(session_id, [])
        return self._to_domain(raw_lines)

    def save(self, session_id: str, cart: CartState) -> None:
        sessions = read_json(self._file_path)
        sessions[session_id] = self._to_raw(cart)
        write_json_atomic(self._file_path, sessions)

    def clear(self, session_id: str) -> None:
        sessions = read_json(self._file_path)
        if sessions.pop(session_id, None) is not None:
            write_json_atomic(self._file_path, sessions)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(cart: CartState) -> list[dict]:
        return [
            {
                "product_id": line.product_id,
                "name": line.name,
                "price": str(line.price.amount),
                "quantity": line.quantity,
            }
            for line in cart.lines.values()
        ]

    @staticmethod
    def _to_domain(raw_lines: list[dict]) -> CartState:
        return CartState(
            {
                raw["product_id"]: CartLine(
                    product_id=raw["product_id"],
                    name=raw["name"],
                    price=Money(Decimal(raw["price"])),
                    quantity=raw["quantity"],
                )
                for raw in raw_lines
            }
        )
