"""Abstract session store for carts.

Each session owns one CartState. Handlers run their load-modify-save
round-trip inside ``locked(session_id)`` so requests for the same session
never interleave. An implementation may lock more widely than one
session; it must never lock less.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from storefront.domain.model.cart import CartState


class CartSessionRepository(ABC):

    @abstractmethod
    def load(self, session_id: str) -> CartState:
        """Return the session's cart, or an empty one on first use."""

    @abstractmethod
    def save(self, session_id: str, cart: CartState) -> None:
        """Persist the session's cart. Call only inside ``locked()``."""

    @abstractmethod
    def clear(self, session_id: str) -> None:
        """Discard the session's cart entirely. Call only inside ``locked()``."""

    @abstractmethod
    def locked(self, session_id: str) -> AbstractContextManager:
        """Exclusive access to the session for one load-modify-save."""
