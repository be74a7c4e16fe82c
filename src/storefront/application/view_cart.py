"""Application service: View Cart (query) and Clear Cart use cases."""

from __future__ import annotations

import structlog

from storefront.application.dto import CartDTO, to_cart_dto
from storefront.domain.repository.cart_repository import CartSessionRepository

logger = structlog.get_logger(__name__)


class ViewCartHandler:

    def __init__(self, cart_repo: CartSessionRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, session_id: str) -> CartDTO:
        return to_cart_dto(self._cart_repo.load(session_id))


class ClearCartHandler:
    """Ends a session's cart; the next interaction starts empty."""

    def __init__(self, cart_repo: CartSessionRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, session_id: str) -> None:
        with self._cart_repo.locked(session_id):
            self._cart_repo.clear(session_id)
        logger.info("cart_cleared", session_id=session_id)
