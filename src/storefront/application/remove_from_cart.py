"""Application service: Remove From Cart use case."""

from __future__ import annotations

import structlog

from storefront.application.dto import CartActionResult, cart_result
from storefront.domain.exceptions import NotInCartError
from storefront.domain.repository.cart_repository import CartSessionRepository

logger = structlog.get_logger(__name__)


class RemoveFromCartHandler:

    def __init__(self, cart_repo: CartSessionRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, session_id: str, product_id: int) -> CartActionResult:
        with self._cart_repo.locked(session_id):
            try:
                cart = self._cart_repo.load(session_id).remove(product_id)
            except NotInCartError:
                logger.info("cart_remove_rejected", session_id=session_id, product_id=product_id)
                raise
            result = cart_result("Product removed", cart)
            self._cart_repo.save(session_id, cart)

        logger.info("cart_item_removed", session_id=session_id, product_id=product_id)
        return result
