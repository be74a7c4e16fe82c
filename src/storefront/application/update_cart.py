"""Application service: Update Cart Quantity use case."""

from __future__ import annotations

import structlog

from storefront.application.dto import CartActionResult, cart_result
from storefront.domain.exceptions import DomainException
from storefront.domain.repository.cart_repository import CartSessionRepository

logger = structlog.get_logger(__name__)


class UpdateCartQuantityHandler:

    def __init__(self, cart_repo: CartSessionRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, session_id: str, product_id: int, quantity: int) -> CartActionResult:
        """Set a line's quantity. Zero or a negative number removes it."""
        with self._cart_repo.locked(session_id):
            try:
                cart = self._cart_repo.load(session_id).set_quantity(product_id, quantity)
            except DomainException as exc:
                logger.info(
                    "cart_quantity_rejected",
                    session_id=session_id,
                    product_id=product_id,
                    reason=type(exc).__name__,
                )
                raise
            result = cart_result("Cart updated", cart)
            self._cart_repo.save(session_id, cart)

        logger.info(
            "cart_quantity_set",
            session_id=session_id,
            product_id=product_id,
            quantity=max(quantity, 0),
        )
        return result
