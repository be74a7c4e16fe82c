"""Application service: Add To Cart use case.

The only place where the cart meets the catalog: the product is looked
up through the active-only view and its name and price are copied into
the cart line.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import CartActionResult, cart_result
from storefront.domain.exceptions import DomainException
from storefront.domain.repository.cart_repository import CartSessionRepository
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class AddToCartHandler:

    def __init__(
        self,
        cart_repo: CartSessionRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def handle(self, session_id: str, product_id: int) -> CartActionResult:
        product = self._product_repo.get_available(product_id)

        with self._cart_repo.locked(session_id):
            cart = self._cart_repo.load(session_id)
            try:
                cart = cart.add(product)
            except DomainException as exc:
                logger.info(
                    "cart_add_rejected",
                    session_id=session_id,
                    product_id=product_id,
                    reason=type(exc).__name__,
                )
                raise
            result = cart_result("Product added to cart", cart)
            self._cart_repo.save(session_id, cart)

        logger.info(
            "cart_item_added",
            session_id=session_id,
            product_id=product_id,
            cart_count=cart.item_count,
        )
        return result
