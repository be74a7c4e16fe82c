"""Application service: Update Product use case."""

from __future__ import annotations

from decimal import Decimal

import structlog

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.product import (
    DEFAULT_CONSTRAINTS,
    Product,
    ProductConstraints,
    ProductStatus,
)
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class UpdateProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        fallback_actor_id: int = 1,
        constraints: ProductConstraints = DEFAULT_CONSTRAINTS,
    ) -> None:
        self._product_repo = product_repo
        self._fallback_actor_id = fallback_actor_id
        self._constraints = constraints

    def handle(
        self,
        product_id: int,
        name: str | None,
        price: str | int | float | Decimal | None,
        status: str | ProductStatus | None = None,
        actor_id: int | None = None,
    ) -> Product:
        """Replace a product's name, price and (optionally) status.

        Trashed products are not found here; restore them first. Carts
        that already hold the product keep their old snapshot.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            logger.info("product_update_rejected", product_id=product_id, reason="not_found")
            raise EntityNotFoundError("Product not found")

        try:
            details = self._constraints.validate(name, price, status)
        except ValidationError as exc:
            logger.info("product_update_rejected", product_id=product_id, errors=exc.errors)
            raise
        product.revise(
            details,
            actor_id=actor_id if actor_id is not None else self._fallback_actor_id,
        )
        self._product_repo.save(product)

        logger.info(
            "product_updated",
            product_id=product.id,
            status=product.status.value,
            updated_by=product.updated_by,
        )
        return product
