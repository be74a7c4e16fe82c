"""Application service: Create Product use case."""

from __future__ import annotations

from decimal import Decimal

import structlog

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import (
    DEFAULT_CONSTRAINTS,
    Product,
    ProductConstraints,
    ProductStatus,
)
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class CreateProductHandler:

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
        name: str | None,
        price: str | int | float | Decimal | None,
        status: str | ProductStatus | None = None,
        actor_id: int | None = None,
        image: str | None = None,
    ) -> Product:
        """Add a new product to the catalog. Status defaults to active."""
        try:
            details = self._constraints.validate(name, price, status)
        except ValidationError as exc:
            logger.info("product_create_rejected", errors=exc.errors)
            raise

        product = Product.create(
            details,
            actor_id=actor_id if actor_id is not None else self._fallback_actor_id,
            image=image,
        )
        self._product_repo.save(product)

        logger.info(
            "product_created",
            product_id=product.id,
            status=product.status.value,
            created_by=product.created_by,
        )
        return product
