"""Application service: Soft-delete and Force-delete Product use cases."""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class SoftDeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> None:
        """Move a product to the trash.

        Already-trashed products are not found, so deleting twice
        reports an error and leaves the first deletion time intact.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            logger.info("product_trash_rejected", product_id=product_id, reason="not_found")
            raise EntityNotFoundError("Product not found")

        product.soft_delete()
        self._product_repo.save(product)
        logger.info("product_trashed", product_id=product_id)


class ForceDeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> None:
        """Remove a product for good, whether or not it is trashed."""
        product = self._product_repo.get_by_id(product_id, include_trashed=True)
        if product is None:
            logger.info("product_force_delete_rejected", product_id=product_id, reason="not_found")
            raise EntityNotFoundError("Product not found")

        self._product_repo.delete(product_id)
        logger.info("product_force_deleted", product_id=product_id)
