"""Application service: Restore Product use case."""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import EntityNotFoundError, NotTrashedError
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class RestoreProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> None:
        """Take a trashed product out of the trash.

        Only the deletion timestamp is cleared; the status stays
        ``deleted`` until an admin updates it.
        """
        product = self._product_repo.get_by_id(product_id, include_trashed=True)
        if product is None:
            logger.info("product_restore_rejected", product_id=product_id, reason="not_found")
            raise EntityNotFoundError("Product not found")

        try:
            product.restore()
        except NotTrashedError:
            logger.info("product_restore_rejected", product_id=product_id, reason="not_trashed")
            raise
        self._product_repo.save(product)
        logger.info("product_restored", product_id=product_id, status=product.status.value)
