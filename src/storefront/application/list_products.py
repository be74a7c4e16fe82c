"""Application service: catalog listing queries."""

from __future__ import annotations

from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository


class ListActiveProductsHandler:
    """Public catalog: active products that are not in the trash."""

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[Product]:
        return self._product_repo.list_available()


class ListAllProductsHandler:
    """Admin view: every product, trashed ones included."""

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[Product]:
        return self._product_repo.list_all_including_trashed()
