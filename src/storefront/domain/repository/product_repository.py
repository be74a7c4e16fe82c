"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory)
live in the infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int, include_trashed: bool = False) -> Product | None:
        """Return a product by its ID, or None if not found.

        Trashed products are only returned when ``include_trashed`` is set.
        """

    def get_available(self, product_id: int) -> Product | None:
        """Return the product only if it is active and not trashed."""
        product = self.get_by_id(product_id)
        if product is None or not product.is_available:
            return None
        return product

    @abstractmethod
    def list_all_including_trashed(self) -> list[Product]:
        """Return every product regardless of status or trash state."""

    def list_available(self) -> list[Product]:
        """Return products shown in the public catalog, in insertion order."""
        return [p for p in self.list_all_including_trashed() if p.is_available]

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product, assigning an ID to new ones."""

    @abstractmethod
    def delete(self, product_id: int) -> None:
        """Permanently remove a product. Unknown IDs are ignored."""
