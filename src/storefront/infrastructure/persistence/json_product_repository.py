"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.product import Product, ProductStatus
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.json_files import (
    ensure_json_file,
    lock_for,
    read_json,
    write_json_atomic,
)


class JsonProductRepository(ProductRepository):
    """Stores ``{"next_id": n, "products": [...]}``.

    IDs come from the ``next_id`` counter rather than the current
    maximum, so an ID freed by a permanent delete is never handed out
    again. Each write holds the file lock for its whole read-modify-write,
    so concurrent processes never drop each other's products.
    """

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        ensure_json_file(self._file_path, {"next_id": 1, "products": []})

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int, include_trashed: bool = False) -> Product | None:
        for raw in self._load_raw()["products"]:
            if raw["id"] == product_id:
                product = self._to_domain(raw)
                if product.is_trashed and not include_trashed:
                    return None
                return product
        return None

    def list_all_including_trashed(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._load_raw()["products"]]

    def save(self, product: Product) -> None:
        with lock_for(self._file_path):
            self._save_unlocked(product)

    def delete(self, product_id: int) -> None:
        with lock_for(self._file_path):
            data = self._load_raw()
            data["products"] = [raw for raw in data["products"] if raw["id"] != product_id]
            self._persist_raw(data)

    def _save_unlocked(self, product: Product) -> None:
        data = self._load_raw()

        if product.id is None:
            product.id = data["next_id"]
        data["next_id"] = max(data["next_id"], product.id + 1)

        # Upsert: replace if exists, otherwise append
        records = data["products"]
        for i, raw in enumerate(records):
            if raw["id"] == product.id:
                records[i] = self._to_raw(product)
                break
        else:
            records.append(self._to_raw(product))

        self._persist_raw(data)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "price": str(product.price.amount),
            "image": product.image,
            "status": product.status.value,
            "created_by": product.created_by,
            "updated_by": product.updated_by,
            "created_at": product.created_at.isoformat(),
            "updated_at": product.updated_at.isoformat(),
            "deleted_at": product.deleted_at.isoformat() if product.deleted_at else None,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        deleted_at = raw.get("deleted_at")
        return Product(
            id=raw["id"],
            name=raw["name"],
            price=Money(Decimal(raw["price"])),
            status=ProductStatus(raw.get("status", "active")),
            image=raw.get("image"),
            created_by=raw.get("created_by"),
            updated_by=raw.get("updated_by"),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
            deleted_at=datetime.fromisoformat(deleted_at) if deleted_at else None,
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict:
        return read_json(self._file_path)

    def _persist_raw(self, data: dict) -> None:
        write_json_atomic(self._file_path, data)
