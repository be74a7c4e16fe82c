"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions. Settings are read on
every call so the environment in effect at invocation time wins.
"""

from __future__ import annotations

from storefront.infrastructure.config import Settings
from storefront.infrastructure.persistence.json_cart_repository import (
    JsonCartSessionRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def settings() -> Settings:
    return Settings.from_env()


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(settings().data_dir / "products.json")


def cart_repository() -> JsonCartSessionRepository:
    return JsonCartSessionRepository(settings().data_dir / "carts.json")


def fallback_actor_id() -> int:
    return settings().fallback_actor_id
