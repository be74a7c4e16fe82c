"""Application service: seed the demo catalog."""

from __future__ import annotations

from storefront.application.create_product import CreateProductHandler
from storefront.domain.model.product import Product

DEMO_PRODUCTS: list[dict] = [
    {"name": "Laptop", "price": "55000", "image": "laptop.jpg"},
    {"name": "Mobile Phone", "price": "12000", "image": "mobile.jpg"},
    {"name": "Headphones", "price": "800", "image": "headphone.jpg"},
]


class SeedCatalogHandler:

    def __init__(self, create_handler: CreateProductHandler) -> None:
        self._create = create_handler

    def handle(self) -> list[Product]:
        return [
            self._create.handle(
                name=item["name"],
                price=item["price"],
                status="active",
                image=item["image"],
            )
            for item in DEMO_PRODUCTS
        ]
