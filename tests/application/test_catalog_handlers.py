"""Integration tests for the catalog use cases.

Uses in-memory fake repositories, no file I/O.
"""

import pytest
from structlog.testing import capture_logs

from storefront.application.create_product import CreateProductHandler
from storefront.application.delete_product import (
    ForceDeleteProductHandler,
    SoftDeleteProductHandler,
)
from storefront.application.list_products import (
    ListActiveProductsHandler,
    ListAllProductsHandler,
)
from storefront.application.restore_product import RestoreProductHandler
from storefront.application.seed_catalog import SeedCatalogHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import (
    EntityNotFoundError,
    NotFoundError,
    NotTrashedError,
    ValidationError,
)
from storefront.domain.model.product import Product, ProductStatus
from storefront.domain.model.value_objects import Money
from tests.fakes import FakeProductRepository


def _seeded_repo() -> FakeProductRepository:
    return FakeProductRepository([
        Product(id=None, name="Laptop", price=Money.of("55000")),
        Product(id=None, name="Mobile Phone", price=Money.of("12000"), status=ProductStatus.INACTIVE),
        Product(id=None, name="Headphones", price=Money.of("800")),
    ])


class TestCreateProduct:

    def test_creates_active_product_by_default(self):
        repo = FakeProductRepository()
        product = CreateProductHandler(repo).handle(name="Laptop", price="55000")
        assert product.id == 1
        assert product.status == ProductStatus.ACTIVE
        assert repo.get_by_id(1) is product

    def test_sequential_ids(self):
        repo = FakeProductRepository()
        handler = CreateProductHandler(repo)
        first = handler.handle(name="Laptop", price="1")
        second = handler.handle(name="Phone", price="1")
        assert second.id == first.id + 1

    def test_uses_given_actor(self):
        product = CreateProductHandler(FakeProductRepository()).handle(
            name="Laptop", price="1", actor_id=42
        )
        assert product.created_by == 42

    def test_falls_back_to_configured_actor(self):
        product = CreateProductHandler(FakeProductRepository(), fallback_actor_id=9).handle(
            name="Laptop", price="1"
        )
        assert product.created_by == 9

    def test_default_fallback_actor_is_one(self):
        product = CreateProductHandler(FakeProductRepository()).handle(name="Laptop", price="1")
        assert product.created_by == 1

    def test_explicit_status(self):
        product = CreateProductHandler(FakeProductRepository()).handle(
            name="Laptop", price="1", status="inactive"
        )
        assert product.status == ProductStatus.INACTIVE

    def test_invalid_input_not_persisted(self):
        repo = FakeProductRepository()
        with pytest.raises(ValidationError) as excinfo:
            CreateProductHandler(repo).handle(name="", price="-1", status="gone")
        assert set(excinfo.value.errors) == {"name", "price", "status"}
        assert repo.list_all_including_trashed() == []


class TestUpdateProduct:

    def test_updates_fields_and_actor(self):
        repo = _seeded_repo()
        product = UpdateProductHandler(repo).handle(
            1, name="Laptop Pro", price="60000.50", status="inactive", actor_id=5
        )
        assert product.name == "Laptop Pro"
        assert product.price == Money.of("60000.50")
        assert product.status == ProductStatus.INACTIVE
        assert product.updated_by == 5

    def test_updated_by_falls_back(self):
        product = UpdateProductHandler(_seeded_repo()).handle(1, name="Laptop", price="1")
        assert product.updated_by == 1

    def test_omitted_status_is_kept(self):
        product = UpdateProductHandler(_seeded_repo()).handle(2, name="Phone", price="1")
        assert product.status == ProductStatus.INACTIVE

    def test_unknown_id_rejected(self):
        with pytest.raises(NotFoundError, match="Product not found"):
            UpdateProductHandler(_seeded_repo()).handle(99, name="X", price="1")

    def test_trashed_product_not_found(self):
        repo = _seeded_repo()
        SoftDeleteProductHandler(repo).handle(1)
        with pytest.raises(EntityNotFoundError):
            UpdateProductHandler(repo).handle(1, name="Laptop", price="1")

    def test_invalid_input_leaves_product_unchanged(self):
        repo = _seeded_repo()
        with pytest.raises(ValidationError):
            UpdateProductHandler(repo).handle(1, name="", price="1")
        assert repo.get_by_id(1).name == "Laptop"


class TestListProducts:

    def test_active_list_excludes_inactive_and_trashed(self):
        repo = _seeded_repo()
        SoftDeleteProductHandler(repo).handle(3)
        names = [p.name for p in ListActiveProductsHandler(repo).handle()]
        assert names == ["Laptop"]

    def test_active_list_excludes_deleted_status_without_trash(self):
        repo = _seeded_repo()
        UpdateProductHandler(repo).handle(1, name="Laptop", price="1", status="deleted")
        assert [p.id for p in ListActiveProductsHandler(repo).handle()] == [3]

    def test_all_list_includes_everything(self):
        repo = _seeded_repo()
        SoftDeleteProductHandler(repo).handle(3)
        products = ListAllProductsHandler(repo).handle()
        assert [p.id for p in products] == [1, 2, 3]
        assert products[2].is_trashed


class TestSoftDeleteProduct:

    def test_sets_status_and_timestamp(self):
        repo = _seeded_repo()
        SoftDeleteProductHandler(repo).handle(1)
        product = repo.get_by_id(1, include_trashed=True)
        assert product.status == ProductStatus.DELETED
        assert product.deleted_at is not None
        assert repo.get_by_id(1) is None

    def test_unknown_id_rejected(self):
        with pytest.raises(NotFoundError):
            SoftDeleteProductHandler(_seeded_repo()).handle(99)

    def test_deleting_twice_keeps_first_timestamp(self):
        repo = _seeded_repo()
        handler = SoftDeleteProductHandler(repo)
        handler.handle(1)
        first = repo.get_by_id(1, include_trashed=True).deleted_at
        with pytest.raises(NotFoundError):
            handler.handle(1)
        assert repo.get_by_id(1, include_trashed=True).deleted_at == first


class TestRestoreProduct:

    def test_restore_clears_trash_but_status_stays_deleted(self):
        repo = _seeded_repo()
        SoftDeleteProductHandler(repo).handle(1)
        RestoreProductHandler(repo).handle(1)

        product = next(p for p in ListAllProductsHandler(repo).handle() if p.id == 1)
        assert not product.is_trashed
        assert product.status == ProductStatus.DELETED
        assert 1 not in [p.id for p in ListActiveProductsHandler(repo).handle()]

    def test_restored_product_can_be_reactivated(self):
        repo = _seeded_repo()
        SoftDeleteProductHandler(repo).handle(1)
        RestoreProductHandler(repo).handle(1)
        UpdateProductHandler(repo).handle(1, name="Laptop", price="55000", status="active")
        assert 1 in [p.id for p in ListActiveProductsHandler(repo).handle()]

    def test_unknown_id_rejected(self):
        with pytest.raises(NotFoundError):
            RestoreProductHandler(_seeded_repo()).handle(99)

    def test_not_trashed_rejected(self):
        with pytest.raises(NotTrashedError):
            RestoreProductHandler(_seeded_repo()).handle(1)


class TestForceDeleteProduct:

    def test_removes_trashed_product_permanently(self):
        repo = _seeded_repo()
        SoftDeleteProductHandler(repo).handle(1)
        ForceDeleteProductHandler(repo).handle(1)
        assert 1 not in [p.id for p in ListAllProductsHandler(repo).handle()]

    def test_removes_live_product(self):
        repo = _seeded_repo()
        ForceDeleteProductHandler(repo).handle(2)
        assert repo.get_by_id(2, include_trashed=True) is None

    def test_later_operations_report_not_found(self):
        repo = _seeded_repo()
        ForceDeleteProductHandler(repo).handle(1)
        with pytest.raises(NotFoundError):
            RestoreProductHandler(repo).handle(1)
        with pytest.raises(NotFoundError):
            UpdateProductHandler(repo).handle(1, name="Laptop", price="1")
        with pytest.raises(NotFoundError):
            ForceDeleteProductHandler(repo).handle(1)

    def test_ids_not_reused(self):
        repo = _seeded_repo()
        ForceDeleteProductHandler(repo).handle(3)
        product = CreateProductHandler(repo).handle(name="Tablet", price="1")
        assert product.id == 4


class TestSeedCatalog:

    def test_seeds_demo_products(self):
        repo = FakeProductRepository()
        products = SeedCatalogHandler(CreateProductHandler(repo)).handle()
        assert [p.name for p in products] == ["Laptop", "Mobile Phone", "Headphones"]
        assert products[0].price == Money.of("55000")
        assert products[0].image == "laptop.jpg"
        assert all(p.is_available for p in repo.list_available())


class TestRejectionLogging:

    def test_each_rejection_logs_its_event(self):
        repo = _seeded_repo()
        with capture_logs() as logs:
            with pytest.raises(NotFoundError):
                UpdateProductHandler(repo).handle(99, name="X", price="1")
            with pytest.raises(ValidationError):
                UpdateProductHandler(repo).handle(1, name="", price="1")
            with pytest.raises(NotFoundError):
                SoftDeleteProductHandler(repo).handle(99)
            with pytest.raises(NotTrashedError):
                RestoreProductHandler(repo).handle(1)
            with pytest.raises(NotFoundError):
                ForceDeleteProductHandler(repo).handle(99)

        assert [entry["event"] for entry in logs] == [
            "product_update_rejected",
            "product_update_rejected",
            "product_trash_rejected",
            "product_restore_rejected",
            "product_force_delete_rejected",
        ]
        assert logs[1]["errors"] == {"name": ["The name field is required."]}
        assert logs[3]["reason"] == "not_trashed"
