"""Product aggregate.

Products carry two lifecycle signals: a ``status`` enum and a soft-delete
timestamp. Deleting a product sets both. Every visibility check goes
through ``is_trashed`` / ``is_available`` so the rest of the code never
inspects the two fields directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from enum import Enum

from storefront.domain.exceptions import NotTrashedError, ValidationError
from storefront.domain.model.value_objects import Money


class ProductStatus(Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    DELETED = "deleted"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ProductDetails:
    """Validated input for creating or updating a product."""

    name: str
    price: Money
    status: ProductStatus | None = None


@dataclass(frozen=True)
class ProductConstraints:
    """Field rules for product input, checked by ``validate()``."""

    name_max_length: int = 255
    price_min: Decimal = Decimal("0")
    price_max: Decimal = Decimal("999999.99")
    allowed_statuses: tuple[ProductStatus, ...] = tuple(ProductStatus)

    def validate(
        self,
        name: str | None,
        price: str | int | float | Decimal | None,
        status: str | ProductStatus | None = None,
    ) -> ProductDetails:
        """Check every field and return the cleaned values.

        All failing fields are reported together in one ValidationError.
        """
        errors: dict[str, list[str]] = {}

        clean_name = (name or "").strip()
        if not clean_name:
            errors.setdefault("name", []).append("The name field is required.")
        elif len(clean_name) > self.name_max_length:
            errors.setdefault("name", []).append(
                f"The name field must not be greater than {self.name_max_length} characters."
            )

        amount = self._parse_price(price, errors)

        clean_status = self._parse_status(status, errors)

        if errors:
            raise ValidationError("The given data was invalid.", errors)

        return ProductDetails(
            name=clean_name,
            price=Money(amount),  # type: ignore[arg-type]
            status=clean_status,
        )

    def _parse_price(
        self,
        price: str | int | float | Decimal | None,
        errors: dict[str, list[str]],
    ) -> Decimal | None:
        if price is None or (isinstance(price, str) and not price.strip()):
            errors.setdefault("price", []).append("The price field is required.")
            return None
        if isinstance(price, bool):
            errors.setdefault("price", []).append("The price field must be a number.")
            return None
        try:
            amount = Decimal(str(price).strip())
        except (InvalidOperation, ValueError):
            amount = None
        if amount is None or not amount.is_finite():
            errors.setdefault("price", []).append("The price field must be a number.")
            return None
        if amount < self.price_min:
            errors.setdefault("price", []).append(
                f"The price field must be at least {self.price_min}."
            )
        elif amount > self.price_max:
            errors.setdefault("price", []).append(
                f"The price field must not be greater than {self.price_max}."
            )
        return amount

    def _parse_status(
        self, status: str | ProductStatus | None, errors: dict[str, list[str]]
    ) -> ProductStatus | None:
        if status is None or status == "":
            return None
        try:
            parsed = status if isinstance(status, ProductStatus) else ProductStatus(status)
        except ValueError:
            parsed = None
        if parsed is None or parsed not in self.allowed_statuses:
            errors.setdefault("status", []).append("The selected status is invalid.")
            return None
        return parsed


DEFAULT_CONSTRAINTS = ProductConstraints()


@dataclass
class Product:
    """A product in the catalog.

    This is an aggregate root. ``id`` is None until the repository
    assigns one on first save, and never changes afterwards.
    """

    id: int | None
    name: str
    price: Money
    status: ProductStatus = ProductStatus.ACTIVE
    image: str | None = None
    created_by: int | None = None
    updated_by: int | None = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)
    deleted_at: datetime | None = None

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(
        details: ProductDetails,
        actor_id: int | None,
        image: str | None = None,
        now: datetime | None = None,
    ) -> Product:
        now = now or _utcnow()
        return Product(
            id=None,
            name=details.name,
            price=details.price,
            status=details.status or ProductStatus.ACTIVE,
            image=image,
            created_by=actor_id,
            created_at=now,
            updated_at=now,
        )

    # --- Visibility -----------------------------------------------------------

    @property
    def is_trashed(self) -> bool:
        return self.deleted_at is not None

    @property
    def is_available(self) -> bool:
        """Shown in the public catalog and allowed into a cart."""
        return self.status == ProductStatus.ACTIVE and not self.is_trashed

    # --- Lifecycle ------------------------------------------------------------

    def revise(
        self,
        details: ProductDetails,
        actor_id: int | None,
        now: datetime | None = None,
    ) -> None:
        """Apply new details. An omitted status leaves the current one."""
        self.name = details.name
        self.price = details.price
        if details.status is not None:
            self.status = details.status
        self.updated_by = actor_id
        self.updated_at = now or _utcnow()

    def soft_delete(self, now: datetime | None = None) -> None:
        """Move to trash: status and timestamp are set together."""
        now = now or _utcnow()
        self.status = ProductStatus.DELETED
        self.deleted_at = now
        self.updated_at = now

    def restore(self, now: datetime | None = None) -> None:
        """Take the product out of the trash.

        ``status`` is left as it is, so a restored product stays
        ``deleted`` and out of the public catalog until updated.
        """
        if not self.is_trashed:
            raise NotTrashedError("Product not found or not trashed")
        self.deleted_at = None
        self.updated_at = now or _utcnow()
