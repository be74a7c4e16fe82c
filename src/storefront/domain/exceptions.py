"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Each class carries the HTTP-equivalent status the boundary reports for it.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""

    status_code = 400


class ValidationError(DomainException):
    """Input failed one or more field constraints.

    ``errors`` maps a field name to its messages, e.g.
    ``{"name": ["The name field is required."]}``.
    """

    status_code = 422

    def __init__(self, message: str, errors: dict[str, list[str]] | None = None) -> None:
        super().__init__(message)
        self.errors: dict[str, list[str]] = dict(errors or {})


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    status_code = 404


NotFoundError = EntityNotFoundError


class NotTrashedError(DomainException):
    """Restore was requested for a product that is not soft-deleted."""

    status_code = 409


class UnavailableError(DomainException):
    """The product is missing or not active, so it cannot go in a cart."""

    status_code = 404


class NotInCartError(DomainException):
    """The cart has no line for the requested product."""

    status_code = 404
