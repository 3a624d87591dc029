# flowershop/domain/errors.py
"""
Failure kinds surfaced by the catalog layer.

Exceptions cover bad input from the caller, a store that cannot be reached,
and stored rows that no longer satisfy the entity rules. "Not found" is an
ordinary result (None / False), and dangling composition entries are
reported on the returned view.
"""
from __future__ import annotations


class CatalogError(Exception):
    """Base class for catalog data-access failures."""


class InvalidInput(CatalogError, ValueError):
    """Malformed id, missing required field or a reference to a missing row."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        self.message = message
        self.field = field
        super().__init__(message)


class BackendUnavailable(CatalogError):
    """The backing store could not be reached or failed mid-request."""

    def __init__(self, message: str = "Backing store unavailable") -> None:
        self.message = message
        super().__init__(message)


class StoredDataError(CatalogError):
    """A row read back from the store violates an entity invariant."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


__all__ = ["CatalogError", "InvalidInput", "BackendUnavailable", "StoredDataError"]
