"""
Structured error types for the advocate directory.

Errors carry a category, a generic user-safe message and an optional chained
cause. Only ``message`` is allowed to cross the HTTP or client boundary; the
cause is for logs.

Hierarchy::

    DirectoryError
    ├── StorageError          (STORAGE)
    │   ├── ListingFailedError
    │   └── SeedFailedError
    └── FetchError            (NETWORK, client side)

Unknown sort keys and directions are *not* errors: the query builder
substitutes safe defaults and never raises.

Usage::

    try:
        rows = repo.search(statement)
    except Exception as exc:
        raise ListingFailedError(cause=exc) from exc
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Standard error categories for classification and routing."""

    STORAGE = "STORAGE"
    NETWORK = "NETWORK"
    VALIDATION = "VALIDATION"
    INTERNAL = "INTERNAL"


class DirectoryError(Exception):
    """Base class for all advocate directory errors.

    Attributes:
        message: Generic, user-safe description.
        category: :class:`ErrorCategory` for routing.
        cause: Underlying exception, also chained as ``__cause__``.
        context: Free-form metadata (keyword, sort key, ...) for logging.
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL
    default_message: str = "Directory operation failed"

    def __init__(
        self,
        message: str | None = None,
        *,
        category: ErrorCategory | None = None,
        cause: BaseException | None = None,
        context: dict[str, Any] | None = None,
    ):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.cause = cause
        self.context = dict(context or {})

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> DirectoryError:
        """Add context to this error (fluent API)."""
        self.context.update(kwargs)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        if self.context:
            result["context"] = dict(self.context)
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# STORAGE ERRORS
# =============================================================================


class StorageError(DirectoryError):
    """Query or mutation against the advocates table failed."""

    default_category = ErrorCategory.STORAGE
    default_message = "Storage operation failed"


class ListingFailedError(StorageError):
    """Listing advocates failed; storage detail is kept in ``cause``."""

    default_message = "Could not fetch advocates"


class SeedFailedError(StorageError):
    """Replacing the advocates table with the seed dataset failed."""

    default_message = "Could not seed advocates"


# =============================================================================
# CLIENT ERRORS
# =============================================================================


class FetchError(DirectoryError):
    """Listing request failed on the client side.

    Raised for transport errors, non-2xx statuses and ``success: false``
    envelopes alike.
    """

    default_category = ErrorCategory.NETWORK
    default_message = "Failed to fetch advocates"

    def __init__(
        self,
        message: str | None = None,
        *,
        status_code: int | None = None,
        cause: BaseException | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, cause=cause, context=context)
        self.status_code = status_code

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.status_code is not None:
            result["status_code"] = self.status_code
        return result
