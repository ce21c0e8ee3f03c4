"""Service result types.

Every catalog service operation returns a ServiceResult instead of raising,
so callers branch on ``error_kind`` exhaustively.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from product_catalog.domain.exceptions import (
    DomainError,
    DuplicateEntityError,
    EntityNotFoundError,
    MissingFieldError,
)

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Outward-facing failure kinds."""

    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNEXPECTED = "UNEXPECTED"


@dataclass
class ServiceResult(Generic[T]):
    """Outcome of a service operation.

    Attributes:
        value: Operation result when successful. ``None`` for operations
            that complete with no value, such as delete.
        success: Whether the operation succeeded.
        error: Human-readable error message.
        error_kind: Failure kind callers branch on.
        cause: Underlying exception kept for diagnostics.
    """

    value: T | None = None
    success: bool = True
    error: str | None = None
    error_kind: ErrorKind | None = None
    cause: BaseException | None = None

    @classmethod
    def ok(cls, value: T | None = None) -> "ServiceResult[T]":
        """Build a successful result."""
        return cls(value=value)

    @classmethod
    def fail(
        cls,
        kind: ErrorKind,
        error: str,
        cause: BaseException | None = None,
    ) -> "ServiceResult[T]":
        """Build a failed result."""
        return cls(success=False, error=error, error_kind=kind, cause=cause)

    @classmethod
    def from_exception(cls, exc: BaseException, context: str) -> "ServiceResult[T]":
        """Classify an exception into a failed result.

        Args:
            exc: Exception raised while performing the operation.
            context: Layer message describing the failed operation.

        Returns:
            Failed result whose kind matches the exception type.
        """
        if isinstance(exc, EntityNotFoundError):
            return cls.fail(ErrorKind.NOT_FOUND, exc.message, exc)
        if isinstance(exc, DuplicateEntityError):
            return cls.fail(ErrorKind.CONFLICT, exc.message, exc)
        if isinstance(exc, MissingFieldError):
            return cls.fail(ErrorKind.VALIDATION_ERROR, exc.message, exc)
        if isinstance(exc, DomainError):
            return cls.fail(ErrorKind.UNEXPECTED, f"{context}: {exc.message}", exc)
        return cls.fail(ErrorKind.UNEXPECTED, f"{context}: {exc}", exc)
