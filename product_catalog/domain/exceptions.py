"""Domain exceptions.

All domain-level errors raised inside the catalog. Services catch them at
their boundary and turn them into a ServiceResult, so these never reach
HTTP handlers directly.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the application layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Lookup Errors
# ============================================================================


class EntityNotFoundError(DomainError):
    """Raised when an entity is absent or belongs to another parent.

    Both cases share one message so a caller cannot tell whether a record
    exists under a parent it does not own.
    """

    def __init__(
        self,
        entity_type: str,
        entity_id: Any,
        parent_id: Any | None = None,
    ) -> None:
        """Initialize not found error.

        Args:
            entity_type: Type of entity (e.g., "ProductFeature").
            entity_id: Requested identifier.
            parent_id: Parent identifier from the request path, if scoped.
        """
        if parent_id is None:
            message = f"{entity_type} {entity_id} not found"
        else:
            message = f"{entity_type} {entity_id} not found for parent {parent_id}"
        super().__init__(
            message,
            details={
                "entity_type": entity_type,
                "entity_id": str(entity_id),
                "parent_id": str(parent_id) if parent_id is not None else None,
            },
        )


# ============================================================================
# Precondition Errors
# ============================================================================


class DuplicateEntityError(DomainError):
    """Raised when a unique field value is already taken."""

    def __init__(self, entity_type: str, field: str, value: Any) -> None:
        """Initialize duplicate entity error.

        Args:
            entity_type: Type of entity.
            field: Name of the unique field.
            value: Conflicting value.
        """
        super().__init__(
            f"{entity_type} with {field} '{value}' already exists",
            details={"entity_type": entity_type, "field": field, "value": str(value)},
        )


class MissingFieldError(DomainError):
    """Raised when a required input field is absent."""

    def __init__(self, entity_type: str, field: str) -> None:
        """Initialize missing field error.

        Args:
            entity_type: Type of entity.
            field: Name of the missing field.
        """
        super().__init__(
            f"{entity_type} requires '{field}'",
            details={"entity_type": entity_type, "field": field},
        )


# ============================================================================
# Infrastructure Errors
# ============================================================================


class StoreError(DomainError):
    """Raised when the store fails to complete an operation."""

    def __init__(self, operation: str, entity_type: str, cause: Exception) -> None:
        """Initialize store error.

        Args:
            operation: Store operation that failed (e.g., "save").
            entity_type: Type of entity.
            cause: Underlying driver or ORM exception.
        """
        super().__init__(
            f"Store failed to {operation} {entity_type}: {cause}",
            details={"operation": operation, "entity_type": entity_type},
        )
        self.__cause__ = cause


class IntegrityViolationError(StoreError):
    """Raised when the store rejects a write because of a table constraint."""
