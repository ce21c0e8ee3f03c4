"""Domain layer module.

Contains enumerations, exceptions and the service result type shared by
every catalog component.
"""

from product_catalog.domain.enums import (
    BundleStatus,
    ConfigType,
    ContractingDocType,
    DocType,
    FeatureType,
    ProductStatus,
    ProductType,
    RelationshipType,
    SortDirection,
)
from product_catalog.domain.exceptions import (
    DomainError,
    DuplicateEntityError,
    EntityNotFoundError,
    IntegrityViolationError,
    MissingFieldError,
    StoreError,
)
from product_catalog.domain.results import ErrorKind, ServiceResult

__all__ = [
    # Enums
    "BundleStatus",
    "ConfigType",
    "ContractingDocType",
    "DocType",
    "FeatureType",
    "ProductStatus",
    "ProductType",
    "RelationshipType",
    "SortDirection",
    # Exceptions
    "DomainError",
    "DuplicateEntityError",
    "EntityNotFoundError",
    "IntegrityViolationError",
    "MissingFieldError",
    "StoreError",
    # Results
    "ErrorKind",
    "ServiceResult",
]
