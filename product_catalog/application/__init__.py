"""Application layer module.

Contains the catalog services (use cases) that orchestrate the
repository, mappers and pagination engine.
"""

from product_catalog.application.container import (
    CatalogServices,
    build_catalog_services,
)
from product_catalog.application.crud_service import CrudService, ScopedCrudService
from product_catalog.application.services import (
    ConfigurationService,
    DocumentationRequirementService,
)

__all__ = [
    "CatalogServices",
    "build_catalog_services",
    "ConfigurationService",
    "CrudService",
    "DocumentationRequirementService",
    "ScopedCrudService",
]
