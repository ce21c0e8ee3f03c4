"""Product catalog persistence.

Provides the SQLAlchemy models, the generic repository, entity mappers and
the pagination engine.
"""

from product_catalog.catalog.mappers import EntityMapper
from product_catalog.catalog.models import (
    CatalogModel,
    FeeApplicationRule,
    FeeComponent,
    Product,
    ProductBundle,
    ProductCategory,
    ProductConfiguration,
    ProductDocumentation,
    ProductDocumentationRequirement,
    ProductFeature,
    ProductFeeStructure,
    ProductLifecycle,
    ProductLimit,
    ProductLocalization,
    ProductPricing,
    ProductPricingLocalization,
    ProductRelationship,
    ProductSubtype,
    ProductVersion,
)
from product_catalog.catalog.pagination import PageRequest, PageResult, paginate
from product_catalog.catalog.repository import CatalogRepository

__all__ = [
    # Models
    "CatalogModel",
    "FeeApplicationRule",
    "FeeComponent",
    "Product",
    "ProductBundle",
    "ProductCategory",
    "ProductConfiguration",
    "ProductDocumentation",
    "ProductDocumentationRequirement",
    "ProductFeature",
    "ProductFeeStructure",
    "ProductLifecycle",
    "ProductLimit",
    "ProductLocalization",
    "ProductPricing",
    "ProductPricingLocalization",
    "ProductRelationship",
    "ProductSubtype",
    "ProductVersion",
    # Repository
    "CatalogRepository",
    # Mapping
    "EntityMapper",
    # Pagination
    "PageRequest",
    "PageResult",
    "paginate",
]
