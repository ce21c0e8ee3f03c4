"""Catalog service wiring.

Builds every catalog service from one session factory. The application
factory stores the container on ``app.state``; tests build their own
against a temporary database.
"""

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from product_catalog.application.crud_service import CrudService, ScopedCrudService
from product_catalog.application.dtos import (
    FeeApplicationRuleDTO,
    FeeComponentDTO,
    ProductBundleDTO,
    ProductCategoryDTO,
    ProductCategorySubtypeDTO,
    ProductConfigurationDTO,
    ProductDocumentationDTO,
    ProductDocumentationRequirementDTO,
    ProductDTO,
    ProductFeatureDTO,
    ProductFeeStructureDTO,
    ProductLifecycleDTO,
    ProductLimitDTO,
    ProductLocalizationDTO,
    ProductPricingDTO,
    ProductPricingLocalizationDTO,
    ProductRelationshipDTO,
    ProductVersionDTO,
)
from product_catalog.application.services import (
    ConfigurationService,
    DocumentationRequirementService,
)
from product_catalog.catalog.mappers import EntityMapper
from product_catalog.catalog.models import (
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
from product_catalog.catalog.repository import CatalogRepository


@dataclass(frozen=True)
class CatalogServices:
    """All catalog services sharing one session factory."""

    products: CrudService[Product, ProductDTO]
    bundles: CrudService[ProductBundle, ProductBundleDTO]
    categories: CrudService[ProductCategory, ProductCategoryDTO]
    subtypes: ScopedCrudService[ProductSubtype, ProductCategorySubtypeDTO]
    features: ScopedCrudService[ProductFeature, ProductFeatureDTO]
    versions: ScopedCrudService[ProductVersion, ProductVersionDTO]
    localizations: ScopedCrudService[ProductLocalization, ProductLocalizationDTO]
    relationships: ScopedCrudService[ProductRelationship, ProductRelationshipDTO]
    configurations: ConfigurationService
    documentation_requirements: DocumentationRequirementService
    documentation: ScopedCrudService[ProductDocumentation, ProductDocumentationDTO]
    lifecycles: ScopedCrudService[ProductLifecycle, ProductLifecycleDTO]
    limits: ScopedCrudService[ProductLimit, ProductLimitDTO]
    pricings: ScopedCrudService[ProductPricing, ProductPricingDTO]
    pricing_localizations: ScopedCrudService[
        ProductPricingLocalization, ProductPricingLocalizationDTO
    ]
    fee_structures: ScopedCrudService[ProductFeeStructure, ProductFeeStructureDTO]
    fee_components: ScopedCrudService[FeeComponent, FeeComponentDTO]
    fee_rules: ScopedCrudService[FeeApplicationRule, FeeApplicationRuleDTO]


def build_catalog_services(
    session_factory: async_sessionmaker[AsyncSession],
) -> CatalogServices:
    """Create the catalog services.

    Args:
        session_factory: Factory for async SQLAlchemy sessions.

    Returns:
        Container with one service per catalog resource.
    """

    def parts(model, dto):
        return CatalogRepository(session_factory, model), EntityMapper(model, dto)

    return CatalogServices(
        products=CrudService(
            *parts(Product, ProductDTO),
            required_fields=("tenant_id", "product_name"),
        ),
        bundles=CrudService(
            *parts(ProductBundle, ProductBundleDTO),
            required_fields=("bundle_name",),
        ),
        categories=CrudService(
            *parts(ProductCategory, ProductCategoryDTO),
            required_fields=("category_name",),
        ),
        subtypes=ScopedCrudService(
            *parts(ProductSubtype, ProductCategorySubtypeDTO),
            required_fields=("subtype_name",),
            unique_field="subtype_name",
        ),
        features=ScopedCrudService(
            *parts(ProductFeature, ProductFeatureDTO),
            required_fields=("feature_name",),
        ),
        versions=ScopedCrudService(
            *parts(ProductVersion, ProductVersionDTO),
            required_fields=("version_number",),
        ),
        localizations=ScopedCrudService(
            *parts(ProductLocalization, ProductLocalizationDTO),
            required_fields=("language_code",),
        ),
        relationships=ScopedCrudService(
            *parts(ProductRelationship, ProductRelationshipDTO),
            required_fields=("related_product_id",),
        ),
        configurations=ConfigurationService(
            *parts(ProductConfiguration, ProductConfigurationDTO),
            required_fields=("config_key",),
        ),
        documentation_requirements=DocumentationRequirementService(
            *parts(ProductDocumentationRequirement, ProductDocumentationRequirementDTO),
            required_fields=("doc_type",),
        ),
        documentation=ScopedCrudService(
            *parts(ProductDocumentation, ProductDocumentationDTO),
            required_fields=("doc_type",),
        ),
        lifecycles=ScopedCrudService(
            *parts(ProductLifecycle, ProductLifecycleDTO),
            required_fields=("lifecycle_status",),
        ),
        limits=ScopedCrudService(
            *parts(ProductLimit, ProductLimitDTO),
            required_fields=("limit_type", "limit_value"),
        ),
        pricings=ScopedCrudService(
            *parts(ProductPricing, ProductPricingDTO),
            required_fields=("pricing_type",),
        ),
        pricing_localizations=ScopedCrudService(
            *parts(ProductPricingLocalization, ProductPricingLocalizationDTO),
            required_fields=("currency_code",),
        ),
        fee_structures=ScopedCrudService(
            *parts(ProductFeeStructure, ProductFeeStructureDTO),
            required_fields=("fee_structure_id",),
        ),
        fee_components=ScopedCrudService(
            *parts(FeeComponent, FeeComponentDTO),
            required_fields=("component_name",),
        ),
        fee_rules=ScopedCrudService(
            *parts(FeeApplicationRule, FeeApplicationRuleDTO),
            required_fields=("rule_condition",),
        ),
    )
