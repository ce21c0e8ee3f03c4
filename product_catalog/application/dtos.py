"""Catalog data transfer objects.

Pydantic models shared by the services and the HTTP layer. Every field is
optional so the same DTO serves create, full update and partial update;
services enforce the fields an entity needs on create. Identity and audit
fields are always assigned by the server.
"""

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from product_catalog.domain.enums import (
    BundleStatus,
    ConfigType,
    ContractingDocType,
    DocType,
    FeatureType,
    LifecycleStatus,
    LimitType,
    PricingType,
    ProductStatus,
    ProductType,
    RelationshipType,
    TimePeriod,
)


class CatalogDTO(BaseModel):
    """Base DTO carrying audit timestamps."""

    model_config = ConfigDict(from_attributes=True)

    date_created: datetime | None = Field(default=None, description="Creation timestamp")
    date_updated: datetime | None = Field(default=None, description="Last update timestamp")


# ============================================================================
# Top-level DTOs
# ============================================================================


class ProductDTO(CatalogDTO):
    """Product."""

    product_id: UUID | None = Field(default=None, description="Product identifier")
    tenant_id: UUID | None = Field(
        default=None, description="Tenant owning the product (required on create)"
    )
    product_subtype_id: UUID | None = None
    product_type: ProductType | None = None
    product_name: str | None = Field(default=None, max_length=300)
    product_code: str | None = Field(default=None, max_length=100)
    product_description: str | None = None
    product_status: ProductStatus | None = None
    launch_date: date | None = None
    end_date: date | None = None


class ProductCategoryDTO(CatalogDTO):
    """Product category."""

    product_category_id: UUID | None = None
    category_name: str | None = Field(default=None, max_length=200)
    category_description: str | None = None
    parent_category_id: UUID | None = None
    level: int | None = Field(default=None, ge=0)


class ProductCategorySubtypeDTO(CatalogDTO):
    """Subtype of a product category."""

    product_subtype_id: UUID | None = None
    product_category_id: UUID | None = None
    subtype_name: str | None = Field(default=None, max_length=200)
    subtype_description: str | None = None


class ProductBundleDTO(CatalogDTO):
    """Product bundle."""

    product_bundle_id: UUID | None = None
    bundle_name: str | None = Field(default=None, max_length=200)
    bundle_description: str | None = None
    bundle_status: BundleStatus | None = None


# ============================================================================
# Product-owned DTOs
# ============================================================================


class ProductFeatureDTO(CatalogDTO):
    """Feature of a product."""

    product_feature_id: UUID | None = None
    product_id: UUID | None = None
    feature_name: str | None = Field(default=None, max_length=200)
    feature_description: str | None = None
    feature_type: FeatureType | None = None
    is_mandatory: bool | None = None


class ProductVersionDTO(CatalogDTO):
    """Version of a product."""

    product_version_id: UUID | None = None
    product_id: UUID | None = None
    version_number: int | None = Field(default=None, ge=1)
    version_description: str | None = None
    effective_date: datetime | None = None


class ProductLocalizationDTO(CatalogDTO):
    """Localized product texts."""

    product_localization_id: UUID | None = None
    product_id: UUID | None = None
    language_code: str | None = Field(default=None, max_length=20, examples=["en-US"])
    localized_name: str | None = Field(default=None, max_length=300)
    localized_description: str | None = None


class ProductRelationshipDTO(CatalogDTO):
    """Relationship between two products."""

    product_relationship_id: UUID | None = None
    product_id: UUID | None = None
    related_product_id: UUID | None = None
    relationship_type: RelationshipType | None = None
    description: str | None = None


class ProductConfigurationDTO(CatalogDTO):
    """Product configuration entry."""

    product_configuration_id: UUID | None = None
    product_id: UUID | None = None
    config_type: ConfigType | None = None
    config_key: str | None = Field(default=None, max_length=200)
    config_value: str | None = None


class ProductDocumentationRequirementDTO(CatalogDTO):
    """Documentation requirement of a product."""

    product_doc_requirement_id: UUID | None = None
    product_id: UUID | None = None
    doc_type: ContractingDocType | None = None
    is_mandatory: bool | None = None
    description: str | None = None


class ProductDocumentationDTO(CatalogDTO):
    """Document published for a product."""

    product_documentation_id: UUID | None = None
    product_id: UUID | None = None
    doc_type: DocType | None = None
    document_manager_ref: int | None = None
    date_added: datetime | None = None


class ProductLifecycleDTO(CatalogDTO):
    """Lifecycle status entry of a product."""

    product_lifecycle_id: UUID | None = None
    product_id: UUID | None = None
    lifecycle_status: LifecycleStatus | None = None
    status_start_date: datetime | None = None
    status_end_date: datetime | None = None
    reason: str | None = None


class ProductLimitDTO(CatalogDTO):
    """Limit enforced by a product."""

    product_limit_id: UUID | None = None
    product_id: UUID | None = None
    limit_type: LimitType | None = None
    limit_value: Decimal | None = Field(default=None, ge=0)
    limit_unit: str | None = Field(default=None, max_length=20, examples=["USD"])
    time_period: TimePeriod | None = None
    effective_date: date | None = None
    expiry_date: date | None = None


# ============================================================================
# Pricing DTOs
# ============================================================================


class ProductPricingDTO(CatalogDTO):
    """Pricing entry of a product."""

    product_pricing_id: UUID | None = None
    product_id: UUID | None = None
    pricing_type: PricingType | None = None
    amount_value: Decimal | None = None
    amount_unit: str | None = Field(default=None, max_length=20, examples=["PERCENT"])
    pricing_condition: str | None = None
    effective_date: date | None = None
    expiry_date: date | None = None


class ProductPricingLocalizationDTO(CatalogDTO):
    """Pricing amount in one currency."""

    product_pricing_localization_id: UUID | None = None
    product_pricing_id: UUID | None = None
    currency_code: str | None = Field(
        default=None, min_length=3, max_length=3, examples=["EUR"]
    )
    localized_amount_value: Decimal | None = None


# ============================================================================
# Fee DTOs
# ============================================================================


class ProductFeeStructureDTO(CatalogDTO):
    """Fee structure assigned to a product."""

    product_fee_structure_id: UUID | None = None
    product_id: UUID | None = None
    fee_structure_id: UUID | None = None
    priority: int | None = Field(default=None, ge=0)


class FeeComponentDTO(CatalogDTO):
    """Component of a fee structure."""

    fee_component_id: UUID | None = None
    fee_structure_id: UUID | None = None
    component_name: str | None = Field(default=None, max_length=200)
    component_description: str | None = None
    amount_value: Decimal | None = None
    amount_unit: str | None = Field(default=None, max_length=20)


class FeeApplicationRuleDTO(CatalogDTO):
    """Rule deciding when a fee component applies."""

    fee_application_rule_id: UUID | None = None
    fee_component_id: UUID | None = None
    rule_description: str | None = None
    rule_condition: str | None = None
    priority: int | None = Field(default=None, ge=0)
    effective_date: date | None = None
    expiry_date: date | None = None
