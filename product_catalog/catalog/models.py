"""SQLAlchemy models for the product catalog.

One table per catalog concept. Each model names its identity column in
``ID_FIELD`` and, for records owned by a parent, its parent reference column in
``PARENT_FIELD``; the generic repository and mapper read both.
"""

from datetime import date, datetime, timezone
from decimal import Decimal
from typing import ClassVar
from uuid import UUID, uuid4

from sqlalchemy import (
    BigInteger,
    Boolean,
    Date,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column

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
from product_catalog.infrastructure.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _enum(enum_cls: type) -> Enum:
    return Enum(enum_cls, native_enum=False, length=40, validate_strings=True)


class AuditMixin:
    """Creation and last-update timestamps shared by every table."""

    date_created: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )
    date_updated: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
    )


class CatalogModel(AuditMixin, Base):
    """Abstract base for catalog tables."""

    __abstract__ = True

    ID_FIELD: ClassVar[str]
    PARENT_FIELD: ClassVar[str | None] = None

    @property
    def identity(self) -> UUID | None:
        """Value of the identity column."""
        return getattr(self, self.ID_FIELD)

    @property
    def parent_identity(self) -> UUID | None:
        """Value of the parent foreign key, if the model has one."""
        if self.PARENT_FIELD is None:
            return None
        return getattr(self, self.PARENT_FIELD)

    def __repr__(self) -> str:
        """String representation."""
        return f"<{type(self).__name__}({self.ID_FIELD}={self.identity})>"


# ============================================================================
# Top-level Models
# ============================================================================


class ProductCategory(CatalogModel):
    """Product category, optionally nested under a parent category."""

    __tablename__ = "product_category"

    ID_FIELD = "product_category_id"

    product_category_id: Mapped[UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid4
    )
    category_name: Mapped[str] = mapped_column(String(200), nullable=False)
    category_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    parent_category_id: Mapped[UUID | None] = mapped_column(
        Uuid,
        ForeignKey("product_category.product_category_id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    level: Mapped[int | None] = mapped_column(Integer, nullable=True)


class ProductSubtype(CatalogModel):
    """Subtype within a category.

    Subtype names are unique across all categories.
    """

    __tablename__ = "product_subtype"

    ID_FIELD = "product_subtype_id"
    PARENT_FIELD = "product_category_id"

    product_subtype_id: Mapped[UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid4
    )
    product_category_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("product_category.product_category_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    subtype_name: Mapped[str] = mapped_column(String(200), nullable=False, unique=True)
    subtype_description: Mapped[str | None] = mapped_column(Text, nullable=True)


class Product(CatalogModel):
    """Product offered by a tenant."""

    __tablename__ = "product"

    ID_FIELD = "product_id"

    product_id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    tenant_id: Mapped[UUID] = mapped_column(Uuid, nullable=False, index=True)
    product_subtype_id: Mapped[UUID | None] = mapped_column(
        Uuid,
        ForeignKey("product_subtype.product_subtype_id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    product_type: Mapped[ProductType | None] = mapped_column(
        _enum(ProductType), nullable=True
    )
    product_name: Mapped[str] = mapped_column(String(300), nullable=False)
    product_code: Mapped[str | None] = mapped_column(String(100), nullable=True)
    product_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    product_status: Mapped[ProductStatus | None] = mapped_column(
        _enum(ProductStatus), nullable=True
    )
    launch_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)


class ProductBundle(CatalogModel):
    """Commercial bundle grouping several products."""

    __tablename__ = "product_bundle"

    ID_FIELD = "product_bundle_id"

    product_bundle_id: Mapped[UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid4
    )
    bundle_name: Mapped[str] = mapped_column(String(200), nullable=False)
    bundle_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    bundle_status: Mapped[BundleStatus | None] = mapped_column(
        _enum(BundleStatus), nullable=True
    )


# ============================================================================
# Product-owned Models
# ============================================================================


def _product_fk() -> Mapped[UUID]:
    return mapped_column(
        Uuid,
        ForeignKey("product.product_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )


class ProductFeature(CatalogModel):
    """Feature attached to a product."""

    __tablename__ = "product_feature"

    ID_FIELD = "product_feature_id"
    PARENT_FIELD = "product_id"

    product_feature_id: Mapped[UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid4
    )
    product_id: Mapped[UUID] = _product_fk()
    feature_name: Mapped[str] = mapped_column(String(200), nullable=False)
    feature_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    feature_type: Mapped[FeatureType | None] = mapped_column(
        _enum(FeatureType), nullable=True
    )
    is_mandatory: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)


class ProductVersion(CatalogModel):
    """Numbered version of a product definition."""

    __tablename__ = "product_version"

    ID_FIELD = "product_version_id"
    PARENT_FIELD = "product_id"

    product_version_id: Mapped[UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid4
    )
    product_id: Mapped[UUID] = _product_fk()
    version_number: Mapped[int] = mapped_column(Integer, nullable=False)
    version_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    effective_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )


class ProductLocalization(CatalogModel):
    """Product name and description in one language."""

    __tablename__ = "product_localization"

    ID_FIELD = "product_localization_id"
    PARENT_FIELD = "product_id"

    product_localization_id: Mapped[UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid4
    )
    product_id: Mapped[UUID] = _product_fk()
    language_code: Mapped[str] = mapped_column(String(20), nullable=False)
    localized_name: Mapped[str | None] = mapped_column(String(300), nullable=True)
    localized_description: Mapped[str | None] = mapped_column(Text, nullable=True)


class ProductRelationship(CatalogModel):
    """Directed relationship from a product to another product."""

    __tablename__ = "product_relationship"

    ID_FIELD = "product_relationship_id"
    PARENT_FIELD = "product_id"

    product_relationship_id: Mapped[UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid4
    )
    product_id: Mapped[UUID] = _product_fk()
    related_product_id: Mapped[UUID] = mapped_column(Uuid, nullable=False, index=True)
    relationship_type: Mapped[RelationshipType | None] = mapped_column(
        _enum(RelationshipType), nullable=True
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)


class ProductConfiguration(CatalogModel):
    """Typed key/value setting of a product."""

    __tablename__ = "product_configuration"

    ID_FIELD = "product_configuration_id"
    PARENT_FIELD = "product_id"

    product_configuration_id: Mapped[UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid4
    )
    product_id: Mapped[UUID] = _product_fk()
    config_type: Mapped[ConfigType | None] = mapped_column(
        _enum(ConfigType), nullable=True, index=True
    )
    config_key: Mapped[str] = mapped_column(String(200), nullable=False)
    config_value: Mapped[str | None] = mapped_column(Text, nullable=True)


class ProductDocumentationRequirement(CatalogModel):
    """Document a customer must provide to contract a product."""

    __tablename__ = "product_documentation_requirement"

    ID_FIELD = "product_doc_requirement_id"
    PARENT_FIELD = "product_id"

    product_doc_requirement_id: Mapped[UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid4
    )
    product_id: Mapped[UUID] = _product_fk()
    doc_type: Mapped[ContractingDocType] = mapped_column(
        _enum(ContractingDocType), nullable=False
    )
    is_mandatory: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)


class ProductDocumentation(CatalogModel):
    """Document published for a product, stored in the document manager."""

    __tablename__ = "product_documentation"

    ID_FIELD = "product_documentation_id"
    PARENT_FIELD = "product_id"

    product_documentation_id: Mapped[UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid4
    )
    product_id: Mapped[UUID] = _product_fk()
    doc_type: Mapped[DocType] = mapped_column(_enum(DocType), nullable=False)
    document_manager_ref: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    date_added: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )


class ProductLifecycle(CatalogModel):
    """Lifecycle status a product held over a period."""

    __tablename__ = "product_lifecycle"

    ID_FIELD = "product_lifecycle_id"
    PARENT_FIELD = "product_id"

    product_lifecycle_id: Mapped[UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid4
    )
    product_id: Mapped[UUID] = _product_fk()
    lifecycle_status: Mapped[LifecycleStatus] = mapped_column(
        _enum(LifecycleStatus), nullable=False
    )
    status_start_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    status_end_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    reason: Mapped[str | None] = mapped_column(Text, nullable=True)


class ProductLimit(CatalogModel):
    """Amount limit enforced by a product over a time period."""

    __tablename__ = "product_limit"

    ID_FIELD = "product_limit_id"
    PARENT_FIELD = "product_id"

    product_limit_id: Mapped[UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid4
    )
    product_id: Mapped[UUID] = _product_fk()
    limit_type: Mapped[LimitType] = mapped_column(_enum(LimitType), nullable=False)
    limit_value: Mapped[Decimal] = mapped_column(Numeric(18, 4), nullable=False)
    limit_unit: Mapped[str | None] = mapped_column(String(20), nullable=True)
    time_period: Mapped[TimePeriod | None] = mapped_column(
        _enum(TimePeriod), nullable=True
    )
    effective_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    expiry_date: Mapped[date | None] = mapped_column(Date, nullable=True)


# ============================================================================
# Pricing Models
# ============================================================================


class ProductPricing(CatalogModel):
    """Price, rate or fee amount of a product."""

    __tablename__ = "product_pricing"

    ID_FIELD = "product_pricing_id"
    PARENT_FIELD = "product_id"

    product_pricing_id: Mapped[UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid4
    )
    product_id: Mapped[UUID] = _product_fk()
    pricing_type: Mapped[PricingType] = mapped_column(_enum(PricingType), nullable=False)
    amount_value: Mapped[Decimal | None] = mapped_column(Numeric(18, 4), nullable=True)
    amount_unit: Mapped[str | None] = mapped_column(String(20), nullable=True)
    pricing_condition: Mapped[str | None] = mapped_column(Text, nullable=True)
    effective_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    expiry_date: Mapped[date | None] = mapped_column(Date, nullable=True)


class ProductPricingLocalization(CatalogModel):
    """Amount of a pricing entry in one currency."""

    __tablename__ = "product_pricing_localization"

    ID_FIELD = "product_pricing_localization_id"
    PARENT_FIELD = "product_pricing_id"

    product_pricing_localization_id: Mapped[UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid4
    )
    product_pricing_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("product_pricing.product_pricing_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    currency_code: Mapped[str] = mapped_column(String(3), nullable=False)
    localized_amount_value: Mapped[Decimal | None] = mapped_column(
        Numeric(18, 4), nullable=True
    )


# ============================================================================
# Fee Models
# ============================================================================


class ProductFeeStructure(CatalogModel):
    """Assignment of a fee structure to a product, ranked by priority."""

    __tablename__ = "product_fee_structure"

    ID_FIELD = "product_fee_structure_id"
    PARENT_FIELD = "product_id"

    product_fee_structure_id: Mapped[UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid4
    )
    product_id: Mapped[UUID] = _product_fk()
    fee_structure_id: Mapped[UUID] = mapped_column(Uuid, nullable=False, index=True)
    priority: Mapped[int | None] = mapped_column(Integer, nullable=True)


class FeeComponent(CatalogModel):
    """Chargeable part of a fee structure.

    Fee structures are defined outside the catalog, so ``fee_structure_id``
    is a plain reference rather than a foreign key.
    """

    __tablename__ = "fee_component"

    ID_FIELD = "fee_component_id"
    PARENT_FIELD = "fee_structure_id"

    fee_component_id: Mapped[UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid4
    )
    fee_structure_id: Mapped[UUID] = mapped_column(Uuid, nullable=False, index=True)
    component_name: Mapped[str] = mapped_column(String(200), nullable=False)
    component_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    amount_value: Mapped[Decimal | None] = mapped_column(Numeric(18, 4), nullable=True)
    amount_unit: Mapped[str | None] = mapped_column(String(20), nullable=True)


class FeeApplicationRule(CatalogModel):
    """Condition under which a fee component is charged."""

    __tablename__ = "fee_application_rule"

    ID_FIELD = "fee_application_rule_id"
    PARENT_FIELD = "fee_component_id"

    fee_application_rule_id: Mapped[UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid4
    )
    fee_component_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("fee_component.fee_component_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    rule_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    rule_condition: Mapped[str] = mapped_column(Text, nullable=False)
    priority: Mapped[int | None] = mapped_column(Integer, nullable=True)
    effective_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    expiry_date: Mapped[date | None] = mapped_column(Date, nullable=True)
