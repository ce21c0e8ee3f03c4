"""Catalog enumerations.

Stored by name in the database and serialized by value in the API; names
and values are identical.
"""

from enum import Enum


class ProductType(str, Enum):
    """Broad product family."""

    FINANCIAL = "FINANCIAL"
    NON_FINANCIAL = "NON_FINANCIAL"


class ProductStatus(str, Enum):
    """Product lifecycle status."""

    DRAFT = "DRAFT"
    PROPOSED = "PROPOSED"
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    RETIRED = "RETIRED"


class BundleStatus(str, Enum):
    """Bundle availability status."""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    RETIRED = "RETIRED"


class FeatureType(str, Enum):
    """How a feature is offered with its product."""

    STANDARD = "STANDARD"
    OPTIONAL = "OPTIONAL"
    PREMIUM = "PREMIUM"


class RelationshipType(str, Enum):
    """Relationship between two products."""

    BUNDLE_COMPONENT = "BUNDLE_COMPONENT"
    COMPLIMENTARY = "COMPLIMENTARY"
    UPGRADE = "UPGRADE"
    DOWNGRADE = "DOWNGRADE"
    ALTERNATIVE = "ALTERNATIVE"
    REPLACEMENT = "REPLACEMENT"


class ConfigType(str, Enum):
    """Category of a product configuration entry."""

    ELIGIBILITY = "ELIGIBILITY"
    PRICING = "PRICING"
    LIMITS = "LIMITS"
    FEES = "FEES"
    TERMS = "TERMS"
    OTHER = "OTHER"


class ContractingDocType(str, Enum):
    """Documents a customer must supply when contracting a product."""

    IDENTIFICATION = "IDENTIFICATION"
    TAX_IDENTIFICATION = "TAX_IDENTIFICATION"
    PROOF_OF_ADDRESS = "PROOF_OF_ADDRESS"
    INCOME_VERIFICATION = "INCOME_VERIFICATION"
    BANK_STATEMENTS = "BANK_STATEMENTS"
    POWER_OF_ATTORNEY = "POWER_OF_ATTORNEY"
    BUSINESS_REGISTRATION = "BUSINESS_REGISTRATION"
    ARTICLES_OF_INCORPORATION = "ARTICLES_OF_INCORPORATION"
    COMPANY_BYLAWS = "COMPANY_BYLAWS"
    SIGNED_CONTRACT = "SIGNED_CONTRACT"
    REGULATORY_COMPLIANCE = "REGULATORY_COMPLIANCE"
    CREDIT_REPORT = "CREDIT_REPORT"
    INSURANCE_POLICY = "INSURANCE_POLICY"
    OTHER = "OTHER"


class DocType(str, Enum):
    """Documents published alongside a product."""

    TNC = "TNC"
    BROCHURE = "BROCHURE"
    FAQ = "FAQ"
    CONTRACT = "CONTRACT"
    POLICY = "POLICY"
    OTHER = "OTHER"


class PricingType(str, Enum):
    """What a pricing entry prices."""

    INTEREST_RATE = "INTEREST_RATE"
    FEE = "FEE"
    COMMISSION = "COMMISSION"
    PREMIUM = "PREMIUM"
    SUBSCRIPTION = "SUBSCRIPTION"
    OTHER = "OTHER"


class LifecycleStatus(str, Enum):
    """Status recorded in a product lifecycle entry."""

    INIT = "INIT"
    ACTIVE = "ACTIVE"
    SUSPENDED = "SUSPENDED"
    TERMINATED = "TERMINATED"


class LimitType(str, Enum):
    """Kind of limit a product enforces."""

    CREDIT_LIMIT = "CREDIT_LIMIT"
    WITHDRAWAL_LIMIT = "WITHDRAWAL_LIMIT"
    DEPOSIT_LIMIT = "DEPOSIT_LIMIT"
    TRANSFER_LIMIT = "TRANSFER_LIMIT"
    TRANSACTION_LIMIT = "TRANSACTION_LIMIT"
    OTHER = "OTHER"


class TimePeriod(str, Enum):
    """Window a limit applies to."""

    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"
    PER_TRANSACTION = "PER_TRANSACTION"


class SortDirection(str, Enum):
    """Sort direction for paged queries."""

    ASC = "ASC"
    DESC = "DESC"
