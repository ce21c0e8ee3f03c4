"""API layer module.

Contains FastAPI routers and request/response schemas.
"""

from product_catalog.api.bundles import router as bundles_router
from product_catalog.api.categories import router as categories_router
from product_catalog.api.configurations import router as configurations_router
from product_catalog.api.documentation import (
    documentation_router,
    requirements_router,
)
from product_catalog.api.fees import (
    fee_components_router,
    fee_rules_router,
    product_fee_structures_router,
)
from product_catalog.api.features import router as features_router
from product_catalog.api.health import router as health_router
from product_catalog.api.lifecycle import lifecycle_router, limits_router
from product_catalog.api.localizations import router as localizations_router
from product_catalog.api.pricing import pricing_localizations_router, pricing_router
from product_catalog.api.products import router as products_router
from product_catalog.api.relationships import router as relationships_router
from product_catalog.api.versions import router as versions_router

CATALOG_ROUTERS = [
    products_router,
    features_router,
    versions_router,
    localizations_router,
    relationships_router,
    configurations_router,
    requirements_router,
    documentation_router,
    lifecycle_router,
    limits_router,
    pricing_router,
    pricing_localizations_router,
    product_fee_structures_router,
    fee_components_router,
    fee_rules_router,
    bundles_router,
    categories_router,
]

__all__ = [
    "CATALOG_ROUTERS",
    "bundles_router",
    "categories_router",
    "configurations_router",
    "documentation_router",
    "features_router",
    "fee_components_router",
    "fee_rules_router",
    "health_router",
    "lifecycle_router",
    "limits_router",
    "localizations_router",
    "pricing_localizations_router",
    "pricing_router",
    "product_fee_structures_router",
    "products_router",
    "relationships_router",
    "requirements_router",
    "versions_router",
]
