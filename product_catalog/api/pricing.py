"""Product pricing API endpoints.

Provides endpoints for:
- /products/{product_id}/pricings - pricing entries of a product
- /products/{product_id}/pricings/{pricing_id}/localizations - currency
  amounts of one pricing entry

Localization routes first resolve the pricing entry under the product, so a
pricing id used under another product is reported as not found.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from product_catalog.api.dependencies import get_page_request, get_services, unwrap
from product_catalog.api.schemas import NOT_FOUND_RESPONSES, WRITE_RESPONSES
from product_catalog.application.container import CatalogServices
from product_catalog.application.dtos import (
    ProductPricingDTO,
    ProductPricingLocalizationDTO,
)
from product_catalog.catalog.pagination import PageRequest, PageResult

pricing_router = APIRouter(prefix="/products/{product_id}/pricings", tags=["Product Pricing"])
pricing_localizations_router = APIRouter(
    prefix="/products/{product_id}/pricings/{pricing_id}/localizations",
    tags=["Product Pricing"],
)

Services = Annotated[CatalogServices, Depends(get_services)]
Page = Annotated[PageRequest, Depends(get_page_request)]


async def get_owned_pricing_id(
    product_id: UUID, pricing_id: UUID, services: Services
) -> UUID:
    """Resolve a pricing id that belongs to the product in the path.

    Raises:
        HTTPException: 404 if the pricing entry is missing or owned by
            another product.
    """
    unwrap(await services.pricings.get_by_id(product_id, pricing_id))
    return pricing_id


PricingId = Annotated[UUID, Depends(get_owned_pricing_id)]


# ============================================================================
# Pricing
# ============================================================================


@pricing_router.get("", response_model=PageResult[ProductPricingDTO], summary="List pricings")
async def list_pricings(
    product_id: UUID, services: Services, page: Page
) -> PageResult[ProductPricingDTO]:
    """List the pricing entries of a product."""
    return unwrap(await services.pricings.list(product_id, page))


@pricing_router.post(
    "",
    response_model=ProductPricingDTO,
    status_code=status.HTTP_201_CREATED,
    responses=WRITE_RESPONSES,
    summary="Create pricing",
)
async def create_pricing(
    product_id: UUID, dto: ProductPricingDTO, services: Services
) -> ProductPricingDTO:
    """Create a pricing entry; ``pricing_type`` is required."""
    return unwrap(await services.pricings.create(product_id, dto))


@pricing_router.get(
    "/{pricing_id}",
    response_model=ProductPricingDTO,
    responses=NOT_FOUND_RESPONSES,
    summary="Get pricing",
)
async def get_pricing(
    product_id: UUID, pricing_id: UUID, services: Services
) -> ProductPricingDTO:
    """Get a pricing entry of a product."""
    return unwrap(await services.pricings.get_by_id(product_id, pricing_id))


@pricing_router.put(
    "/{pricing_id}",
    response_model=ProductPricingDTO,
    responses=WRITE_RESPONSES,
    summary="Update pricing",
)
async def update_pricing(
    product_id: UUID, pricing_id: UUID, dto: ProductPricingDTO, services: Services
) -> ProductPricingDTO:
    """Update a pricing entry of a product."""
    return unwrap(await services.pricings.update(product_id, pricing_id, dto))


@pricing_router.delete(
    "/{pricing_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND_RESPONSES,
    summary="Delete pricing",
)
async def delete_pricing(
    product_id: UUID, pricing_id: UUID, services: Services
) -> Response:
    """Delete a pricing entry and its localizations."""
    unwrap(await services.pricings.delete(product_id, pricing_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ============================================================================
# Pricing Localizations
# ============================================================================


@pricing_localizations_router.get(
    "",
    response_model=PageResult[ProductPricingLocalizationDTO],
    responses=NOT_FOUND_RESPONSES,
    summary="List pricing localizations",
)
async def list_pricing_localizations(
    pricing_id: PricingId, services: Services, page: Page
) -> PageResult[ProductPricingLocalizationDTO]:
    """List the currency amounts of a pricing entry."""
    return unwrap(await services.pricing_localizations.list(pricing_id, page))


@pricing_localizations_router.post(
    "",
    response_model=ProductPricingLocalizationDTO,
    status_code=status.HTTP_201_CREATED,
    responses=WRITE_RESPONSES,
    summary="Create pricing localization",
)
async def create_pricing_localization(
    pricing_id: PricingId, dto: ProductPricingLocalizationDTO, services: Services
) -> ProductPricingLocalizationDTO:
    """Add a currency amount to a pricing entry."""
    return unwrap(await services.pricing_localizations.create(pricing_id, dto))


@pricing_localizations_router.get(
    "/{localization_id}",
    response_model=ProductPricingLocalizationDTO,
    responses=NOT_FOUND_RESPONSES,
    summary="Get pricing localization",
)
async def get_pricing_localization(
    pricing_id: PricingId, localization_id: UUID, services: Services
) -> ProductPricingLocalizationDTO:
    """Get a currency amount of a pricing entry."""
    return unwrap(
        await services.pricing_localizations.get_by_id(pricing_id, localization_id)
    )


@pricing_localizations_router.put(
    "/{localization_id}",
    response_model=ProductPricingLocalizationDTO,
    responses=WRITE_RESPONSES,
    summary="Update pricing localization",
)
async def update_pricing_localization(
    pricing_id: PricingId,
    localization_id: UUID,
    dto: ProductPricingLocalizationDTO,
    services: Services,
) -> ProductPricingLocalizationDTO:
    """Update a currency amount of a pricing entry."""
    return unwrap(
        await services.pricing_localizations.update(pricing_id, localization_id, dto)
    )


@pricing_localizations_router.delete(
    "/{localization_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND_RESPONSES,
    summary="Delete pricing localization",
)
async def delete_pricing_localization(
    pricing_id: PricingId, localization_id: UUID, services: Services
) -> Response:
    """Delete a currency amount of a pricing entry."""
    unwrap(await services.pricing_localizations.delete(pricing_id, localization_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
