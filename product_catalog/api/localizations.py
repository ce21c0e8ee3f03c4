"""Product localization API endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from product_catalog.api.dependencies import get_page_request, get_services, unwrap
from product_catalog.api.schemas import NOT_FOUND_RESPONSES, WRITE_RESPONSES
from product_catalog.application.container import CatalogServices
from product_catalog.application.dtos import ProductLocalizationDTO
from product_catalog.catalog.pagination import PageRequest, PageResult

router = APIRouter(
    prefix="/products/{product_id}/localizations", tags=["Product Localizations"]
)

Services = Annotated[CatalogServices, Depends(get_services)]
Page = Annotated[PageRequest, Depends(get_page_request)]


@router.get(
    "",
    response_model=PageResult[ProductLocalizationDTO],
    summary="List localizations",
)
async def list_localizations(
    product_id: UUID, services: Services, page: Page
) -> PageResult[ProductLocalizationDTO]:
    """List the localizations of a product."""
    return unwrap(await services.localizations.list(product_id, page))


@router.post(
    "",
    response_model=ProductLocalizationDTO,
    status_code=status.HTTP_201_CREATED,
    responses=WRITE_RESPONSES,
    summary="Create localization",
)
async def create_localization(
    product_id: UUID, dto: ProductLocalizationDTO, services: Services
) -> ProductLocalizationDTO:
    """Create a localization; `language_code` is required."""
    return unwrap(await services.localizations.create(product_id, dto))


@router.get(
    "/{localization_id}",
    response_model=ProductLocalizationDTO,
    responses=NOT_FOUND_RESPONSES,
    summary="Get localization",
)
async def get_localization(
    product_id: UUID, localization_id: UUID, services: Services
) -> ProductLocalizationDTO:
    """Get a localization of a product."""
    return unwrap(await services.localizations.get_by_id(product_id, localization_id))


@router.put(
    "/{localization_id}",
    response_model=ProductLocalizationDTO,
    responses=WRITE_RESPONSES,
    summary="Update localization",
)
async def update_localization(
    product_id: UUID,
    localization_id: UUID,
    dto: ProductLocalizationDTO,
    services: Services,
) -> ProductLocalizationDTO:
    """Update a localization of a product."""
    return unwrap(
        await services.localizations.update(product_id, localization_id, dto)
    )


@router.delete(
    "/{localization_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND_RESPONSES,
    summary="Delete localization",
)
async def delete_localization(
    product_id: UUID, localization_id: UUID, services: Services
) -> Response:
    """Delete a localization of a product."""
    unwrap(await services.localizations.delete(product_id, localization_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
