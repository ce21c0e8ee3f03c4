"""Product configuration API endpoints.

Provides endpoints for typed key/value settings of a product:
- /products/{product_id}/configurations[/{config_id}] - CRUD
- /products/{product_id}/configurations/by-key/{config_key} - lookup by key
- /products/{product_id}/configurations/by-type/{config_type} - filter by type
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from product_catalog.api.dependencies import get_page_request, get_services, unwrap
from product_catalog.api.schemas import NOT_FOUND_RESPONSES, WRITE_RESPONSES
from product_catalog.application.container import CatalogServices
from product_catalog.application.dtos import ProductConfigurationDTO
from product_catalog.catalog.pagination import PageRequest, PageResult
from product_catalog.domain.enums import ConfigType

router = APIRouter(
    prefix="/products/{product_id}/configurations", tags=["Product Configurations"]
)

Services = Annotated[CatalogServices, Depends(get_services)]
Page = Annotated[PageRequest, Depends(get_page_request)]


# ============================================================================
# Lookups
# ============================================================================


@router.get(
    "/by-key/{config_key}",
    response_model=ProductConfigurationDTO,
    responses=NOT_FOUND_RESPONSES,
    summary="Get configuration by key",
)
async def get_configuration_by_key(
    product_id: UUID, config_key: str, services: Services
) -> ProductConfigurationDTO:
    """Get the configuration entry of a product with the given key."""
    return unwrap(await services.configurations.get_by_key(product_id, config_key))


@router.get(
    "/by-type/{config_type}",
    response_model=list[ProductConfigurationDTO],
    summary="List configurations by type",
)
async def list_configurations_by_type(
    product_id: UUID, config_type: ConfigType, services: Services
) -> list[ProductConfigurationDTO]:
    """List the configuration entries of a product with the given type."""
    return unwrap(await services.configurations.list_by_type(product_id, config_type))


# ============================================================================
# CRUD
# ============================================================================


@router.get(
    "",
    response_model=PageResult[ProductConfigurationDTO],
    summary="List configurations",
)
async def list_configurations(
    product_id: UUID, services: Services, page: Page
) -> PageResult[ProductConfigurationDTO]:
    """List the configuration entries of a product."""
    return unwrap(await services.configurations.list(product_id, page))


@router.post(
    "",
    response_model=ProductConfigurationDTO,
    status_code=status.HTTP_201_CREATED,
    responses=WRITE_RESPONSES,
    summary="Create configuration",
)
async def create_configuration(
    product_id: UUID, dto: ProductConfigurationDTO, services: Services
) -> ProductConfigurationDTO:
    """Create a configuration entry; `config_key` is required."""
    return unwrap(await services.configurations.create(product_id, dto))


@router.get(
    "/{config_id}",
    response_model=ProductConfigurationDTO,
    responses=NOT_FOUND_RESPONSES,
    summary="Get configuration",
)
async def get_configuration(
    product_id: UUID, config_id: UUID, services: Services
) -> ProductConfigurationDTO:
    """Get a configuration entry of a product."""
    return unwrap(await services.configurations.get_by_id(product_id, config_id))


@router.put(
    "/{config_id}",
    response_model=ProductConfigurationDTO,
    responses=WRITE_RESPONSES,
    summary="Update configuration",
)
async def update_configuration(
    product_id: UUID,
    config_id: UUID,
    dto: ProductConfigurationDTO,
    services: Services,
) -> ProductConfigurationDTO:
    """Update a configuration entry of a product."""
    return unwrap(await services.configurations.update(product_id, config_id, dto))


@router.delete(
    "/{config_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND_RESPONSES,
    summary="Delete configuration",
)
async def delete_configuration(
    product_id: UUID, config_id: UUID, services: Services
) -> Response:
    """Delete a configuration entry of a product."""
    unwrap(await services.configurations.delete(product_id, config_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
