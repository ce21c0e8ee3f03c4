"""Product version API endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from product_catalog.api.dependencies import get_page_request, get_services, unwrap
from product_catalog.api.schemas import NOT_FOUND_RESPONSES, WRITE_RESPONSES
from product_catalog.application.container import CatalogServices
from product_catalog.application.dtos import ProductVersionDTO
from product_catalog.catalog.pagination import PageRequest, PageResult

router = APIRouter(prefix="/products/{product_id}/versions", tags=["Product Versions"])

Services = Annotated[CatalogServices, Depends(get_services)]
Page = Annotated[PageRequest, Depends(get_page_request)]


@router.get("", response_model=PageResult[ProductVersionDTO], summary="List versions")
async def list_versions(
    product_id: UUID, services: Services, page: Page
) -> PageResult[ProductVersionDTO]:
    """List the versions of a product."""
    return unwrap(await services.versions.list(product_id, page))


@router.post(
    "",
    response_model=ProductVersionDTO,
    status_code=status.HTTP_201_CREATED,
    responses=WRITE_RESPONSES,
    summary="Create version",
)
async def create_version(
    product_id: UUID, dto: ProductVersionDTO, services: Services
) -> ProductVersionDTO:
    """Create a version; `version_number` is required."""
    return unwrap(await services.versions.create(product_id, dto))


@router.get(
    "/{version_id}",
    response_model=ProductVersionDTO,
    responses=NOT_FOUND_RESPONSES,
    summary="Get version",
)
async def get_version(
    product_id: UUID, version_id: UUID, services: Services
) -> ProductVersionDTO:
    """Get a version of a product."""
    return unwrap(await services.versions.get_by_id(product_id, version_id))


@router.put(
    "/{version_id}",
    response_model=ProductVersionDTO,
    responses=WRITE_RESPONSES,
    summary="Update version",
)
async def update_version(
    product_id: UUID, version_id: UUID, dto: ProductVersionDTO, services: Services
) -> ProductVersionDTO:
    """Update a version of a product."""
    return unwrap(await services.versions.update(product_id, version_id, dto))


@router.delete(
    "/{version_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND_RESPONSES,
    summary="Delete version",
)
async def delete_version(
    product_id: UUID, version_id: UUID, services: Services
) -> Response:
    """Delete a version of a product."""
    unwrap(await services.versions.delete(product_id, version_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
