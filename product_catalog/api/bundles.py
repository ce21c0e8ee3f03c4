"""Product bundle API endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from product_catalog.api.dependencies import get_page_request, get_services, unwrap
from product_catalog.api.schemas import NOT_FOUND_RESPONSES, WRITE_RESPONSES
from product_catalog.application.container import CatalogServices
from product_catalog.application.dtos import ProductBundleDTO
from product_catalog.catalog.pagination import PageRequest, PageResult

router = APIRouter(prefix="/bundles", tags=["Bundles"])

Services = Annotated[CatalogServices, Depends(get_services)]
Page = Annotated[PageRequest, Depends(get_page_request)]


@router.get("", response_model=PageResult[ProductBundleDTO], summary="List bundles")
async def list_bundles(services: Services, page: Page) -> PageResult[ProductBundleDTO]:
    """List bundles with pagination."""
    return unwrap(await services.bundles.list(page))


@router.post(
    "",
    response_model=ProductBundleDTO,
    status_code=status.HTTP_201_CREATED,
    responses=WRITE_RESPONSES,
    summary="Create bundle",
)
async def create_bundle(dto: ProductBundleDTO, services: Services) -> ProductBundleDTO:
    """Create a bundle."""
    return unwrap(await services.bundles.create(dto))


@router.get(
    "/{bundle_id}",
    response_model=ProductBundleDTO,
    responses=NOT_FOUND_RESPONSES,
    summary="Get bundle",
)
async def get_bundle(bundle_id: UUID, services: Services) -> ProductBundleDTO:
    """Get a bundle by ID."""
    return unwrap(await services.bundles.get_by_id(bundle_id))


@router.put(
    "/{bundle_id}",
    response_model=ProductBundleDTO,
    responses=WRITE_RESPONSES,
    summary="Update bundle",
)
async def update_bundle(
    bundle_id: UUID, dto: ProductBundleDTO, services: Services
) -> ProductBundleDTO:
    """Update a bundle."""
    return unwrap(await services.bundles.update(bundle_id, dto))


@router.delete(
    "/{bundle_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND_RESPONSES,
    summary="Delete bundle",
)
async def delete_bundle(bundle_id: UUID, services: Services) -> Response:
    """Delete a bundle."""
    unwrap(await services.bundles.delete(bundle_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
