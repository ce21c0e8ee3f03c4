"""Product feature API endpoints.

Features are always addressed through their product; a feature id used
under another product is reported as not found.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from product_catalog.api.dependencies import get_page_request, get_services, unwrap
from product_catalog.api.schemas import NOT_FOUND_RESPONSES, WRITE_RESPONSES
from product_catalog.application.container import CatalogServices
from product_catalog.application.dtos import ProductFeatureDTO
from product_catalog.catalog.pagination import PageRequest, PageResult

router = APIRouter(prefix="/products/{product_id}/features", tags=["Product Features"])

Services = Annotated[CatalogServices, Depends(get_services)]
Page = Annotated[PageRequest, Depends(get_page_request)]


@router.get("", response_model=PageResult[ProductFeatureDTO], summary="List features")
async def list_features(
    product_id: UUID, services: Services, page: Page
) -> PageResult[ProductFeatureDTO]:
    """List the features of a product.

    Args:
        product_id: Owning product.
        services: Catalog services.
        page: Page to return.

    Returns:
        Page of features; empty when the product has none.
    """
    return unwrap(await services.features.list(product_id, page))


@router.post(
    "",
    response_model=ProductFeatureDTO,
    status_code=status.HTTP_201_CREATED,
    responses=WRITE_RESPONSES,
    summary="Create feature",
)
async def create_feature(
    product_id: UUID, dto: ProductFeatureDTO, services: Services
) -> ProductFeatureDTO:
    """Create a feature; the product id from the path wins over the body."""
    return unwrap(await services.features.create(product_id, dto))


@router.get(
    "/{feature_id}",
    response_model=ProductFeatureDTO,
    responses=NOT_FOUND_RESPONSES,
    summary="Get feature",
)
async def get_feature(
    product_id: UUID, feature_id: UUID, services: Services
) -> ProductFeatureDTO:
    """Get a feature of a product."""
    return unwrap(await services.features.get_by_id(product_id, feature_id))


@router.put(
    "/{feature_id}",
    response_model=ProductFeatureDTO,
    responses=WRITE_RESPONSES,
    summary="Update feature",
)
async def update_feature(
    product_id: UUID, feature_id: UUID, dto: ProductFeatureDTO, services: Services
) -> ProductFeatureDTO:
    """Update a feature of a product."""
    return unwrap(await services.features.update(product_id, feature_id, dto))


@router.delete(
    "/{feature_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND_RESPONSES,
    summary="Delete feature",
)
async def delete_feature(
    product_id: UUID, feature_id: UUID, services: Services
) -> Response:
    """Delete a feature of a product."""
    unwrap(await services.features.delete(product_id, feature_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
