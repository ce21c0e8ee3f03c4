"""Product relationship API endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from product_catalog.api.dependencies import get_page_request, get_services, unwrap
from product_catalog.api.schemas import NOT_FOUND_RESPONSES, WRITE_RESPONSES
from product_catalog.application.container import CatalogServices
from product_catalog.application.dtos import ProductRelationshipDTO
from product_catalog.catalog.pagination import PageRequest, PageResult

router = APIRouter(
    prefix="/products/{product_id}/relationships", tags=["Product Relationships"]
)

Services = Annotated[CatalogServices, Depends(get_services)]
Page = Annotated[PageRequest, Depends(get_page_request)]


@router.get(
    "",
    response_model=PageResult[ProductRelationshipDTO],
    summary="List relationships",
)
async def list_relationships(
    product_id: UUID, services: Services, page: Page
) -> PageResult[ProductRelationshipDTO]:
    """List the outgoing relationships of a product."""
    return unwrap(await services.relationships.list(product_id, page))


@router.post(
    "",
    response_model=ProductRelationshipDTO,
    status_code=status.HTTP_201_CREATED,
    responses=WRITE_RESPONSES,
    summary="Create relationship",
)
async def create_relationship(
    product_id: UUID, dto: ProductRelationshipDTO, services: Services
) -> ProductRelationshipDTO:
    """Relate a product to another product."""
    return unwrap(await services.relationships.create(product_id, dto))


@router.get(
    "/{relationship_id}",
    response_model=ProductRelationshipDTO,
    responses=NOT_FOUND_RESPONSES,
    summary="Get relationship",
)
async def get_relationship(
    product_id: UUID, relationship_id: UUID, services: Services
) -> ProductRelationshipDTO:
    """Get a relationship of a product."""
    return unwrap(await services.relationships.get_by_id(product_id, relationship_id))


@router.put(
    "/{relationship_id}",
    response_model=ProductRelationshipDTO,
    responses=WRITE_RESPONSES,
    summary="Update relationship",
)
async def update_relationship(
    product_id: UUID,
    relationship_id: UUID,
    dto: ProductRelationshipDTO,
    services: Services,
) -> ProductRelationshipDTO:
    """Update a relationship of a product."""
    return unwrap(
        await services.relationships.update(product_id, relationship_id, dto)
    )


@router.delete(
    "/{relationship_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND_RESPONSES,
    summary="Delete relationship",
)
async def delete_relationship(
    product_id: UUID, relationship_id: UUID, services: Services
) -> Response:
    """Delete a relationship of a product."""
    unwrap(await services.relationships.delete(product_id, relationship_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
