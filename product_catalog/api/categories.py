"""Product category API endpoints.

Provides endpoints for categories and their subtypes:
- /categories[/{category_id}] - category CRUD
- /categories/{category_id}/subtypes[/{subtype_id}] - subtypes scoped to
  their category; subtype names are unique across all categories
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from product_catalog.api.dependencies import get_page_request, get_services, unwrap
from product_catalog.api.schemas import NOT_FOUND_RESPONSES, WRITE_RESPONSES
from product_catalog.application.container import CatalogServices
from product_catalog.application.dtos import ProductCategoryDTO, ProductCategorySubtypeDTO
from product_catalog.catalog.pagination import PageRequest, PageResult

router = APIRouter(prefix="/categories", tags=["Categories"])

Services = Annotated[CatalogServices, Depends(get_services)]
Page = Annotated[PageRequest, Depends(get_page_request)]


# ============================================================================
# Categories
# ============================================================================


@router.get("", response_model=PageResult[ProductCategoryDTO], summary="List categories")
async def list_categories(
    services: Services, page: Page
) -> PageResult[ProductCategoryDTO]:
    """List categories with pagination."""
    return unwrap(await services.categories.list(page))


@router.post(
    "",
    response_model=ProductCategoryDTO,
    status_code=status.HTTP_201_CREATED,
    responses=WRITE_RESPONSES,
    summary="Create category",
)
async def create_category(
    dto: ProductCategoryDTO, services: Services
) -> ProductCategoryDTO:
    """Create a category."""
    return unwrap(await services.categories.create(dto))


@router.get(
    "/{category_id}",
    response_model=ProductCategoryDTO,
    responses=NOT_FOUND_RESPONSES,
    summary="Get category",
)
async def get_category(category_id: UUID, services: Services) -> ProductCategoryDTO:
    """Get a category by ID."""
    return unwrap(await services.categories.get_by_id(category_id))


@router.put(
    "/{category_id}",
    response_model=ProductCategoryDTO,
    responses=WRITE_RESPONSES,
    summary="Update category",
)
async def update_category(
    category_id: UUID, dto: ProductCategoryDTO, services: Services
) -> ProductCategoryDTO:
    """Update a category."""
    return unwrap(await services.categories.update(category_id, dto))


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND_RESPONSES,
    summary="Delete category",
)
async def delete_category(category_id: UUID, services: Services) -> Response:
    """Delete a category."""
    unwrap(await services.categories.delete(category_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ============================================================================
# Subtypes
# ============================================================================


@router.get(
    "/{category_id}/subtypes",
    response_model=PageResult[ProductCategorySubtypeDTO],
    summary="List category subtypes",
)
async def list_subtypes(
    category_id: UUID, services: Services, page: Page
) -> PageResult[ProductCategorySubtypeDTO]:
    """List the subtypes of a category."""
    return unwrap(await services.subtypes.list(category_id, page))


@router.post(
    "/{category_id}/subtypes",
    response_model=ProductCategorySubtypeDTO,
    status_code=status.HTTP_201_CREATED,
    responses=WRITE_RESPONSES,
    summary="Create category subtype",
)
async def create_subtype(
    category_id: UUID, dto: ProductCategorySubtypeDTO, services: Services
) -> ProductCategorySubtypeDTO:
    """Create a subtype under a category.

    Raises:
        HTTPException: 409 if the subtype name is already used.
    """
    return unwrap(await services.subtypes.create(category_id, dto))


@router.get(
    "/{category_id}/subtypes/{subtype_id}",
    response_model=ProductCategorySubtypeDTO,
    responses=NOT_FOUND_RESPONSES,
    summary="Get category subtype",
)
async def get_subtype(
    category_id: UUID, subtype_id: UUID, services: Services
) -> ProductCategorySubtypeDTO:
    """Get a subtype of a category."""
    return unwrap(await services.subtypes.get_by_id(category_id, subtype_id))


@router.put(
    "/{category_id}/subtypes/{subtype_id}",
    response_model=ProductCategorySubtypeDTO,
    responses=WRITE_RESPONSES,
    summary="Update category subtype",
)
async def update_subtype(
    category_id: UUID,
    subtype_id: UUID,
    dto: ProductCategorySubtypeDTO,
    services: Services,
) -> ProductCategorySubtypeDTO:
    """Update a subtype of a category."""
    return unwrap(await services.subtypes.update(category_id, subtype_id, dto))


@router.delete(
    "/{category_id}/subtypes/{subtype_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND_RESPONSES,
    summary="Delete category subtype",
)
async def delete_subtype(
    category_id: UUID, subtype_id: UUID, services: Services
) -> Response:
    """Delete a subtype of a category."""
    unwrap(await services.subtypes.delete(category_id, subtype_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
