"""Product lifecycle and limit API endpoints.

Provides endpoints for:
- /products/{product_id}/lifecycle - lifecycle status history of a product
- /products/{product_id}/limits - amount limits enforced by a product
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from product_catalog.api.dependencies import get_page_request, get_services, unwrap
from product_catalog.api.schemas import NOT_FOUND_RESPONSES, WRITE_RESPONSES
from product_catalog.application.container import CatalogServices
from product_catalog.application.dtos import ProductLifecycleDTO, ProductLimitDTO
from product_catalog.catalog.pagination import PageRequest, PageResult

lifecycle_router = APIRouter(
    prefix="/products/{product_id}/lifecycle", tags=["Product Lifecycle"]
)
limits_router = APIRouter(prefix="/products/{product_id}/limits", tags=["Product Limits"])

Services = Annotated[CatalogServices, Depends(get_services)]
Page = Annotated[PageRequest, Depends(get_page_request)]


# ============================================================================
# Lifecycle
# ============================================================================


@lifecycle_router.get(
    "",
    response_model=PageResult[ProductLifecycleDTO],
    summary="List lifecycle entries",
)
async def list_lifecycles(
    product_id: UUID, services: Services, page: Page
) -> PageResult[ProductLifecycleDTO]:
    """List the lifecycle entries of a product."""
    return unwrap(await services.lifecycles.list(product_id, page))


@lifecycle_router.post(
    "",
    response_model=ProductLifecycleDTO,
    status_code=status.HTTP_201_CREATED,
    responses=WRITE_RESPONSES,
    summary="Create lifecycle entry",
)
async def create_lifecycle(
    product_id: UUID, dto: ProductLifecycleDTO, services: Services
) -> ProductLifecycleDTO:
    """Record a lifecycle status for a product.

    Args:
        product_id: Owning product.
        dto: Lifecycle entry; ``lifecycle_status`` is required.
        services: Catalog services.

    Returns:
        The stored entry.
    """
    return unwrap(await services.lifecycles.create(product_id, dto))


@lifecycle_router.get(
    "/{lifecycle_id}",
    response_model=ProductLifecycleDTO,
    responses=NOT_FOUND_RESPONSES,
    summary="Get lifecycle entry",
)
async def get_lifecycle(
    product_id: UUID, lifecycle_id: UUID, services: Services
) -> ProductLifecycleDTO:
    """Get a lifecycle entry of a product."""
    return unwrap(await services.lifecycles.get_by_id(product_id, lifecycle_id))


@lifecycle_router.put(
    "/{lifecycle_id}",
    response_model=ProductLifecycleDTO,
    responses=WRITE_RESPONSES,
    summary="Update lifecycle entry",
)
async def update_lifecycle(
    product_id: UUID,
    lifecycle_id: UUID,
    dto: ProductLifecycleDTO,
    services: Services,
) -> ProductLifecycleDTO:
    """Update a lifecycle entry of a product."""
    return unwrap(await services.lifecycles.update(product_id, lifecycle_id, dto))


@lifecycle_router.delete(
    "/{lifecycle_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND_RESPONSES,
    summary="Delete lifecycle entry",
)
async def delete_lifecycle(
    product_id: UUID, lifecycle_id: UUID, services: Services
) -> Response:
    """Delete a lifecycle entry of a product."""
    unwrap(await services.lifecycles.delete(product_id, lifecycle_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ============================================================================
# Limits
# ============================================================================


@limits_router.get("", response_model=PageResult[ProductLimitDTO], summary="List limits")
async def list_limits(
    product_id: UUID, services: Services, page: Page
) -> PageResult[ProductLimitDTO]:
    """List the limits of a product."""
    return unwrap(await services.limits.list(product_id, page))


@limits_router.post(
    "",
    response_model=ProductLimitDTO,
    status_code=status.HTTP_201_CREATED,
    responses=WRITE_RESPONSES,
    summary="Create limit",
)
async def create_limit(
    product_id: UUID, dto: ProductLimitDTO, services: Services
) -> ProductLimitDTO:
    """Create a limit; ``limit_type`` and ``limit_value`` are required."""
    return unwrap(await services.limits.create(product_id, dto))


@limits_router.get(
    "/{limit_id}",
    response_model=ProductLimitDTO,
    responses=NOT_FOUND_RESPONSES,
    summary="Get limit",
)
async def get_limit(product_id: UUID, limit_id: UUID, services: Services) -> ProductLimitDTO:
    """Get a limit of a product."""
    return unwrap(await services.limits.get_by_id(product_id, limit_id))


@limits_router.put(
    "/{limit_id}",
    response_model=ProductLimitDTO,
    responses=WRITE_RESPONSES,
    summary="Update limit",
)
async def update_limit(
    product_id: UUID, limit_id: UUID, dto: ProductLimitDTO, services: Services
) -> ProductLimitDTO:
    """Update a limit of a product."""
    return unwrap(await services.limits.update(product_id, limit_id, dto))


@limits_router.delete(
    "/{limit_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND_RESPONSES,
    summary="Delete limit",
)
async def delete_limit(product_id: UUID, limit_id: UUID, services: Services) -> Response:
    """Delete a limit of a product."""
    unwrap(await services.limits.delete(product_id, limit_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
