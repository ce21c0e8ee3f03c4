"""Product API endpoints.

Provides endpoints for product management:
- GET /products - list products (paginated)
- POST /products - create a product
- GET /products/{product_id} - product details
- PUT /products/{product_id} - update a product
- DELETE /products/{product_id} - delete a product
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from product_catalog.api.dependencies import get_page_request, get_services, unwrap
from product_catalog.api.schemas import NOT_FOUND_RESPONSES, WRITE_RESPONSES
from product_catalog.application.container import CatalogServices
from product_catalog.application.dtos import ProductDTO
from product_catalog.catalog.pagination import PageRequest, PageResult

router = APIRouter(prefix="/products", tags=["Products"])

Services = Annotated[CatalogServices, Depends(get_services)]
Page = Annotated[PageRequest, Depends(get_page_request)]


@router.get(
    "",
    response_model=PageResult[ProductDTO],
    summary="List products",
)
async def list_products(services: Services, page: Page) -> PageResult[ProductDTO]:
    """List products with pagination."""
    return unwrap(await services.products.list(page))


@router.post(
    "",
    response_model=ProductDTO,
    status_code=status.HTTP_201_CREATED,
    responses=WRITE_RESPONSES,
    summary="Create product",
    description="Create a product. `tenant_id` and `product_name` are required.",
)
async def create_product(dto: ProductDTO, services: Services) -> ProductDTO:
    """Create a product.

    Args:
        dto: Product fields.
        services: Catalog services.

    Returns:
        Created product.

    Raises:
        HTTPException: 422 if a required field is missing.
    """
    return unwrap(await services.products.create(dto))


@router.get(
    "/{product_id}",
    response_model=ProductDTO,
    responses=NOT_FOUND_RESPONSES,
    summary="Get product",
)
async def get_product(product_id: UUID, services: Services) -> ProductDTO:
    """Get a product by ID."""
    return unwrap(await services.products.get_by_id(product_id))


@router.put(
    "/{product_id}",
    response_model=ProductDTO,
    responses=WRITE_RESPONSES,
    summary="Update product",
)
async def update_product(
    product_id: UUID, dto: ProductDTO, services: Services
) -> ProductDTO:
    """Update a product; fields left null keep their stored value."""
    return unwrap(await services.products.update(product_id, dto))


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND_RESPONSES,
    summary="Delete product",
)
async def delete_product(product_id: UUID, services: Services) -> Response:
    """Delete a product."""
    unwrap(await services.products.delete(product_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
