"""Product documentation API endpoints.

Two routers:
- requirements_router: documents a customer must supply to contract a
  product, with lookups by type and a mandatory-only listing
- documentation_router: documents published for a product
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from product_catalog.api.dependencies import get_page_request, get_services, unwrap
from product_catalog.api.schemas import NOT_FOUND_RESPONSES, WRITE_RESPONSES
from product_catalog.application.container import CatalogServices
from product_catalog.application.dtos import (
    ProductDocumentationDTO,
    ProductDocumentationRequirementDTO,
)
from product_catalog.catalog.pagination import PageRequest, PageResult
from product_catalog.domain.enums import ContractingDocType

requirements_router = APIRouter(
    prefix="/products/{product_id}/documentation-requirements",
    tags=["Product Documentation Requirements"],
)
documentation_router = APIRouter(
    prefix="/products/{product_id}/documentation",
    tags=["Product Documentation"],
)

Services = Annotated[CatalogServices, Depends(get_services)]
Page = Annotated[PageRequest, Depends(get_page_request)]


# ============================================================================
# Documentation Requirements
# ============================================================================


# Registered before "/{requirement_id}" so "mandatory" is not parsed as an id
@requirements_router.get(
    "/mandatory",
    response_model=list[ProductDocumentationRequirementDTO],
    summary="List mandatory requirements",
)
async def list_mandatory_requirements(
    product_id: UUID, services: Services
) -> list[ProductDocumentationRequirementDTO]:
    """List the mandatory documentation requirements of a product."""
    return unwrap(await services.documentation_requirements.list_mandatory(product_id))


@requirements_router.get(
    "/by-type/{doc_type}",
    response_model=ProductDocumentationRequirementDTO,
    responses=NOT_FOUND_RESPONSES,
    summary="Get requirement by document type",
)
async def get_requirement_by_type(
    product_id: UUID, doc_type: ContractingDocType, services: Services
) -> ProductDocumentationRequirementDTO:
    """Get the requirement of a product for one document type."""
    return unwrap(
        await services.documentation_requirements.get_by_type(product_id, doc_type)
    )


@requirements_router.get(
    "",
    response_model=PageResult[ProductDocumentationRequirementDTO],
    summary="List requirements",
)
async def list_requirements(
    product_id: UUID, services: Services, page: Page
) -> PageResult[ProductDocumentationRequirementDTO]:
    """List the documentation requirements of a product."""
    return unwrap(await services.documentation_requirements.list(product_id, page))


@requirements_router.post(
    "",
    response_model=ProductDocumentationRequirementDTO,
    status_code=status.HTTP_201_CREATED,
    responses=WRITE_RESPONSES,
    summary="Create requirement",
)
async def create_requirement(
    product_id: UUID, dto: ProductDocumentationRequirementDTO, services: Services
) -> ProductDocumentationRequirementDTO:
    """Create a documentation requirement; `doc_type` is required."""
    return unwrap(await services.documentation_requirements.create(product_id, dto))


@requirements_router.get(
    "/{requirement_id}",
    response_model=ProductDocumentationRequirementDTO,
    responses=NOT_FOUND_RESPONSES,
    summary="Get requirement",
)
async def get_requirement(
    product_id: UUID, requirement_id: UUID, services: Services
) -> ProductDocumentationRequirementDTO:
    """Get a documentation requirement of a product."""
    return unwrap(
        await services.documentation_requirements.get_by_id(product_id, requirement_id)
    )


@requirements_router.put(
    "/{requirement_id}",
    response_model=ProductDocumentationRequirementDTO,
    responses=WRITE_RESPONSES,
    summary="Update requirement",
)
async def update_requirement(
    product_id: UUID,
    requirement_id: UUID,
    dto: ProductDocumentationRequirementDTO,
    services: Services,
) -> ProductDocumentationRequirementDTO:
    """Update a documentation requirement of a product."""
    return unwrap(
        await services.documentation_requirements.update(
            product_id, requirement_id, dto
        )
    )


@requirements_router.delete(
    "/{requirement_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND_RESPONSES,
    summary="Delete requirement",
)
async def delete_requirement(
    product_id: UUID, requirement_id: UUID, services: Services
) -> Response:
    """Delete a documentation requirement of a product."""
    unwrap(
        await services.documentation_requirements.delete(product_id, requirement_id)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ============================================================================
# Published Documentation
# ============================================================================


@documentation_router.get(
    "",
    response_model=PageResult[ProductDocumentationDTO],
    summary="List documentation",
)
async def list_documentation(
    product_id: UUID, services: Services, page: Page
) -> PageResult[ProductDocumentationDTO]:
    """List the documents published for a product."""
    return unwrap(await services.documentation.list(product_id, page))


@documentation_router.post(
    "",
    response_model=ProductDocumentationDTO,
    status_code=status.HTTP_201_CREATED,
    responses=WRITE_RESPONSES,
    summary="Create documentation",
)
async def create_documentation(
    product_id: UUID, dto: ProductDocumentationDTO, services: Services
) -> ProductDocumentationDTO:
    """Register a document for a product; `doc_type` is required."""
    return unwrap(await services.documentation.create(product_id, dto))


@documentation_router.get(
    "/{documentation_id}",
    response_model=ProductDocumentationDTO,
    responses=NOT_FOUND_RESPONSES,
    summary="Get documentation",
)
async def get_documentation(
    product_id: UUID, documentation_id: UUID, services: Services
) -> ProductDocumentationDTO:
    """Get a document of a product."""
    return unwrap(await services.documentation.get_by_id(product_id, documentation_id))


@documentation_router.put(
    "/{documentation_id}",
    response_model=ProductDocumentationDTO,
    responses=WRITE_RESPONSES,
    summary="Update documentation",
)
async def update_documentation(
    product_id: UUID,
    documentation_id: UUID,
    dto: ProductDocumentationDTO,
    services: Services,
) -> ProductDocumentationDTO:
    """Update a document of a product."""
    return unwrap(
        await services.documentation.update(product_id, documentation_id, dto)
    )


@documentation_router.delete(
    "/{documentation_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND_RESPONSES,
    summary="Delete documentation",
)
async def delete_documentation(
    product_id: UUID, documentation_id: UUID, services: Services
) -> Response:
    """Delete a document of a product."""
    unwrap(await services.documentation.delete(product_id, documentation_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
