"""Fee API endpoints.

Provides endpoints for:
- /products/{product_id}/fee-structures - fee structures assigned to a product
- /fee-structures/{fee_structure_id}/components - components of a fee structure
- /fee-structures/{fee_structure_id}/components/{component_id}/rules -
  application rules of a component

Rule routes first resolve the component under the fee structure, so a
component id used under another fee structure is reported as not found.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from product_catalog.api.dependencies import get_page_request, get_services, unwrap
from product_catalog.api.schemas import NOT_FOUND_RESPONSES, WRITE_RESPONSES
from product_catalog.application.container import CatalogServices
from product_catalog.application.dtos import (
    FeeApplicationRuleDTO,
    FeeComponentDTO,
    ProductFeeStructureDTO,
)
from product_catalog.catalog.pagination import PageRequest, PageResult

product_fee_structures_router = APIRouter(
    prefix="/products/{product_id}/fee-structures", tags=["Product Fees"]
)
fee_components_router = APIRouter(
    prefix="/fee-structures/{fee_structure_id}/components", tags=["Fees"]
)
fee_rules_router = APIRouter(
    prefix="/fee-structures/{fee_structure_id}/components/{component_id}/rules",
    tags=["Fees"],
)

Services = Annotated[CatalogServices, Depends(get_services)]
Page = Annotated[PageRequest, Depends(get_page_request)]


async def get_owned_component_id(
    fee_structure_id: UUID, component_id: UUID, services: Services
) -> UUID:
    """Resolve a component id that belongs to the fee structure in the path.

    Raises:
        HTTPException: 404 if the component is missing or belongs to another
            fee structure.
    """
    unwrap(await services.fee_components.get_by_id(fee_structure_id, component_id))
    return component_id


ComponentId = Annotated[UUID, Depends(get_owned_component_id)]


# ============================================================================
# Product Fee Structures
# ============================================================================


@product_fee_structures_router.get(
    "",
    response_model=PageResult[ProductFeeStructureDTO],
    summary="List product fee structures",
)
async def list_product_fee_structures(
    product_id: UUID, services: Services, page: Page
) -> PageResult[ProductFeeStructureDTO]:
    """List the fee structures assigned to a product."""
    return unwrap(await services.fee_structures.list(product_id, page))


@product_fee_structures_router.post(
    "",
    response_model=ProductFeeStructureDTO,
    status_code=status.HTTP_201_CREATED,
    responses=WRITE_RESPONSES,
    summary="Assign fee structure",
)
async def create_product_fee_structure(
    product_id: UUID, dto: ProductFeeStructureDTO, services: Services
) -> ProductFeeStructureDTO:
    """Assign a fee structure to a product; ``fee_structure_id`` is required."""
    return unwrap(await services.fee_structures.create(product_id, dto))


@product_fee_structures_router.get(
    "/{product_fee_structure_id}",
    response_model=ProductFeeStructureDTO,
    responses=NOT_FOUND_RESPONSES,
    summary="Get product fee structure",
)
async def get_product_fee_structure(
    product_id: UUID, product_fee_structure_id: UUID, services: Services
) -> ProductFeeStructureDTO:
    """Get a fee structure assignment of a product."""
    return unwrap(
        await services.fee_structures.get_by_id(product_id, product_fee_structure_id)
    )


@product_fee_structures_router.put(
    "/{product_fee_structure_id}",
    response_model=ProductFeeStructureDTO,
    responses=WRITE_RESPONSES,
    summary="Update product fee structure",
)
async def update_product_fee_structure(
    product_id: UUID,
    product_fee_structure_id: UUID,
    dto: ProductFeeStructureDTO,
    services: Services,
) -> ProductFeeStructureDTO:
    """Update the priority or fee structure of an assignment."""
    return unwrap(
        await services.fee_structures.update(product_id, product_fee_structure_id, dto)
    )


@product_fee_structures_router.delete(
    "/{product_fee_structure_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND_RESPONSES,
    summary="Remove product fee structure",
)
async def delete_product_fee_structure(
    product_id: UUID, product_fee_structure_id: UUID, services: Services
) -> Response:
    """Remove a fee structure assignment from a product."""
    unwrap(await services.fee_structures.delete(product_id, product_fee_structure_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ============================================================================
# Fee Components
# ============================================================================


@fee_components_router.get(
    "", response_model=PageResult[FeeComponentDTO], summary="List fee components"
)
async def list_fee_components(
    fee_structure_id: UUID, services: Services, page: Page
) -> PageResult[FeeComponentDTO]:
    """List the components of a fee structure."""
    return unwrap(await services.fee_components.list(fee_structure_id, page))


@fee_components_router.post(
    "",
    response_model=FeeComponentDTO,
    status_code=status.HTTP_201_CREATED,
    responses=WRITE_RESPONSES,
    summary="Create fee component",
)
async def create_fee_component(
    fee_structure_id: UUID, dto: FeeComponentDTO, services: Services
) -> FeeComponentDTO:
    """Create a component; ``component_name`` is required."""
    return unwrap(await services.fee_components.create(fee_structure_id, dto))


@fee_components_router.get(
    "/{component_id}",
    response_model=FeeComponentDTO,
    responses=NOT_FOUND_RESPONSES,
    summary="Get fee component",
)
async def get_fee_component(
    fee_structure_id: UUID, component_id: UUID, services: Services
) -> FeeComponentDTO:
    """Get a component of a fee structure."""
    return unwrap(await services.fee_components.get_by_id(fee_structure_id, component_id))


@fee_components_router.put(
    "/{component_id}",
    response_model=FeeComponentDTO,
    responses=WRITE_RESPONSES,
    summary="Update fee component",
)
async def update_fee_component(
    fee_structure_id: UUID,
    component_id: UUID,
    dto: FeeComponentDTO,
    services: Services,
) -> FeeComponentDTO:
    """Update a component of a fee structure."""
    return unwrap(
        await services.fee_components.update(fee_structure_id, component_id, dto)
    )


@fee_components_router.delete(
    "/{component_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND_RESPONSES,
    summary="Delete fee component",
)
async def delete_fee_component(
    fee_structure_id: UUID, component_id: UUID, services: Services
) -> Response:
    """Delete a component and its application rules."""
    unwrap(await services.fee_components.delete(fee_structure_id, component_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ============================================================================
# Fee Application Rules
# ============================================================================


@fee_rules_router.get(
    "",
    response_model=PageResult[FeeApplicationRuleDTO],
    responses=NOT_FOUND_RESPONSES,
    summary="List fee application rules",
)
async def list_fee_rules(
    component_id: ComponentId, services: Services, page: Page
) -> PageResult[FeeApplicationRuleDTO]:
    """List the application rules of a component."""
    return unwrap(await services.fee_rules.list(component_id, page))


@fee_rules_router.post(
    "",
    response_model=FeeApplicationRuleDTO,
    status_code=status.HTTP_201_CREATED,
    responses=WRITE_RESPONSES,
    summary="Create fee application rule",
)
async def create_fee_rule(
    component_id: ComponentId, dto: FeeApplicationRuleDTO, services: Services
) -> FeeApplicationRuleDTO:
    """Create a rule; ``rule_condition`` is required."""
    return unwrap(await services.fee_rules.create(component_id, dto))


@fee_rules_router.get(
    "/{rule_id}",
    response_model=FeeApplicationRuleDTO,
    responses=NOT_FOUND_RESPONSES,
    summary="Get fee application rule",
)
async def get_fee_rule(
    component_id: ComponentId, rule_id: UUID, services: Services
) -> FeeApplicationRuleDTO:
    """Get an application rule of a component."""
    return unwrap(await services.fee_rules.get_by_id(component_id, rule_id))


@fee_rules_router.put(
    "/{rule_id}",
    response_model=FeeApplicationRuleDTO,
    responses=WRITE_RESPONSES,
    summary="Update fee application rule",
)
async def update_fee_rule(
    component_id: ComponentId,
    rule_id: UUID,
    dto: FeeApplicationRuleDTO,
    services: Services,
) -> FeeApplicationRuleDTO:
    """Update an application rule of a component."""
    return unwrap(await services.fee_rules.update(component_id, rule_id, dto))


@fee_rules_router.delete(
    "/{rule_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND_RESPONSES,
    summary="Delete fee application rule",
)
async def delete_fee_rule(
    component_id: ComponentId, rule_id: UUID, services: Services
) -> Response:
    """Delete an application rule of a component."""
    unwrap(await services.fee_rules.delete(component_id, rule_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
