"""Shared API dependencies.

Resolves the catalog services and settings stored on the application,
parses paging query parameters, and turns service results into responses
or HTTP errors.
"""

from typing import TypeVar

from fastapi import HTTPException, Query, Request

from product_catalog.application.container import CatalogServices
from product_catalog.catalog.pagination import PageRequest
from product_catalog.domain.enums import SortDirection
from product_catalog.domain.exceptions import DomainError
from product_catalog.domain.results import ErrorKind, ServiceResult
from product_catalog.infrastructure.config import Settings

T = TypeVar("T")

STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
    ErrorKind.VALIDATION_ERROR: 422,
    ErrorKind.UNEXPECTED: 500,
}


def get_services(request: Request) -> CatalogServices:
    """Get the catalog services of the running application."""
    return request.app.state.services


def get_settings(request: Request) -> Settings:
    """Get the settings of the running application."""
    return request.app.state.settings


def get_page_request(
    request: Request,
    page_number: int = Query(default=0, ge=0, description="Page index (0-based)"),
    page_size: int | None = Query(default=None, ge=1, description="Items per page"),
    sort_by: str | None = Query(default=None, description="Field to sort by"),
    sort_direction: SortDirection = Query(
        default=SortDirection.ASC, description="Sort direction"
    ),
) -> PageRequest:
    """Build a page request from query parameters.

    A missing page size uses the configured default; sizes above the
    configured maximum are clamped to it.
    """
    settings = get_settings(request)
    size = min(page_size or settings.default_page_size, settings.max_page_size)
    return PageRequest(
        page_number=page_number,
        page_size=size,
        sort_by=sort_by,
        sort_direction=sort_direction,
    )


def unwrap(result: ServiceResult[T]) -> T:
    """Return the value of a successful result.

    Args:
        result: Service result.

    Returns:
        The result value.

    Raises:
        HTTPException: If the result failed, with the status code of its kind.
    """
    if result.success:
        return result.value  # type: ignore[return-value]

    kind = result.error_kind or ErrorKind.UNEXPECTED
    details = []
    # Missing and duplicate field errors name the offending field
    if isinstance(result.cause, DomainError) and kind != ErrorKind.UNEXPECTED:
        field = result.cause.details.get("field")
        if field:
            details.append({"field": field, "message": result.cause.message})

    raise HTTPException(
        status_code=STATUS_BY_KIND[kind],
        detail={
            "error_code": kind.value,
            "message": result.error or "Request failed",
            "details": details,
        },
    )
