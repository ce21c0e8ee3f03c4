"""Pagination engine.

Builds a page of DTOs from a row fetcher and a count fetcher that the
caller has already scoped, for example to one parent id.
"""

import asyncio
import math
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from product_catalog.domain.enums import SortDirection

E = TypeVar("E")
T = TypeVar("T")


@dataclass(frozen=True)
class PageRequest:
    """One page of a result set.

    Attributes:
        page_number: Page index (0-based).
        page_size: Items per page.
        sort_by: Optional field to sort by.
        sort_direction: Sort direction.
    """

    page_number: int = 0
    page_size: int = 10
    sort_by: str | None = None
    sort_direction: SortDirection = SortDirection.ASC

    def __post_init__(self) -> None:
        if self.page_number < 0:
            raise ValueError(f"page_number must be >= 0, got {self.page_number}")
        if self.page_size <= 0:
            raise ValueError(f"page_size must be > 0, got {self.page_size}")

    @property
    def offset(self) -> int:
        """Calculate offset from page number."""
        return self.page_number * self.page_size

    @property
    def limit(self) -> int:
        """Get limit (alias for page_size)."""
        return self.page_size


class PageResult(BaseModel, Generic[T]):
    """Paginated result container."""

    content: list[T] = Field(default_factory=list, description="Items on this page")
    total_elements: int = Field(..., description="Total number of matching items")
    total_pages: int = Field(..., description="Total number of pages")
    current_page: int = Field(..., description="Current page index (0-based)")
    page_size: int = Field(..., description="Items per page")
    first: bool = Field(..., description="Whether this is the first page")
    last: bool = Field(..., description="Whether this is the last page")


RowFetcher = Callable[[PageRequest], Awaitable[Sequence[E]]]
CountFetcher = Callable[[], Awaitable[int]]


async def paginate(
    request: PageRequest,
    row_fetcher: RowFetcher[E],
    count_fetcher: CountFetcher,
    mapper: Callable[[E], T],
) -> PageResult[T]:
    """Fetch one page and the total count concurrently.

    Args:
        request: Page to fetch.
        row_fetcher: Returns the entities of the requested page.
        count_fetcher: Returns the total number of matching entities.
        mapper: Converts each entity to its output type.

    Returns:
        Page result with mapped content in fetch order.

    Raises:
        Exception: The first error either fetcher raised. The other fetcher
            is cancelled and no partial page is built.
    """
    try:
        async with asyncio.TaskGroup() as group:
            rows_task = group.create_task(row_fetcher(request))
            total_task = group.create_task(count_fetcher())
    except ExceptionGroup as eg:
        raise eg.exceptions[0]

    rows, total = rows_task.result(), total_task.result()

    total_pages = math.ceil(total / request.page_size) if total else 0

    return PageResult(
        content=[mapper(row) for row in rows],
        total_elements=total,
        total_pages=total_pages,
        current_page=request.page_number,
        page_size=request.page_size,
        first=request.page_number == 0,
        last=request.page_number + 1 >= total_pages,
    )
