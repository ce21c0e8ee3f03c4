"""Generic catalog CRUD services.

Two services cover every catalog resource:

- CrudService: top-level records addressed by their own id (products,
  bundles, categories).
- ScopedCrudService: records owned by a parent. Every read, update and
  delete first checks that the stored record belongs to the parent id
  from the request path.

Operations never raise; they return a ServiceResult whose ``error_kind``
is NOT_FOUND, CONFLICT, VALIDATION_ERROR or UNEXPECTED.
"""

from collections.abc import Awaitable, Callable, Iterable
from typing import Any, Generic, TypeVar
from uuid import UUID

import structlog
from pydantic import BaseModel

from product_catalog.catalog.mappers import EntityMapper
from product_catalog.catalog.models import CatalogModel
from product_catalog.catalog.pagination import PageRequest, PageResult, paginate
from product_catalog.catalog.repository import CatalogRepository
from product_catalog.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    IntegrityViolationError,
    MissingFieldError,
)
from product_catalog.domain.results import ErrorKind, ServiceResult

logger = structlog.get_logger()

M = TypeVar("M", bound=CatalogModel)
D = TypeVar("D", bound=BaseModel)
R = TypeVar("R")


class _CatalogService(Generic[M, D]):
    """Shared plumbing for the catalog services."""

    def __init__(
        self,
        repository: CatalogRepository[M],
        mapper: EntityMapper[M, D],
        required_fields: Iterable[str] = (),
        unique_field: str | None = None,
    ) -> None:
        """Initialize service.

        Args:
            repository: Store for the entity.
            mapper: Entity/DTO mapper.
            required_fields: DTO fields that must be present on create.
            unique_field: Field whose value must be unique across the table.
        """
        self.repository = repository
        self.mapper = mapper
        self.required_fields = tuple(required_fields)
        self.unique_field = unique_field
        self.entity_name = repository.entity_name

    def _check_required(self, dto: D) -> None:
        for field in self.required_fields:
            if getattr(dto, field, None) is None:
                raise MissingFieldError(self.entity_name, field)

    async def _check_unique(self, dto: D) -> None:
        """Check for an existing row with the same unique value.

        The unique index still decides under concurrent creates; this check
        only gives the common case a clean error.
        """
        if self.unique_field is None:
            return
        value = getattr(dto, self.unique_field, None)
        if value is None:
            return
        if await self.repository.exists_by(**{self.unique_field: value}):
            raise DuplicateEntityError(self.entity_name, self.unique_field, value)

    async def _save(self, entity: M) -> M:
        # Read before saving: a rolled-back save expires the detached entity
        value = getattr(entity, self.unique_field) if self.unique_field else None
        try:
            return await self.repository.save(entity)
        except IntegrityViolationError as e:
            if self.unique_field is None:
                raise
            raise DuplicateEntityError(self.entity_name, self.unique_field, value) from e

    async def _run(
        self,
        operation: str,
        action: Callable[[], Awaitable[R]],
        **context: Any,
    ) -> ServiceResult[R]:
        """Run an operation and turn its outcome into a ServiceResult.

        Args:
            operation: Operation name used in messages and logs.
            action: Coroutine factory performing the operation.
            **context: Identifiers bound to the log records.

        Returns:
            Successful result with the action's value, or a classified failure.
        """
        try:
            value = await action()
        except Exception as e:
            result: ServiceResult[R] = ServiceResult.from_exception(
                e, f"Failed to {operation} {self.entity_name}"
            )
            if result.error_kind == ErrorKind.UNEXPECTED:
                logger.error(
                    "Catalog operation failed",
                    operation=operation,
                    entity_type=self.entity_name,
                    error=str(e),
                    exc_info=e,
                    **context,
                )
            else:
                logger.info(
                    "Catalog operation rejected",
                    operation=operation,
                    entity_type=self.entity_name,
                    error_kind=result.error_kind.value if result.error_kind else None,
                    error=result.error,
                    **context,
                )
            return result

        logger.debug(
            "Catalog operation completed",
            operation=operation,
            entity_type=self.entity_name,
            **context,
        )
        return ServiceResult.ok(value)


# ============================================================================
# Top-level CRUD
# ============================================================================


class CrudService(_CatalogService[M, D]):
    """CRUD for records that have no owning parent."""

    async def list(self, page: PageRequest) -> ServiceResult[PageResult[D]]:
        """List one page of records."""

        async def action() -> PageResult[D]:
            return await paginate(
                page,
                self.repository.find_all,
                self.repository.count,
                self.mapper.to_dto,
            )

        return await self._run("list", action, page_number=page.page_number)

    async def create(self, dto: D) -> ServiceResult[D]:
        """Validate and persist a new record.

        Args:
            dto: Incoming DTO. Identity and audit fields are ignored.

        Returns:
            Result with the saved DTO, or VALIDATION_ERROR when a required
            field is missing, or CONFLICT when a unique value is taken.
        """

        async def action() -> D:
            self._check_required(dto)
            await self._check_unique(dto)
            saved = await self._save(self.mapper.to_entity(dto))
            logger.info(
                "Catalog record created",
                entity_type=self.entity_name,
                entity_id=str(saved.identity),
            )
            return self.mapper.to_dto(saved)

        return await self._run("create", action)

    async def get_by_id(self, entity_id: UUID) -> ServiceResult[D]:
        """Get a record by id."""

        async def action() -> D:
            return self.mapper.to_dto(await self._get(entity_id))

        return await self._run("get", action, entity_id=str(entity_id))

    async def update(self, entity_id: UUID, dto: D) -> ServiceResult[D]:
        """Merge the non-null fields of a DTO into a stored record."""

        async def action() -> D:
            existing = await self._get(entity_id)
            self.mapper.merge_into_entity(dto, existing)
            saved = await self._save(existing)
            logger.info(
                "Catalog record updated",
                entity_type=self.entity_name,
                entity_id=str(entity_id),
            )
            return self.mapper.to_dto(saved)

        return await self._run("update", action, entity_id=str(entity_id))

    async def delete(self, entity_id: UUID) -> ServiceResult[None]:
        """Delete a record by id."""

        async def action() -> None:
            existing = await self._get(entity_id)
            await self.repository.delete(existing)
            logger.info(
                "Catalog record deleted",
                entity_type=self.entity_name,
                entity_id=str(entity_id),
            )

        return await self._run("delete", action, entity_id=str(entity_id))

    async def _get(self, entity_id: UUID) -> M:
        entity = await self.repository.find_by_id(entity_id)
        if entity is None:
            raise EntityNotFoundError(self.entity_name, entity_id)
        return entity


# ============================================================================
# Ownership-scoped CRUD
# ============================================================================


class ScopedCrudService(_CatalogService[M, D]):
    """CRUD for records owned by a parent.

    The parent id always comes from the caller (the request path) and wins
    over any parent id carried in a DTO. A record owned by another parent
    is reported exactly like a missing one.

    Example usage:
        service = ScopedCrudService(
            CatalogRepository(session_factory, ProductFeature),
            EntityMapper(ProductFeature, ProductFeatureDTO),
        )
        result = await service.get_by_id(product_id, feature_id)
        if result.error_kind == ErrorKind.NOT_FOUND:
            ...
    """

    def __init__(
        self,
        repository: CatalogRepository[M],
        mapper: EntityMapper[M, D],
        required_fields: Iterable[str] = (),
        unique_field: str | None = None,
        parent_key: Callable[[M], Any] | None = None,
    ) -> None:
        """Initialize service.

        Args:
            repository: Store for the entity.
            mapper: Entity/DTO mapper.
            required_fields: DTO fields that must be present on create.
            unique_field: Field whose value must be unique across the table.
            parent_key: Reads the parent id of a stored entity. Defaults to
                the model's parent foreign key column.
        """
        super().__init__(repository, mapper, required_fields, unique_field)
        parent_field = repository.model.PARENT_FIELD
        if parent_field is None:
            raise TypeError(f"{self.entity_name} is not owned by a parent")
        self.parent_field = parent_field
        self.parent_key = parent_key or (lambda entity: entity.parent_identity)

    async def list(self, parent_id: UUID, page: PageRequest) -> ServiceResult[PageResult[D]]:
        """List one page of the records owned by a parent.

        A parent with no records, or a page past the end, yields an empty
        page rather than an error.
        """

        async def rows(request: PageRequest) -> Any:
            return await self.repository.find_by_parent_id(parent_id, request)

        async def total() -> int:
            return await self.repository.count_by_parent_id(parent_id)

        async def action() -> PageResult[D]:
            return await paginate(page, rows, total, self.mapper.to_dto)

        return await self._run(
            "list", action, parent_id=str(parent_id), page_number=page.page_number
        )

    async def create(self, parent_id: UUID, dto: D) -> ServiceResult[D]:
        """Create a record under a parent.

        Args:
            parent_id: Owning parent id from the request path.
            dto: Incoming DTO. Its parent id, identity and audit fields are
                ignored.

        Returns:
            Result with the saved DTO.
        """

        async def action() -> D:
            scoped = dto.model_copy(update={self.parent_field: parent_id})
            self._check_required(scoped)
            await self._check_unique(scoped)
            saved = await self._save(self.mapper.to_entity(scoped))
            logger.info(
                "Catalog record created",
                entity_type=self.entity_name,
                entity_id=str(saved.identity),
                parent_id=str(parent_id),
            )
            return self.mapper.to_dto(saved)

        return await self._run("create", action, parent_id=str(parent_id))

    async def get_by_id(self, parent_id: UUID, entity_id: UUID) -> ServiceResult[D]:
        """Get a record owned by a parent."""

        async def action() -> D:
            return self.mapper.to_dto(await self._get_owned(parent_id, entity_id))

        return await self._run(
            "get", action, parent_id=str(parent_id), entity_id=str(entity_id)
        )

    async def update(self, parent_id: UUID, entity_id: UUID, dto: D) -> ServiceResult[D]:
        """Merge a DTO into a record owned by a parent.

        Identity, parent key and creation timestamp keep their stored values
        whatever the DTO carries.
        """

        async def action() -> D:
            existing = await self._get_owned(parent_id, entity_id)
            self.mapper.merge_into_entity(dto, existing)
            saved = await self._save(existing)
            logger.info(
                "Catalog record updated",
                entity_type=self.entity_name,
                entity_id=str(entity_id),
                parent_id=str(parent_id),
            )
            return self.mapper.to_dto(saved)

        return await self._run(
            "update", action, parent_id=str(parent_id), entity_id=str(entity_id)
        )

    async def delete(self, parent_id: UUID, entity_id: UUID) -> ServiceResult[None]:
        """Delete a record owned by a parent.

        The verified entity itself is deleted, never a bare id.
        """

        async def action() -> None:
            existing = await self._get_owned(parent_id, entity_id)
            await self.repository.delete(existing)
            logger.info(
                "Catalog record deleted",
                entity_type=self.entity_name,
                entity_id=str(entity_id),
                parent_id=str(parent_id),
            )

        return await self._run(
            "delete", action, parent_id=str(parent_id), entity_id=str(entity_id)
        )

    async def _get_owned(self, parent_id: UUID, entity_id: UUID) -> M:
        entity = await self.repository.find_by_id(entity_id)
        if entity is None or self.parent_key(entity) != parent_id:
            raise EntityNotFoundError(self.entity_name, entity_id, parent_id)
        return entity
