"""Catalog repository for database operations.

One generic repository serves every catalog table. Each call runs in its
own short-lived session, so independent reads (a page and its count) can
run concurrently and every write commits on its own.
"""

from collections.abc import Sequence
from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from product_catalog.catalog.models import CatalogModel
from product_catalog.catalog.pagination import PageRequest
from product_catalog.domain.enums import SortDirection
from product_catalog.domain.exceptions import IntegrityViolationError, StoreError
from product_catalog.infrastructure.database import session_scope

M = TypeVar("M", bound=CatalogModel)


class CatalogRepository(Generic[M]):
    """Repository for one catalog model.

    Absence is reported as ``None`` or an empty sequence, never as an
    error. Driver and ORM failures are raised as StoreError.

    Example usage:
        repo = CatalogRepository(session_factory, ProductFeature)
        features = await repo.find_by_parent_id(product_id, PageRequest(0, 20))
        total = await repo.count_by_parent_id(product_id)
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        model: type[M],
    ) -> None:
        """Initialize repository.

        Args:
            session_factory: Factory for async SQLAlchemy sessions.
            model: Model class this repository stores.
        """
        self.session_factory = session_factory
        self.model = model
        self.entity_name = model.__name__

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def find_by_id(self, entity_id: UUID) -> M | None:
        """Get entity by ID.

        Args:
            entity_id: Identity column value.

        Returns:
            Entity if found, None otherwise.
        """
        try:
            async with self.session_factory() as session:
                return await session.get(self.model, entity_id)
        except SQLAlchemyError as e:
            raise StoreError("find", self.entity_name, e) from e

    async def find_all(self, page: PageRequest) -> Sequence[M]:
        """Get one page of all entities."""
        return await self._fetch_page(select(self.model), page)

    async def count(self) -> int:
        """Count all entities."""
        return await self._count()

    async def find_by_parent_id(self, parent_id: UUID, page: PageRequest) -> Sequence[M]:
        """Get one page of the entities owned by a parent.

        Args:
            parent_id: Parent foreign key value.
            page: Page to fetch.

        Returns:
            Entities of the requested page, possibly empty.
        """
        query = select(self.model).where(self._parent_column() == parent_id)
        return await self._fetch_page(query, page)

    async def count_by_parent_id(self, parent_id: UUID) -> int:
        """Count the entities owned by a parent."""
        return await self._count(self._parent_column() == parent_id)

    async def find_by(self, **filters: Any) -> Sequence[M]:
        """Get all entities whose columns equal the given values.

        Args:
            **filters: Column name to value.

        Returns:
            Matching entities in default order.
        """
        query = select(self.model).filter_by(**filters)
        query = query.order_by(*self._default_order())
        try:
            async with self.session_factory() as session:
                result = await session.execute(query)
                return result.scalars().all()
        except SQLAlchemyError as e:
            raise StoreError("find", self.entity_name, e) from e

    async def find_one_by(self, **filters: Any) -> M | None:
        """Get the first entity whose columns equal the given values."""
        query = select(self.model).filter_by(**filters)
        query = query.order_by(*self._default_order()).limit(1)
        try:
            async with self.session_factory() as session:
                result = await session.execute(query)
                return result.scalars().first()
        except SQLAlchemyError as e:
            raise StoreError("find", self.entity_name, e) from e

    async def exists_by(self, **filters: Any) -> bool:
        """Check whether any entity matches the given column values."""
        query = select(self.model).filter_by(**filters).exists()
        try:
            async with self.session_factory() as session:
                result = await session.execute(select(query))
                return bool(result.scalar())
        except SQLAlchemyError as e:
            raise StoreError("exists", self.entity_name, e) from e

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def save(self, entity: M) -> M:
        """Insert a new entity or update a detached one.

        Args:
            entity: Entity to save.

        Returns:
            Saved entity with store-assigned values loaded.

        Raises:
            IntegrityViolationError: If a table constraint rejects the row.
            StoreError: On any other store failure.
        """
        try:
            async with session_scope(self.session_factory) as session:
                session.add(entity)
                await session.flush()
                await session.refresh(entity)
            return entity
        except IntegrityError as e:
            raise IntegrityViolationError("save", self.entity_name, e) from e
        except SQLAlchemyError as e:
            raise StoreError("save", self.entity_name, e) from e

    async def delete(self, entity: M) -> None:
        """Delete exactly the given entity.

        Args:
            entity: Previously loaded entity.
        """
        try:
            async with session_scope(self.session_factory) as session:
                await session.delete(entity)
        except IntegrityError as e:
            raise IntegrityViolationError("delete", self.entity_name, e) from e
        except SQLAlchemyError as e:
            raise StoreError("delete", self.entity_name, e) from e

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    async def _fetch_page(self, query: Select, page: PageRequest) -> Sequence[M]:
        query = query.order_by(*self._order_for(page)).limit(page.limit).offset(page.offset)
        try:
            async with self.session_factory() as session:
                result = await session.execute(query)
                return result.scalars().all()
        except SQLAlchemyError as e:
            raise StoreError("list", self.entity_name, e) from e

    async def _count(self, *conditions: Any) -> int:
        query = select(func.count()).select_from(self.model)
        if conditions:
            query = query.where(*conditions)
        try:
            async with self.session_factory() as session:
                result = await session.execute(query)
                return result.scalar_one()
        except SQLAlchemyError as e:
            raise StoreError("count", self.entity_name, e) from e

    def _parent_column(self) -> Any:
        if self.model.PARENT_FIELD is None:
            raise TypeError(f"{self.entity_name} has no parent key")
        return getattr(self.model, self.model.PARENT_FIELD)

    def _default_order(self) -> list[Any]:
        return [self.model.date_created.asc(), getattr(self.model, self.model.ID_FIELD).asc()]

    def _order_for(self, page: PageRequest) -> list[Any]:
        """Get ORDER BY clauses for a page.

        Unknown sort fields fall back to the default order. The identity
        column is always the final tie-breaker so pages never overlap.
        """
        column = self._sort_column(page.sort_by)
        if column is None:
            return self._default_order()

        identity = getattr(self.model, self.model.ID_FIELD)
        if page.sort_direction == SortDirection.DESC:
            return [column.desc(), identity.asc()]
        return [column.asc(), identity.asc()]

    def _sort_column(self, sort_by: str | None) -> Any:
        if not sort_by:
            return None
        if sort_by not in self.model.__table__.columns:
            return None
        return getattr(self.model, sort_by)
