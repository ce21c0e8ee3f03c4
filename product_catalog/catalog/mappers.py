"""Entity to DTO mapping.

One generic mapper per entity type converts between SQLAlchemy models and
pydantic DTOs and merges partial updates into stored entities.
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from sqlalchemy import inspect

from product_catalog.catalog.models import CatalogModel

M = TypeVar("M", bound=CatalogModel)
D = TypeVar("D", bound=BaseModel)

AUDIT_FIELDS = frozenset({"date_created", "date_updated"})


class EntityMapper(Generic[M, D]):
    """Bidirectional mapper between a model class and a DTO class.

    Only attributes that exist on both sides are copied. The identity
    column, the parent foreign key and the audit timestamps are never taken
    from a DTO when merging into a stored entity.

    Example usage:
        mapper = EntityMapper(ProductFeature, ProductFeatureDTO)
        dto = mapper.to_dto(feature)
        mapper.merge_into_entity(ProductFeatureDTO(feature_description="x"), feature)
    """

    def __init__(self, model_cls: type[M], dto_cls: type[D]) -> None:
        """Initialize mapper.

        Args:
            model_cls: SQLAlchemy model class.
            dto_cls: Pydantic DTO class.
        """
        self.model_cls = model_cls
        self.dto_cls = dto_cls

        columns = {attr.key for attr in inspect(model_cls).column_attrs}
        self._shared_fields = frozenset(columns & set(dto_cls.model_fields))

        immutable = {model_cls.ID_FIELD, *AUDIT_FIELDS}
        if model_cls.PARENT_FIELD is not None:
            immutable.add(model_cls.PARENT_FIELD)
        self.immutable_fields = frozenset(immutable)

    def to_dto(self, entity: M) -> D:
        """Convert an entity to its DTO."""
        return self.dto_cls.model_validate(entity)

    def to_entity(self, dto: D) -> M:
        """Build a new, unsaved entity from a DTO.

        The identity and audit fields are left for the store to assign. The
        parent key is copied, so callers set it on the DTO beforehand.
        """
        values = self._values(dto, exclude={self.model_cls.ID_FIELD, *AUDIT_FIELDS})
        return self.model_cls(**values)

    def merge_into_entity(self, dto: D, entity: M) -> M:
        """Copy the non-null mutable fields of a DTO onto an entity.

        Args:
            dto: Incoming DTO, possibly partial.
            entity: Stored entity to update in place.

        Returns:
            The same entity instance.
        """
        for field, value in self._values(dto, exclude=self.immutable_fields).items():
            setattr(entity, field, value)
        return entity

    def _values(self, dto: D, exclude: frozenset[str] | set[str]) -> dict[str, Any]:
        data = dto.model_dump(exclude_none=True)
        return {
            key: value
            for key, value in data.items()
            if key in self._shared_fields and key not in exclude
        }
