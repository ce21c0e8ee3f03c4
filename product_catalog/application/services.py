"""Entity-specific catalog services.

Adds the product-scoped lookups that go beyond plain CRUD: configuration
entries by key or type, documentation requirements by type or mandatory
flag.
"""

from uuid import UUID

from product_catalog.application.crud_service import ScopedCrudService
from product_catalog.application.dtos import (
    ProductConfigurationDTO,
    ProductDocumentationRequirementDTO,
)
from product_catalog.catalog.models import (
    ProductConfiguration,
    ProductDocumentationRequirement,
)
from product_catalog.domain.enums import ConfigType, ContractingDocType
from product_catalog.domain.exceptions import EntityNotFoundError
from product_catalog.domain.results import ServiceResult


class ConfigurationService(
    ScopedCrudService[ProductConfiguration, ProductConfigurationDTO]
):
    """Product configuration entries."""

    async def get_by_key(
        self, product_id: UUID, config_key: str
    ) -> ServiceResult[ProductConfigurationDTO]:
        """Get the configuration entry of a product with the given key.

        Args:
            product_id: Owning product.
            config_key: Configuration key.

        Returns:
            Result with the entry, or NOT_FOUND when the product has no
            entry with that key.
        """

        async def action() -> ProductConfigurationDTO:
            entity = await self.repository.find_one_by(
                product_id=product_id, config_key=config_key
            )
            if entity is None:
                raise EntityNotFoundError(self.entity_name, config_key, product_id)
            return self.mapper.to_dto(entity)

        return await self._run(
            "get", action, parent_id=str(product_id), config_key=config_key
        )

    async def list_by_type(
        self, product_id: UUID, config_type: ConfigType
    ) -> ServiceResult[list[ProductConfigurationDTO]]:
        """List the configuration entries of a product with the given type."""

        async def action() -> list[ProductConfigurationDTO]:
            entities = await self.repository.find_by(
                product_id=product_id, config_type=config_type
            )
            return [self.mapper.to_dto(entity) for entity in entities]

        return await self._run(
            "list", action, parent_id=str(product_id), config_type=config_type.value
        )


class DocumentationRequirementService(
    ScopedCrudService[ProductDocumentationRequirement, ProductDocumentationRequirementDTO]
):
    """Documents a customer must supply to contract a product."""

    async def get_by_type(
        self, product_id: UUID, doc_type: ContractingDocType
    ) -> ServiceResult[ProductDocumentationRequirementDTO]:
        """Get the requirement of a product for one document type.

        Args:
            product_id: Owning product.
            doc_type: Contracting document type.

        Returns:
            Result with the first matching requirement, or NOT_FOUND.
        """

        async def action() -> ProductDocumentationRequirementDTO:
            entity = await self.repository.find_one_by(
                product_id=product_id, doc_type=doc_type
            )
            if entity is None:
                raise EntityNotFoundError(self.entity_name, doc_type.value, product_id)
            return self.mapper.to_dto(entity)

        return await self._run(
            "get", action, parent_id=str(product_id), doc_type=doc_type.value
        )

    async def list_mandatory(
        self, product_id: UUID
    ) -> ServiceResult[list[ProductDocumentationRequirementDTO]]:
        """List the mandatory documentation requirements of a product."""

        async def action() -> list[ProductDocumentationRequirementDTO]:
            entities = await self.repository.find_by(
                product_id=product_id, is_mandatory=True
            )
            return [self.mapper.to_dto(entity) for entity in entities]

        return await self._run("list", action, parent_id=str(product_id))
