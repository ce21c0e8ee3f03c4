"""Tests for configuration and documentation requirement lookups."""

from uuid import uuid4

import pytest

from product_catalog.application.dtos import (
    ProductBundleDTO,
    ProductConfigurationDTO,
    ProductDocumentationRequirementDTO,
    ProductVersionDTO,
)
from product_catalog.catalog.pagination import PageRequest
from product_catalog.domain.enums import ConfigType, ContractingDocType
from product_catalog.domain.results import ErrorKind


class TestConfigurationService:
    """Tests for configuration lookups."""

    @pytest.mark.asyncio
    async def test_get_by_key(self, services, product):
        """Test lookup of a configuration entry by key."""
        await services.configurations.create(
            product.product_id,
            ProductConfigurationDTO(
                config_type=ConfigType.LIMITS, config_key="daily_limit", config_value="500"
            ),
        )

        result = await services.configurations.get_by_key(product.product_id, "daily_limit")

        assert result.success is True
        assert result.value.config_value == "500"

    @pytest.mark.asyncio
    async def test_get_by_key_is_scoped_to_product(self, services, product, other_product):
        """Test a key of another product is not found."""
        await services.configurations.create(
            product.product_id, ProductConfigurationDTO(config_key="daily_limit")
        )

        result = await services.configurations.get_by_key(
            other_product.product_id, "daily_limit"
        )

        assert result.error_kind == ErrorKind.NOT_FOUND

    @pytest.mark.asyncio
    async def test_list_by_type(self, services, product, other_product):
        """Test filtering configuration entries by type."""
        for key, config_type in (
            ("monthly_fee", ConfigType.FEES),
            ("wire_fee", ConfigType.FEES),
            ("daily_limit", ConfigType.LIMITS),
        ):
            await services.configurations.create(
                product.product_id,
                ProductConfigurationDTO(config_key=key, config_type=config_type),
            )
        await services.configurations.create(
            other_product.product_id,
            ProductConfigurationDTO(config_key="atm_fee", config_type=ConfigType.FEES),
        )

        result = await services.configurations.list_by_type(
            product.product_id, ConfigType.FEES
        )

        assert result.success is True
        assert sorted(c.config_key for c in result.value) == ["monthly_fee", "wire_fee"]

    @pytest.mark.asyncio
    async def test_create_requires_key(self, services, product):
        """Test config key is required on create."""
        result = await services.configurations.create(
            product.product_id, ProductConfigurationDTO(config_value="x")
        )

        assert result.error_kind == ErrorKind.VALIDATION_ERROR


class TestDocumentationRequirementService:
    """Tests for documentation requirement lookups."""

    @pytest.mark.asyncio
    async def test_get_by_type(self, services, product):
        """Test lookup of a requirement by document type."""
        await services.documentation_requirements.create(
            product.product_id,
            ProductDocumentationRequirementDTO(
                doc_type=ContractingDocType.PROOF_OF_ADDRESS, description="Utility bill"
            ),
        )

        found = await services.documentation_requirements.get_by_type(
            product.product_id, ContractingDocType.PROOF_OF_ADDRESS
        )
        missing = await services.documentation_requirements.get_by_type(
            product.product_id, ContractingDocType.CREDIT_REPORT
        )

        assert found.value.description == "Utility bill"
        assert missing.error_kind == ErrorKind.NOT_FOUND

    @pytest.mark.asyncio
    async def test_is_mandatory_defaults_to_true(self, services, product):
        """Test a requirement is mandatory unless stated otherwise."""
        result = await services.documentation_requirements.create(
            product.product_id,
            ProductDocumentationRequirementDTO(doc_type=ContractingDocType.IDENTIFICATION),
        )

        assert result.value.is_mandatory is True

    @pytest.mark.asyncio
    async def test_list_mandatory(self, services, product):
        """Test only mandatory requirements are listed."""
        await services.documentation_requirements.create(
            product.product_id,
            ProductDocumentationRequirementDTO(doc_type=ContractingDocType.IDENTIFICATION),
        )
        await services.documentation_requirements.create(
            product.product_id,
            ProductDocumentationRequirementDTO(
                doc_type=ContractingDocType.BANK_STATEMENTS, is_mandatory=False
            ),
        )

        result = await services.documentation_requirements.list_mandatory(
            product.product_id
        )

        assert [r.doc_type for r in result.value] == [ContractingDocType.IDENTIFICATION]


class TestOtherServices:
    """Spot checks of the remaining catalog services."""

    @pytest.mark.asyncio
    async def test_version_number_required(self, services, product):
        """Test version number is required on create."""
        result = await services.versions.create(
            product.product_id, ProductVersionDTO(version_description="Initial")
        )

        assert result.error_kind == ErrorKind.VALIDATION_ERROR

    @pytest.mark.asyncio
    async def test_bundle_crud(self, services):
        """Test bundle create, update, list and delete."""
        created = await services.bundles.create(ProductBundleDTO(bundle_name="Family"))
        bundle_id = created.value.product_bundle_id

        updated = await services.bundles.update(
            bundle_id, ProductBundleDTO(bundle_description="Two accounts")
        )
        listed = await services.bundles.list(PageRequest(0, 10))
        deleted = await services.bundles.delete(bundle_id)

        assert updated.value.bundle_name == "Family"
        assert updated.value.bundle_description == "Two accounts"
        assert listed.value.total_elements == 1
        assert deleted.success is True
        assert (await services.bundles.get_by_id(bundle_id)).error_kind == ErrorKind.NOT_FOUND

    @pytest.mark.asyncio
    async def test_store_failure_is_unexpected(self, services, engine):
        """Test a store failure becomes UNEXPECTED with the cause attached."""
        async with engine.begin() as conn:
            await conn.exec_driver_sql("DROP TABLE product_bundle")

        result = await services.bundles.get_by_id(uuid4())

        assert result.success is False
        assert result.error_kind == ErrorKind.UNEXPECTED
        assert result.cause is not None
