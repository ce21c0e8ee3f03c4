"""Tests for the generic catalog repository."""

from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from product_catalog.catalog.models import (
    Product,
    ProductCategory,
    ProductLocalization,
    ProductSubtype,
)
from product_catalog.catalog.pagination import PageRequest
from product_catalog.catalog.repository import CatalogRepository
from product_catalog.domain.enums import SortDirection
from product_catalog.domain.exceptions import IntegrityViolationError


@pytest.fixture
def product_repo(session_factory: async_sessionmaker[AsyncSession]):
    """Repository for products."""
    return CatalogRepository(session_factory, Product)


@pytest.fixture
def localization_repo(session_factory: async_sessionmaker[AsyncSession]):
    """Repository for product localizations."""
    return CatalogRepository(session_factory, ProductLocalization)


async def seed_product(repo: CatalogRepository[Product], name: str = "Checking") -> Product:
    """Insert a product."""
    return await repo.save(Product(tenant_id=uuid4(), product_name=name))


class TestReads:
    """Tests for repository reads."""

    @pytest.mark.asyncio
    async def test_find_by_id_missing_returns_none(self, product_repo):
        """Test absence is None, not an error."""
        assert await product_repo.find_by_id(uuid4()) is None

    @pytest.mark.asyncio
    async def test_save_assigns_identity_and_timestamps(self, product_repo):
        """Test saving a new entity fills store-assigned values."""
        product = await seed_product(product_repo)

        assert product.product_id is not None
        assert product.date_created is not None
        assert product.date_updated is not None

        found = await product_repo.find_by_id(product.product_id)
        assert found is not None
        assert found.product_name == "Checking"

    @pytest.mark.asyncio
    async def test_find_by_parent_id_scopes_rows(self, product_repo, localization_repo):
        """Test children of other parents are not returned."""
        first = await seed_product(product_repo, "First")
        second = await seed_product(product_repo, "Second")
        for code in ("en", "fr", "de"):
            await localization_repo.save(
                ProductLocalization(product_id=first.product_id, language_code=code)
            )
        await localization_repo.save(
            ProductLocalization(product_id=second.product_id, language_code="es")
        )

        rows = await localization_repo.find_by_parent_id(
            first.product_id, PageRequest(0, 10)
        )

        assert {row.language_code for row in rows} == {"en", "fr", "de"}
        assert await localization_repo.count_by_parent_id(first.product_id) == 3
        assert await localization_repo.count_by_parent_id(second.product_id) == 1
        assert await localization_repo.count() == 4

    @pytest.mark.asyncio
    async def test_sort_by_column(self, product_repo):
        """Test sorting by a known column in both directions."""
        for name in ("Bravo", "Alpha", "Charlie"):
            await seed_product(product_repo, name)

        ascending = await product_repo.find_all(PageRequest(0, 10, "product_name"))
        descending = await product_repo.find_all(
            PageRequest(0, 10, "product_name", SortDirection.DESC)
        )

        assert [p.product_name for p in ascending] == ["Alpha", "Bravo", "Charlie"]
        assert [p.product_name for p in descending] == ["Charlie", "Bravo", "Alpha"]

    @pytest.mark.asyncio
    async def test_unknown_sort_field_falls_back(self, product_repo):
        """Test an unknown sort field does not fail the query."""
        await seed_product(product_repo)

        rows = await product_repo.find_all(PageRequest(0, 10, "no_such_column"))

        assert len(rows) == 1

    @pytest.mark.asyncio
    async def test_find_by_and_exists_by(self, product_repo):
        """Test column filters."""
        await seed_product(product_repo, "Alpha")
        await seed_product(product_repo, "Beta")

        assert [p.product_name for p in await product_repo.find_by(product_name="Beta")] == ["Beta"]
        assert await product_repo.exists_by(product_name="Alpha") is True
        assert await product_repo.exists_by(product_name="Gamma") is False
        assert await product_repo.find_one_by(product_name="Gamma") is None


class TestWrites:
    """Tests for repository writes."""

    @pytest.mark.asyncio
    async def test_update_detached_entity(self, product_repo):
        """Test saving a loaded entity updates its row."""
        product = await seed_product(product_repo)
        product.product_description = "Everyday account"

        await product_repo.save(product)

        found = await product_repo.find_by_id(product.product_id)
        assert found.product_description == "Everyday account"
        assert await product_repo.count() == 1

    @pytest.mark.asyncio
    async def test_delete(self, product_repo):
        """Test deleting a loaded entity removes its row."""
        product = await seed_product(product_repo)

        await product_repo.delete(product)

        assert await product_repo.find_by_id(product.product_id) is None

    @pytest.mark.asyncio
    async def test_unique_index_violation(self, session_factory):
        """Test a duplicate subtype name is rejected by the store."""
        categories = CatalogRepository(session_factory, ProductCategory)
        subtypes = CatalogRepository(session_factory, ProductSubtype)
        category = await categories.save(ProductCategory(category_name="Accounts"))

        await subtypes.save(
            ProductSubtype(
                product_category_id=category.product_category_id,
                subtype_name="Current",
            )
        )

        with pytest.raises(IntegrityViolationError):
            await subtypes.save(
                ProductSubtype(
                    product_category_id=category.product_category_id,
                    subtype_name="Current",
                )
            )

    @pytest.mark.asyncio
    async def test_top_level_model_has_no_parent_lookup(self, product_repo):
        """Test parent queries are refused for top-level models."""
        with pytest.raises(TypeError):
            await product_repo.count_by_parent_id(uuid4())
