"""Shared fixtures for catalog tests.

Each test gets its own SQLite database file so the concurrent page and
count queries run against real separate connections.
"""

from collections.abc import AsyncGenerator
from uuid import UUID, uuid4

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from product_catalog.application.container import CatalogServices, build_catalog_services
from product_catalog.application.dtos import ProductDTO
from product_catalog.infrastructure.config import Settings
from product_catalog.infrastructure.database import (
    build_engine,
    build_session_factory,
    create_schema,
)
from product_catalog.main import create_app


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings pointing at a temporary SQLite database."""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}",
        log_json=False,
        log_level="WARNING",
        default_page_size=10,
        max_page_size=50,
    )


def enable_foreign_keys(dbapi_connection, connection_record) -> None:
    """Turn on foreign key enforcement for a new SQLite connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest_asyncio.fixture
async def engine(test_settings: Settings) -> AsyncGenerator[AsyncEngine, None]:
    """Create an engine with the catalog schema in place.

    SQLite only enforces foreign keys when asked to on each connection.
    """
    engine = build_engine(test_settings)
    event.listen(engine.sync_engine, "connect", enable_foreign_keys)
    await create_schema(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test engine."""
    return build_session_factory(engine)


@pytest.fixture
def services(session_factory: async_sessionmaker[AsyncSession]) -> CatalogServices:
    """Catalog services backed by the test database."""
    return build_catalog_services(session_factory)


@pytest_asyncio.fixture
async def client(
    test_settings: Settings,
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client for an application wired to the test database."""
    app = create_app(test_settings, session_factory)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        yield client


@pytest.fixture
def tenant_id() -> UUID:
    """Tenant owning the test products."""
    return uuid4()


@pytest_asyncio.fixture
async def product(services: CatalogServices, tenant_id: UUID) -> ProductDTO:
    """Create a product to attach children to."""
    result = await services.products.create(
        ProductDTO(tenant_id=tenant_id, product_name="Checking")
    )
    assert result.success, result.error
    return result.value


@pytest_asyncio.fixture
async def other_product(services: CatalogServices, tenant_id: UUID) -> ProductDTO:
    """Create a second product for ownership checks."""
    result = await services.products.create(
        ProductDTO(tenant_id=tenant_id, product_name="Savings")
    )
    assert result.success, result.error
    return result.value
