"""Tests for health check endpoints."""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine

from product_catalog.infrastructure.database import build_session_factory
from product_catalog.main import create_app


@pytest.mark.asyncio
async def test_health_check(client) -> None:
    """Test health endpoint returns healthy status."""
    response = await client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["service"] == "product-catalog"
    assert "version" in data


@pytest.mark.asyncio
async def test_readiness_check(client) -> None:
    """Test readiness endpoint returns ready status."""
    response = await client.get("/ready")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ready"
    assert data["database"] == "ok"


@pytest.mark.asyncio
async def test_readiness_without_database(test_settings, tmp_path) -> None:
    """Test readiness reports 503 when the database cannot be opened."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'catalog.db'}"
    )
    app = create_app(test_settings, build_session_factory(engine))

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        response = await client.get("/ready")

    await engine.dispose()
    assert response.status_code == 503
    assert response.json()["status"] == "not_ready"
