"""Tests for product-owned resource endpoints."""

from uuid import uuid4

import pytest
import pytest_asyncio

API = "/api/v1"


@pytest_asyncio.fixture
async def product_ids(client):
    """Create two products and return their ids."""
    ids = []
    for name in ("Checking", "Savings"):
        response = await client.post(
            f"{API}/products", json={"tenant_id": str(uuid4()), "product_name": name}
        )
        ids.append(response.json()["product_id"])
    return ids


class TestFeatures:
    """Tests for /products/{product_id}/features."""

    @pytest.mark.asyncio
    async def test_feature_scoped_to_product(self, client, product_ids):
        """Test a feature is only reachable through its product."""
        owner, other = product_ids
        response = await client.post(
            f"{API}/products/{owner}/features",
            json={"feature_name": "Overdraft", "feature_type": "OPTIONAL"},
        )
        assert response.status_code == 201
        feature_id = response.json()["product_feature_id"]

        assert (await client.get(f"{API}/products/{owner}/features/{feature_id}")).status_code == 200
        assert (await client.get(f"{API}/products/{other}/features/{feature_id}")).status_code == 404
        assert (
            await client.put(
                f"{API}/products/{other}/features/{feature_id}",
                json={"feature_name": "Hijacked"},
            )
        ).status_code == 404
        assert (await client.delete(f"{API}/products/{other}/features/{feature_id}")).status_code == 404

    @pytest.mark.asyncio
    async def test_body_product_id_is_ignored(self, client, product_ids):
        """Test the path product id wins over the body."""
        owner, other = product_ids

        response = await client.post(
            f"{API}/products/{owner}/features",
            json={"product_id": other, "feature_name": "Cashback"},
        )

        assert response.json()["product_id"] == owner

    @pytest.mark.asyncio
    async def test_update_description_only(self, client, product_ids):
        """Test a partial update keeps identity and parent."""
        owner, _ = product_ids
        created = (
            await client.post(
                f"{API}/products/{owner}/features", json={"feature_name": "Overdraft"}
            )
        ).json()

        response = await client.put(
            f"{API}/products/{owner}/features/{created['product_feature_id']}",
            json={"feature_description": "Up to 500"},
        )

        data = response.json()
        assert response.status_code == 200
        assert data["product_feature_id"] == created["product_feature_id"]
        assert data["product_id"] == owner
        assert data["feature_name"] == "Overdraft"
        assert data["feature_description"] == "Up to 500"

    @pytest.mark.asyncio
    async def test_list_empty(self, client, product_ids):
        """Test a product without features lists an empty page."""
        owner, _ = product_ids

        response = await client.get(f"{API}/products/{owner}/features")

        assert response.status_code == 200
        assert response.json()["content"] == []
        assert response.json()["total_elements"] == 0


class TestLocalizations:
    """Tests for /products/{product_id}/localizations."""

    @pytest.mark.asyncio
    async def test_pages(self, client, product_ids):
        """Test 25 localizations over pages of 10."""
        owner, _ = product_ids
        for i in range(25):
            await client.post(
                f"{API}/products/{owner}/localizations", json={"language_code": f"l{i}"}
            )

        first = (
            await client.get(
                f"{API}/products/{owner}/localizations",
                params={"page_number": 0, "page_size": 10},
            )
        ).json()
        last = (
            await client.get(
                f"{API}/products/{owner}/localizations",
                params={"page_number": 2, "page_size": 10},
            )
        ).json()

        assert len(first["content"]) == 10
        assert first["total_elements"] == 25
        assert first["total_pages"] == 3
        assert len(last["content"]) == 5


class TestVersionsAndRelationships:
    """Tests for versions and relationships."""

    @pytest.mark.asyncio
    async def test_version_lifecycle(self, client, product_ids):
        """Test create and delete of a version."""
        owner, _ = product_ids
        response = await client.post(
            f"{API}/products/{owner}/versions",
            json={"version_number": 1, "version_description": "Launch"},
        )
        assert response.status_code == 201
        version_id = response.json()["product_version_id"]

        response = await client.delete(f"{API}/products/{owner}/versions/{version_id}")
        assert response.status_code == 204

    @pytest.mark.asyncio
    async def test_version_number_must_be_positive(self, client, product_ids):
        """Test version numbers start at 1."""
        owner, _ = product_ids

        response = await client.post(
            f"{API}/products/{owner}/versions", json={"version_number": 0}
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_relationship(self, client, product_ids):
        """Test relating two products."""
        owner, other = product_ids

        response = await client.post(
            f"{API}/products/{owner}/relationships",
            json={"related_product_id": other, "relationship_type": "UPGRADE"},
        )

        assert response.status_code == 201
        assert response.json()["related_product_id"] == other
        assert response.json()["product_id"] == owner


class TestConfigurations:
    """Tests for /products/{product_id}/configurations."""

    @pytest.mark.asyncio
    async def test_lookups(self, client, product_ids):
        """Test lookup by key and by type."""
        owner, _ = product_ids
        for key, config_type in (("monthly_fee", "FEES"), ("daily_limit", "LIMITS")):
            await client.post(
                f"{API}/products/{owner}/configurations",
                json={"config_key": key, "config_type": config_type, "config_value": "10"},
            )

        by_key = await client.get(f"{API}/products/{owner}/configurations/by-key/monthly_fee")
        by_type = await client.get(f"{API}/products/{owner}/configurations/by-type/LIMITS")
        missing = await client.get(f"{API}/products/{owner}/configurations/by-key/nope")

        assert by_key.status_code == 200
        assert by_key.json()["config_type"] == "FEES"
        assert [c["config_key"] for c in by_type.json()] == ["daily_limit"]
        assert missing.status_code == 404


class TestDocumentation:
    """Tests for documentation requirements and published documents."""

    @pytest.mark.asyncio
    async def test_mandatory_and_by_type(self, client, product_ids):
        """Test mandatory listing and lookup by type."""
        owner, _ = product_ids
        base = f"{API}/products/{owner}/documentation-requirements"
        await client.post(base, json={"doc_type": "IDENTIFICATION"})
        await client.post(base, json={"doc_type": "CREDIT_REPORT", "is_mandatory": False})

        mandatory = await client.get(f"{base}/mandatory")
        by_type = await client.get(f"{base}/by-type/CREDIT_REPORT")
        page = await client.get(base)

        assert mandatory.status_code == 200
        assert [r["doc_type"] for r in mandatory.json()] == ["IDENTIFICATION"]
        assert by_type.json()["is_mandatory"] is False
        assert page.json()["total_elements"] == 2

    @pytest.mark.asyncio
    async def test_requirement_needs_doc_type(self, client, product_ids):
        """Test doc type is required."""
        owner, _ = product_ids

        response = await client.post(
            f"{API}/products/{owner}/documentation-requirements",
            json={"description": "Anything"},
        )

        assert response.status_code == 422
        assert response.json()["details"][0]["field"] == "doc_type"

    @pytest.mark.asyncio
    async def test_published_documentation(self, client, product_ids):
        """Test registering and reading a published document."""
        owner, other = product_ids
        response = await client.post(
            f"{API}/products/{owner}/documentation",
            json={"doc_type": "TNC", "document_manager_ref": 1234},
        )
        assert response.status_code == 201
        doc_id = response.json()["product_documentation_id"]

        own = await client.get(f"{API}/products/{owner}/documentation/{doc_id}")
        foreign = await client.get(f"{API}/products/{other}/documentation/{doc_id}")

        assert own.json()["document_manager_ref"] == 1234
        assert foreign.status_code == 404
