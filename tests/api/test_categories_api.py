"""Tests for category and subtype API endpoints."""

from uuid import uuid4

import pytest

API = "/api/v1"


async def create_category(client, name: str) -> str:
    """Create a category and return its id."""
    response = await client.post(f"{API}/categories", json={"category_name": name})
    assert response.status_code == 201
    return response.json()["product_category_id"]


class TestCategories:
    """Tests for /categories endpoints."""

    @pytest.mark.asyncio
    async def test_category_lifecycle(self, client):
        """Test create, get, update and delete of a category."""
        category_id = await create_category(client, "Accounts")

        response = await client.put(
            f"{API}/categories/{category_id}", json={"level": 1}
        )
        assert response.json()["category_name"] == "Accounts"
        assert response.json()["level"] == 1

        assert (await client.delete(f"{API}/categories/{category_id}")).status_code == 204
        assert (await client.get(f"{API}/categories/{category_id}")).status_code == 404

    @pytest.mark.asyncio
    async def test_nested_category(self, client):
        """Test a category can reference a parent category."""
        parent_id = await create_category(client, "Banking")

        response = await client.post(
            f"{API}/categories",
            json={"category_name": "Accounts", "parent_category_id": parent_id},
        )

        assert response.json()["parent_category_id"] == parent_id


class TestSubtypes:
    """Tests for /categories/{category_id}/subtypes endpoints."""

    @pytest.mark.asyncio
    async def test_duplicate_name_conflicts(self, client):
        """Test subtype names are unique across categories."""
        accounts = await create_category(client, "Accounts")
        cards = await create_category(client, "Cards")

        first = await client.post(
            f"{API}/categories/{accounts}/subtypes", json={"subtype_name": "Premium"}
        )
        second = await client.post(
            f"{API}/categories/{cards}/subtypes", json={"subtype_name": "Premium"}
        )
        distinct = await client.post(
            f"{API}/categories/{cards}/subtypes", json={"subtype_name": "Gold"}
        )

        assert first.status_code == 201
        assert second.status_code == 409
        assert second.json()["error_code"] == "CONFLICT"
        assert second.json()["details"][0]["field"] == "subtype_name"
        assert distinct.status_code == 201

    @pytest.mark.asyncio
    async def test_subtype_scoped_to_category(self, client):
        """Test a subtype is only reachable through its category."""
        accounts = await create_category(client, "Accounts")
        cards = await create_category(client, "Cards")
        subtype_id = (
            await client.post(
                f"{API}/categories/{accounts}/subtypes", json={"subtype_name": "Premium"}
            )
        ).json()["product_subtype_id"]

        own = await client.get(f"{API}/categories/{accounts}/subtypes/{subtype_id}")
        foreign = await client.get(f"{API}/categories/{cards}/subtypes/{subtype_id}")
        unknown = await client.get(f"{API}/categories/{uuid4()}/subtypes/{subtype_id}")
        listed = await client.get(f"{API}/categories/{accounts}/subtypes")

        assert own.status_code == 200
        assert foreign.status_code == 404
        assert unknown.status_code == 404
        assert listed.json()["total_elements"] == 1

    @pytest.mark.asyncio
    async def test_rename_onto_taken_name_conflicts(self, client):
        """Test renaming a subtype to a used name returns 409."""
        accounts = await create_category(client, "Accounts")
        base = f"{API}/categories/{accounts}/subtypes"
        await client.post(base, json={"subtype_name": "Premium"})
        basic_id = (
            await client.post(base, json={"subtype_name": "Basic"})
        ).json()["product_subtype_id"]

        response = await client.put(f"{base}/{basic_id}", json={"subtype_name": "Premium"})
        unchanged = await client.get(f"{base}/{basic_id}")

        assert response.status_code == 409
        assert response.json()["error_code"] == "CONFLICT"
        assert response.json()["details"][0]["field"] == "subtype_name"
        assert unchanged.json()["subtype_name"] == "Basic"
