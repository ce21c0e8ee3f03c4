"""Tests for lifecycle, limit, pricing and fee API endpoints."""

from decimal import Decimal
from uuid import uuid4

import pytest
import pytest_asyncio

API = "/api/v1"


@pytest_asyncio.fixture
async def product_ids(client):
    """Create two products and return their ids."""
    ids = []
    for name in ("Credit Card", "Mortgage"):
        response = await client.post(
            f"{API}/products", json={"tenant_id": str(uuid4()), "product_name": name}
        )
        ids.append(response.json()["product_id"])
    return ids


class TestLifecycle:
    """Tests for /products/{product_id}/lifecycle."""

    @pytest.mark.asyncio
    async def test_lifecycle_history(self, client, product_ids):
        """Test recording and suspending a product."""
        owner, other = product_ids
        base = f"{API}/products/{owner}/lifecycle"

        created = await client.post(
            base,
            json={
                "lifecycle_status": "ACTIVE",
                "status_start_date": "2026-01-01T00:00:00Z",
                "reason": "Initial activation",
            },
        )
        assert created.status_code == 201
        lifecycle_id = created.json()["product_lifecycle_id"]

        updated = await client.put(
            f"{base}/{lifecycle_id}", json={"lifecycle_status": "SUSPENDED"}
        )
        foreign = await client.get(f"{API}/products/{other}/lifecycle/{lifecycle_id}")

        assert updated.json()["lifecycle_status"] == "SUSPENDED"
        assert updated.json()["reason"] == "Initial activation"
        assert foreign.status_code == 404

    @pytest.mark.asyncio
    async def test_status_required(self, client, product_ids):
        """Test the lifecycle status is required."""
        owner, _ = product_ids

        response = await client.post(
            f"{API}/products/{owner}/lifecycle", json={"reason": "No status"}
        )

        assert response.status_code == 422
        assert response.json()["details"][0]["field"] == "lifecycle_status"


class TestLimits:
    """Tests for /products/{product_id}/limits."""

    @pytest.mark.asyncio
    async def test_limit_lifecycle(self, client, product_ids):
        """Test create, list and delete of a limit."""
        owner, _ = product_ids
        base = f"{API}/products/{owner}/limits"

        created = await client.post(
            base,
            json={
                "limit_type": "CREDIT_LIMIT",
                "limit_value": "10000.00",
                "limit_unit": "USD",
                "time_period": "MONTHLY",
                "effective_date": "2026-01-01",
                "expiry_date": "2027-01-01",
            },
        )
        assert created.status_code == 201
        data = created.json()
        assert Decimal(data["limit_value"]) == Decimal("10000")
        assert data["expiry_date"] == "2027-01-01"

        listed = await client.get(base)
        assert listed.json()["total_elements"] == 1

        deleted = await client.delete(f"{base}/{data['product_limit_id']}")
        assert deleted.status_code == 204

    @pytest.mark.asyncio
    async def test_limit_value_required(self, client, product_ids):
        """Test a limit needs a value."""
        owner, _ = product_ids

        response = await client.post(
            f"{API}/products/{owner}/limits", json={"limit_type": "WITHDRAWAL_LIMIT"}
        )

        assert response.status_code == 422
        assert response.json()["details"][0]["field"] == "limit_value"

    @pytest.mark.asyncio
    async def test_negative_limit_rejected(self, client, product_ids):
        """Test limit values cannot be negative."""
        owner, _ = product_ids

        response = await client.post(
            f"{API}/products/{owner}/limits",
            json={"limit_type": "CREDIT_LIMIT", "limit_value": "-1"},
        )

        assert response.status_code == 422


class TestPricing:
    """Tests for pricings and their localizations."""

    async def create_pricing(self, client, product_id: str) -> str:
        """Create an interest rate pricing and return its id."""
        response = await client.post(
            f"{API}/products/{product_id}/pricings",
            json={
                "pricing_type": "INTEREST_RATE",
                "amount_value": "5.75",
                "amount_unit": "PERCENT",
                "pricing_condition": "Standard rate for premium customers",
            },
        )
        assert response.status_code == 201
        return response.json()["product_pricing_id"]

    @pytest.mark.asyncio
    async def test_pricing_scoped_to_product(self, client, product_ids):
        """Test a pricing is only reachable through its product."""
        owner, other = product_ids
        pricing_id = await self.create_pricing(client, owner)

        own = await client.get(f"{API}/products/{owner}/pricings/{pricing_id}")
        foreign = await client.get(f"{API}/products/{other}/pricings/{pricing_id}")

        assert Decimal(own.json()["amount_value"]) == Decimal("5.75")
        assert own.json()["pricing_type"] == "INTEREST_RATE"
        assert foreign.status_code == 404

    @pytest.mark.asyncio
    async def test_localizations(self, client, product_ids):
        """Test currency amounts of a pricing entry."""
        owner, _ = product_ids
        pricing_id = await self.create_pricing(client, owner)
        base = f"{API}/products/{owner}/pricings/{pricing_id}/localizations"

        created = await client.post(
            base, json={"currency_code": "USD", "localized_amount_value": "100.00"}
        )
        assert created.status_code == 201
        localization_id = created.json()["product_pricing_localization_id"]
        assert created.json()["product_pricing_id"] == pricing_id

        updated = await client.put(
            f"{base}/{localization_id}", json={"localized_amount_value": "120.50"}
        )
        listed = await client.get(base)

        assert updated.json()["currency_code"] == "USD"
        assert Decimal(updated.json()["localized_amount_value"]) == Decimal("120.5")
        assert listed.json()["total_elements"] == 1

    @pytest.mark.asyncio
    async def test_localizations_under_foreign_pricing(self, client, product_ids):
        """Test localizations are hidden behind another product's path."""
        owner, other = product_ids
        pricing_id = await self.create_pricing(client, owner)
        own_base = f"{API}/products/{owner}/pricings/{pricing_id}/localizations"
        localization_id = (
            await client.post(own_base, json={"currency_code": "EUR"})
        ).json()["product_pricing_localization_id"]

        foreign_base = f"{API}/products/{other}/pricings/{pricing_id}/localizations"
        listed = await client.get(foreign_base)
        fetched = await client.get(f"{foreign_base}/{localization_id}")
        created = await client.post(foreign_base, json={"currency_code": "GBP"})

        assert listed.status_code == 404
        assert fetched.status_code == 404
        assert created.status_code == 404
        assert (await client.get(own_base)).json()["total_elements"] == 1

    @pytest.mark.asyncio
    async def test_currency_code_length(self, client, product_ids):
        """Test currency codes are three letters."""
        owner, _ = product_ids
        pricing_id = await self.create_pricing(client, owner)

        response = await client.post(
            f"{API}/products/{owner}/pricings/{pricing_id}/localizations",
            json={"currency_code": "EURO"},
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_deleting_pricing_removes_localizations(
        self, client, product_ids, services
    ):
        """Test localizations are deleted with their pricing entry."""
        owner, _ = product_ids
        pricing_id = await self.create_pricing(client, owner)
        await client.post(
            f"{API}/products/{owner}/pricings/{pricing_id}/localizations",
            json={"currency_code": "USD"},
        )

        response = await client.delete(f"{API}/products/{owner}/pricings/{pricing_id}")

        assert response.status_code == 204
        assert await services.pricing_localizations.repository.count() == 0


class TestFees:
    """Tests for fee structures, components and application rules."""

    @pytest.mark.asyncio
    async def test_assign_fee_structure(self, client, product_ids):
        """Test assigning and reprioritising a fee structure."""
        owner, _ = product_ids
        base = f"{API}/products/{owner}/fee-structures"
        fee_structure_id = str(uuid4())

        created = await client.post(
            base, json={"fee_structure_id": fee_structure_id, "priority": 1}
        )
        assert created.status_code == 201
        assignment_id = created.json()["product_fee_structure_id"]

        updated = await client.put(f"{base}/{assignment_id}", json={"priority": 5})

        assert updated.json()["priority"] == 5
        assert updated.json()["fee_structure_id"] == fee_structure_id

    @pytest.mark.asyncio
    async def test_fee_structure_required(self, client, product_ids):
        """Test an assignment needs a fee structure id."""
        owner, _ = product_ids

        response = await client.post(
            f"{API}/products/{owner}/fee-structures", json={"priority": 1}
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_components_and_rules(self, client):
        """Test rules are reachable only through their fee structure."""
        fee_structure_id = str(uuid4())
        other_structure_id = str(uuid4())
        components = f"{API}/fee-structures/{fee_structure_id}/components"

        component = await client.post(
            components,
            json={"component_name": "Annual fee", "amount_value": "25", "amount_unit": "EUR"},
        )
        assert component.status_code == 201
        component_id = component.json()["fee_component_id"]

        rules = f"{components}/{component_id}/rules"
        rule = await client.post(
            rules, json={"rule_condition": "balance < 1000", "priority": 1}
        )
        assert rule.status_code == 201
        rule_id = rule.json()["fee_application_rule_id"]
        assert rule.json()["fee_component_id"] == component_id

        foreign_rules = (
            f"{API}/fee-structures/{other_structure_id}/components/{component_id}/rules"
        )
        assert (await client.get(f"{rules}/{rule_id}")).status_code == 200
        assert (await client.get(f"{foreign_rules}/{rule_id}")).status_code == 404
        assert (await client.get(foreign_rules)).status_code == 404

    @pytest.mark.asyncio
    async def test_deleting_component_removes_rules(self, client, services):
        """Test rules are deleted with their component."""
        components = f"{API}/fee-structures/{uuid4()}/components"
        component_id = (
            await client.post(components, json={"component_name": "Transfer fee"})
        ).json()["fee_component_id"]
        await client.post(
            f"{components}/{component_id}/rules", json={"rule_condition": "always"}
        )

        response = await client.delete(f"{components}/{component_id}")

        assert response.status_code == 204
        assert await services.fee_rules.repository.count() == 0

    @pytest.mark.asyncio
    async def test_rule_condition_required(self, client):
        """Test a rule needs a condition."""
        components = f"{API}/fee-structures/{uuid4()}/components"
        component_id = (
            await client.post(components, json={"component_name": "Overdraft fee"})
        ).json()["fee_component_id"]

        response = await client.post(
            f"{components}/{component_id}/rules", json={"rule_description": "Nothing"}
        )

        assert response.status_code == 422
        assert response.json()["details"][0]["field"] == "rule_condition"
