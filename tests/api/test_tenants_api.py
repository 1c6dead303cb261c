"""API tests for tenant endpoints.

- GET /tenants (tenants visible to the caller, with the caller's role)
- POST /tenants (create a tenant and join it with the write role)
"""

import pytest

from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError, StoreError
from src.domain.enums.tenant_role import TenantRole
from tests.conftest import World


@pytest.mark.api
class TestListTenants:
    """Tests for GET /tenants endpoint."""

    def test_list_tenants_with_roles_ordered_by_name(
        self, client, alice_headers, world: World
    ):
        response = client.get("/tenants", headers=alice_headers)

        assert response.status_code == 200
        assert response.json() == {
            "tenants": [
                {"id": str(world.acme_id), "name": "Acme", "role": "write"},
                {"id": str(world.bravo_id), "name": "Bravo", "role": "read"},
            ]
        }

    def test_list_tenants_hides_foreign_tenants(
        self, client, bob_headers, world: World
    ):
        response = client.get("/tenants", headers=bob_headers)

        assert response.status_code == 200
        tenants = response.json()["tenants"]
        assert [t["name"] for t in tenants] == ["Bravo"]
        assert tenants[0]["role"] == "write"

    def test_caller_without_memberships_gets_empty_list(
        self, client, alice_headers, world: World
    ):
        world.db.memberships.clear()

        response = client.get("/tenants", headers=alice_headers)

        assert response.status_code == 200
        assert response.json() == {"tenants": []}

    def test_store_denial_returns_403(self, client, alice_headers, store_factory):
        store_factory.fail_with = AuthorizationError(
            code=ErrorCode.POLICY_VIOLATION,
            message="permission denied for table tenants",
            store_code="42501",
        )

        response = client.get("/tenants", headers=alice_headers)

        assert response.status_code == 403
        assert response.json()["detail"] == "permission denied for table tenants"

    def test_store_transport_failure_returns_500(
        self, client, alice_headers, store_factory
    ):
        store_factory.fail_with = StoreError(
            code=ErrorCode.STORE_UNAVAILABLE,
            message="Store unavailable: connection refused",
            is_transport_failure=True,
        )

        response = client.get("/tenants", headers=alice_headers)

        assert response.status_code == 500
        assert response.json()["detail"] == "Internal server error"


@pytest.mark.api
class TestCreateTenant:
    """Tests for POST /tenants endpoint."""

    def test_create_tenant_returns_201_and_joins_as_writer(
        self, client, bob_headers, world: World
    ):
        response = client.post(
            "/tenants", json={"name": "  Chess Club  "}, headers=bob_headers
        )

        assert response.status_code == 201
        tenant_id = response.json()["id"]
        created = next(t for t in world.db.tenants.values() if str(t.id) == tenant_id)
        assert created.name == "Chess Club"
        assert world.db.role_of(world.bob_id, created.id) == TenantRole.WRITE

    def test_creator_can_write_to_new_tenant(self, client, bob_headers):
        tenant_id = client.post(
            "/tenants", json={"name": "Garden"}, headers=bob_headers
        ).json()["id"]

        response = client.post(
            "/transactions",
            json={
                "tenantId": tenant_id,
                "type": "income",
                "amount": 12,
                "description": "Seeds sale",
                "date": "2024-06-01",
                "category": "Sales",
            },
            headers=bob_headers,
        )

        assert response.status_code == 201

    @pytest.mark.parametrize("name", ["", "   ", "x" * 201])
    def test_invalid_name_returns_400(self, client, bob_headers, world: World, name):
        response = client.post("/tenants", json={"name": name}, headers=bob_headers)

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "name"
        assert world.db.mutations == 0

    def test_store_error_returns_400(self, client, bob_headers, store_factory):
        store_factory.fail_with = StoreError(
            code=ErrorCode.STORE_REQUEST_FAILED,
            message=(
                "function create_tenant_and_join(tenant_name => text) does not exist"
            ),
            store_code="42883",
        )

        response = client.post("/tenants", json={"name": "X"}, headers=bob_headers)

        assert response.status_code == 400
        assert "does not exist" in response.json()["detail"]
