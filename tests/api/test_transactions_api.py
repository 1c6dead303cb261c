"""API tests for transaction endpoints.

Tests the complete HTTP request/response cycle:
- POST /transactions (record income/expense, write role)
- GET /transactions?tenantId= (list, date DESC then createdAt DESC)

Architecture:
- Uses FastAPI TestClient with real app + dependency overrides
- In-memory store enforces tenant membership and roles like the real store
- Validation failures must never reach the store
"""

import pytest
from uuid_extensions import uuid7

from tests.conftest import World

ARABIC_INDIC_DATE = "\u0662\u0660\u0662\u0664-\u0660\u0663-\u0661\u0665"
FULLWIDTH_DATE = "\uff12\uff10\uff12\uff14-\uff10\uff13-\uff11\uff15"


def _body(tenant_id, **overrides) -> dict:
    body = {
        "tenantId": str(tenant_id),
        "type": "income",
        "amount": 100.5,
        "description": "Membership fees",
        "date": "2024-03-15",
        "category": "Dues",
    }
    body.update(overrides)
    return body


# =============================================================================
# Create Transaction Tests (POST /transactions)
# =============================================================================


@pytest.mark.api
class TestCreateTransaction:
    """Tests for POST /transactions endpoint."""

    def test_create_transaction_returns_201_with_id(
        self, client, alice_headers, world: World
    ):
        """Write member records a transaction and gets its id back."""
        response = client.post(
            "/transactions", json=_body(world.acme_id), headers=alice_headers
        )

        assert response.status_code == 201
        data = response.json()
        assert set(data) == {"id"}
        stored = world.db.transactions[0]
        assert data["id"] == str(stored.id)
        assert stored.tenant_id == world.acme_id
        assert stored.created_by == world.alice_id
        assert str(stored.amount) == "100.5"

    def test_create_transaction_visible_in_list(
        self, client, alice_headers, world: World
    ):
        """Created transaction is returned by the list endpoint."""
        created = client.post(
            "/transactions",
            json=_body(world.acme_id, type="expense", amount=42),
            headers=alice_headers,
        ).json()

        response = client.get(
            "/transactions",
            params={"tenantId": str(world.acme_id)},
            headers=alice_headers,
        )

        assert response.status_code == 200
        transactions = response.json()["transactions"]
        assert len(transactions) == 1
        assert transactions[0]["id"] == created["id"]
        assert transactions[0]["type"] == "expense"
        assert transactions[0]["amount"] == 42
        assert transactions[0]["tenantId"] == str(world.acme_id)
        assert transactions[0]["createdBy"] == str(world.alice_id)
        assert transactions[0]["date"] == "2024-03-15"

    def test_read_member_is_denied_with_403(
        self, client, alice_headers, world: World
    ):
        """Read role cannot create; the store's policy denial becomes 403."""
        response = client.post(
            "/transactions", json=_body(world.bravo_id), headers=alice_headers
        )

        assert response.status_code == 403
        data = response.json()
        assert data["status"] == 403
        assert "row-level security" in data["detail"]
        assert world.db.transactions == []

    def test_non_member_is_denied_with_403(self, client, bob_headers, world: World):
        """Caller without membership cannot write into another tenant."""
        response = client.post(
            "/transactions", json=_body(world.acme_id), headers=bob_headers
        )

        assert response.status_code == 403
        assert world.db.transactions == []

    def test_impossible_calendar_date_is_rejected_by_store(
        self, client, alice_headers, world: World
    ):
        """Well-formed but impossible dates fail in the store as a 400."""
        response = client.post(
            "/transactions",
            json=_body(world.acme_id, date="2024-02-30"),
            headers=alice_headers,
        )

        assert response.status_code == 400
        assert "out of range" in response.json()["detail"]

    @pytest.mark.parametrize(
        "overrides, field",
        [
            ({"tenantId": "not-a-uuid"}, "tenantId"),
            ({"tenantId": "12345678-1234-1234-1234-1234567890"}, "tenantId"),
            ({"type": "refund"}, "type"),
            ({"amount": 0}, "amount"),
            ({"amount": -5}, "amount"),
            ({"amount": "100"}, "amount"),
            ({"amount": True}, "amount"),
            ({"amount": 10**400}, "amount"),
            ({"amount": 2**53 + 1}, "amount"),
            ({"description": ""}, "description"),
            ({"category": ""}, "category"),
            ({"date": "15/03/2024"}, "date"),
            ({"date": "2024-3-15"}, "date"),
            ({"date": ARABIC_INDIC_DATE}, "date"),
            ({"date": FULLWIDTH_DATE}, "date"),
        ],
    )
    def test_invalid_input_returns_400_before_store(
        self, client, alice_headers, store_factory, world: World, overrides, field
    ):
        """Invalid bodies answer 400 and never touch the store."""
        response = client.post(
            "/transactions",
            json=_body(world.acme_id, **overrides),
            headers=alice_headers,
        )

        assert response.status_code == 400
        data = response.json()
        assert data["title"] == "Invalid Input"
        assert field in {error["field"] for error in data["errors"]}
        assert world.db.mutations == 0

    def test_missing_field_returns_400(self, client, alice_headers, world: World):
        """Every body field is required."""
        body = _body(world.acme_id)
        del body["category"]

        response = client.post("/transactions", json=body, headers=alice_headers)

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "category"

    def test_uppercase_uuid_is_accepted(self, client, alice_headers, world: World):
        """Canonical UUIDs are matched case-insensitively."""
        response = client.post(
            "/transactions",
            json=_body(str(world.acme_id).upper()),
            headers=alice_headers,
        )

        assert response.status_code == 201


# =============================================================================
# List Transactions Tests (GET /transactions)
# =============================================================================


@pytest.mark.api
class TestListTransactions:
    """Tests for GET /transactions endpoint."""

    def test_list_is_ordered_by_date_then_creation(
        self, client, alice_headers, world: World
    ):
        """Newest date first; same-date entries newest-created first."""
        for description, date in [
            ("first", "2024-01-10"),
            ("second", "2024-02-01"),
            ("third", "2024-01-10"),
        ]:
            client.post(
                "/transactions",
                json=_body(world.acme_id, description=description, date=date),
                headers=alice_headers,
            )

        response = client.get(
            "/transactions",
            params={"tenantId": str(world.acme_id)},
            headers=alice_headers,
        )

        assert response.status_code == 200
        descriptions = [t["description"] for t in response.json()["transactions"]]
        assert descriptions == ["second", "third", "first"]

    def test_other_tenant_transactions_are_invisible(
        self, client, alice_headers, bob_headers, world: World
    ):
        """Non-members get an empty list, never another tenant's rows."""
        client.post("/transactions", json=_body(world.acme_id), headers=alice_headers)

        response = client.get(
            "/transactions",
            params={"tenantId": str(world.acme_id)},
            headers=bob_headers,
        )

        assert response.status_code == 200
        assert response.json() == {"transactions": []}

    def test_read_member_can_list(
        self, client, alice_headers, bob_headers, world: World
    ):
        """Read role is enough to list a tenant's transactions."""
        client.post("/transactions", json=_body(world.bravo_id), headers=bob_headers)

        response = client.get(
            "/transactions",
            params={"tenantId": str(world.bravo_id)},
            headers=alice_headers,
        )

        assert response.status_code == 200
        assert len(response.json()["transactions"]) == 1

    def test_list_is_idempotent(self, client, alice_headers, world: World):
        """Repeated reads return the same payload and mutate nothing."""
        client.post("/transactions", json=_body(world.acme_id), headers=alice_headers)
        params = {"tenantId": str(world.acme_id)}

        first = client.get("/transactions", params=params, headers=alice_headers)
        second = client.get("/transactions", params=params, headers=alice_headers)

        assert first.json() == second.json()
        assert world.db.mutations == 1

    def test_missing_tenant_id_returns_400(self, client, alice_headers):
        """tenantId query parameter is required."""
        response = client.get("/transactions", headers=alice_headers)

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "tenantId"

    def test_malformed_tenant_id_returns_400(self, client, alice_headers):
        """tenantId must be a canonical UUID."""
        response = client.get(
            "/transactions",
            params={"tenantId": str(uuid7()).replace("-", "")},
            headers=alice_headers,
        )

        assert response.status_code == 400
