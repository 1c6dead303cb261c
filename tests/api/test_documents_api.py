"""API tests for document endpoints.

Tests the complete HTTP request/response cycle:
- POST /documents (attach a file URL to a transaction, write role)
- GET /documents?transactionId= (list, newest first)

Document URL policy: absolute http(s) only; file:// is rejected with a
dedicated message.
"""

import pytest
from uuid_extensions import uuid7

from tests.conftest import World


@pytest.fixture
def acme_transaction_id(client, alice_headers, world: World) -> str:
    """Transaction owned by tenant Acme (Alice: write)."""
    response = client.post(
        "/transactions",
        json={
            "tenantId": str(world.acme_id),
            "type": "expense",
            "amount": 19.99,
            "description": "Printer paper",
            "date": "2024-04-02",
            "category": "Office",
        },
        headers=alice_headers,
    )
    assert response.status_code == 201
    return response.json()["id"]


# =============================================================================
# Create Document Tests (POST /documents)
# =============================================================================


@pytest.mark.api
class TestCreateDocument:
    """Tests for POST /documents endpoint."""

    def test_create_document_returns_201_with_id(
        self, client, alice_headers, acme_transaction_id, world: World
    ):
        """Write member attaches a document to an existing transaction."""
        response = client.post(
            "/documents",
            json={
                "transactionId": acme_transaction_id,
                "fileUrl": "https://files.example.com/receipt.pdf",
            },
            headers=alice_headers,
        )

        assert response.status_code == 201
        assert response.json()["id"] == str(world.db.documents[0].id)

    def test_minimal_https_url_is_accepted(
        self, client, alice_headers, acme_transaction_id
    ):
        """Any absolute https URL with a host passes the URL policy."""
        response = client.post(
            "/documents",
            json={"transactionId": acme_transaction_id, "fileUrl": "https://x"},
            headers=alice_headers,
        )

        assert response.status_code == 201

    def test_file_url_is_rejected_with_dedicated_message(
        self, client, alice_headers, acme_transaction_id, world: World
    ):
        """file:// URLs are rejected before the scheme allow-list."""
        response = client.post(
            "/documents",
            json={
                "transactionId": acme_transaction_id,
                "fileUrl": "file:///etc/passwd",
            },
            headers=alice_headers,
        )

        assert response.status_code == 400
        error = response.json()["errors"][0]
        assert error["field"] == "fileUrl"
        assert "file://" in error["message"]
        assert world.db.documents == []

    @pytest.mark.parametrize(
        "file_url",
        ["ftp://files.example.com/a.pdf", "files.example.com/a.pdf", "", "https://"],
    )
    def test_non_http_urls_return_400(
        self, client, alice_headers, acme_transaction_id, world: World, file_url
    ):
        """Only absolute http(s) URLs are accepted."""
        response = client.post(
            "/documents",
            json={"transactionId": acme_transaction_id, "fileUrl": file_url},
            headers=alice_headers,
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "fileUrl"
        assert world.db.documents == []

    def test_malformed_transaction_id_returns_400(self, client, alice_headers):
        response = client.post(
            "/documents",
            json={"transactionId": "123", "fileUrl": "https://x"},
            headers=alice_headers,
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "transactionId"

    def test_unknown_transaction_returns_400(self, client, alice_headers):
        """A missing parent transaction is a store error, not a denial."""
        response = client.post(
            "/documents",
            json={"transactionId": str(uuid7()), "fileUrl": "https://x"},
            headers=alice_headers,
        )

        assert response.status_code == 400
        assert "foreign key" in response.json()["detail"]

    def test_other_tenant_transaction_is_denied_with_403(
        self, client, bob_headers, acme_transaction_id, world: World
    ):
        """Bob cannot attach documents to Acme's transactions."""
        response = client.post(
            "/documents",
            json={"transactionId": acme_transaction_id, "fileUrl": "https://x"},
            headers=bob_headers,
        )

        assert response.status_code == 403
        assert world.db.documents == []


# =============================================================================
# List Documents Tests (GET /documents)
# =============================================================================


@pytest.mark.api
class TestListDocuments:
    """Tests for GET /documents endpoint."""

    def test_list_documents_newest_first(
        self, client, alice_headers, acme_transaction_id
    ):
        """Documents are ordered by createdAt descending."""
        for name in ["a.pdf", "b.pdf", "c.pdf"]:
            client.post(
                "/documents",
                json={
                    "transactionId": acme_transaction_id,
                    "fileUrl": f"https://files.example.com/{name}",
                },
                headers=alice_headers,
            )

        response = client.get(
            "/documents",
            params={"transactionId": acme_transaction_id},
            headers=alice_headers,
        )

        assert response.status_code == 200
        documents = response.json()["documents"]
        assert [d["fileUrl"].rsplit("/", 1)[1] for d in documents] == [
            "c.pdf",
            "b.pdf",
            "a.pdf",
        ]
        assert all(d["transactionId"] == acme_transaction_id for d in documents)
        assert {"id", "transactionId", "fileUrl", "createdAt"} <= set(documents[0])

    def test_other_tenant_documents_are_invisible(
        self, client, alice_headers, bob_headers, acme_transaction_id
    ):
        client.post(
            "/documents",
            json={"transactionId": acme_transaction_id, "fileUrl": "https://x"},
            headers=alice_headers,
        )

        response = client.get(
            "/documents",
            params={"transactionId": acme_transaction_id},
            headers=bob_headers,
        )

        assert response.status_code == 200
        assert response.json() == {"documents": []}

    def test_missing_transaction_id_returns_400(self, client, alice_headers):
        response = client.get("/documents", headers=alice_headers)

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "transactionId"
