"""API tests for the Auth Gate.

Every resource endpoint requires `Authorization: Bearer <token>`. The gate
rejects before any validation or store access happens.
"""

from unittest.mock import MagicMock

import pytest

from src.core.container import get_logger, get_token_verifier
from src.infrastructure.supabase.auth_adapter import SupabaseAuthAdapter
from src.main import app

PROTECTED = [
    ("GET", "/transactions"),
    ("POST", "/transactions"),
    ("GET", "/documents"),
    ("POST", "/documents"),
    ("GET", "/summary"),
    ("GET", "/tenants"),
    ("POST", "/tenants"),
]


class ExplodingVerifier:
    async def verify(self, token: str):
        raise RuntimeError("provider client crashed")


@pytest.fixture
def gate_logger(client):
    logger = MagicMock()
    app.dependency_overrides[get_logger] = lambda: logger
    yield logger
    app.dependency_overrides.pop(get_logger, None)


def _rejection_codes(logger: MagicMock) -> list[str]:
    return [
        call.kwargs["error_code"]
        for call in logger.info.call_args_list
        if call.args == ("Authentication rejected",)
    ]


@pytest.mark.api
class TestAuthGate:
    """Tests for bearer authentication on protected routes."""

    @pytest.mark.parametrize("method, path", PROTECTED)
    def test_missing_header_returns_401(
        self, client, token_verifier, store_factory, method, path
    ):
        response = client.request(method, path, json={})

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"
        data = response.json()
        assert data["status"] == 401
        assert data["detail"] == "Missing or invalid authorization header"
        assert token_verifier.calls == []
        assert store_factory.built == []

    def test_non_bearer_scheme_returns_401(self, client, token_verifier):
        response = client.get(
            "/tenants", headers={"Authorization": "Basic dXNlcjpwYXNz"}
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Missing or invalid authorization header"
        assert token_verifier.calls == []

    @pytest.mark.parametrize("header", ["Bearer", "Bearer ", "Bearer    "])
    def test_empty_token_returns_401(self, client, token_verifier, header):
        response = client.get("/tenants", headers={"Authorization": header})

        assert response.status_code == 401
        assert response.json()["detail"] == "Empty token"
        assert token_verifier.calls == []

    def test_rejected_token_returns_401_with_reason(self, client, store_factory):
        response = client.get(
            "/tenants", headers={"Authorization": "Bearer forged-token"}
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid or expired token: invalid JWT"
        assert store_factory.built == []

    def test_verifier_exception_returns_401(self, client, alice_headers):
        app.dependency_overrides[get_token_verifier] = lambda: ExplodingVerifier()

        response = client.get("/tenants", headers=alice_headers)

        assert response.status_code == 401
        assert response.json()["detail"] == "Authentication failed"

    def test_unconfigured_identity_provider_returns_500(self, client, alice_headers):
        """Missing provider credentials are an operator error, not a 401."""
        app.dependency_overrides[get_token_verifier] = lambda: SupabaseAuthAdapter(
            supabase_url=None, anon_key=None
        )

        response = client.get("/tenants", headers=alice_headers)

        assert response.status_code == 500
        assert response.json()["detail"] == (
            "Server configuration error: Missing Supabase environment variables"
        )

    def test_authentication_runs_before_body_validation(self, client, store_factory):
        response = client.post("/transactions", json={"amount": -1})

        assert response.status_code == 401
        assert store_factory.built == []

    def test_valid_token_builds_store_for_that_token(
        self, client, alice_headers, token_verifier, store_factory
    ):
        response = client.get("/tenants", headers=alice_headers)

        assert response.status_code == 200
        assert token_verifier.calls == ["alice-token"]
        assert store_factory.built == ["alice-token"]

    def test_lowercase_bearer_scheme_is_accepted(self, client):
        response = client.get(
            "/tenants", headers={"Authorization": "bearer alice-token"}
        )

        assert response.status_code == 200

    def test_error_responses_carry_trace_id(self, client):
        response = client.get("/tenants", headers={"X-Trace-Id": "trace-123"})

        assert response.status_code == 401
        assert response.headers["X-Trace-Id"] == "trace-123"
        assert response.json()["trace_id"] == "trace-123"

    @pytest.mark.parametrize(
        "headers, code",
        [
            ({}, "authorization_header_missing"),
            ({"Authorization": "Basic dXNlcjpwYXNz"}, "authorization_header_missing"),
            ({"Authorization": "Bearer "}, "token_empty"),
            ({"Authorization": "Bearer forged-token"}, "token_invalid"),
        ],
    )
    def test_rejections_are_logged_with_error_code(
        self, client, gate_logger, headers, code
    ):
        response = client.get("/tenants", headers=headers)

        assert response.status_code == 401
        assert _rejection_codes(gate_logger) == [code]

    def test_verifier_exception_is_logged_as_authentication_failed(
        self, client, gate_logger, alice_headers
    ):
        app.dependency_overrides[get_token_verifier] = lambda: ExplodingVerifier()

        client.get("/tenants", headers=alice_headers)

        assert _rejection_codes(gate_logger) == ["authentication_failed"]
        gate_logger.error.assert_called_once()
