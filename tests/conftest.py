"""Shared pytest configuration and fixtures.

API tests run the real application with two dependency overrides:
- get_token_verifier -> StaticTokenVerifier (token -> user map)
- get_store_factory  -> InMemoryStoreFactory (row-level-security simulator)

Two callers are provided by default: Alice holds write access to "Acme" and
read access to "Bravo"; Bob holds write access to "Bravo" only.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from uuid import UUID

import pytest
from fastapi.testclient import TestClient
from uuid_extensions import uuid7

from src.core.container import get_store_factory, get_token_verifier
from src.domain.enums.tenant_role import TenantRole
from src.main import app
from tests.utils.in_memory_store import (
    InMemoryDatabase,
    InMemoryStoreFactory,
    StaticTokenVerifier,
)

ALICE_TOKEN = "alice-token"
BOB_TOKEN = "bob-token"


@dataclass(frozen=True)
class World:
    """Seeded tenants and callers."""

    db: InMemoryDatabase
    alice_id: UUID
    bob_id: UUID
    acme_id: UUID
    bravo_id: UUID


@pytest.fixture
def world() -> World:
    db = InMemoryDatabase()
    alice_id = uuid7()
    bob_id = uuid7()
    acme_id = db.add_tenant("Acme")
    bravo_id = db.add_tenant("Bravo")
    db.add_member(alice_id, acme_id, TenantRole.WRITE)
    db.add_member(alice_id, bravo_id, TenantRole.READ)
    db.add_member(bob_id, bravo_id, TenantRole.WRITE)
    return World(
        db=db,
        alice_id=alice_id,
        bob_id=bob_id,
        acme_id=acme_id,
        bravo_id=bravo_id,
    )


@pytest.fixture
def tokens(world: World) -> dict[str, UUID]:
    return {ALICE_TOKEN: world.alice_id, BOB_TOKEN: world.bob_id}


@pytest.fixture
def token_verifier(tokens) -> StaticTokenVerifier:
    return StaticTokenVerifier(tokens)


@pytest.fixture
def store_factory(world: World, tokens) -> InMemoryStoreFactory:
    return InMemoryStoreFactory(world.db, tokens)


@pytest.fixture
def client(token_verifier, store_factory) -> Iterator[TestClient]:
    """Test client wired to the in-memory identity provider and store."""
    app.dependency_overrides[get_token_verifier] = lambda: token_verifier
    app.dependency_overrides[get_store_factory] = lambda: store_factory
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.pop(get_token_verifier, None)
    app.dependency_overrides.pop(get_store_factory, None)


@pytest.fixture
def alice_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {ALICE_TOKEN}"}


@pytest.fixture
def bob_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {BOB_TOKEN}"}
