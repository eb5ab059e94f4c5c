"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from app.db.base import create_engine
from app.db.repositories.memory import MemoryInventoryStore
from app.db.repositories.sql import SqlInventoryStore
from app.main import create_app


@pytest.fixture
def memory_store():
    """Empty in-memory store."""
    return MemoryInventoryStore()


@pytest.fixture
def client(memory_store):
    """API client running against the in-memory store."""
    with TestClient(create_app(store=memory_store)) as test_client:
        yield test_client


@pytest.fixture
def sql_client(tmp_path):
    """API client running against a throwaway SQLite database."""
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'inventory.db'}", echo=False)
    with TestClient(create_app(store=SqlInventoryStore(engine))) as test_client:
        yield test_client


@pytest.fixture
def product_payload():
    """Create-product request body."""
    return {
        "name": "Steel Rods (12mm)",
        "sku": "SR-12MM-001",
        "category": "Steel",
        "quantity": 5,
        "reorderPoint": 10,
        "unitPrice": 520.0,
        "location": "Warehouse A",
        "supplier": "Steel Corp India",
    }


@pytest.fixture
def make_product(client, product_payload):
    """Factory creating products through the API on the in-memory client."""

    def _make(**overrides):
        body = {**product_payload, **overrides}
        response = client.post("/api/products", json=body)
        assert response.status_code == 201, response.text
        return response.json()

    return _make
