from fastapi import Request

from app.db.repositories.base import InventoryStore


def get_store(request: Request) -> InventoryStore:
    """Storage backend selected at startup."""
    return request.app.state.store
