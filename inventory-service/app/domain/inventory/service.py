# app/domain/inventory/service.py
from datetime import datetime, timezone
from typing import List, Tuple

from pydantic import ValidationError

from app.core.exceptions import InvalidPayloadError, NotFoundError
from app.core.logging import get_inventory_logger
from app.db.models.transactions import TransactionType
from app.db.repositories.base import InventoryStore
from .schemas import (
    INT32_MAX, INT32_MIN, ProductCreate, ProductOut, ProductUpdate, TransactionCreate, TransactionOut,
)
from .status import derive_status, resolve_status

logger = get_inventory_logger()

INBOUND_TYPES = {TransactionType.IN, TransactionType.RETURN}


def _now() -> datetime:
    return datetime.now(timezone.utc)


async def list_products(store: InventoryStore) -> List[ProductOut]:
    return await store.list_products()


async def get_product(store: InventoryStore, product_id: str) -> ProductOut:
    product = await store.get_product(product_id)
    if product is None:
        raise NotFoundError("Product not found")
    return product


async def create_product(store: InventoryStore, data: ProductCreate) -> ProductOut:
    now = _now()
    values = data.model_dump(exclude={"status"})
    values["last_restocked"] = values["last_restocked"] or now

    product = ProductOut(
        id=store.new_product_id(),
        status=resolve_status(data.quantity, data.reorder_point, data.status),
        created_at=now,
        updated_at=now,
        **values,
    )
    await store.add_product(product)
    logger.info(f"Created product {product.sku} ({product.id}) with status {product.status.value}")
    return product


async def update_product(store: InventoryStore, product_id: str, changes: ProductUpdate) -> ProductOut:
    current = await get_product(store, product_id)

    values = changes.model_dump(exclude_unset=True)
    requested = values.pop("status", None)
    merged = {**current.model_dump(), **values, "updated_at": _now()}
    try:
        product = ProductOut.model_validate(merged)
    except ValidationError as e:
        raise InvalidPayloadError("Error updating product", {"error": str(e)}) from e

    product.status = resolve_status(product.quantity, product.reorder_point, requested)
    await store.save_product(product)
    return product


async def delete_product(store: InventoryStore, product_id: str) -> None:
    if not await store.delete_product(product_id):
        raise NotFoundError("Product not found")
    logger.info(f"Deleted product {product_id}")


async def apply_movement(
    store: InventoryStore,
    data: TransactionCreate,
) -> Tuple[TransactionOut, ProductOut]:
    """Apply a stock movement and record it.

    IN and RETURN add to the quantity, OUT and DAMAGE subtract from it with
    no floor at zero. Only IN counts as a restock.
    """
    product = await get_product(store, data.product_id)

    now = _now()
    delta = data.quantity if data.type in INBOUND_TYPES else -data.quantity
    quantity = product.quantity + delta
    if not INT32_MIN <= quantity <= INT32_MAX:
        raise InvalidPayloadError(
            "Error creating transaction",
            {"error": f"resulting quantity {quantity} is out of range"},
        )
    updates = {"quantity": quantity, "updated_at": now}
    if data.type == TransactionType.IN:
        updates["last_restocked"] = now

    product = product.model_copy(update=updates)
    product.status = derive_status(product.quantity, product.reorder_point)

    txn = TransactionOut(
        id=store.new_transaction_id(),
        product_id=product.id,
        type=data.type,
        quantity=data.quantity,
        notes=data.notes or "",
        performed_by=data.performed_by or "System",
        created_at=now,
    )
    await store.record_movement(product, txn)

    logger.info(
        f"{data.type.value} {data.quantity} x {product.sku}: "
        f"quantity now {product.quantity} ({product.status.value})"
    )
    return txn, product


async def list_transactions(store: InventoryStore) -> List[TransactionOut]:
    return await store.list_transactions()
