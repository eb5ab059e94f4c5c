# app/api/routes_transactions.py
from typing import List

from fastapi import APIRouter, Depends

from app.api.deps import get_store
from app.db.repositories.base import InventoryStore
from app.domain.inventory.schemas import MovementOut, TransactionCreate, TransactionOut
from app.domain.inventory.service import apply_movement, list_transactions


router = APIRouter(prefix="/api/transactions", tags=["transactions"])


@router.post("", response_model=MovementOut, status_code=201)
async def create_transaction_endpoint(
    payload: TransactionCreate,
    store: InventoryStore = Depends(get_store),
):
    txn, product = await apply_movement(store, payload)
    return MovementOut(transaction=txn, product=product)


@router.get("", response_model=List[TransactionOut])
async def list_transactions_endpoint(store: InventoryStore = Depends(get_store)):
    return await list_transactions(store)
