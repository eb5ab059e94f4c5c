# app/api/routes_products.py
from typing import List

from fastapi import APIRouter, Depends

from app.api.deps import get_store
from app.db.repositories.base import InventoryStore
from app.domain.inventory.schemas import MessageOut, ProductCreate, ProductOut, ProductUpdate
from app.domain.inventory import service


router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("", response_model=List[ProductOut])
async def list_products_endpoint(store: InventoryStore = Depends(get_store)):
    return await service.list_products(store)


@router.get("/{product_id}", response_model=ProductOut)
async def get_product_endpoint(product_id: str, store: InventoryStore = Depends(get_store)):
    return await service.get_product(store, product_id)


@router.post("", response_model=ProductOut, status_code=201)
async def create_product_endpoint(
    payload: ProductCreate,
    store: InventoryStore = Depends(get_store),
):
    return await service.create_product(store, payload)


@router.put("/{product_id}", response_model=ProductOut)
async def update_product_endpoint(
    product_id: str,
    payload: ProductUpdate,
    store: InventoryStore = Depends(get_store),
):
    return await service.update_product(store, product_id, payload)


@router.delete("/{product_id}", response_model=MessageOut)
async def delete_product_endpoint(product_id: str, store: InventoryStore = Depends(get_store)):
    await service.delete_product(store, product_id)
    return MessageOut(message="Product deleted successfully")
