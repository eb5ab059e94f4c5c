# app/api/routes_system.py
from fastapi import APIRouter, Depends

from app.api.deps import get_store
from app.db.repositories.base import InventoryStore
from app.domain.inventory.analytics import get_analytics
from app.domain.inventory.schemas import AnalyticsOut, HealthOut, SeedOut
from app.domain.inventory.seed import seed_catalog


router = APIRouter(prefix="/api", tags=["system"])


@router.get("/health", response_model=HealthOut)
async def health(store: InventoryStore = Depends(get_store)):
    return HealthOut(status="OK", message="Server is running", storage_mode=store.mode)


@router.get("/analytics", response_model=AnalyticsOut)
async def analytics_endpoint(store: InventoryStore = Depends(get_store)):
    return await get_analytics(store)


@router.post("/seed", response_model=SeedOut)
async def seed_endpoint(store: InventoryStore = Depends(get_store)):
    count = await seed_catalog(store)
    return SeedOut(message="Sample data created successfully", count=count)
