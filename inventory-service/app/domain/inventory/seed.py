"""Demo catalog of construction materials used by POST /api/seed."""
from datetime import datetime, timezone

from app.core.logging import get_inventory_logger
from app.db.repositories.base import InventoryStore
from .schemas import ProductOut
from .status import derive_status

logger = get_inventory_logger()

DEMO_CATALOG = [
    {"name": "Steel Rods (10mm)", "sku": "SR-10MM-001", "category": "Steel", "quantity": 150,
     "reorder_point": 50, "unit_price": 450, "location": "Warehouse A", "supplier": "Steel Corp India"},
    {"name": "Cement Bags (50kg)", "sku": "CM-50KG-001", "category": "Cement", "quantity": 200,
     "reorder_point": 100, "unit_price": 380, "location": "Warehouse B", "supplier": "UltraTech"},
    {"name": "Bricks (Red Clay)", "sku": "BR-RC-001", "category": "Bricks", "quantity": 5000,
     "reorder_point": 1000, "unit_price": 8, "location": "Yard 1", "supplier": "Local Kiln"},
    {"name": "Sand (per ton)", "sku": "SD-T-001", "category": "Aggregates", "quantity": 25,
     "reorder_point": 10, "unit_price": 1200, "location": "Yard 2", "supplier": "Sand Suppliers Ltd"},
    {"name": "Paint (White 20L)", "sku": "PT-W20-001", "category": "Paint", "quantity": 8,
     "reorder_point": 15, "unit_price": 2500, "location": "Warehouse A", "supplier": "Asian Paints"},
    {"name": "Tiles (Ceramic 2x2)", "sku": "TL-C22-001", "category": "Tiles", "quantity": 3,
     "reorder_point": 20, "unit_price": 450, "location": "Warehouse C", "supplier": "Kajaria"},
    {"name": "Plywood (8mm)", "sku": "PW-8MM-001", "category": "Wood", "quantity": 45,
     "reorder_point": 20, "unit_price": 1800, "location": "Warehouse A", "supplier": "Century Ply"},
]


async def seed_catalog(store: InventoryStore) -> int:
    """Replace every product with DEMO_CATALOG. Transactions are left alone."""
    now = datetime.now(timezone.utc)
    products = [
        ProductOut(
            id=store.new_product_id(),
            status=derive_status(item["quantity"], item["reorder_point"]),
            last_restocked=now,
            created_at=now,
            updated_at=now,
            **item,
        )
        for item in DEMO_CATALOG
    ]
    stored = await store.replace_products(products)
    logger.info(f"Seeded {len(stored)} demo products")
    return len(stored)
