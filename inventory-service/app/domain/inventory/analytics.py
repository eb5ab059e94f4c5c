from collections import Counter
from typing import List

from app.db.models.products import StockStatus
from app.db.repositories.base import InventoryStore
from .schemas import AnalyticsOut, ProductOut, StockAlert

TOP_PRODUCTS_LIMIT = 5
LOW_STOCK_ITEMS_LIMIT = 10

LOW_STOCK_STATUSES = {StockStatus.LOW_STOCK, StockStatus.OUT_OF_STOCK}


def build_analytics(products: List[ProductOut]) -> AnalyticsOut:
    """Aggregate dashboard figures over the current product list."""
    low_stock = [p for p in products if p.status in LOW_STOCK_STATUSES]
    damaged = [p for p in products if p.status == StockStatus.DAMAGED]

    alerts = [
        StockAlert(
            product_id=p.id,
            product_name=p.name,
            current_stock=p.quantity,
            reorder_point=p.reorder_point,
            severity="critical" if p.status == StockStatus.OUT_OF_STOCK else "warning",
        )
        for p in low_stock
    ]

    return AnalyticsOut(
        total_products=len(products),
        total_value=sum(p.stock_value for p in products),
        low_stock_count=len(low_stock),
        damaged_count=len(damaged),
        category_breakdown=dict(Counter(p.category for p in products)),
        top_products=sorted(products, key=lambda p: p.stock_value, reverse=True)[:TOP_PRODUCTS_LIMIT],
        low_stock_items=low_stock[:LOW_STOCK_ITEMS_LIMIT],
        alerts=alerts,
    )


async def get_analytics(store: InventoryStore) -> AnalyticsOut:
    return build_analytics(await store.list_products())
