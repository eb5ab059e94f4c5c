# app/domain/inventory/schemas.py
from datetime import datetime, timezone
from typing import Annotated, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from app.db.models.products import StockStatus
from app.db.models.transactions import TransactionType

# products.quantity, reorder_point and transactions.quantity are INTEGER columns
INT32_MIN = -2**31
INT32_MAX = 2**31 - 1

StockCount = Annotated[int, Field(ge=INT32_MIN, le=INT32_MAX)]


def _as_utc(value: datetime) -> datetime:
    # SQLite hands timestamps back without tzinfo
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class CamelModel(BaseModel):
    """Fields are snake_case in Python and camelCase on the wire."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class ProductCreate(CamelModel):
    name: str
    sku: str
    category: str
    quantity: StockCount = 0
    reorder_point: StockCount = 10
    unit_price: float
    location: str = "Main Warehouse"
    supplier: str = ""
    last_restocked: Optional[datetime] = None
    status: Optional[StockStatus] = None


class ProductUpdate(CamelModel):
    name: Optional[str] = None
    sku: Optional[str] = None
    category: Optional[str] = None
    quantity: Optional[StockCount] = None
    reorder_point: Optional[StockCount] = None
    unit_price: Optional[float] = None
    location: Optional[str] = None
    supplier: Optional[str] = None
    last_restocked: Optional[datetime] = None
    status: Optional[StockStatus] = None


class ProductOut(CamelModel):
    id: str
    name: str
    sku: str
    category: str
    quantity: int
    reorder_point: int
    unit_price: float
    location: str
    supplier: str
    last_restocked: datetime
    status: StockStatus
    created_at: datetime
    updated_at: datetime

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value):
        return str(value)

    @field_validator("unit_price")
    @classmethod
    def _round_price(cls, value):
        # unit_price is NUMERIC(18, 2)
        return round(value, 2)

    @field_validator("last_restocked", "created_at", "updated_at")
    @classmethod
    def _normalize_timestamps(cls, value):
        return _as_utc(value)

    @property
    def stock_value(self) -> float:
        return self.quantity * self.unit_price


class TransactionCreate(CamelModel):
    product_id: str
    type: TransactionType
    quantity: StockCount
    notes: Optional[str] = None
    performed_by: Optional[str] = None


class TransactionOut(CamelModel):
    id: str
    product_id: str
    type: TransactionType
    quantity: int
    notes: str
    performed_by: str
    created_at: datetime
    product: Optional[ProductOut] = None

    @field_validator("id", "product_id", mode="before")
    @classmethod
    def _stringify_ids(cls, value):
        return str(value)

    @field_validator("created_at")
    @classmethod
    def _normalize_created_at(cls, value):
        return _as_utc(value)


class MovementOut(CamelModel):
    transaction: TransactionOut
    product: ProductOut


class StockAlert(CamelModel):
    product_id: str
    product_name: str
    current_stock: int
    reorder_point: int
    severity: Literal["critical", "warning"]


class AnalyticsOut(CamelModel):
    total_products: int
    total_value: float
    low_stock_count: int
    damaged_count: int
    category_breakdown: Dict[str, int]
    top_products: List[ProductOut]
    low_stock_items: List[ProductOut]
    alerts: List[StockAlert]


class MessageOut(CamelModel):
    message: str


class SeedOut(CamelModel):
    message: str
    count: int


class HealthOut(CamelModel):
    status: str
    message: str
    storage_mode: str
