# app/db/models/products.py
import enum
from datetime import datetime, timezone
import uuid

from sqlalchemy import Column, DateTime, Enum, Integer, Numeric, String, Uuid

from app.db.base import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class StockStatus(str, enum.Enum):
    IN_STOCK = "In Stock"
    LOW_STOCK = "Low Stock"
    OUT_OF_STOCK = "Out of Stock"
    DAMAGED = "Damaged"


class Product(Base):
    __tablename__ = "products"

    """Represents a stocked product and its current on-hand quantity.

    Status is stored alongside the quantity so listings and analytics can
    filter on it directly; it is recomputed by the domain layer on every
    change to quantity or reorder point.
    """

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)

    name = Column(String, nullable=False)
    sku = Column(String, nullable=False, unique=True)
    category = Column(String, nullable=False, index=True)

    quantity = Column(Integer, nullable=False, default=0)
    reorder_point = Column(Integer, nullable=False, default=10)
    unit_price = Column(Numeric(18, 2, asdecimal=False), nullable=False)

    location = Column(String, nullable=False, default="Main Warehouse")
    supplier = Column(String, nullable=False, default="")

    last_restocked = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    status = Column(
        Enum(StockStatus, name="stock_status_enum", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=StockStatus.IN_STOCK,
    )

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
