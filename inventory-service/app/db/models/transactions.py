import enum
from sqlalchemy import Column, DateTime, Enum, Index, Integer, String, Text, Uuid
import uuid

from app.db.base import Base
from app.db.models.products import utcnow


class TransactionType(str, enum.Enum):
    IN = "IN"
    OUT = "OUT"
    DAMAGE = "DAMAGE"
    RETURN = "RETURN"


class Transaction(Base):
    __tablename__ = "transactions"

    """Represents a single stock movement against a product.

    Movements are append-only. product_id is a plain reference rather than a
    foreign key so that deleting a product leaves its history in place.
    """

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    product_id = Column(Uuid(as_uuid=True), nullable=False, index=True)

    type = Column(Enum(TransactionType, name="transaction_type_enum"), nullable=False)
    quantity = Column(Integer, nullable=False)

    notes = Column(Text, nullable=False, default="")
    performed_by = Column(String, nullable=False, default="System")

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    __table_args__ = (
        Index("ix_transactions_created_at", "created_at"),
    )
