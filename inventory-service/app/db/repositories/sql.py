from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional
from uuid import UUID, uuid4

from sqlalchemy.exc import DataError, IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.sql import delete, select

from app.core.exceptions import InvalidPayloadError, NotFoundError, StorageError
from app.db.base import Base
from app.db.models.products import Product
from app.db.models.transactions import Transaction
from app.db.repositories.base import InventoryStore
from app.domain.inventory.schemas import ProductOut, TransactionOut

TRANSACTION_LIST_LIMIT = 100

_PRODUCT_FIELDS = (
    "name", "sku", "category", "quantity", "reorder_point", "unit_price",
    "location", "supplier", "last_restocked", "status", "created_at", "updated_at",
)


def _parse_id(value: str) -> Optional[UUID]:
    try:
        return UUID(str(value))
    except ValueError:
        return None


def _product_out(row: Product) -> ProductOut:
    values = {field: getattr(row, field) for field in _PRODUCT_FIELDS}
    return ProductOut.model_validate({"id": row.id, **values})


def _transaction_out(row: Transaction) -> TransactionOut:
    return TransactionOut.model_validate({
        "id": row.id,
        "product_id": row.product_id,
        "type": row.type,
        "quantity": row.quantity,
        "notes": row.notes,
        "performed_by": row.performed_by,
        "created_at": row.created_at,
    })


def _apply(row: Product, product: ProductOut) -> Product:
    for field in _PRODUCT_FIELDS:
        setattr(row, field, getattr(product, field))
    return row


class SqlInventoryStore(InventoryStore):
    """Store backed by an SQLAlchemy async engine."""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self.mode = engine.dialect.name
        self._sessions = async_sessionmaker(
            bind=engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def open(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def close(self) -> None:
        await self.engine.dispose()

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[AsyncSession]:
        async with self._sessions() as session:
            try:
                yield session
            except IntegrityError as exc:
                await session.rollback()
                raise InvalidPayloadError(
                    "Product violates a uniqueness constraint",
                    {"error": str(exc.orig)},
                ) from exc
            except (DataError, OverflowError) as exc:
                await session.rollback()
                raise InvalidPayloadError("Value out of range for storage", {"error": str(exc)}) from exc
            except SQLAlchemyError as exc:
                await session.rollback()
                raise StorageError("Database operation failed", {"error": str(exc)}) from exc

    def new_product_id(self) -> str:
        return str(uuid4())

    def new_transaction_id(self) -> str:
        return str(uuid4())

    async def list_products(self) -> List[ProductOut]:
        async with self._session() as db:
            result = await db.execute(
                select(Product).order_by(Product.created_at.desc())
            )
            return [_product_out(row) for row in result.scalars().all()]

    async def get_product(self, product_id: str) -> Optional[ProductOut]:
        key = _parse_id(product_id)
        if key is None:
            return None
        async with self._session() as db:
            row = await db.get(Product, key)
            return _product_out(row) if row is not None else None

    async def add_product(self, product: ProductOut) -> None:
        async with self._session() as db:
            db.add(_apply(Product(id=UUID(product.id)), product))
            await db.commit()

    async def save_product(self, product: ProductOut) -> None:
        async with self._session() as db:
            row = await db.get(Product, UUID(product.id))
            if row is None:
                raise NotFoundError("Product not found")
            _apply(row, product)
            await db.commit()

    async def delete_product(self, product_id: str) -> bool:
        key = _parse_id(product_id)
        if key is None:
            return False
        async with self._session() as db:
            row = await db.get(Product, key)
            if row is None:
                return False
            await db.delete(row)
            await db.commit()
            return True

    async def replace_products(self, products: List[ProductOut]) -> List[ProductOut]:
        async with self._session() as db:
            await db.execute(delete(Product))
            db.add_all([_apply(Product(id=UUID(p.id)), p) for p in products])
            await db.commit()
        return products

    async def record_movement(self, product: ProductOut, transaction: TransactionOut) -> None:
        async with self._session() as db:
            row = await db.get(Product, UUID(product.id))
            if row is None:
                raise NotFoundError("Product not found")
            _apply(row, product)
            db.add(Transaction(
                id=UUID(transaction.id),
                product_id=row.id,
                type=transaction.type,
                quantity=transaction.quantity,
                notes=transaction.notes,
                performed_by=transaction.performed_by,
                created_at=transaction.created_at,
            ))
            await db.commit()

    async def list_transactions(self) -> List[TransactionOut]:
        async with self._session() as db:
            result = await db.execute(
                select(Transaction, Product)
                .outerjoin(Product, Product.id == Transaction.product_id)
                .order_by(Transaction.created_at.desc())
                .limit(TRANSACTION_LIST_LIMIT)
            )
            transactions = []
            for txn, product in result.all():
                out = _transaction_out(txn)
                if product is not None:
                    out.product = _product_out(product)
                transactions.append(out)
            return transactions
