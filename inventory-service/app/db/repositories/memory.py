"""Process-local store used when no database is reachable.

Nothing survives a restart and SKU uniqueness is not checked.
"""

from typing import Dict, List, Optional

from app.core.exceptions import NotFoundError
from app.db.repositories.base import InventoryStore
from app.domain.inventory.schemas import ProductOut, TransactionOut


class MemoryInventoryStore(InventoryStore):

    mode = "in-memory"

    def __init__(self) -> None:
        self._products: Dict[str, ProductOut] = {}
        self._transactions: List[TransactionOut] = []
        self._next_product_id = 1
        self._next_transaction_id = 1

    def new_product_id(self) -> str:
        product_id = str(self._next_product_id)
        self._next_product_id += 1
        return product_id

    def new_transaction_id(self) -> str:
        transaction_id = str(self._next_transaction_id)
        self._next_transaction_id += 1
        return transaction_id

    async def list_products(self) -> List[ProductOut]:
        return list(self._products.values())

    async def get_product(self, product_id: str) -> Optional[ProductOut]:
        return self._products.get(product_id)

    async def add_product(self, product: ProductOut) -> None:
        self._products[product.id] = product

    async def save_product(self, product: ProductOut) -> None:
        if product.id not in self._products:
            raise NotFoundError("Product not found")
        self._products[product.id] = product

    async def delete_product(self, product_id: str) -> bool:
        return self._products.pop(product_id, None) is not None

    async def replace_products(self, products: List[ProductOut]) -> List[ProductOut]:
        # seeded catalog is renumbered from 1
        self._products = {}
        self._next_product_id = 1
        stored = []
        for product in products:
            product = product.model_copy(update={"id": self.new_product_id()})
            self._products[product.id] = product
            stored.append(product)
        return stored

    async def record_movement(self, product: ProductOut, transaction: TransactionOut) -> None:
        if product.id not in self._products:
            raise NotFoundError("Product not found")
        self._products[product.id] = product
        self._transactions.append(transaction)

    async def list_transactions(self) -> List[TransactionOut]:
        return list(self._transactions)
