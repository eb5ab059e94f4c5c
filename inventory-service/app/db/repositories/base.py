"""Storage interface shared by the database and in-memory backends.

One implementation is chosen at startup (see app.db.storage) and injected
into the routes; the domain services only ever talk to this interface.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from app.domain.inventory.schemas import ProductOut, TransactionOut


class InventoryStore(ABC):

    #: reported by the health endpoint
    mode: str

    async def open(self) -> None:
        """Prepare the backend for use."""

    async def close(self) -> None:
        """Release backend resources."""

    @abstractmethod
    def new_product_id(self) -> str:
        """Return an id for a product that is about to be added."""

    @abstractmethod
    def new_transaction_id(self) -> str:
        """Return an id for a transaction that is about to be recorded."""

    @abstractmethod
    async def list_products(self) -> List[ProductOut]:
        """Return every product."""

    @abstractmethod
    async def get_product(self, product_id: str) -> Optional[ProductOut]:
        """Return a product by id, or None if it does not exist."""

    @abstractmethod
    async def add_product(self, product: ProductOut) -> None:
        """Persist a new product."""

    @abstractmethod
    async def save_product(self, product: ProductOut) -> None:
        """Overwrite an existing product. Raises NotFoundError if it is gone."""

    @abstractmethod
    async def delete_product(self, product_id: str) -> bool:
        """Delete a product; return False if it did not exist."""

    @abstractmethod
    async def replace_products(self, products: List[ProductOut]) -> List[ProductOut]:
        """Drop the whole catalog and store `products` in its place."""

    @abstractmethod
    async def record_movement(self, product: ProductOut, transaction: TransactionOut) -> None:
        """Save the moved product and append its transaction as one unit."""

    @abstractmethod
    async def list_transactions(self) -> List[TransactionOut]:
        """Return recorded transactions."""
