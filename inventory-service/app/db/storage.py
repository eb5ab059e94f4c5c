"""Startup selection between the database and in-memory stores."""
import asyncio
from typing import Optional

from app.core.config import settings
from app.core.logging import get_storage_logger
from app.db.base import create_engine
from app.db.repositories.base import InventoryStore
from app.db.repositories.memory import MemoryInventoryStore
from app.db.repositories.sql import SqlInventoryStore

logger = get_storage_logger()


async def open_store(db_url: Optional[str] = None, timeout: Optional[float] = None) -> InventoryStore:
    """Open the database store, or fall back to memory for the process lifetime.

    Any failure (bad URL, missing driver, unreachable server, timeout) selects
    the in-memory store. There is no reconnection afterwards.
    """
    timeout = settings.DB_CONNECT_TIMEOUT if timeout is None else timeout
    engine = None
    try:
        engine = create_engine(db_url)
        store = SqlInventoryStore(engine)
        await asyncio.wait_for(store.open(), timeout=timeout)
    except Exception as e:
        logger.warning(f"Database connection failed, using in-memory storage: {e!r}")
        if engine is not None:
            await engine.dispose()
        return MemoryInventoryStore()

    logger.info(f"Database connected successfully ({store.mode})")
    return store
