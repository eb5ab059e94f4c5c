from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import declarative_base
from app.core.config import settings

Base = declarative_base()


def create_engine(db_url: Optional[str] = None, echo: Optional[bool] = None) -> AsyncEngine:
    """Build the async engine for DB_URL (or an explicit URL)."""
    return create_async_engine(
        db_url or settings.DB_URL,
        future=True,
        echo=settings.DB_ECHO if echo is None else echo,
    )
