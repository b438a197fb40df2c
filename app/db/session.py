# app/db/session.py
"""
Database engine lifecycle and session dependencies.
"""

import logging
from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.config import settings

logger = logging.getLogger(__name__)


class Database:
    """Owns the async engine and the session factory built on it."""

    def __init__(self, url: str, *, echo: bool = False):
        self.url = url
        self.echo = echo
        self.engine: Optional[AsyncEngine] = None
        self.session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    async def connect(self) -> None:
        """Create the engine and make sure the tables exist."""
        self.engine = create_async_engine(self.url, echo=self.echo)
        self.session_factory = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

        logger.info(f"Database connected: {self.engine.url.render_as_string()}")

    async def disconnect(self) -> None:
        if self.engine is not None:
            await self.engine.dispose()
            logger.info("Database disconnected")
        self.engine = None
        self.session_factory = None


db = Database(settings.DATABASE_URL, echo=settings.DB_ECHO)


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Return the session factory, for work that outlives a single dependency."""
    if db.session_factory is None:
        raise RuntimeError("Database is not connected.")
    return db.session_factory


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield one session per request."""
    async with get_session_factory()() as session:
        yield session
