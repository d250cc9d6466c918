"""Database session management.

The store connection is an explicitly constructed resource handle. It is
opened once and reused; concurrent first-time ``connect()`` calls share a
single in-flight attempt instead of opening duplicate engines.
"""

import asyncio
import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from pitchlab.config import settings
from pitchlab.db.models import Base

logger = logging.getLogger(__name__)


class DatabaseNotConnectedError(RuntimeError):
    """Raised when the store is used before a successful connect()."""

    def __init__(self) -> None:
        super().__init__("Database not connected")


class Database:
    """Lifecycle-managed handle to the project store."""

    def __init__(
        self,
        url: str,
        *,
        echo: bool = False,
        auto_connect: bool = True,
        engine_factory: Callable[..., AsyncEngine] = create_async_engine,
    ):
        self.url = url
        self.echo = echo
        self.auto_connect = auto_connect
        self._engine_factory = engine_factory
        self._engine: AsyncEngine | None = None
        self._session_maker: async_sessionmaker[AsyncSession] | None = None
        self._connecting: asyncio.Task | None = None

    @property
    def is_connected(self) -> bool:
        return self._session_maker is not None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise DatabaseNotConnectedError()
        return self._engine

    async def connect(self) -> None:
        """Open the store connection.

        A no-op once connected. Callers arriving while an attempt is in
        flight await that attempt. A failed attempt is forgotten so a later
        call can retry, and the error is re-raised to every waiter.
        """
        if self.is_connected:
            return

        task = self._connecting
        if task is None:
            task = asyncio.ensure_future(self._open())
            self._connecting = task

        try:
            await asyncio.shield(task)
        finally:
            if task.done() and self._connecting is task:
                self._connecting = None

    async def _open(self) -> None:
        engine = self._engine_factory(self.url, echo=self.echo)
        try:
            # Create tables on connect (dev only - use Alembic in production)
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except Exception:
            logger.exception("Failed to connect to database")
            await engine.dispose()
            raise

        self._engine = engine
        self._session_maker = async_sessionmaker(
            engine, class_=AsyncSession, expire_on_commit=False
        )
        logger.info("Connected to database")

    async def disconnect(self) -> None:
        """Dispose of the engine. A later operation reconnects if allowed."""
        if self._engine is None:
            return
        engine = self._engine
        self._engine = None
        self._session_maker = None
        await engine.dispose()
        logger.info("Disconnected from database")

    async def ensure_connected(self) -> None:
        if self.is_connected:
            return
        if not self.auto_connect:
            raise DatabaseNotConnectedError()
        await self.connect()

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Yield a session, committing on success and rolling back on error."""
        await self.ensure_connected()
        session_maker = self._session_maker
        if session_maker is None:
            # Disconnected while the connect was being awaited
            raise DatabaseNotConnectedError()
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise


database = Database(
    settings.database_url,
    echo=settings.debug,
    auto_connect=settings.store_auto_connect,
)


async def get_db() -> Database:
    """Dependency for getting the process-wide database handle."""
    return database
