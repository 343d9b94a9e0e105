"""
Database connection and session management.
Provides the injectable store handle wrapping an async SQLAlchemy engine and its connection pool.
"""

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.pool import StaticPool
from sqlalchemy import Integer, event, text
from contextlib import asynccontextmanager
from lightbnb.config import Settings, get_settings
from typing import AsyncIterator, Optional
import logging

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    """SQLite leaves foreign key enforcement off per connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Base(DeclarativeBase):
    """
    Base class for all database models.
    Every LightBnB table uses a serial integer primary key.
    """

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    def __repr__(self) -> str:
        """String representation of the model."""
        return f"<{self.__class__.__name__}(id={self.id})>"


class Database:
    """
    Store handle owning the engine, its connection pool and the session factory.

    Created once by the process entry point and passed to services. Nothing is
    connected until init() is awaited; shutdown() disposes the pool.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("Database is not initialized; await Database.init() first")
        return self._engine

    @property
    def is_initialized(self) -> bool:
        return self._engine is not None

    def _engine_options(self) -> dict:
        """Build engine keyword arguments for the configured backend."""
        if self.settings.is_sqlite:
            # In-memory SQLite must share its single connection
            return {
                "echo": self.settings.db_echo,
                "poolclass": StaticPool,
                "connect_args": {"check_same_thread": False},
            }

        return {
            "echo": self.settings.db_echo,
            "pool_size": self.settings.db_pool_size,
            "max_overflow": self.settings.db_max_overflow,
            "pool_pre_ping": True,
            "pool_recycle": self.settings.db_pool_recycle,
            "pool_timeout": self.settings.db_pool_timeout,
            "connect_args": {
                "server_settings": {
                    "application_name": self.settings.app_name,
                }
            },
        }

    async def init(self) -> None:
        """Create the engine and session factory. Safe to call more than once."""
        if self._engine is not None:
            return

        self._engine = create_async_engine(self.settings.database_url, **self._engine_options())
        if self.settings.is_sqlite:
            event.listen(self._engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

        self._session_factory = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        logger.info(f"Database engine initialized for {self._engine.url.render_as_string(hide_password=True)}")

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[AsyncSession]:
        """
        Acquire a session from the pool for the duration of one operation.
        The session is rolled back on error and always released.
        """
        if self._session_factory is None:
            await self.init()

        session = self._session_factory()
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await self.release(session)

    async def release(self, session: AsyncSession) -> None:
        """Return a session's connection to the pool."""
        await session.close()

    async def shutdown(self) -> None:
        """
        Dispose of the engine and every pooled connection.
        The handle can be initialized again afterwards.
        """
        if self._engine is None:
            return

        await self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info("Database connections closed")

    async def check_connection(self) -> bool:
        """
        Test database connectivity.
        Returns True if connection is successful, False otherwise.
        """
        try:
            async with self.acquire() as session:
                result = await session.execute(text("SELECT 1"))
                result.scalar()
                logger.info("Database connection successful")
                return True
        except Exception as e:
            logger.error(f"Database connection failed: {e}")
            return False

    async def create_tables(self) -> None:
        """
        Create all database tables.
        Production schemas are pre-existing; this serves development and tests.
        """
        # Register every model on the metadata
        import lightbnb.models  # noqa: F401

        await self.init()
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
            logger.info("Database tables created successfully")

    async def drop_tables(self) -> None:
        """
        Drop all database tables.
        This should only be used in testing or development.
        """
        if self.settings.is_production:
            raise RuntimeError("Cannot drop tables in production environment")

        import lightbnb.models  # noqa: F401

        await self.init()
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            logger.info("Database tables dropped successfully")
