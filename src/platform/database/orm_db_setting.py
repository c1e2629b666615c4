"""
SQLAlchemy async engine and session management

This module provides:
1. AsyncEngineManager: event-loop-aware engine / session maker holder
2. Base: declarative base for all ORM models
3. Database: DI-friendly wrapper exposing `session()` and schema helpers

The engine URL comes from `settings.DATABASE_URL_ASYNC` (PostgreSQL via
asyncpg in production, SQLite via aiosqlite in tests).
"""

import asyncio
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger


# =============================================================================
# Base Model
# =============================================================================


class Base(DeclarativeBase):
    pass


# =============================================================================
# Event-loop-aware Engine Manager
# =============================================================================


class AsyncEngineManager:
    """
    Holds one AsyncEngine per event loop.

    Engines are bound to the loop they were created on; a new loop (e.g. a
    fresh pytest-asyncio loop) gets a new engine to prevent
    "Task got Future attached to a different loop" errors.
    """

    def __init__(self, url: Optional[str] = None) -> None:
        self._url = url or settings.DATABASE_URL_ASYNC
        self._engine: Optional[AsyncEngine] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._session_maker: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def url(self) -> str:
        return self._url

    def get_engine(self) -> AsyncEngine:
        try:
            current_loop = asyncio.get_running_loop()
        except RuntimeError:
            # No event loop running, create engine without loop tracking
            if self._engine is None:
                self._engine = self._create_engine()
            return self._engine

        if self._loop is not current_loop:
            if self._engine is not None:
                Logger.base.warning('🔄 [DB] Event loop changed, recreating engine...')
            self._engine = self._create_engine()
            self._session_maker = None
            self._loop = current_loop

        return self._engine  # type: ignore[return-value]

    def get_session_maker(self) -> async_sessionmaker[AsyncSession]:
        engine = self.get_engine()
        if self._session_maker is None:
            self._session_maker = async_sessionmaker(
                engine,
                class_=AsyncSession,
                expire_on_commit=False,
            )
        return self._session_maker

    async def dispose(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
        self._engine = None
        self._session_maker = None
        self._loop = None

    def _create_engine(self) -> AsyncEngine:
        kwargs: dict[str, Any] = {'echo': settings.DB_ECHO}
        if not self._is_sqlite:
            kwargs |= {
                'pool_size': settings.DB_POOL_SIZE,
                'max_overflow': settings.DB_POOL_MAX_OVERFLOW,
                'pool_timeout': settings.DB_POOL_TIMEOUT,
                'pool_recycle': settings.DB_POOL_RECYCLE,
                'pool_pre_ping': settings.DB_POOL_PRE_PING,
            }
        Logger.base.info(f'🔗 [DB] Creating engine for {self._url.split("@")[-1]}')
        engine = create_async_engine(self._url, **kwargs)
        if self._is_sqlite:
            self._setup_sqlite_listeners(engine)
        return engine

    @property
    def _is_sqlite(self) -> bool:
        return self._url.startswith('sqlite')

    @staticmethod
    def _setup_sqlite_listeners(engine: AsyncEngine) -> None:
        """SQLite ignores FOR UPDATE; every transaction takes the write lock on BEGIN."""

        @event.listens_for(engine.sync_engine, 'connect')
        def disable_driver_begin(dbapi_connection, connection_record) -> None:
            dbapi_connection.isolation_level = None

        @event.listens_for(engine.sync_engine, 'begin')
        def begin_immediate(conn) -> None:
            conn.exec_driver_sql('BEGIN IMMEDIATE')


# =============================================================================
# Database Class (for DI)
# =============================================================================


class Database:
    """
    Database class for dependency injection

    Repositories receive `database.provided.session` as their session
    factory; the Unit of Work uses the same factory to open one
    transactional session per use case.
    """

    def __init__(self, url: Optional[str] = None) -> None:
        self._engine_manager = AsyncEngineManager(url)

    @property
    def engine(self) -> AsyncEngine:
        return self._engine_manager.get_engine()

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Context manager for database sessions

        Note: Automatically handles rollback on exception
        """
        session_maker = self._engine_manager.get_session_maker()
        async with session_maker() as session:
            yield session

    async def create_all(self) -> None:
        """Create tables from ORM metadata (tests and local bootstrap only)."""
        # Register every model on Base.metadata
        import src.service.booking.driven_adapter.model  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all, checkfirst=True)

    async def drop_all(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def dispose(self) -> None:
        await self._engine_manager.dispose()
