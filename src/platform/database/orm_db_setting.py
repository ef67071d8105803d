"""
SQLAlchemy async engine and session management

This module provides:
1. Base: declarative base for every ORM model
2. Database: event-loop-aware engine/session owner used through DI

Engines are bound to the event loop that created them; when the running loop
changes (e.g. TestClient portal threads) the engine is rebuilt.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger


class Base(DeclarativeBase):
    pass


class Database:
    """
    Owns one async engine and its session maker.

    Args:
        db_url: SQLAlchemy async URL; defaults to settings.DATABASE_URL_ASYNC
    """

    def __init__(self, *, db_url: Optional[str] = None) -> None:
        self._db_url = db_url or settings.DATABASE_URL_ASYNC
        self._engine: Optional[AsyncEngine] = None
        self._session_maker: Optional[async_sessionmaker[AsyncSession]] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None

    @property
    def is_sqlite(self) -> bool:
        return self._db_url.startswith('sqlite')

    def get_engine(self) -> AsyncEngine:
        try:
            current_loop: Optional[asyncio.AbstractEventLoop] = asyncio.get_running_loop()
        except RuntimeError:
            current_loop = None

        if self._engine is None or (current_loop is not None and self._loop is not current_loop):
            if self._engine is not None:
                Logger.base.warning('🔄 [DB] Event loop changed, rebuilding engine...')
            self._engine = self._create_engine()
            self._session_maker = async_sessionmaker(
                self._engine, class_=AsyncSession, expire_on_commit=False
            )
            self._loop = current_loop

        return self._engine

    def get_session_maker(self) -> async_sessionmaker[AsyncSession]:
        self.get_engine()
        assert self._session_maker is not None
        return self._session_maker

    def _create_engine(self) -> AsyncEngine:
        if self.is_sqlite:
            # In-memory SQLite only survives on a single shared connection
            return create_async_engine(
                self._db_url,
                echo=False,
                connect_args={'check_same_thread': False},
                poolclass=StaticPool,
            )

        return create_async_engine(
            self._db_url,
            echo=False,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_POOL_MAX_OVERFLOW,
            pool_timeout=settings.DB_POOL_TIMEOUT,
            pool_recycle=settings.DB_POOL_RECYCLE,
            pool_pre_ping=settings.DB_POOL_PRE_PING,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Session context manager; rolls back automatically on exception."""
        session_maker = self.get_session_maker()
        async with session_maker() as session:
            yield session

    async def create_tables(self) -> None:
        async with self.get_engine().begin() as conn:
            await conn.run_sync(Base.metadata.create_all, checkfirst=True)

    async def ping(self) -> bool:
        try:
            async with self.get_engine().connect() as conn:
                await conn.execute(text('SELECT 1'))
            return True
        except Exception as e:
            Logger.base.warning(f'⚠️ [DB] Ping failed: {e}')
            return False

    async def dispose(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
        self._engine = None
        self._session_maker = None
        self._loop = None
