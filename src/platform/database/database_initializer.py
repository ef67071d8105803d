"""
Database Initializer

Process-wide "ensure ready" service: creates the schema once per process and
tears the engine down on shutdown. Called from the application lifespan; safe
to call again from any request path since repeated calls are no-ops.
"""

import asyncio

from src.platform.database.orm_db_setting import Database
from src.platform.logging.loguru_io import Logger


class DatabaseInitializer:
    def __init__(self, database: Database) -> None:
        self._database = database
        self._ready = False
        self._lock = asyncio.Lock()

    @property
    def is_ready(self) -> bool:
        return self._ready

    @Logger.io
    async def ensure_ready(self) -> None:
        if self._ready:
            return

        async with self._lock:
            if self._ready:
                return

            # Register every ORM model on Base.metadata before create_all
            import src.service.train_booking.driven_adapter.model  # noqa: F401

            Logger.base.info('🚀 [DB] Initializing database schema...')
            await self._database.create_tables()
            self._ready = True
            Logger.base.info('✅ [DB] Database ready')

    @Logger.io
    async def teardown(self) -> None:
        await self._database.dispose()
        self._ready = False
        Logger.base.info('🗄️ [DB] Engine disposed')
