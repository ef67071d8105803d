"""
Shared FastAPI App Factory

Production and test apps differ only in title and lifespan label; both wire
the DI container, bring the database up through the DatabaseInitializer and
tear it down again on shutdown.
"""

from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from datetime import datetime, timezone
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.constant.route_constant import (
    BOOKING_BASE,
    HEALTH,
    SCHEDULE_BASE,
    USER_BASE,
)
from src.platform.exception.exception_handlers import register_exception_handlers
from src.platform.logging.loguru_io import Logger
from src.service.train_booking.driving_adapter.http_controller.booking_controller import (
    router as booking_router,
)
from src.service.train_booking.driving_adapter.http_controller.train_schedule_controller import (
    router as schedule_router,
)
from src.service.train_booking.driving_adapter.http_controller.user_controller import (
    router as user_router,
)

Lifespan = Callable[[FastAPI], AbstractAsyncContextManager[Any]]


def service_lifespan(label: str) -> Lifespan:
    """Lifespan that wires DI and owns the database for the life of the app"""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        Logger.base.info(f'🚀 [{label}] Starting up...')

        container.wire(modules=WIRE_MODULES)
        Logger.base.info(f'🔌 [{label}] Dependency injection wired')

        database_initializer = container.database_initializer()
        await database_initializer.ensure_ready()
        Logger.base.info(f'✅ [{label}] Ready to serve requests')

        try:
            yield
        finally:
            Logger.base.info(f'🛑 [{label}] Shutting down...')
            # An in-memory SQLite database disappears with its engine
            await database_initializer.teardown()
            container.unwire()
            Logger.base.info(f'👋 [{label}] Shutdown complete')

    return lifespan


def create_app(
    *,
    lifespan: Lifespan,
    title_suffix: str = '',
    description: str = 'Train ticket reservation service',
) -> FastAPI:
    """
    Create a configured FastAPI application.

    Args:
        lifespan: Async context manager for app lifespan (startup/shutdown)
        title_suffix: Optional suffix for app title (e.g., " (Test)")
        description: App description
    """
    app = FastAPI(
        title=f'{settings.PROJECT_NAME}{title_suffix}',
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    register_exception_handlers(app)

    app.include_router(user_router, prefix=USER_BASE, tags=['user'])
    app.include_router(schedule_router, prefix=SCHEDULE_BASE, tags=['schedule'])
    app.include_router(booking_router, prefix=BOOKING_BASE, tags=['booking'])

    _register_health_endpoint(app)

    return app


def _register_health_endpoint(app: FastAPI) -> None:
    @app.get(HEALTH)
    async def health_check() -> dict[str, str]:
        """Liveness plus a SELECT 1 against the database"""
        database_ok = await container.database().ping()
        return {
            'status': 'ok',
            'time': datetime.now(timezone.utc).isoformat(),
            'env': settings.DEPLOY_ENV,
            'database': 'ok' if database_ok else 'error',
        }
