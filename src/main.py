"""
Hotel Booking Service - FastAPI Application
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.di import cleanup, container, setup
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Booking Service] Starting up...')

    # Wire dependency injection for all modules
    container.wire(modules=WIRE_MODULES)
    setup()
    Logger.base.info('🔌 [Booking Service] Dependency injection wired')

    # Initialize database engine on the serving event loop
    database = container.database()
    _ = database.engine
    Logger.base.info('🗄️  [Booking Service] Database engine ready')

    Logger.base.info('✅ [Booking Service] Ready to serve requests')
    yield

    Logger.base.info('🛑 [Booking Service] Shutting down...')

    await database.dispose()
    Logger.base.info('🗄️  [Booking Service] Database engine disposed')

    cleanup()
    container.unwire()
    Logger.base.info('👋 [Booking Service] Shutdown complete')


# Create FastAPI app using shared factory
app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
