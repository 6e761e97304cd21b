"""
Production FastAPI Application
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import anyio
from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import create_db_and_tables, dispose_engine
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup: wire DI, create tables, open the background task group."""
    Logger.base.info('🚀 [Movie Ticket] Starting up...')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Movie Ticket] Dependency injection wired')

    if settings.AUTO_CREATE_TABLES:
        await create_db_and_tables()
        Logger.base.info('🗄️  [Movie Ticket] Database tables ensured')

    # Notification deliveries run on this group; leaving it waits for them
    async with anyio.create_task_group() as tg:
        container.task_group.override(tg)
        Logger.base.info('✅ [Movie Ticket] Ready to serve requests')

        yield

        Logger.base.info('🛑 [Movie Ticket] Shutting down, draining pending notifications...')

    container.task_group.reset_override()
    await dispose_engine()
    container.unwire()

    Logger.base.info('👋 [Movie Ticket] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
