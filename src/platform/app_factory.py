"""
Shared FastAPI App Factory

Provides common app setup for production and test environments.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.platform.config.core_setting import settings
from src.platform.constant.route_constant import CUSTOMER_BASE, MOVIE_BASE, PURCHASE_BASE
from src.platform.exception.exception_handlers import register_exception_handlers
from src.service.movie_ticket.driving_adapter.http_controller.customer_controller import (
    router as customer_router,
)
from src.service.movie_ticket.driving_adapter.http_controller.movie_controller import (
    router as movie_router,
)
from src.service.movie_ticket.driving_adapter.http_controller.ticket_purchase_controller import (
    router as ticket_purchase_router,
)


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]],
    title_suffix: str = '',
    description: str = 'Movie Ticketing System',
) -> FastAPI:
    """
    Create a configured FastAPI application.

    Args:
        lifespan: Async context manager for app lifespan (startup/shutdown)
        title_suffix: Optional suffix for app title (e.g., " (Test)")
        description: App description

    Returns:
        Configured FastAPI application
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

    app.include_router(customer_router, prefix=CUSTOMER_BASE, tags=['customer'])
    app.include_router(movie_router, prefix=MOVIE_BASE, tags=['movie'])
    app.include_router(ticket_purchase_router, prefix=PURCHASE_BASE, tags=['purchase'])

    @app.get('/health')
    async def health_check() -> dict[str, str]:
        """Health check endpoint for container orchestration."""
        return {'status': 'healthy', 'service': settings.PROJECT_NAME}

    return app
