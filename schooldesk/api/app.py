# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Builds the SchoolDesk ASGI application.

uvicorn serves ``schooldesk.main:app``; tests call create_app() with their
own Settings.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from schooldesk import __version__
from schooldesk.api.error_handlers import register_error_handlers
from schooldesk.api.middleware.auth import AuthMiddleware
from schooldesk.api.middleware.rate_limit import build_limiter, rate_limit_exceeded_handler
from schooldesk.api.routes import health
from schooldesk.api.v1 import router as v1_router
from schooldesk.core.config import Settings, get_settings
from schooldesk.infrastructure.database.connection import close_database, init_database
from schooldesk.utils.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Set up logging and the database pool around the serving period."""
    settings: Settings = app.state.settings
    setup_logging(settings)

    logger.info(
        "Starting SchoolDesk API (environment=%s, debug=%s)",
        settings.environment,
        settings.debug,
    )

    await init_database(settings)
    logger.info("Database connection initialized")

    yield

    await close_database()
    logger.info("Shutting down SchoolDesk API")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Assemble routers, middleware and error handlers.

    Args:
        settings: Overrides the cached environment settings when given.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="SchoolDesk API",
        description="Scheduling and billing backend for class and camp providers",
        version=__version__,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
        redirect_slashes=False,
    )

    # =========================================================================
    # State
    # =========================================================================
    app.state.settings = settings
    app.state.limiter = build_limiter(settings)

    # =========================================================================
    # Exception handlers
    # =========================================================================
    register_error_handlers(app)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # =========================================================================
    # Middleware (added last runs first)
    # =========================================================================
    if settings.rate_limit.enabled:
        app.add_middleware(SlowAPIMiddleware)

    # Runs before rate limiting so limits are keyed by user
    app.add_middleware(AuthMiddleware, cookie_name=settings.auth.session_cookie_name)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.origins_list,
        allow_credentials=settings.cors.allow_credentials,
        allow_methods=settings.cors.allow_methods,
        allow_headers=settings.cors.allow_headers,
    )

    # =========================================================================
    # Routes
    # =========================================================================
    app.include_router(health.router, tags=["Health"])
    app.include_router(v1_router)

    return app
