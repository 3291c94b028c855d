"""Nucleus API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Every route is served under /api/v{version} and, assuming the default
      version, under /api
    - Global error handlers map NucleusError, binding errors and rate limit
      rejections → structured responses
    - CORS configured from settings (not hardcoded)
    - Interactive docs only exposed in the development environment

Design Decisions:
    - Lifespan over @app.on_event for startup logging setup
    - create_app() factory so tests can build an app per settings; module-level
      `app` for uvicorn
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from nucleus.api.error_handlers import register_error_handlers
from nucleus.api.rate_limit import limiter
from nucleus.api.routes import data, users
from nucleus.api.versioning import (
    UNVERSIONED_PREFIX, VERSIONED_PREFIX, add_version_reporting,
)
from nucleus.config import get_settings
from nucleus.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"{settings.app_name} started ({settings.environment})")
    yield
    logger.info(f"{settings.app_name} shutting down")


def create_app() -> FastAPI:
    settings = get_settings()
    docs_enabled = settings.is_development
    app = FastAPI(
        title=settings.app_name,
        version=settings.default_api_version,
        lifespan=lifespan,
        openapi_url="/openapi.json" if docs_enabled else None,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    add_version_reporting(app, settings)

    app.state.limiter = limiter
    register_error_handlers(app)

    # Unversioned aliases stay out of the schema to avoid duplicate operation ids
    for router in (users.router, data.router):
        app.include_router(router, prefix=VERSIONED_PREFIX)
        app.include_router(
            router, prefix=UNVERSIONED_PREFIX, include_in_schema=False,
        )
    return app


app = create_app()
