"""
FastAPI application factory.

``create_app()`` wires the database engine, middleware, routers, error
handlers and lifespan events into a single ``FastAPI`` instance.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from advocate_directory.api.deps import get_settings
from advocate_directory.api.middleware.errors import (
    directory_error_handler,
    unhandled_exception_handler,
    validation_error_handler,
)
from advocate_directory.api.middleware.request_id import RequestIDMiddleware
from advocate_directory.api.middleware.timing import TimingMiddleware
from advocate_directory.config import DirectorySettings
from advocate_directory.core.errors import DirectoryError
from advocate_directory.core.logging import configure_logging, get_logger, json_format_for
from advocate_directory.core.orm import create_directory_engine, create_tables, directory_session_factory


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: create tables, optionally seed."""
    from advocate_directory.ops.advocates import seed_advocates
    from advocate_directory.ops.context import OperationContext

    settings: DirectorySettings = app.state.settings
    log = get_logger("advocate_directory.api")
    log.info("api_starting", version=app.version, database_url=app.state.engine.url.render_as_string())

    tables = create_tables(app.state.engine)
    log.info("database_initialized", tables=tables)

    if settings.seed_on_startup:
        with app.state.session_factory() as session:
            result = seed_advocates(OperationContext(session=session, caller="startup"))
        log.info("startup_seed_complete", count=result.count)

    yield

    app.state.engine.dispose()
    log.info("api_stopping")


def create_app(*, settings: DirectorySettings | None = None) -> FastAPI:
    """Build and return a fully-configured FastAPI application.

    Parameters
    ----------
    settings : DirectorySettings | None
        Override settings (useful for testing).  When ``None`` the cached
        process-wide settings are used.
    """
    settings = settings or get_settings()
    configure_logging(level=settings.log_level, json_format=json_format_for(settings.log_format))

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        description="Search and sort the advocate directory",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.engine = create_directory_engine(settings.database_url, echo=settings.database_echo)
    app.state.session_factory = directory_session_factory(app.state.engine)

    app.dependency_overrides[get_settings] = lambda: settings

    # ── Middleware (outermost → innermost) ────────────────────────────
    app.add_middleware(TimingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Exception handlers ───────────────────────────────────────────
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(DirectoryError, directory_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # ── Routers ──────────────────────────────────────────────────────
    from advocate_directory.api.routers import advocates, health, seed

    app.include_router(health.router, tags=["health"])
    app.include_router(advocates.router, tags=["advocates"])
    app.include_router(seed.router, tags=["seed"])

    return app
