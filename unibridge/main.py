"""UniBridge API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map UniBridgeError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Exactly one connection pool per app: built in lifespan unless injected

Design Decisions:
    - create_app() factory: the store is passed in (tests, scripts) or built from
      settings at startup; it lives on app.state, never in a module global
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Injected stores belong to the caller and are not disposed on shutdown
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from unibridge import __version__
from unibridge.api.error_handlers import register_error_handlers
from unibridge.api.routes import courses, faculty, health, students
from unibridge.config import Settings, get_settings
from unibridge.core.repository_protocols import UniversityStore
from unibridge.infrastructure.database import DatabaseSessionManager
from unibridge.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None, store: UniversityStore | None = None,
) -> FastAPI:
    """Build the application around a settings object and an optional store."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        owns_store = app.state.store is None
        if owns_store:
            app.state.store = DatabaseSessionManager(
                settings.sqlalchemy_url,
                pool_size=settings.database_pool_size,
                max_overflow=settings.database_max_overflow,
            )
        logger.info(f"UniBridge API started (database {settings.db_name})")
        yield
        if owns_store:
            await app.state.store.dispose()
            app.state.store = None
        logger.info("UniBridge API shutting down")

    app = FastAPI(title="UniBridge API", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(students.router)
    app.include_router(courses.router)
    app.include_router(faculty.router)

    register_error_handlers(app)

    # Mounted after API routes so they take precedence
    if os.path.isdir(settings.static_dir):
        app.mount(
            "/", StaticFiles(directory=settings.static_dir, html=True),
            name="static",
        )

    return app


app = create_app()
