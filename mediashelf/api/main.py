"""
Mediashelf API Application Entry Point

FastAPI application setup with all routers, middleware, and lifecycle management.

Application Architecture:
=========================
┌─────────────────────────────────────────────────────────────────────────────┐
│                           MEDIASHELF API                                    │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   Middleware:   CORS → Request logging → Error handlers                     │
│                              │                                              │
│                              ▼                                              │
│   Routers:      Health │ Auth │ Users │ Social │ Works │ Ratings │          │
│                 Shelves │ Search                                            │
│                              │                                              │
│                              ▼                                              │
│   Services:     injected per request over the active storage backend        │
│                              │                                              │
│                 ┌────────────┴────────────┐                                 │
│                 ▼                         ▼                                 │
│            SqlBackend                MemoryBackend                          │
│        (DATABASE_URL reachable)   (fallback, seeded with samples)           │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Lifecycle:
==========
1. Application starts → lifespan startup
2. Database connection attempted
3. No database → in-memory store, optionally seeded
4. Application serves requests
5. Application stops → database connection closed

Usage:
======
    # Run with uvicorn
    uvicorn mediashelf.api.main:app --host 0.0.0.0 --port 3000 --reload

    # Or programmatically
    from mediashelf.api.main import create_application
    app = create_application(seed_sample_data=False)
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mediashelf.config.settings import settings
from mediashelf.shared.db import MemoryBackend, close_db, init_db, seed_sample_catalog
from mediashelf.shared.core.logging import logger
from mediashelf.api.middleware import RequestLoggingMiddleware, setup_exception_handlers
from mediashelf.api.routes import register_routes


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Startup:
    - Connect to the database when DATABASE_URL is set and reachable
    - Otherwise seed the in-memory store with the sample catalog

    Shutdown:
    - Close database connections
    """
    # ═══════════════════════════════════════════════════════════════════════════
    # STARTUP
    # ═══════════════════════════════════════════════════════════════════════════
    logger.info(
        "Starting Mediashelf API",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
    )

    app.state.database_connected = await init_db()

    if not app.state.database_connected and app.state.seed_sample_data:
        await seed_sample_catalog(app.state.memory_backend)

    logger.info(
        "Mediashelf API started successfully",
        backend="sql" if app.state.database_connected else "memory",
    )

    yield

    # ═══════════════════════════════════════════════════════════════════════════
    # SHUTDOWN
    # ═══════════════════════════════════════════════════════════════════════════
    logger.info("Shutting down Mediashelf API")

    await close_db()
    app.state.database_connected = False

    logger.info("Mediashelf API shutdown complete")


def create_application(seed_sample_data: Optional[bool] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        seed_sample_data: Seed the in-memory store on startup.
            Defaults to settings.SEED_MOCK_DATA.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description="Catalog, rate and shelve movies, series, music, books and graphic novels",
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    # Storage state exists before startup so requests work without lifespan
    app.state.memory_backend = MemoryBackend()
    app.state.database_connected = False
    app.state.seed_sample_data = settings.SEED_MOCK_DATA if seed_sample_data is None else seed_sample_data

    # ═══════════════════════════════════════════════════════════════════════════
    # MIDDLEWARE
    # ═══════════════════════════════════════════════════════════════════════════

    app.add_middleware(RequestLoggingMiddleware)

    # CORS Middleware - added last so it wraps everything else
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # EXCEPTION HANDLERS
    # ═══════════════════════════════════════════════════════════════════════════

    setup_exception_handlers(app)

    # ═══════════════════════════════════════════════════════════════════════════
    # ROUTES
    # ═══════════════════════════════════════════════════════════════════════════

    register_routes(app)

    return app


# Create the application instance
app = create_application()
