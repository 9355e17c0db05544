"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /health, /ready, /live → Health check endpoints
    /api/auth              → Authentication (signup, login)
    /api/users             → Users, their ratings, shelves and follow graph
    /api/works             → Catalog, work ratings, similar and popular works
    /api/ratings           → Ratings by id
    /api/shelves           → Shelves by id and their works
    /api/search            → Combined work and user search

Usage:
======
    from mediashelf.api.routes import register_routes

    app = FastAPI()
    register_routes(app)
"""

from fastapi import FastAPI

from mediashelf.api.handlers import (
    auth_handler,
    health_handler,
    rating_handler,
    search_handler,
    shelf_handler,
    social_handler,
    user_handler,
    work_handler,
)


def register_routes(app: FastAPI) -> None:
    """
    Register all API routes.

    Args:
        app: FastAPI application instance
    """
    # Health check endpoints (no prefix, root level)
    app.include_router(
        health_handler.router,
        tags=["Health"],
    )

    app.include_router(
        auth_handler.router,
        prefix="/api/auth",
        tags=["Authentication"],
    )

    app.include_router(
        user_handler.router,
        prefix="/api/users",
        tags=["Users"],
    )

    # Follow graph lives under the user resource
    app.include_router(
        social_handler.router,
        prefix="/api/users",
        tags=["Social"],
    )

    app.include_router(
        work_handler.router,
        prefix="/api/works",
        tags=["Works"],
    )

    app.include_router(
        rating_handler.router,
        prefix="/api/ratings",
        tags=["Ratings"],
    )

    app.include_router(
        shelf_handler.router,
        prefix="/api/shelves",
        tags=["Shelves"],
    )

    app.include_router(
        search_handler.router,
        prefix="/api/search",
        tags=["Search"],
    )
