"""
API Middleware

Custom middleware for the FastAPI application.

Components:
===========
- error_handler: Global exception handling
- request_logging: Request id binding and per-request access log

Usage:
======
    from mediashelf.api.middleware import setup_exception_handlers, RequestLoggingMiddleware

    app = FastAPI()
    setup_exception_handlers(app)
    app.add_middleware(RequestLoggingMiddleware)
"""

from mediashelf.api.middleware.error_handler import setup_exception_handlers
from mediashelf.api.middleware.request_logging import RequestLoggingMiddleware

__all__ = [
    "setup_exception_handlers",
    "RequestLoggingMiddleware",
]
