"""
API Handlers

Route handlers for the Mediashelf API.

Handlers follow the pattern:
- Parse HTTP requests
- Call service methods
- Wrap results in the success envelope

All business logic is delegated to the service layer.
"""

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

__all__ = [
    "auth_handler",
    "health_handler",
    "rating_handler",
    "search_handler",
    "shelf_handler",
    "social_handler",
    "user_handler",
    "work_handler",
]
