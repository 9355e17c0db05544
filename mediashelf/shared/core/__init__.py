"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions

Usage:
======
    from mediashelf.shared.core.logging import logger, get_logger
    from mediashelf.shared.core.exceptions import MediashelfException, NotFoundError

    logger.info("Rating stored", user_id=user_id, work_id=work_id)
"""

from mediashelf.shared.core.logging import (
    logger,
    get_logger,
    log_context,
    clear_log_context,
)
from mediashelf.shared.core.exceptions import (
    MediashelfException,
    AuthenticationError,
    NotFoundError,
    UserNotFoundError,
    WorkNotFoundError,
    RatingNotFoundError,
    ShelfNotFoundError,
    ValidationError,
    DuplicateResourceError,
    InvalidRelationshipError,
    SelfFollowError,
    AlreadyFollowingError,
    NotFollowingError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    # Exceptions
    "MediashelfException",
    "AuthenticationError",
    "NotFoundError",
    "UserNotFoundError",
    "WorkNotFoundError",
    "RatingNotFoundError",
    "ShelfNotFoundError",
    "ValidationError",
    "DuplicateResourceError",
    "InvalidRelationshipError",
    "SelfFollowError",
    "AlreadyFollowingError",
    "NotFollowingError",
]
