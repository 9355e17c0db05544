"""
Custom Exceptions

Domain errors, each mapped to an HTTP status and an error code.

Exception Hierarchy:
====================
    MediashelfException (base)
       │
       ├── AuthenticationError (401)       ← Unknown identifier, wrong password
       ├── NotFoundError (404)             ← Resource not found
       │      ├── UserNotFoundError
       │      ├── WorkNotFoundError
       │      ├── RatingNotFoundError
       │      └── ShelfNotFoundError
       ├── ValidationError (400)           ← Invalid input data
       ├── DuplicateResourceError (400)    ← Username, email or shelf name taken
       └── InvalidRelationshipError (400)  ← Follow graph rule broken
              ├── SelfFollowError
              ├── AlreadyFollowingError
              └── NotFollowingError

Usage:
======
    from mediashelf.shared.core.exceptions import NotFoundError, ValidationError

    # Raise with automatic status code
    raise NotFoundError("User", user_id)
    # Results in: {"success": false, "error": {"code": "NOT_FOUND", "message": "User with id '7' not found"}}

    # Raise with a list of violated rules
    raise ValidationError("Invalid input", errors=["score must be between 1 and 5"])

Exception Handling:
===================
    The exception handlers in api/middleware turn these into the error envelope:
    {
        "success": false,
        "error": {
            "code": "NOT_FOUND",
            "message": "Work with id '12' not found",
            "details": {}
        }
    }
"""

from typing import Any, Optional


class MediashelfException(Exception):
    """
    Root of every error the service layer raises on purpose.

    Carries the HTTP status, a stable error code and free-form details, and
    renders itself as the error envelope.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (default 500)
        error_code: Machine-readable error code
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or "INTERNAL_ERROR"
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for API response.

        Returns:
            Dictionary with error details for JSON response
        """
        return {
            "success": False,
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            },
        }


# ═══════════════════════════════════════════════════════════════════════════════
# AUTHENTICATION ERRORS (401)
# ═══════════════════════════════════════════════════════════════════════════════


class AuthenticationError(MediashelfException):
    """
    Login failed (401).

    Raised when the login identifier is unknown or the credential is wrong.
    """

    def __init__(
        self,
        message: str = "Invalid credentials",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=401,
            error_code="AUTHENTICATION_ERROR",
            details=details,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# NOT FOUND ERRORS (404)
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(MediashelfException):
    """
    A requested record does not exist (404).

    The message is built from the resource name and id.

    Example:
        raise NotFoundError("User", user_id)
        # Message: "User with id '7' not found"
    """

    def __init__(
        self,
        resource: str,
        resource_id: Optional[Any] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        message = f"{resource} not found"
        if resource_id is not None:
            message = f"{resource} with id '{resource_id}' not found"
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details=details,
        )


class UserNotFoundError(NotFoundError):
    """User not found error."""

    def __init__(self, user_id: int) -> None:
        super().__init__(resource="User", resource_id=user_id)


class WorkNotFoundError(NotFoundError):
    """Work not found error."""

    def __init__(self, work_id: int) -> None:
        super().__init__(resource="Work", resource_id=work_id)


class RatingNotFoundError(NotFoundError):
    """Rating not found error."""

    def __init__(self, rating_id: int) -> None:
        super().__init__(resource="Rating", resource_id=rating_id)


class ShelfNotFoundError(NotFoundError):
    """Shelf not found error."""

    def __init__(self, shelf_id: int) -> None:
        super().__init__(resource="Shelf", resource_id=shelf_id)


# ═══════════════════════════════════════════════════════════════════════════════
# VALIDATION & DUPLICATE ERRORS (400)
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(MediashelfException):
    """
    Input breaks a domain rule (400).

    Raised when input data fails validation. The violated rules are
    listed under details["errors"].
    """

    def __init__(
        self,
        message: str = "Validation failed",
        errors: Optional[list[str]] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        extra_details = details or {}
        if errors:
            extra_details["errors"] = list(errors)
        super().__init__(
            message=message,
            status_code=400,
            error_code="VALIDATION_ERROR",
            details=extra_details,
        )


class DuplicateResourceError(MediashelfException):
    """
    Duplicate resource error (400 Bad Request).

    Raised when a uniqueness rule is broken: username, email, or a shelf
    name within one owner's shelves.

    Example:
        raise DuplicateResourceError("Email already exists")
    """

    def __init__(
        self,
        message: str = "Resource already exists",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=400,
            error_code="ALREADY_EXISTS",
            details=details,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# FOLLOW GRAPH ERRORS (400)
# ═══════════════════════════════════════════════════════════════════════════════


class InvalidRelationshipError(MediashelfException):
    """
    Follow relationship error (400 Bad Request).

    Base class for follow/unfollow rule violations.
    """

    def __init__(
        self,
        message: str = "Invalid relationship",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=400,
            error_code="INVALID_RELATIONSHIP",
            details=details,
        )


class SelfFollowError(InvalidRelationshipError):
    """A user tried to follow themselves."""

    def __init__(self) -> None:
        super().__init__("Cannot follow yourself")


class AlreadyFollowingError(InvalidRelationshipError):
    """The follow edge already exists."""

    def __init__(self) -> None:
        super().__init__("Already following this user")


class NotFollowingError(InvalidRelationshipError):
    """The follow edge to remove does not exist."""

    def __init__(self) -> None:
        super().__init__("Not following this user")
