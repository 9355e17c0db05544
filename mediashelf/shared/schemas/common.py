"""
Common Schemas

Shared schemas used across the application for consistent API responses.

Schema Types:
=============
- BaseSchema: camelCase aliases, from_attributes, populate_by_name
- ApiResponse[T]: Success envelope {success, data, message}
- ErrorResponse: Error envelope {success, error: {code, message, details}}
- HealthResponse: Health check payload

Usage:
======
    from mediashelf.shared.schemas.common import ApiResponse, BaseSchema

    class ShelfResponse(BaseSchema):
        shelf_id: int          # serialized as "shelfId"
        name: str

    # In route handler
    return ApiResponse(data=shelf, message="Shelf created successfully")
"""

from datetime import datetime, timezone
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# Generic payload type for the success envelope
DataT = TypeVar("DataT")


class BaseSchema(BaseModel):
    """
    Base schema with common configuration.

    All request and response schemas inherit from this class.
    Provides:
    - alias_generator: snake_case fields exposed as camelCase JSON keys
    - populate_by_name: Allow field population by name or alias
    - from_attributes: Allow creating from ORM models
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# STANDARD RESPONSES
# ═══════════════════════════════════════════════════════════════════════════════


class ApiResponse(BaseSchema, Generic[DataT]):
    """
    Success envelope wrapping every successful payload.

    Example:
        {
            "success": true,
            "data": {"workId": 6, "averageRating": 4.5, "totalRatings": 2},
            "message": "Average rating retrieved successfully"
        }
    """

    success: bool = True
    data: Optional[DataT] = None
    message: str = "OK"


class ErrorDetail(BaseModel):
    """Error detail structure in error responses."""

    code: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error message")
    details: Optional[dict[str, Any]] = Field(
        default=None,
        description="Additional error context",
    )


class ErrorResponse(BaseModel):
    """
    Standard error response schema.

    All API errors return this format for consistency.

    Example:
        {
            "success": false,
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Request validation failed",
                "details": {"errors": ["score: Input should be less than or equal to 5"]}
            }
        }
    """

    success: bool = False
    error: ErrorDetail


# ═══════════════════════════════════════════════════════════════════════════════
# HEALTH CHECK
# ═══════════════════════════════════════════════════════════════════════════════


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = "healthy"
    service: str = "mediashelf"
    version: str = "1.0.0"
    backend: Optional[str] = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
