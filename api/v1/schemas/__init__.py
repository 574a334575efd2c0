"""API v1 response schemas."""

from api.v1.schemas.attendance import (
    AttendanceMetadata,
    AttendanceResponse,
    ActivityResponse,
    StatsBody,
    StatsResponse,
    HealthResponse,
    ErrorResponse,
)

__all__ = [
    "AttendanceMetadata",
    "AttendanceResponse",
    "ActivityResponse",
    "StatsBody",
    "StatsResponse",
    "HealthResponse",
    "ErrorResponse",
]
