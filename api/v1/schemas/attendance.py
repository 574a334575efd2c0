"""
Attendance API response schemas.

Pydantic models for attendance, activity, statistics and health
responses. Keys are camelCase on the wire.

Responsibility: API v1 attendance response schemas
"""

from typing import Optional, List, Dict, Any
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.models.attendance import AttendanceRecord, STATS_SAMPLE_NOTE


class CamelModel(BaseModel):
    """Base schema serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AttendanceMetadata(CamelModel):
    """Pagination and volume information for an attendance page."""

    total_activities: int
    total_registrations: int
    total_count: Optional[int] = None
    skip: int
    limit: int


class AttendanceResponse(CamelModel):
    """Flattened attendance records for one page of activities."""

    success: bool = True
    data: List[AttendanceRecord]
    metadata: AttendanceMetadata


class ActivityResponse(CamelModel):
    """Raw upstream activity, unflattened."""

    success: bool = True
    data: Dict[str, Any]


class StatsBody(CamelModel):
    """Sample-based statistics."""

    total_activities: int
    sample_registrations: int
    unique_people_in_sample: int
    unique_fractions_in_sample: int
    note: str = STATS_SAMPLE_NOTE


class StatsResponse(CamelModel):
    success: bool = True
    stats: StatsBody


class HealthResponse(CamelModel):
    success: bool = True
    message: str
    timestamp: str
    fetch_available: bool


class ErrorResponse(CamelModel):
    """Uniform failure body."""

    success: bool = False
    error: str
    details: Optional[str] = None
