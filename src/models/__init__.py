"""
Models package for the Tweede Kamer Attendance API.

This package contains all Pydantic models for:
- Upstream activities with their actors, persons and fractions
- Flattened attendance records and query filters
"""

from .activity import (
    Activity,
    Actor,
    Fraction,
    Person,
)
from .attendance import (
    AttendancePage,
    AttendanceRecord,
    AttendanceStats,
    FilterParameters,
    FlattenResult,
)

__all__ = [
    "Activity",
    "Actor",
    "Fraction",
    "Person",
    "AttendancePage",
    "AttendanceRecord",
    "AttendanceStats",
    "FilterParameters",
    "FlattenResult",
]
