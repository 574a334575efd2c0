"""Services package for attendance use cases"""

from .attendance_flattener import flatten_activities
from .attendance_service import AttendanceService

__all__ = [
    "AttendanceService",
    "flatten_activities",
]
