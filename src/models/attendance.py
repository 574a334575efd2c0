"""
Attendance domain models.

Defines the flattened per-person attendance record produced for the
charting frontend, the filter parameters accepted by the API and the
page/statistics containers returned by the attendance service.

Responsibility: Output entities of the attendance pipeline
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


UNKNOWN = "Unknown"
UNKNOWN_ACTIVITY = "Unknown Activity"
DEFAULT_ROLE = "Participant"

STATS_SAMPLE_NOTE = "Statistics are based on a sample of activities due to API limitations"


class FilterParameters(BaseModel):
    """
    Logical filters for activity queries.

    Every field is optional; ``None`` means no constraint on that
    dimension. Date bounds are inclusive calendar days.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    date_from: Optional[date] = None
    date_to: Optional[date] = None
    activity_type: Optional[str] = Field(
        default=None,
        description="Case-insensitive substring of the activity subject"
    )


class AttendanceRecord(BaseModel):
    """
    One person registered at one activity.

    Serialized with camelCase keys (``activityId``, ``personName``, ...)
    which is what the frontend charts consume.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    # MARK: - Activity
    activity_id: Optional[str]
    activity_title: str = UNKNOWN_ACTIVITY
    activity_date: str = UNKNOWN
    activity_time: str = UNKNOWN
    activity_date_time: Optional[str] = None

    # MARK: - Person
    person_id: Optional[str]
    person_name: str
    person_initials: str = ""
    person_first_name: str = ""
    person_last_name: str = ""

    # MARK: - Fraction / role
    fraction: str = UNKNOWN
    fraction_id: Optional[str] = None
    role: str = DEFAULT_ROLE
    actor_id: Optional[str] = None

    has_valid_date: bool = False


@dataclass
class FlattenResult:
    """Flattened records plus diagnostics about the input batch."""
    records: List[AttendanceRecord] = field(default_factory=list)
    skipped_activities: int = 0


@dataclass
class AttendancePage:
    """One page of attendance data with pagination metadata."""
    records: List[AttendanceRecord]
    total_activities: int
    total_count: Optional[int]
    skip: int
    limit: int

    @property
    def total_registrations(self) -> int:
        return len(self.records)


@dataclass
class AttendanceStats:
    """Approximate statistics computed from a bounded sample."""
    total_activities: int
    sample_registrations: int
    unique_people_in_sample: int
    unique_fractions_in_sample: int
    note: str = STATS_SAMPLE_NOTE
