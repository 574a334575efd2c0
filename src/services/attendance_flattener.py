"""
Attendance flattening.

Turns nested activities (activity -> actors -> person/fraction) into one
flat attendance record per person per activity. Missing data never
fails the batch: dates, names, fractions and roles fall back to fixed
placeholder values.

Responsibility: Reshape upstream activities into attendance records
"""

import logging
from typing import Iterable, List

from ..models.activity import Activity, Actor
from ..models.attendance import (
    AttendanceRecord,
    FlattenResult,
    UNKNOWN,
    UNKNOWN_ACTIVITY,
    DEFAULT_ROLE,
)
from ..utils.date_format import DEFAULT_TIMEZONE, format_dutch_date_time

logger = logging.getLogger(__name__)

# Number of skipped activities reported individually at DEBUG level
_SKIP_LOG_LIMIT = 5


def _build_record(
    activity: Activity,
    actor: Actor,
    activity_date: str,
    activity_time: str,
    has_valid_date: bool,
) -> AttendanceRecord:
    person = actor.person
    fraction = actor.fraction

    return AttendanceRecord(
        activity_id=activity.id,
        activity_title=activity.subject or UNKNOWN_ACTIVITY,
        activity_date=activity_date,
        activity_time=activity_time,
        activity_date_time=activity.raw_datetime,
        person_id=person.id,
        person_name=person.full_name(),
        person_initials=person.initials or "",
        person_first_name=person.first_names or "",
        person_last_name=person.sort_name(),
        fraction=(fraction.name_nl or UNKNOWN) if fraction else UNKNOWN,
        fraction_id=fraction.id if fraction else None,
        role=actor.function or DEFAULT_ROLE,
        actor_id=actor.id,
        has_valid_date=has_valid_date,
    )


def flatten_activities(
    activities: Iterable[Activity],
    tz_name: str = DEFAULT_TIMEZONE,
) -> FlattenResult:
    """
    Flatten activities into attendance records.

    Activities without actors produce no rows and are counted in
    ``skipped_activities``. Actors without a person are dropped silently.

    Args:
        activities: Normalized activities, in output order
        tz_name: Timezone used for the displayed date and time

    Returns:
        FlattenResult with records in activity/actor order
    """
    records: List[AttendanceRecord] = []
    skipped = 0
    processed = 0

    for index, activity in enumerate(activities):
        processed += 1

        if not activity.actors:
            skipped += 1
            if index < _SKIP_LOG_LIMIT:
                logger.debug(
                    f"Skipping activity {activity.id} ({activity.subject}): No actors found"
                )
            continue

        activity_date, activity_time, has_valid_date = format_dutch_date_time(
            activity.raw_datetime, tz_name
        )
        if not has_valid_date and activity.raw_datetime:
            logger.debug(
                f"Unparseable date for activity {activity.id}: {activity.raw_datetime!r}"
            )

        for actor in activity.actors:
            if actor.person is None:
                continue
            records.append(
                _build_record(activity, actor, activity_date, activity_time, has_valid_date)
            )

    logger.info(f"Processed {len(records)} attendance records from {processed} activities")
    if skipped:
        logger.info(f"Skipped {skipped} activities without actors")

    return FlattenResult(records=records, skipped_activities=skipped)
