"""Date helpers for upstream timestamps.

Parses the ISO-8601 strings returned by the OData service and formats
them the way Dutch readers expect: ``15-03-2024`` and ``14:30``.
"""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from functools import lru_cache
from typing import Optional
from zoneinfo import ZoneInfo

from ..models.attendance import UNKNOWN

DUTCH_DATE_FORMAT = "%d-%m-%Y"
DUTCH_TIME_FORMAT = "%H:%M"
DEFAULT_TIMEZONE = "Europe/Amsterdam"


@lru_cache(maxsize=8)
def _zone(name: str) -> tzinfo:
    return ZoneInfo(name)


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse an upstream timestamp into an aware datetime.

    Accepts full timestamps (``2024-03-15T14:30:00Z``,
    ``2024-03-15T14:30:00+01:00``) and bare dates (``2024-03-15``).
    Values without an offset are taken as UTC. Returns ``None`` for
    missing or unparseable input.
    """
    if not value or not isinstance(value, str):
        return None
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_dutch_date_time(
    value: Optional[str],
    tz_name: str = DEFAULT_TIMEZONE,
) -> tuple[str, str, bool]:
    """Return ``(date, time, is_valid)`` for display.

    Unparseable input degrades to ``("Unknown", "Unknown", False)``.
    """
    parsed = parse_timestamp(value)
    if parsed is None:
        return UNKNOWN, UNKNOWN, False

    try:
        local = parsed.astimezone(_zone(tz_name))
    except OverflowError:
        return UNKNOWN, UNKNOWN, False
    return local.strftime(DUTCH_DATE_FORMAT), local.strftime(DUTCH_TIME_FORMAT), True
