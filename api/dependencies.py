"""
FastAPI dependencies.

Responsibility: Hand request handlers the services created at startup
and the parsed filter parameters of the request
"""

from typing import Optional

from fastapi import HTTPException, Query, Request
from pydantic import ValidationError

from src.models.attendance import FilterParameters
from src.services.attendance_service import AttendanceService


def get_attendance_service(request: Request) -> AttendanceService:
    """Return the attendance service attached to the running app."""
    return request.app.state.attendance_service


def get_filter_parameters(
    date_from: Optional[str] = Query(None, alias="dateFrom", description="Start date (YYYY-MM-DD)"),
    date_to: Optional[str] = Query(None, alias="dateTo", description="End date (YYYY-MM-DD)"),
    activity_type: Optional[str] = Query(None, alias="activityType", description="Filter by activity type"),
) -> FilterParameters:
    """
    Build filter parameters from the query string.

    Empty values mean "no constraint", so a form posting blank fields
    behaves like one that omits them.

    Raises:
        HTTPException: 422 if a date is not YYYY-MM-DD
    """
    try:
        return FilterParameters(
            date_from=date_from or None,
            date_to=date_to or None,
            activity_type=(activity_type or "").strip() or None,
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=422,
            detail=e.errors(include_url=False, include_context=False),
        )
