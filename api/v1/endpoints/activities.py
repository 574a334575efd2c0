"""
Activity API endpoints.

Responsibility: Single-activity lookup for API v1
"""

import logging
from fastapi import APIRouter, Depends

from api.dependencies import get_attendance_service
from api.errors import ApiError
from api.v1.schemas.attendance import ActivityResponse
from src.services.attendance_service import AttendanceService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/activity/{activity_id}", response_model=ActivityResponse)
async def get_activity(
    activity_id: str,
    service: AttendanceService = Depends(get_attendance_service),
):
    """
    Get detailed information about a specific activity.

    The upstream record is returned as-is, with actors, persons and
    fractions expanded but not flattened.
    """
    try:
        data = await service.get_activity(activity_id)
    except Exception as e:
        logger.error(f"Error fetching activity details: {e}", exc_info=True)
        raise ApiError(str(e), details=f"Failed to fetch activity {activity_id}") from e

    return ActivityResponse(data=data)
