"""Statistics endpoints based on a sample of activities."""

import logging
from fastapi import APIRouter, Depends

from api.dependencies import get_attendance_service, get_filter_parameters
from api.errors import ApiError
from api.v1.schemas.attendance import StatsBody, StatsResponse
from src.models.attendance import FilterParameters
from src.services.attendance_service import AttendanceService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/stats",
    response_model=StatsResponse,
    summary="Get approximate statistics about activities and attendance",
)
async def get_stats(
    params: FilterParameters = Depends(get_filter_parameters),
    service: AttendanceService = Depends(get_attendance_service),
):
    """Return activity totals plus people/fraction counts from a sample."""
    try:
        stats = await service.get_stats(params)
    except Exception as e:
        logger.error(f"Error fetching statistics: {e}", exc_info=True)
        raise ApiError(str(e), details="Failed to fetch statistics from Dutch Parliament API") from e

    return StatsResponse(
        stats=StatsBody(
            total_activities=stats.total_activities,
            sample_registrations=stats.sample_registrations,
            unique_people_in_sample=stats.unique_people_in_sample,
            unique_fractions_in_sample=stats.unique_fractions_in_sample,
            note=stats.note,
        )
    )
