"""
Attendance API endpoints.

Provides the flattened per-person attendance records consumed by the
charting frontend.

Responsibility: Attendance endpoints for API v1
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query

from api.dependencies import get_attendance_service, get_filter_parameters
from api.errors import ApiError
from api.v1.schemas.attendance import AttendanceMetadata, AttendanceResponse
from src.models.attendance import FilterParameters
from src.services.attendance_service import AttendanceService

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_DETAILS = "Failed to fetch attendance data from Dutch Parliament API"


@router.get("/attendance", response_model=AttendanceResponse)
async def get_attendance(
    limit: Optional[int] = Query(None, ge=1, description="Max activities (default: 1000)"),
    skip: int = Query(0, ge=0, description="Skip activities for pagination"),
    params: FilterParameters = Depends(get_filter_parameters),
    service: AttendanceService = Depends(get_attendance_service),
):
    """
    Get attendance data with optional filters.

    Args:
        limit: Maximum activities to fetch
        skip: Pagination offset in activities
        params: Date range and activity type filters
        service: Attendance service

    Returns:
        AttendanceResponse with records and pagination metadata
    """
    try:
        page = await service.get_attendance(params, limit=limit, skip=skip)
    except Exception as e:
        logger.error(f"Error fetching attendance data: {e}", exc_info=True)
        raise ApiError(str(e), details=ERROR_DETAILS) from e

    return AttendanceResponse(
        data=page.records,
        metadata=AttendanceMetadata(
            total_activities=page.total_activities,
            total_registrations=page.total_registrations,
            total_count=page.total_count,
            skip=page.skip,
            limit=page.limit,
        ),
    )
