"""Health check endpoint for monitoring."""

from datetime import datetime, timezone
from fastapi import APIRouter, Depends

from api.dependencies import get_attendance_service
from api.v1.schemas.attendance import HealthResponse
from src.services.attendance_service import AttendanceService

router = APIRouter()


def _utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get("/health", response_model=HealthResponse)
async def health_check(service: AttendanceService = Depends(get_attendance_service)):
    """Report liveness and whether upstream fetches can be made."""
    return HealthResponse(
        message="Dutch Parliament Attendance API is running",
        timestamp=_utc_timestamp(),
        fetch_available=service.is_ready,
    )
