"""
Attendance service.

Coordinates the upstream adapter, the OData query policy and the
flattener for the three read operations exposed by the API: an
attendance page, a single raw activity and sample-based statistics.

Responsibility: Orchestrate upstream fetches for attendance use cases
"""

import logging
from typing import Any, Dict, Optional

from ..adapters.errors import UpstreamError
from ..adapters.odata_query import (
    ATTENDANCE_EXPAND,
    build_activity_filters,
    participant_expand,
)
from ..adapters.tweedekamer_activities import TweedeKamerActivitiesAdapter
from ..config import UpstreamConfig
from ..models.attendance import AttendancePage, AttendanceStats, FilterParameters
from .attendance_flattener import flatten_activities

logger = logging.getLogger(__name__)

DEFAULT_ORDERBY = "aanvangstijd desc"


class AttendanceService:
    """
    Read-only attendance operations on top of the activities adapter.

    Holds no per-request state; one instance serves all requests.

    Example:
        service = AttendanceService(adapter, settings.upstream)
        page = await service.get_attendance(FilterParameters(), limit=100)
    """

    def __init__(
        self,
        adapter: TweedeKamerActivitiesAdapter,
        config: Optional[UpstreamConfig] = None,
    ):
        self.adapter = adapter
        self.config = config or UpstreamConfig()

    @property
    def is_ready(self) -> bool:
        return self.adapter.is_ready

    async def get_attendance(
        self,
        params: Optional[FilterParameters] = None,
        limit: Optional[int] = None,
        skip: int = 0,
    ) -> AttendancePage:
        """
        Fetch and flatten one page of attendance data.

        The total count is only requested for the first page
        (``skip == 0``); a failing count query is logged and reported
        as an unknown total.

        Raises:
            UpstreamError: If the data query fails
        """
        limit = self.config.default_limit if limit is None else limit
        filters = build_activity_filters(params)

        logger.info(
            f"Fetching attendance data: params={params}, limit={limit}, skip={skip}"
        )

        raw_activities = await self.adapter.fetch_activities(
            filters,
            expands=[ATTENDANCE_EXPAND],
            top=limit,
            skip=skip,
            orderby=DEFAULT_ORDERBY,
        )
        activities = self.adapter.normalize_many(raw_activities)
        result = flatten_activities(activities, self.config.display_timezone)

        total_count = None
        if skip == 0:
            total_count = await self._try_count(filters)

        return AttendancePage(
            records=result.records,
            total_activities=len(raw_activities),
            total_count=total_count,
            skip=skip,
            limit=limit,
        )

    async def get_activity(self, activity_id: str) -> Dict[str, Any]:
        """Return the raw upstream record for one activity."""
        return await self.adapter.fetch_activity(activity_id)

    async def get_stats(self, params: Optional[FilterParameters] = None) -> AttendanceStats:
        """
        Compute approximate statistics.

        The activity total comes from a count query; people and fraction
        cardinalities come from a bounded sample restricted to
        participants, so they are not exhaustive.
        """
        filters = build_activity_filters(params)

        total = await self.adapter.fetch_count(filters)

        raw_sample = await self.adapter.fetch_activities(
            filters,
            expands=[participant_expand(self.config.participant_relation)],
            top=self.config.stats_sample_size,
        )
        sample = flatten_activities(
            self.adapter.normalize_many(raw_sample),
            self.config.display_timezone,
        ).records

        return AttendanceStats(
            total_activities=total or 0,
            sample_registrations=len(sample),
            unique_people_in_sample=len({r.person_id for r in sample}),
            unique_fractions_in_sample=len({r.fraction for r in sample}),
        )

    async def _try_count(self, filters) -> Optional[int]:
        try:
            return await self.adapter.fetch_count(filters)
        except (UpstreamError, ValueError) as e:
            logger.warning(f"Could not fetch total count: {e}")
            return None
