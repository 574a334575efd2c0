"""
Tweede Kamer OData adapter for fetching activities.

Pulls parliamentary activities from the data warehouse
(gegevensmagazijn.tweedekamer.nl) together with their actors, persons
and fractions.

Responsibility: Fetch activities from the Tweede Kamer OData API
"""

from typing import Optional, Dict, List, Any, Sequence
from urllib.parse import quote
import httpx
from pydantic import ValidationError

from .base_adapter import BaseAdapter
from .odata_query import ATTENDANCE_EXPAND, build_query
from ..models.activity import Activity


class TweedeKamerActivitiesAdapter(BaseAdapter[Activity]):
    """
    Adapter for the ``Activiteit`` entity set.

    Key features:
    - Expands actors with their person and fraction in one request
    - Supports $top/$skip pagination and a separate $count query
    - Returns raw JSON; callers normalize what they need

    Example:
        adapter = TweedeKamerActivitiesAdapter()
        await adapter.initialize()
        raw = await adapter.fetch_activities(["verwijderd eq false"], top=10)
    """

    BASE_URL = "https://gegevensmagazijn.tweedekamer.nl/OData/v4/2.0"
    ENTITY_SET = "Activiteit"

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout_seconds: float = 30,
        user_agent: str = "TweedeKamerAttendance/1.0",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize Tweede Kamer activities adapter"""
        super().__init__(
            source_name="tweedekamer_activities",
            timeout_seconds=timeout_seconds,
            user_agent=user_agent,
            transport=transport,
        )
        self.base_url = (base_url or self.BASE_URL).rstrip("/")

    async def fetch_activities(
        self,
        filters: Sequence[str],
        expands: Sequence[str] = (ATTENDANCE_EXPAND,),
        top: Optional[int] = None,
        skip: Optional[int] = None,
        orderby: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        Fetch one page of activities.

        Args:
            filters: OData filter expressions (AND-ed)
            expands: Navigation expansions
            top: Maximum activities to return
            skip: Activities to skip (pagination offset)
            orderby: Sort expression (e.g., "aanvangstijd desc")

        Returns:
            Raw activity dicts from the ``value`` array
        """
        url = build_query(
            self.ENTITY_SET,
            filters,
            expands,
            {"top": top, "skip": skip, "orderby": orderby},
            base_url=self.base_url,
        )
        self.logger.info(f"API Query: {url}")

        data = await self._get_json(url)
        activities = data.get("value") or []

        self.logger.info(f"Found {len(activities)} activities")
        return activities

    async def fetch_count(self, filters: Sequence[str]) -> Optional[int]:
        """
        Count activities matching the filters.

        Uses ``$top=0`` so no records are transferred.

        Returns:
            The ``@odata.count`` value, or None when the service omits it
        """
        url = build_query(
            self.ENTITY_SET,
            filters,
            options={"count": True, "top": 0},
            base_url=self.base_url,
        )
        self.logger.info(f"Count query: {url}")

        data = await self._get_json(url)
        count = data.get("@odata.count")
        return int(count) if count is not None else None

    async def fetch_activity(self, activity_id: str) -> Dict[str, Any]:
        """
        Fetch a single activity with its actors expanded.

        Args:
            activity_id: Activity GUID

        Returns:
            Raw upstream record, unflattened
        """
        url = build_query(
            f"{self.ENTITY_SET}({quote(activity_id, safe='')})",
            expands=[ATTENDANCE_EXPAND],
            base_url=self.base_url,
        )
        self.logger.info(f"Fetching activity {activity_id}")
        return await self._get_json(url)

    def normalize(self, raw_data: Dict[str, Any]) -> Activity:
        """
        Normalize a raw ``Activiteit`` record.

        Raises:
            ValueError: If the record does not match the expected shape
        """
        try:
            return Activity.model_validate(raw_data)
        except ValidationError as e:
            record_id = raw_data.get("Id") if isinstance(raw_data, dict) else None
            raise ValueError(f"Invalid activity record {record_id}: {e}") from e

    def normalize_many(self, raw_activities: List[Dict[str, Any]]) -> List[Activity]:
        """Normalize a batch, logging and dropping malformed records."""
        activities: List[Activity] = []
        for raw in raw_activities:
            try:
                activities.append(self.normalize(raw))
            except ValueError as e:
                self.logger.warning(f"Failed to normalize activity: {e}")
        return activities
