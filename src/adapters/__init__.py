"""
Adapters package for the Tweede Kamer Attendance API.

This package contains the upstream OData adapter, the query builder
and the upstream error types.
"""

from .base_adapter import BaseAdapter
from .errors import UpstreamError, UpstreamHTTPError, UpstreamUnavailableError
from .odata_query import build_activity_filters, build_query
from .tweedekamer_activities import TweedeKamerActivitiesAdapter

__all__ = [
    "BaseAdapter",
    "TweedeKamerActivitiesAdapter",
    "UpstreamError",
    "UpstreamHTTPError",
    "UpstreamUnavailableError",
    "build_activity_filters",
    "build_query",
]
