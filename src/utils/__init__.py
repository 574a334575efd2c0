"""
Utilities package for the Tweede Kamer Attendance API.

This package contains reusable helpers for:
- Parsing and formatting upstream timestamps
"""

from .date_format import (
    format_dutch_date_time,
    parse_timestamp,
)

__all__ = [
    "format_dutch_date_time",
    "parse_timestamp",
]
