"""
Command-line interface for exporting Tweede Kamer attendance data.

Fetches one page of attendance records (or sample statistics) straight
from the OData API, without running the web server.

Usage:
    python -m src.cli.attendance_cli --date-from 2024-01-01 --date-to 2024-01-31
    python -m src.cli.attendance_cli --activity-type debat --limit 50 --output out.json
    python -m src.cli.attendance_cli --stats
    python -m src.cli.attendance_cli --help
"""

import asyncio
import argparse
import json
import logging
import sys
from collections import Counter
from datetime import date
from pathlib import Path
from typing import Optional

from ..adapters.errors import UpstreamError
from ..adapters.tweedekamer_activities import TweedeKamerActivitiesAdapter
from ..config import settings
from ..models.attendance import FilterParameters
from ..services.attendance_service import AttendanceService


# Configure logging
logging.basicConfig(
    level=settings.app.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


def _build_service() -> AttendanceService:
    adapter = TweedeKamerActivitiesAdapter(
        base_url=settings.upstream.base_url,
        timeout_seconds=settings.upstream.timeout_seconds,
        user_agent=settings.upstream.user_agent,
    )
    return AttendanceService(adapter, settings.upstream)


async def export_attendance(
    service: AttendanceService,
    params: FilterParameters,
    limit: int,
    skip: int,
    output_file: Optional[str]
) -> int:
    """
    Fetch one attendance page and print or save it.

    Args:
        service: Attendance service with an initialized adapter
        params: Date range and activity type filters
        limit: Maximum activities to fetch
        skip: Pagination offset
        output_file: Optional JSON output file path

    Returns:
        Process exit code
    """
    page = await service.get_attendance(params, limit=limit, skip=skip)

    print("\n" + "="*60)
    print("ATTENDANCE")
    print("="*60)
    print(f"Activities: {page.total_activities}")
    print(f"Registrations: {page.total_registrations}")
    print(f"Total matching activities: {page.total_count if page.total_count is not None else 'unknown'}")

    if page.records:
        print("\nTop fractions:")
        for fraction, count in Counter(r.fraction for r in page.records).most_common(5):
            print(f"  {fraction}: {count}")

    if output_file:
        output_data = {
            "data": [r.model_dump(by_alias=True) for r in page.records],
            "metadata": {
                "totalActivities": page.total_activities,
                "totalRegistrations": page.total_registrations,
                "totalCount": page.total_count,
                "skip": page.skip,
                "limit": page.limit,
            },
        }

        output_path = Path(output_file)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(output_data, f, indent=2, ensure_ascii=False)

        print(f"\nResults saved to: {output_path.absolute()}")

    print("="*60 + "\n")
    return 0


async def print_stats(service: AttendanceService, params: FilterParameters) -> int:
    """Print sample-based statistics."""
    stats = await service.get_stats(params)

    print("\n" + "="*60)
    print("STATISTICS")
    print("="*60)
    print(f"Total activities: {stats.total_activities}")
    print(f"Sample registrations: {stats.sample_registrations}")
    print(f"Unique people in sample: {stats.unique_people_in_sample}")
    print(f"Unique fractions in sample: {stats.unique_fractions_in_sample}")
    print(f"Note: {stats.note}")
    print("="*60 + "\n")
    return 0


async def run(args: argparse.Namespace) -> int:
    params = FilterParameters(
        date_from=args.date_from,
        date_to=args.date_to,
        activity_type=args.activity_type,
    )
    service = _build_service()
    await service.adapter.initialize()

    try:
        if args.stats:
            return await print_stats(service, params)
        return await export_attendance(
            service,
            params,
            limit=args.limit,
            skip=args.skip,
            output_file=args.output,
        )
    except UpstreamError as e:
        print(f"\nRequest FAILED: {e}\n")
        logger.error("Upstream request failed", exc_info=True)
        return 1
    finally:
        await service.adapter.close()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Export Dutch Parliament attendance data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # January 2024, first 100 activities
  python -m src.cli.attendance_cli --date-from 2024-01-01 --date-to 2024-01-31 --limit 100

  # Debates only, saved to JSON
  python -m src.cli.attendance_cli --activity-type debat --output debates.json

  # Sample statistics
  python -m src.cli.attendance_cli --stats --date-from 2024-01-01
        """
    )

    parser.add_argument(
        "--date-from",
        type=date.fromisoformat,
        help="Start date, inclusive (YYYY-MM-DD)"
    )

    parser.add_argument(
        "--date-to",
        type=date.fromisoformat,
        help="End date, inclusive (YYYY-MM-DD)"
    )

    parser.add_argument(
        "--activity-type",
        type=str,
        help="Case-insensitive match on the activity subject"
    )

    parser.add_argument(
        "--limit",
        type=int,
        default=settings.upstream.default_limit,
        help=f"Maximum number of activities to fetch (default: {settings.upstream.default_limit})"
    )

    parser.add_argument(
        "--skip",
        type=int,
        default=0,
        help="Activities to skip for pagination (default: 0)"
    )

    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print sample-based statistics instead of records"
    )

    parser.add_argument(
        "--output",
        type=str,
        help="Save records to JSON file"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging (DEBUG level)"
    )

    return parser


def main():
    """Main CLI entry point"""
    args = build_parser().parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Verbose logging enabled")

    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
