"""
Release Health Monitor

CLI entry point for running one monitoring pass.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from src.errors import MonitorError
from src.models.monitor_config import MonitorConfig
from src.orchestrator import MonitorOrchestrator
import config.settings as settings


def setup_logging(log_level: str = "INFO"):
    """Configure logging for the entire application."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=settings.LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Release Health Monitor - review and crash status for an Android app",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Last 7 days compared with the week before
  python main.py --package com.example.app --property-id 123456789

  # Last 3 days compared with the 3 days before
  python main.py --package com.example.app --range-days 3 --compare-mode day

Note: Set GOOGLE_PLAY_SERVICE_ACCOUNT_JSON and FIREBASE_SERVICE_ACCOUNT_JSON
environment variables before running.
        """
    )

    parser.add_argument(
        "--package",
        help="Android package name (default: $ANDROID_PACKAGE_NAME)"
    )

    parser.add_argument(
        "--property-id",
        help="GA4 property ID for crash events (default: $GA4_PROPERTY_ID)"
    )

    parser.add_argument(
        "--range-days",
        type=int,
        default=settings.DEFAULT_RANGE_DAYS,
        help=f"Current window length in days (default: {settings.DEFAULT_RANGE_DAYS})"
    )

    parser.add_argument(
        "--compare-mode",
        default=settings.DEFAULT_COMPARE_MODE,
        choices=["day", "week"],
        help=f"Comparison window (default: {settings.DEFAULT_COMPARE_MODE})"
    )

    parser.add_argument(
        "--no-vitals",
        action="store_true",
        help="Skip fetching Play Vitals issues"
    )

    parser.add_argument(
        "--output",
        help="Write snapshot JSON to this file instead of stdout"
    )

    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {settings.LOG_LEVEL})"
    )

    return parser


def main(argv=None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    try:
        config = MonitorConfig.from_settings(
            settings,
            package_name=args.package,
            ga4_property_id=args.property_id,
            range_days=args.range_days,
            compare_mode=args.compare_mode,
            include_vitals=False if args.no_vitals else None
        )
        orchestrator = MonitorOrchestrator(config)
        snapshot = orchestrator.run()
    except MonitorError as e:
        logger.error(f"Monitoring pass failed: {e}")
        return 1

    output = json.dumps(snapshot.to_dict(), indent=2, ensure_ascii=False)

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(output + "\n", encoding="utf-8")
        logger.info(f"Snapshot written to {output_path}")
    else:
        print(output)

    logger.info(
        f"Reviews: {snapshot.reviews.status.level}, crashes: {snapshot.crashes.status.level}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
