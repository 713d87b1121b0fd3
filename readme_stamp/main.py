#!/usr/bin/env python3
"""
Command-line entry point for the README stamper.

A scheduler (cron, a CI schedule) runs it without arguments once a week;
``--json`` prints the run summary for on-demand runs.

Usage (example):
    GITHUB_TOKEN=... python -m readme_stamp.main --json
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .config import settings
from .errors import StampError
from .fetcher import MAX_PAGE_SIZE
from .models import UpdateStatus
from .runner import run_weekly_stamp

logger = logging.getLogger("readme-stamp")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def page_size_arg(value: str) -> int:
    """argparse type for --page-size: an integer in 1..MAX_PAGE_SIZE."""
    try:
        size = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if not 1 <= size <= MAX_PAGE_SIZE:
        raise argparse.ArgumentTypeError(f"must be between 1 and {MAX_PAGE_SIZE}, got {size}")
    return size


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Write this week's stamp as the last line of every repository README."
    )
    parser.add_argument("--token", "-t", required=False, help="GitHub token (defaults to $GITHUB_TOKEN)")
    parser.add_argument("--json", action="store_true", help="Print the run summary as JSON")
    parser.add_argument("--dry-run", action="store_true", help="Report what would change without committing")
    parser.add_argument("--repo", "-r", action="append", metavar="OWNER/NAME",
                        help="Only stamp this repository (repeatable)")
    parser.add_argument("--page-size", type=page_size_arg, default=settings.STAMP_PAGE_SIZE,
                        help="Repositories per listing page")
    parser.add_argument("--previous-sunday", action="store_true",
                        default=not settings.STAMP_ROLL_FORWARD,
                        help="Label the Sunday that has passed instead of the upcoming one")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS,
                        default=settings.STAMP_LOG_LEVEL.upper(), help="Logging level")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """
    Parse arguments, run the stamper and report the outcome.

    Exits with status 1 when the run is aborted (missing token, failed
    repository listing or any other error before the loop). Per-repository
    failures are part of the summary and do not change the exit status.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level)

    try:
        summary = run_weekly_stamp(
            args.token or settings.token(),
            page_size=args.page_size,
            roll_forward=not args.previous_sunday,
            dry_run=args.dry_run,
            include=args.repo,
        )
    except KeyboardInterrupt:
        logger.info("Run interrupted by user")
        print("\nOperation cancelled by user")
        sys.exit(1)
    except StampError as e:
        logger.error("Run aborted: %s", e)
        print(f"Error: run aborted - {e}")
        sys.exit(1)
    except Exception as e:
        logger.error("Stamping run failed: %s", e)
        print(f"Error: stamping run failed - {e}")
        sys.exit(1)

    if args.json:
        print(json.dumps(summary.to_dict(), ensure_ascii=False, indent=2))
    else:
        counts = summary.counts()
        print(f"Stamp: {summary.week_stamp.label_text}")
        print(f"  Updated: {counts['updated']}  Skipped: {counts['skipped']}  Errors: {counts['error']}")
        for repo, outcome in summary.results:
            if outcome.status is UpdateStatus.FAILED:
                print(f"  {repo.full_name}: {outcome.reason}")


if __name__ == "__main__":
    main()
