"""Command-line entry point for Corgi Cover onboarding.

Example:
  - corgi-cover applications.csv --policies policies.json --json eligible.json
"""

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from corgi_cover.config import OutputPaths, settings
from corgi_cover.core.errors import MalformedRowError
from corgi_cover.services.csv_parser import PolicyIndexReader
from corgi_cover.services.onboarding_service import OnboardingResult, OnboardingService

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Send log records to stderr at the given level."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line options; output paths default to the configured settings."""
    parser = argparse.ArgumentParser(
        description="Screen Corgi Cover applications and partition them"
    )
    parser.add_argument("input", help="Path to the applications CSV")
    parser.add_argument("--policies", help="JSON file of existing policies per applicant")
    parser.add_argument("--accepted", default=settings.ACCEPTED_PATH, help="Accepted CSV path")
    parser.add_argument("--rejected", default=settings.REJECTED_PATH, help="Rejected CSV path")
    parser.add_argument("--json", default=settings.JSON_PATH, help="JSON export path")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL)
    return parser.parse_args(argv)


def print_report(result: OnboardingResult) -> None:
    """Print partition counts, per-application tiers and the export location."""
    summary = result.summary
    print(
        f"accepted={summary.accepted} rejected={summary.rejected} "
        f"write_failed={summary.write_failed}"
    )
    for application, tier in result.tiers:
        print(f"  {application.name}: {tier.value}")
    if result.json_path:
        print(f"exported: {result.json_path}")
    if result.note:
        print(result.note)


def main(argv: Optional[List[str]] = None) -> int:
    """Run one onboarding batch and return the process exit code."""
    args = parse_args(argv)
    configure_logging(args.log_level)

    output_paths = OutputPaths(
        accepted_path=args.accepted,
        rejected_path=args.rejected,
        json_path=args.json,
    )

    policy_index = None
    if args.policies:
        try:
            policy_index = PolicyIndexReader.load(args.policies)
        except FileNotFoundError as e:
            logger.error(f"Policy index file missing: {e}")
            return 1
        except ValidationError as e:
            logger.error(f"Invalid policy index file {args.policies}: {e}")
            return 2

    try:
        result = OnboardingService(output_paths).run(args.input, policy_index)
    except MalformedRowError as e:
        logger.error(f"Malformed application file {args.input}: {e}")
        return 2

    if not result.loaded:
        print(result.note)
        return 1

    print_report(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
