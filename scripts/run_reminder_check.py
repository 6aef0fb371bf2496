"""Utility script to run the booster reminder checks once from the command line."""

from __future__ import annotations

import argparse
import logging

from petdoc.application.use_cases.reminders import run_offsets
from petdoc.config import get_settings
from petdoc.infrastructure.database import initialize_database
from petdoc.infrastructure.scheduler import build_reminder_engine


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for a manual reminder run."""

    parser = argparse.ArgumentParser(
        description="Send booster reminder e-mails for the given lookahead offsets.",
    )
    parser.add_argument(
        "--offset",
        dest="offsets",
        action="append",
        type=int,
        default=None,
        help=(
            "Days ahead of the booster date to check. Repeat the option to check "
            "several offsets (default: the configured production offsets)."
        ),
    )
    return parser.parse_args()


def main() -> None:
    """Run the reminder checks and exit with an error when any offset failed."""

    args = parse_args()
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    offsets = args.offsets or list(settings.reminder_offsets)
    if any(offset < 0 for offset in offsets):
        raise SystemExit("Offsets must be zero or positive.")

    initialize_database()
    failed = run_offsets(build_reminder_engine(settings), offsets)
    if failed:
        raise SystemExit(
            "Reminder checks failed for offsets: "
            + ", ".join(str(offset) for offset in failed)
        )
    print(f"Reminder checks completed for offsets: {', '.join(map(str, offsets))}")


if __name__ == "__main__":
    main()
