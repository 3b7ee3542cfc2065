# main.py

"""Entry point for tarkka_fetch.

Fetches the latest Fortum Tarkka hourly prices and stores them in a
local file once per day. Run it from cron; if the file already holds
data for today it exits without touching the network.
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from src.cli.runner import run_fetch
from src.config.logging_config import setup_logging
from src.config.settings import Settings
from src.models.run_context import RunContext

logger = logging.getLogger("tarkka.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="tarkka_fetch",
        description=(
            "Fetches latest 'Tarkka' hourly prices and stores them "
            "locally once per day."
        ),
        epilog=f"Source: {Settings.SOURCE_URL}",
    )
    parser.add_argument(
        "result_file",
        nargs="?",
        default=None,
        metavar="RESULT_FILE",
        help="Full filesystem path to store results to.",
    )
    return parser


def main() -> None:
    """Parse arguments, run one refresh and exit with its status."""
    log_file = setup_logging()
    logger.info("tarkka_fetch starting, log file: %s", log_file or "none")

    parser = _build_parser()
    args, extra = parser.parse_known_args()
    if extra:
        logger.warning("Ignoring extra arguments: %s", " ".join(extra))

    if args.result_file is None:
        parser.print_help(sys.stdout)
        sys.exit(1)

    context = RunContext.for_today(Path(args.result_file))
    logger.info(
        "Result file: %s, day boundary: %d",
        context.result_path,
        context.today_ms,
    )

    exit_code = asyncio.run(run_fetch(context))
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
