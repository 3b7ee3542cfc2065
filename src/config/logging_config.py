# src/config/logging_config.py

"""Logging configuration for unattended tarkka_fetch runs.

The tool is started by cron or a similar trigger, often many times a
day, so every run appends to one ``tarkka.log`` that rotates at
midnight. ``Settings.LOG_BACKUP_COUNT`` bounds how many old days are
kept. The directory comes from ``TARKKA_LOGS_DIR`` and defaults to
``~/.tarkka/logs``.

The console only receives warnings and errors, keeping scheduled runs
quiet unless something needs attention. When the log directory cannot
be written, the run continues with console logging only.
"""

import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from src.config.settings import Settings

_DETAILED_FORMAT = (
    "%(asctime)s | %(process)d | %(levelname)-8s | %(name)s | "
    "%(module)s:%(funcName)s:%(lineno)d | %(message)s"
)

_CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _file_handler(log_file: Path) -> logging.Handler:
    """Daily-rotating file handler capturing DEBUG and up."""
    handler = TimedRotatingFileHandler(
        log_file,
        when="midnight",
        backupCount=Settings.LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(
        logging.Formatter(_DETAILED_FORMAT, datefmt=_DATE_FORMAT)
    )
    return handler


def setup_logging() -> Path | None:
    """Initialise the root ``tarkka`` logger for the current run.

    Returns:
        The shared log file path, or ``None`` when only console
        logging could be set up.
    """
    logs_dir: Path = Settings.LOGS_DIR
    log_file = logs_dir / Settings.LOG_FILE_NAME

    root_logger = logging.getLogger("tarkka")
    root_logger.setLevel(logging.DEBUG)

    # Prevent duplicate handlers on repeated calls (e.g. tests)
    if root_logger.handlers:
        has_file = any(
            isinstance(h, logging.FileHandler)
            for h in root_logger.handlers
        )
        return log_file if has_file else None

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(
        logging.Formatter(_CONSOLE_FORMAT, datefmt=_DATE_FORMAT)
    )
    root_logger.addHandler(console_handler)

    try:
        logs_dir.mkdir(parents=True, exist_ok=True)
        root_logger.addHandler(_file_handler(log_file))
    except OSError as exc:
        root_logger.warning(
            "Cannot write logs to %s (%s), logging to console only",
            logs_dir,
            exc,
        )
        return None

    root_logger.info("Logging initialised, log file: %s", log_file)
    return log_file
