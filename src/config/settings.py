# src/config/settings.py

"""Central configuration for the tarkka_fetch tool."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger("tarkka.settings")


def _optional_float(name: str) -> float | None:
    """Read a float from the environment, ``None`` when unset or invalid."""
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        logger.warning(
            "Ignoring non-numeric %s=%r, using no value", name, raw
        )
        return None


def _logs_dir() -> Path:
    """Log directory from ``TARKKA_LOGS_DIR`` or a per-user default."""
    raw = os.getenv("TARKKA_LOGS_DIR", "").strip()
    if raw:
        return Path(raw).expanduser()
    return Path.home() / ".tarkka" / "logs"


class Settings:
    """Central configuration for the tarkka_fetch tool."""

    # --- Source ---
    SOURCE_HOST: str = "tuotanto.heyday.fi"
    SOURCE_PATH: str = "/fortum/tarkka/graafi.php"
    SOURCE_URL: str = os.getenv(
        "TARKKA_SOURCE_URL",
        f"http://{SOURCE_HOST}{SOURCE_PATH}",
    )

    # --- Fetching ---
    # None disables the timeout; the request runs until the transport gives up
    REQUEST_TIMEOUT: float | None = _optional_float(
        "TARKKA_REQUEST_TIMEOUT"
    )

    # --- Parsing ---
    DATA_LINE_PREFIX: str = "{ data:"

    # --- Logging ---
    LOGS_DIR: Path = _logs_dir()
    LOG_FILE_NAME: str = "tarkka.log"
    LOG_BACKUP_COUNT: int = 14          # Daily files kept after rotation
