# src/storage/snapshot_cache.py

"""On-disk cache holding today's price snapshot."""

import json
import logging
import stat
from pathlib import Path

from src.models.price_snapshot import PriceSnapshot

logger = logging.getLogger("tarkka.cache")


class NotAFileError(Exception):
    """The cache path exists but is not a regular file."""


class SnapshotCache:
    """Single-file cache of one :class:`PriceSnapshot`.

    The file is read before deciding whether to fetch and fully
    replaced after every successful fetch. There is one writer and
    one reader per run, so no locking is done.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def has_valid_snapshot(self, today_ms: int) -> bool:
        """Return True if the file holds a snapshot for today.

        A missing, unreadable or malformed file is a cache miss.

        Raises:
            NotAFileError: the path exists but is not a regular file.
        """
        try:
            st = self.path.stat()
        except OSError as exc:
            logger.info("Could not check '%s': %s", self.path, exc)
            return False
        if not stat.S_ISREG(st.st_mode):
            raise NotAFileError(f"'{self.path}' is not a file.")

        try:
            snapshot = self.load()
            valid = snapshot.is_valid_for(today_ms)
        except (OSError, ValueError, KeyError, TypeError) as exc:
            logger.info("Could not check '%s': %s", self.path, exc)
            return False

        logger.info(
            "Cached snapshot in '%s' is %s (time=%s, today=%d)",
            self.path,
            "current" if valid else "stale",
            snapshot.time,
            today_ms,
        )
        return valid

    def load(self) -> PriceSnapshot:
        """Read and decode the cached snapshot."""
        with open(self.path, encoding="utf-8") as f:
            payload = json.load(f)
        return PriceSnapshot.from_dict(payload)

    def save(self, snapshot: PriceSnapshot) -> Path:
        """Overwrite the cache file with *snapshot*.

        ``OSError`` from the write propagates to the caller.
        """
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(snapshot.to_dict(), f)

        logger.info(
            "Saved %d hourly prices to '%s'",
            len(snapshot.data),
            self.path,
        )
        return self.path
