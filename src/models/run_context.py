# src/models/run_context.py

"""Per-run values captured once at process start."""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from src.models.price_snapshot import day_boundary_ms


@dataclass(frozen=True)
class RunContext:
    """Target cache file and the day boundary for this invocation."""

    result_path: Path
    today_ms: int

    @classmethod
    def for_today(
        cls, result_path: Path, now: datetime | None = None
    ) -> "RunContext":
        """Capture today's boundary alongside the result path."""
        return cls(
            result_path=result_path,
            today_ms=day_boundary_ms(now),
        )
