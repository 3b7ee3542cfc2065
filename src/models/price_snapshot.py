# src/models/price_snapshot.py

"""Daily hourly-price snapshot model and day boundary helper."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


def day_boundary_ms(now: datetime | None = None) -> int:
    """Return epoch milliseconds of local midnight for *now*'s date."""
    current = now if now is not None else datetime.now()
    midnight = current.replace(
        hour=0, minute=0, second=0, microsecond=0
    )
    return int(midnight.timestamp()) * 1000


@dataclass
class PriceSnapshot:
    """One day's hourly prices, stamped with that day's boundary."""

    time: int
    data: list[float] = field(
        default_factory=lambda: list[float]()
    )

    def is_valid_for(self, today_ms: int) -> bool:
        """A snapshot stamped at or after *today_ms* covers today."""
        return self.time >= today_ms

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the on-disk ``{time, data}`` mapping."""
        return {"time": self.time, "data": list(self.data)}

    @classmethod
    def from_dict(cls, payload: Any) -> "PriceSnapshot":
        """Build a snapshot from a decoded cache file.

        Raises ``TypeError`` when *payload* is not a mapping and
        ``KeyError`` when the ``time`` field is missing.
        """
        if not isinstance(payload, dict):
            raise TypeError(
                f"expected an object, got {type(payload).__name__}"
            )
        return cls(
            time=payload["time"],
            data=list(payload.get("data") or []),
        )
