# dtrange/core/clock.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Protocol


class Clock(Protocol):
    """
    Clock Contract

    Sole responsibility:
      - hand out the current instant (timezone-aware)

    Callers read it ONCE per logical step and pass ``now`` down.
    """

    def now(self) -> datetime:
        ...


class SystemClock:
    def now(self) -> datetime:
        return datetime.now(timezone.utc)


@dataclass(frozen=True)
class FixedClock:
    """
    Deterministic clock for tests and replays.
    """
    instant: datetime

    def __post_init__(self):
        if self.instant.tzinfo is None:
            raise ValueError("FixedClock instant must be timezone-aware")

    def now(self) -> datetime:
        return self.instant
