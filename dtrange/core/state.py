# dtrange/core/state.py
from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, tzinfo
from typing import Optional

from dtrange.utils.datetime_utils import DateTimeUtils


@dataclass(frozen=True)
class RangeState:
    """
    RangeState (caller-owned, replaced wholesale on every edit)

      - start / end: aware datetimes, None = unset
      - timezone:    display zone id

    No ordering invariant here: end < start is reported by the validator.
    """
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    timezone: str = "UTC"

    def set_start(self, value: Optional[datetime]) -> "RangeState":
        return replace(self, start=value)

    def set_end(self, value: Optional[datetime]) -> "RangeState":
        return replace(self, end=value)

    def set_timezone(self, timezone_id: str) -> "RangeState":
        return replace(self, timezone=timezone_id)

    @property
    def is_empty(self) -> bool:
        return self.start is None and self.end is None

    @classmethod
    def from_inputs(
        cls,
        start: str = "",
        end: str = "",
        timezone: str = "UTC",
        local_tz: Optional[tzinfo] = None,
    ) -> "RangeState":
        """
        Build from raw ``YYYY-MM-DDTHH:mm`` strings; "" means unset.

        Raises
        ------
        ParseError
            if either string is malformed
        """
        return cls(
            start=DateTimeUtils.parse_local_wall_clock(start, local_tz),
            end=DateTimeUtils.parse_local_wall_clock(end, local_tz),
            timezone=timezone,
        )
