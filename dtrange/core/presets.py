# dtrange/core/presets.py
from __future__ import annotations

from datetime import datetime, time, tzinfo
from enum import Enum
from typing import Optional

from dtrange.core.state import RangeState
from dtrange.utils.datetime_utils import DateTimeUtils as dt
from dtrange.utils.logger import logs

# minute is the finest field the input accepts
DAY_LAST_MINUTE = time(23, 59)


class Preset(str, Enum):
    TODAY = "today"
    LAST_7_DAYS = "last7"
    CLEAR = "clear"

    @property
    def label(self) -> str:
        return {
            Preset.TODAY: "Today",
            Preset.LAST_7_DAYS: "Last 7 Days",
            Preset.CLEAR: "Clear",
        }[self]


def today(state: RangeState, now: datetime, local_tz: Optional[tzinfo] = None) -> RangeState:
    day = dt.local_date(now, local_tz)
    return RangeState(
        start=dt.start_of_day(day, local_tz),
        end=dt.at_local_time(day, DAY_LAST_MINUTE, local_tz),
        timezone=state.timezone,
    )


def last_7_days(
    state: RangeState, now: datetime, local_tz: Optional[tzinfo] = None
) -> RangeState:
    """
    today 23:59 back to 00:00 six calendar days earlier (7 days inclusive).
    """
    day = dt.local_date(now, local_tz)
    return RangeState(
        start=dt.start_of_day(dt.add_days(day, -6), local_tz),
        end=dt.at_local_time(day, DAY_LAST_MINUTE, local_tz),
        timezone=state.timezone,
    )


def clear(
    state: RangeState, now: Optional[datetime] = None, local_tz: Optional[tzinfo] = None
) -> RangeState:
    return RangeState(start=None, end=None, timezone=state.timezone)


_PRESETS = {
    Preset.TODAY: today,
    Preset.LAST_7_DAYS: last_7_days,
    Preset.CLEAR: clear,
}


def apply_preset(
    preset: Preset | str,
    state: RangeState,
    now: datetime,
    local_tz: Optional[tzinfo] = None,
) -> RangeState:
    """
    Raises
    ------
    ValueError
        unknown preset name
    """
    preset = Preset(preset)
    new_state = _PRESETS[preset](state, now, local_tz)
    logs.debug(
        f"[Preset] {preset.label} now={now} → start={new_state.start} end={new_state.end}"
    )
    return new_state
