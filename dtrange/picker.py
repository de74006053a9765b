# dtrange/picker.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import List, Optional, Tuple

from dtrange.core.clock import Clock, SystemClock
from dtrange.core.formatter import PLACEHOLDER, format_in_timezone
from dtrange.core.presets import Preset, apply_preset
from dtrange.core.state import RangeState
from dtrange.core.timezones import TimezoneRegistry
from dtrange.core.validator import ALLOWED_RANGE_HELP, ValidationResult, validate
from dtrange.utils.datetime_utils import DateTimeUtils as dt
from dtrange.utils.logger import logs


@dataclass(frozen=True)
class PickerSnapshot:
    """
    Everything the form renders for one state, computed against one ``now``.
    """
    start_input: str
    end_input: str
    timezone: str
    start_display: str
    end_display: str
    error: Optional[str]
    help_text: str = ALLOWED_RANGE_HELP

    @property
    def is_valid(self) -> bool:
        return self.error is None


class RangePicker:
    """
    Headless date-time range picker.

    Holds the current RangeState and replaces it on every edit. Edits are
    never blocked by validation: ``validate`` / ``snapshot`` are derived on
    demand. Malformed input and unknown zones raise immediately and leave
    the state untouched.
    """

    def __init__(
        self,
        registry: Optional[TimezoneRegistry] = None,
        clock: Optional[Clock] = None,
        initial_start: str = "",
        initial_end: str = "",
        initial_timezone: Optional[str] = None,
        local_tz: Optional[tzinfo] = None,
    ):
        self.registry = registry or TimezoneRegistry()
        self.clock = clock or SystemClock()
        self.local_tz = local_tz

        timezone = self.registry.require(initial_timezone or self.registry.default)
        self.state = RangeState.from_inputs(initial_start, initial_end, timezone, local_tz)

    @classmethod
    def from_config(cls, cfg, clock: Optional[Clock] = None, **kwargs) -> "RangePicker":
        """
        Build from an ``AppConfig``; every configured zone is validated here.
        """
        registry = TimezoneRegistry(cfg.picker.timezones)
        local_tz = dt.zone(cfg.picker.local_timezone) if cfg.picker.local_timezone else None
        if kwargs.get("initial_timezone") is None:
            kwargs["initial_timezone"] = cfg.picker.default_timezone
        return cls(registry=registry, clock=clock, local_tz=local_tz, **kwargs)

    # ---------------------------------------------------------
    # edits
    # ---------------------------------------------------------
    def set_start(self, raw: str) -> RangeState:
        self.state = self.state.set_start(dt.parse_local_wall_clock(raw, self.local_tz))
        logs.debug(f"[RangePicker] start ← {raw!r}")
        return self.state

    def set_end(self, raw: str) -> RangeState:
        self.state = self.state.set_end(dt.parse_local_wall_clock(raw, self.local_tz))
        logs.debug(f"[RangePicker] end ← {raw!r}")
        return self.state

    def set_timezone(self, timezone_id: str) -> RangeState:
        self.state = self.state.set_timezone(self.registry.require(timezone_id))
        logs.debug(f"[RangePicker] timezone ← {timezone_id}")
        return self.state

    def apply_preset(self, preset: Preset | str, now: Optional[datetime] = None) -> RangeState:
        now = now or self.clock.now()
        self.state = apply_preset(preset, self.state, now, self.local_tz)
        return self.state

    # ---------------------------------------------------------
    # derived
    # ---------------------------------------------------------
    def validate(self, now: Optional[datetime] = None) -> ValidationResult:
        return validate(self.state, now or self.clock.now(), self.local_tz)

    def error_message(self, now: Optional[datetime] = None) -> Optional[str]:
        result = self.validate(now)
        return None if result is None else result.message

    def input_value(self, instant: Optional[datetime]) -> str:
        return "" if instant is None else dt.to_local_input(instant, self.local_tz)

    def snapshot(self, now: Optional[datetime] = None) -> PickerSnapshot:
        state = self.state
        return PickerSnapshot(
            start_input=self.input_value(state.start),
            end_input=self.input_value(state.end),
            timezone=state.timezone,
            start_display=format_in_timezone(state.start, state.timezone),
            end_display=format_in_timezone(state.end, state.timezone),
            error=self.error_message(now),
        )

    def preview_lines(self, now: Optional[datetime] = None) -> List[Tuple[str, str]]:
        """
        The read-only preview block, one ``label: value`` pair per line.
        """
        snap = self.snapshot(now)
        return [
            ("Start", snap.start_input or PLACEHOLDER),
            ("End", snap.end_input or PLACEHOLDER),
            ("Timezone", snap.timezone),
            ("Start (formatted in TZ)", snap.start_display),
            ("End (formatted in TZ)", snap.end_display),
        ]
