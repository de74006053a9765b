# dtrange/core/validator.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, tzinfo
from enum import Enum
from typing import Optional

from dtrange.core.state import RangeState
from dtrange.utils.datetime_utils import DateTimeUtils as dt
from dtrange.utils.logger import logs

WINDOW_DAYS = 30

ALLOWED_RANGE_HELP = f"Allowed range: today to next {WINDOW_DAYS} days."


class ValidationKind(str, Enum):
    OUT_OF_ORDER = "out_of_order"
    START_TOO_EARLY = "start_too_early"
    END_TOO_EARLY = "end_too_early"
    START_TOO_LATE = "start_too_late"
    END_TOO_LATE = "end_too_late"

    @property
    def message(self) -> str:
        return MESSAGES[self]


MESSAGES = {
    ValidationKind.OUT_OF_ORDER: "End must be after Start.",
    ValidationKind.START_TOO_EARLY: "Start cannot be in the past.",
    ValidationKind.END_TOO_EARLY: "End cannot be in the past.",
    ValidationKind.START_TOO_LATE: f"Start is too far in the future (max {WINDOW_DAYS} days).",
    ValidationKind.END_TOO_LATE: f"End is too far in the future (max {WINDOW_DAYS} days).",
}

# None = no error
ValidationResult = Optional[ValidationKind]


@dataclass(frozen=True)
class AllowedWindow:
    """
    [min, max], both inclusive.

      - min = local midnight of ``now``'s day
      - max = min + 30 calendar days, 23:59:59.999
    """
    min: datetime
    max: datetime


def allowed_window(now: datetime, local_tz: Optional[tzinfo] = None) -> AllowedWindow:
    """
    Window for a single evaluation. Never cached: ``now`` moves.
    """
    today = dt.local_date(now, local_tz)
    return AllowedWindow(
        min=dt.start_of_day(today, local_tz),
        max=dt.end_of_day(dt.add_days(today, WINDOW_DAYS), local_tz),
    )


def validate(
    state: RangeState, now: datetime, local_tz: Optional[tzinfo] = None
) -> ValidationResult:
    """
    First failing rule wins:

      1. both set and end < start          → OUT_OF_ORDER
      2. start < min                       → START_TOO_EARLY
      3. end < min                         → END_TOO_EARLY
      4. start > max                       → START_TOO_LATE
      5. end > max                         → END_TOO_LATE

    Unset endpoints skip every rule that mentions them. Instants equal to
    min / max are valid. ``now`` is read once by the caller.
    """
    result = _evaluate(state, now, local_tz)
    logs.debug(
        f"[Validator] start={state.start} end={state.end} now={now} "
        f"→ {result.value if result else 'ok'}"
    )
    return result


def _evaluate(
    state: RangeState, now: datetime, local_tz: Optional[tzinfo]
) -> ValidationResult:
    if state.is_empty:
        return None

    start = dt.to_utc(state.start) if state.start is not None else None
    end = dt.to_utc(state.end) if state.end is not None else None

    if start is not None and end is not None and end < start:
        return ValidationKind.OUT_OF_ORDER

    window = allowed_window(now, local_tz)
    lo = dt.to_utc(window.min)
    hi = dt.to_utc(window.max)

    if start is not None and start < lo:
        return ValidationKind.START_TOO_EARLY
    if end is not None and end < lo:
        return ValidationKind.END_TOO_EARLY
    if start is not None and start > hi:
        return ValidationKind.START_TOO_LATE
    if end is not None and end > hi:
        return ValidationKind.END_TOO_LATE

    return None


def error_message(result: ValidationResult) -> Optional[str]:
    return None if result is None else result.message
