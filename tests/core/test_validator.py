from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from dtrange.core.state import RangeState
from dtrange.core.validator import (
    ALLOWED_RANGE_HELP,
    ValidationKind,
    allowed_window,
    error_message,
    validate,
)
from dtrange.utils.datetime_utils import DateTimeUtils as dt

UTC = ZoneInfo("UTC")
NY = ZoneInfo("America/New_York")
KOLKATA = ZoneInfo("Asia/Kolkata")

WINDOW_SPAN = timedelta(days=30, hours=23, minutes=59, seconds=59, milliseconds=999)
MS = timedelta(milliseconds=1)


def _at(*args, tz=UTC) -> datetime:
    return datetime(*args, tzinfo=tz)


# ================================================================
# allowed_window()
# ================================================================
def test_window_bounds_for_utc_evaluator(now_utc):
    w = allowed_window(now_utc, UTC)

    assert w.min == _at(2026, 6, 15, 0, 0)
    assert w.max == _at(2026, 7, 15, 23, 59, 59, 999_000)
    assert w.max - w.min == WINDOW_SPAN


def test_window_span_is_thirty_calendar_days_across_dst():
    """
    Window crosses the 2026-03-08 spring-forward in New York:
    wall clock span stays 30d 23:59:59.999, the absolute span loses one hour.
    """
    now = _at(2026, 2, 20, 9, 0, tz=NY)
    w = allowed_window(now, NY)

    wall_span = w.max.replace(tzinfo=None) - w.min.replace(tzinfo=None)
    assert wall_span == WINDOW_SPAN
    assert dt.to_utc(w.max) - dt.to_utc(w.min) == WINDOW_SPAN - timedelta(hours=1)
    assert w.min.utcoffset() == timedelta(hours=-5)
    assert w.max.utcoffset() == timedelta(hours=-4)


def test_window_uses_evaluator_midnight_not_utc_midnight():
    # 02:00 UTC on the 15th is still the 14th in New York
    now = _at(2026, 6, 15, 2, 0)

    assert allowed_window(now, NY).min == _at(2026, 6, 14, 0, 0, tz=NY)
    assert allowed_window(now, UTC).min == _at(2026, 6, 15, 0, 0)


def test_window_is_rebuilt_for_each_now(now_utc):
    w_today = allowed_window(now_utc, UTC)
    w_tomorrow = allowed_window(now_utc + timedelta(days=1), UTC)

    assert w_tomorrow.min - w_today.min == timedelta(days=1)
    assert w_tomorrow.max - w_today.max == timedelta(days=1)


# ================================================================
# validate(): no selection / ordering
# ================================================================
def test_empty_state_is_never_an_error(now_utc):
    assert validate(RangeState(), now_utc, UTC) is None


def test_valid_range_inside_window(now_utc):
    state = RangeState(start=_at(2026, 6, 16, 9, 0), end=_at(2026, 6, 20, 17, 0))
    assert validate(state, now_utc, UTC) is None


def test_equal_endpoints_are_not_out_of_order(now_utc):
    t = _at(2026, 6, 16, 9, 0)
    assert validate(RangeState(start=t, end=t), now_utc, UTC) is None


def test_end_before_start(now_utc):
    state = RangeState(start=_at(2026, 6, 20, 9, 0), end=_at(2026, 6, 19, 9, 0))
    assert validate(state, now_utc, UTC) is ValidationKind.OUT_OF_ORDER


def test_out_of_order_beats_window_errors(now_utc):
    """
    Contract:
    start after max AND end before start → OUT_OF_ORDER, never a window error
    """
    state = RangeState(start=_at(2026, 8, 10, 9, 0), end=_at(2026, 8, 1, 9, 0))
    assert validate(state, now_utc, UTC) is ValidationKind.OUT_OF_ORDER

    both_past = RangeState(start=_at(2026, 6, 1, 9, 0), end=_at(2026, 5, 1, 9, 0))
    assert validate(both_past, now_utc, UTC) is ValidationKind.OUT_OF_ORDER


def test_ordering_compares_absolute_instants(now_utc):
    # 10:00 Kolkata (04:30 UTC) is before 06:00 UTC although 10 > 6 on the wall
    state = RangeState(start=_at(2026, 6, 16, 10, 0, tz=KOLKATA), end=_at(2026, 6, 16, 6, 0))
    assert validate(state, now_utc, UTC) is None


# ================================================================
# validate(): window rules
# ================================================================
def test_boundaries_are_inclusive(now_utc):
    w = allowed_window(now_utc, UTC)
    assert validate(RangeState(start=w.min, end=w.max), now_utc, UTC) is None


def test_one_millisecond_before_min(now_utc):
    w = allowed_window(now_utc, UTC)
    state = RangeState(start=w.min - MS, end=w.max)
    assert validate(state, now_utc, UTC) is ValidationKind.START_TOO_EARLY


def test_one_millisecond_after_max(now_utc):
    w = allowed_window(now_utc, UTC)
    assert validate(RangeState(end=w.max + MS), now_utc, UTC) is ValidationKind.END_TOO_LATE


@pytest.mark.parametrize(
    "start, end, expected",
    [
        # single endpoint still gets window checks
        (_at(2026, 6, 14, 23, 59), None, ValidationKind.START_TOO_EARLY),
        (None, _at(2026, 6, 1, 0, 0), ValidationKind.END_TOO_EARLY),
        (_at(2026, 7, 16, 0, 0), None, ValidationKind.START_TOO_LATE),
        (None, _at(2026, 9, 1, 0, 0), ValidationKind.END_TOO_LATE),
        # fixed priority between window rules
        (_at(2026, 6, 1, 0, 0), _at(2026, 9, 1, 0, 0), ValidationKind.START_TOO_EARLY),
        (_at(2026, 7, 20, 0, 0), _at(2026, 9, 1, 0, 0), ValidationKind.START_TOO_LATE),
        (_at(2026, 6, 20, 0, 0), _at(2026, 9, 1, 0, 0), ValidationKind.END_TOO_LATE),
        # earlier today is still "today"
        (_at(2026, 6, 15, 0, 0), _at(2026, 6, 15, 1, 0), None),
    ],
)
def test_window_rules(now_utc, start, end, expected):
    assert validate(RangeState(start=start, end=end), now_utc, UTC) is expected


def test_evaluator_zone_decides_what_today_is():
    now = _at(2026, 6, 15, 2, 0)  # 14th, 22:00 in New York
    state = RangeState(start=_at(2026, 6, 14, 10, 0, tz=NY))

    assert validate(state, now, NY) is None
    assert validate(state, now, UTC) is ValidationKind.START_TOO_EARLY


def test_now_offset_does_not_matter():
    instant = _at(2026, 6, 15, 14, 0)
    same_in_kolkata = instant.astimezone(KOLKATA)
    state = RangeState(start=_at(2026, 6, 15, 0, 0), end=_at(2026, 7, 15, 23, 59))

    assert validate(state, instant, UTC) == validate(state, same_in_kolkata, UTC)


def test_validate_is_idempotent(now_utc):
    state = RangeState(start=_at(2026, 6, 20, 9, 0), end=_at(2026, 9, 1, 9, 0))
    first = validate(state, now_utc, UTC)
    second = validate(state, now_utc, UTC)

    assert first is second is ValidationKind.END_TOO_LATE


def test_window_is_recomputed_per_call():
    state = RangeState(start=_at(2026, 6, 15, 9, 0))

    assert validate(state, _at(2026, 6, 15, 23, 0), UTC) is None
    assert validate(state, _at(2026, 6, 16, 0, 30), UTC) is ValidationKind.START_TOO_EARLY


# ================================================================
# messages
# ================================================================
@pytest.mark.parametrize(
    "kind, text",
    [
        (ValidationKind.OUT_OF_ORDER, "End must be after Start."),
        (ValidationKind.START_TOO_EARLY, "Start cannot be in the past."),
        (ValidationKind.END_TOO_EARLY, "End cannot be in the past."),
        (ValidationKind.START_TOO_LATE, "Start is too far in the future (max 30 days)."),
        (ValidationKind.END_TOO_LATE, "End is too far in the future (max 30 days)."),
    ],
)
def test_messages(kind, text):
    assert kind.message == text
    assert error_message(kind) == text


def test_no_message_without_error():
    assert error_message(None) is None
    assert ALLOWED_RANGE_HELP == "Allowed range: today to next 30 days."
