#!filepath: dtrange/utils/datetime_utils.py
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, date, time, timedelta, timezone, tzinfo
from functools import lru_cache
from typing import FrozenSet, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError, available_timezones

from dtrange.utils.errors import ParseError, UnknownTimezoneError

LOCAL_INPUT_FORMAT = "%Y-%m-%dT%H:%M"
_LOCAL_INPUT_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}$")
_MIN_UTC = datetime.min.replace(tzinfo=timezone.utc) + timedelta(days=1)
_MAX_UTC = datetime.max.replace(tzinfo=timezone.utc) - timedelta(days=1)


@dataclass(frozen=True)
class WallClockFields:
    """
    Calendar fields as a clock in ``timezone_id`` reads them.
    """
    year: int
    month: int
    day: int
    hour: int
    minute: int
    timezone_id: str
    utc_offset: timedelta


@lru_cache(maxsize=1)
def _known_timezones() -> FrozenSet[str]:
    return frozenset(available_timezones())


class DateTimeUtils:
    """
    Two distinct conversions:

      - parse_local_wall_clock: input string → instant, in the EVALUATOR's zone
      - project_to_zone:        instant → wall-clock fields, in a DISPLAY zone

    Evaluator zone: ``local_tz`` argument, None → host local time.
    """

    # ================================================================
    # evaluator zone
    # ================================================================
    @classmethod
    def localize(cls, naive: datetime, local_tz: Optional[tzinfo] = None) -> datetime:
        """
        Attach the evaluator zone to a naive wall-clock datetime.

        Gap / overlap times resolve with fold=0: a skipped time keeps the
        pre-transition offset (02:30 on a spring-forward day lands at 03:30),
        a repeated time picks its first occurrence.
        """
        if local_tz is None:
            # host rules (mktime), DST-aware
            return naive.astimezone()
        return naive.replace(tzinfo=local_tz)

    @classmethod
    def to_local(cls, instant: datetime, local_tz: Optional[tzinfo] = None) -> datetime:
        if local_tz is None:
            return instant.astimezone()
        return instant.astimezone(local_tz)

    # ================================================================
    # input string ↔ instant
    # ================================================================
    @classmethod
    def parse_local_wall_clock(
        cls, raw: str, local_tz: Optional[tzinfo] = None
    ) -> Optional[datetime]:
        """
        ``YYYY-MM-DDTHH:mm`` (evaluator's zone) → aware datetime.

        "" → None (unset). Anything else malformed → ParseError.
        """
        if raw is None or raw == "":
            return None
        if not isinstance(raw, str):
            raise ParseError(repr(raw), f"expected str, got {type(raw).__name__}")

        s = raw.strip()
        if not _LOCAL_INPUT_RE.match(s):
            raise ParseError(raw)

        try:
            naive = datetime.strptime(s, LOCAL_INPUT_FORMAT)
        except ValueError as e:
            raise ParseError(raw, str(e)) from e

        try:
            instant = cls.localize(naive, local_tz)
            utc = cls.to_utc(instant)
        except OverflowError as e:
            raise ParseError(raw, "out of supported range") from e
        # one day of headroom: every display zone can still project it
        if not (_MIN_UTC <= utc <= _MAX_UTC):
            raise ParseError(raw, "out of supported range")
        return instant

    @classmethod
    def to_local_input(cls, instant: datetime, local_tz: Optional[tzinfo] = None) -> str:
        """
        instant → ``YYYY-MM-DDTHH:mm`` in the evaluator's zone (seconds dropped).
        """
        return cls.to_local(instant, local_tz).strftime(LOCAL_INPUT_FORMAT)

    # ================================================================
    # display zone
    # ================================================================
    @classmethod
    def zone(cls, timezone_id: str) -> ZoneInfo:
        """
        Exact-case IANA lookup, no fallback.
        """
        if not isinstance(timezone_id, str) or timezone_id not in _known_timezones():
            raise UnknownTimezoneError(str(timezone_id))
        try:
            return ZoneInfo(timezone_id)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise UnknownTimezoneError(timezone_id, str(e)) from e

    @classmethod
    def project_to_zone(cls, instant: datetime, timezone_id: str) -> WallClockFields:
        if instant.tzinfo is None:
            raise ValueError("instant must be timezone-aware")

        local = instant.astimezone(cls.zone(timezone_id))
        return WallClockFields(
            year=local.year,
            month=local.month,
            day=local.day,
            hour=local.hour,
            minute=local.minute,
            timezone_id=timezone_id,
            utc_offset=local.utcoffset(),
        )

    # ================================================================
    # local-day arithmetic (wall clock, evaluator's zone)
    # ================================================================
    @classmethod
    def local_date(cls, instant: datetime, local_tz: Optional[tzinfo] = None) -> date:
        return cls.to_local(instant, local_tz).date()

    @classmethod
    def at_local_time(
        cls, d: date, t: time, local_tz: Optional[tzinfo] = None
    ) -> datetime:
        return cls.localize(datetime.combine(d, t), local_tz)

    @classmethod
    def start_of_day(cls, d: date, local_tz: Optional[tzinfo] = None) -> datetime:
        return cls.at_local_time(d, time.min, local_tz)

    @classmethod
    def end_of_day(cls, d: date, local_tz: Optional[tzinfo] = None) -> datetime:
        """
        23:59:59.999 (millisecond resolution).
        """
        return cls.at_local_time(d, time(23, 59, 59, 999_000), local_tz)

    @classmethod
    def add_days(cls, d: date, days: int) -> date:
        return d + timedelta(days=days)

    @staticmethod
    def to_utc(instant: datetime) -> datetime:
        if instant.tzinfo is None:
            raise ValueError("instant must be timezone-aware")
        return instant.astimezone(timezone.utc)
