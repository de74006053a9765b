# dtrange/core/timezones.py
from __future__ import annotations

from typing import Iterable, Iterator, Tuple

from dtrange.utils.datetime_utils import DateTimeUtils
from dtrange.utils.errors import UnknownTimezoneError
from dtrange.utils.logger import logs

DEFAULT_TIMEZONES: Tuple[str, ...] = (
    "UTC",
    "Asia/Kolkata",
    "America/New_York",
    "Europe/London",
)


class TimezoneRegistry:
    """
    Closed list of selectable display zones.

    Every id is checked when the registry is built, so a typo in the
    configured list fails at startup instead of at format time.
    """

    def __init__(self, timezones: Iterable[str] = DEFAULT_TIMEZONES):
        ids = tuple(timezones)
        if not ids:
            raise ValueError("TimezoneRegistry needs at least one timezone")

        for tz in ids:
            try:
                DateTimeUtils.zone(tz)
            except UnknownTimezoneError:
                logs.error(f"[TimezoneRegistry] rejected configured timezone {tz!r}")
                raise

        self._ids = ids
        logs.info(f"[TimezoneRegistry] loaded {len(ids)} timezones: {', '.join(ids)}")

    @property
    def ids(self) -> Tuple[str, ...]:
        return self._ids

    @property
    def default(self) -> str:
        return self._ids[0]

    def require(self, timezone_id: str) -> str:
        """
        Return ``timezone_id`` if selectable, else UnknownTimezoneError.
        """
        if timezone_id not in self._ids:
            raise UnknownTimezoneError(
                timezone_id, f"not one of the configured timezones ({', '.join(self._ids)})"
            )
        return timezone_id

    def __contains__(self, timezone_id: object) -> bool:
        return timezone_id in self._ids

    def __iter__(self) -> Iterator[str]:
        return iter(self._ids)

    def __len__(self) -> int:
        return len(self._ids)
