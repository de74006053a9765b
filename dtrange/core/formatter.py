# dtrange/core/formatter.py
from __future__ import annotations

from datetime import datetime
from typing import Optional

from dtrange.utils.datetime_utils import DateTimeUtils as dt

PLACEHOLDER = "—"


def format_in_timezone(instant: Optional[datetime], timezone_id: str) -> str:
    """
    ``DD/MM/YYYY, HH:mm`` (24h) as a clock in ``timezone_id`` shows ``instant``.

    None → PLACEHOLDER. The offset comes from the absolute instant, so DST
    transitions are honoured. Unknown zone → UnknownTimezoneError.
    """
    if instant is None:
        # unknown zones are still rejected
        dt.zone(timezone_id)
        return PLACEHOLDER

    f = dt.project_to_zone(instant, timezone_id)
    return f"{f.day:02d}/{f.month:02d}/{f.year:04d}, {f.hour:02d}:{f.minute:02d}"
