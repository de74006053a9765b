# dtrange/config/picker_config.py
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from dtrange.core.timezones import DEFAULT_TIMEZONES


class PickerConfig(BaseModel):
    """
    PickerConfig

    Semantics:
      - timezones:        closed list shown in the timezone selector
      - default_timezone: initial selection, must be in ``timezones``
      - local_timezone:   zone that typed input is read in (None → host zone)

    Ids are only checked against IANA by TimezoneRegistry / DateTimeUtils.
    """

    timezones: List[str] = Field(default_factory=lambda: list(DEFAULT_TIMEZONES), min_length=1)
    default_timezone: str = "UTC"
    local_timezone: Optional[str] = None

    @model_validator(mode="after")
    def _default_in_list(self) -> "PickerConfig":
        if self.default_timezone not in self.timezones:
            raise ValueError(
                f"default_timezone {self.default_timezone!r} is not in timezones {self.timezones}"
            )
        return self
