# dtrange/core/__init__.py
from .clock import Clock, SystemClock, FixedClock
from .state import RangeState
from .timezones import TimezoneRegistry, DEFAULT_TIMEZONES
from .validator import (
    AllowedWindow,
    ValidationKind,
    ValidationResult,
    allowed_window,
    validate,
    error_message,
)
from .presets import Preset, apply_preset
from .formatter import PLACEHOLDER, format_in_timezone

__all__ = [
    "Clock", "SystemClock", "FixedClock",
    "RangeState",
    "TimezoneRegistry", "DEFAULT_TIMEZONES",
    "AllowedWindow", "ValidationKind", "ValidationResult",
    "allowed_window", "validate", "error_message",
    "Preset", "apply_preset",
    "PLACEHOLDER", "format_in_timezone",
]
