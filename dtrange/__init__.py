#!filepath: dtrange/__init__.py

from .utils.logger import Logging, logs
from .utils.datetime_utils import DateTimeUtils
from .utils.errors import UserInputError, ParseError, UnknownTimezoneError
from .config.app_config import AppConfig

__version__ = "0.1.0"

datetime_utils = DateTimeUtils

__all__ = [
    "logs", "Logging",
    "AppConfig",
    "datetime_utils",
    "UserInputError", "ParseError", "UnknownTimezoneError",
    "__version__",
]
