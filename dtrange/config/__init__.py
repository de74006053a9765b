from .app_config import AppConfig
from .log_config import LogConfig
from .picker_config import PickerConfig

__all__ = ["AppConfig", "LogConfig", "PickerConfig"]
