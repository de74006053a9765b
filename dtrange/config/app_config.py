#!filepath: dtrange/config/app_config.py
import os
from typing import Optional

import yaml
from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field

from .log_config import LogConfig
from .picker_config import PickerConfig

ENV_OVERRIDES = {
    "DTRANGE_LOCAL_TIMEZONE": ("picker", "local_timezone"),
    "DTRANGE_DEFAULT_TIMEZONE": ("picker", "default_timezone"),
    "DTRANGE_LOG_LEVEL": ("log", "level"),
}


def default_config_path() -> str:
    return os.path.join(os.path.dirname(__file__), "base.yml")


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    picker: PickerConfig = Field(default_factory=PickerConfig)

    @classmethod
    def load(cls, path: Optional[str] = None) -> "AppConfig":
        """
        Load YAML config + .env
        - default: dtrange/config/base.yml
        - DTRANGE_* environment variables override YAML values
        """
        # 1) nearest .env from the working directory up (does not override real env vars)
        load_dotenv(find_dotenv(usecwd=True))

        # 2) config file
        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        # 3) YAML
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        # 4) env overrides
        for env_key, (section, field) in ENV_OVERRIDES.items():
            value = os.getenv(env_key)
            if value:
                raw.setdefault(section, {})
                raw[section][field] = value

        return cls(**raw)
