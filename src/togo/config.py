"""togo configuration management.

Configuration priority:
1. CONFIG_FILE (~/.config/togo/config.json) config field
2. Environment variables (os.getenv, .env supported)
3. Default constants

A missing or unparsable config file is not an error: the defaults apply.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, TypedDict

from dotenv import load_dotenv

load_dotenv()


CONFIG_FILE = Path.home() / ".config" / "togo" / "config.json"
DEFAULT_DATA_LOCATION = "data.json"

ConfigKey = Literal["dataLocation"]

ENV_KEYS: dict[ConfigKey, str] = {
    "dataLocation": "TOGO_DATA_LOCATION",
}


class FileConfig(TypedDict, total=False):
    dataLocation: str


class Settings(TypedDict, total=False):
    config: FileConfig


def _parse_config(config_file: Path) -> FileConfig:
    """Parse config file; any read or decode problem yields an empty config."""
    try:
        with open(config_file, encoding="utf-8") as f:
            settings: Settings = json.load(f)
    except (json.JSONDecodeError, OSError, UnicodeError):
        return {}
    if not isinstance(settings, dict):
        return {}
    file_config = settings.get("config")
    if not isinstance(file_config, dict):
        return {}
    return file_config


def _get_config_value(file_config: FileConfig, key: ConfigKey, default: str) -> str:
    """Get config value with priority: file_config > os.getenv > default."""
    value = file_config.get(key)
    if isinstance(value, str) and value:
        return value
    return os.getenv(ENV_KEYS[key], default)


@dataclass(frozen=True)
class TogoConfig:
    """Process configuration, built once at startup and never changed."""

    data_location: str = DEFAULT_DATA_LOCATION

    @classmethod
    def from_settings(
        cls,
        config_file: Path | None = None,
        data_location: str | None = None,
    ) -> TogoConfig:
        """Load configuration from the settings file and environment.

        Args:
            config_file: Settings file. Defaults to CONFIG_FILE.
            data_location: Explicit data file path, overriding every source.

        Returns:
            TogoConfig instance with loaded configuration.
        """
        if config_file is None:
            config_file = CONFIG_FILE

        if data_location is None:
            file_config = _parse_config(config_file)
            data_location = _get_config_value(
                file_config, "dataLocation", DEFAULT_DATA_LOCATION
            )

        return cls(data_location=data_location)
