"""Configuration handling for the date printer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

import yaml

from today_date.formatter import DATE_FORMAT, MESSAGE_PREFIX


class ConfigError(ValueError):
    """Raised when configuration files are invalid or incomplete."""


@dataclass
class Settings:
    """Rendering settings for the printed line."""

    date_format: str = DATE_FORMAT
    prefix: str = MESSAGE_PREFIX


def _string_field(data: Dict[str, Any], key: str, default: str) -> str:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        raise ConfigError(f"{key} must be a string, got {type(value).__name__}.")
    return value


def load_settings(path: str) -> Settings:
    """Load rendering settings from a YAML file."""
    try:
        raw = yaml.safe_load(_read_file(path)) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError("Settings YAML must be a mapping/object.")

    date_format = _string_field(raw, "date_format", Settings().date_format)
    if not date_format:
        raise ConfigError("date_format must not be empty.")

    return Settings(
        date_format=date_format,
        prefix=_string_field(raw, "prefix", Settings().prefix),
    )


def _read_file(path: str) -> str:
    try:
        with open(path, "r", encoding="utf-8") as handle:
            return handle.read()
    except FileNotFoundError as exc:
        raise ConfigError(f"Configuration file not found: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read configuration file {path}: {exc}") from exc
