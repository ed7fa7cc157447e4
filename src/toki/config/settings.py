"""Pydantic settings for toki.

Values are layered: CLI options > ``TOKI_*`` environment variables >
defaults.
"""

from __future__ import annotations

import copy
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from toki.config.defaults import DEFAULT_CONFIG, ENV_PREFIX

_LOG_LEVELS = ("debug", "info", "warning", "error", "critical")
_LOG_FORMATS = ("text", "json")

# Environment variable suffix -> (section, key)
ENV_KEYS: dict[str, tuple[str, str]] = {
    "NAME": ("display", "name"),
    "FULLSCREEN": ("display", "fullscreen"),
    "FORMAT": ("display", "time_format"),
    "LOG_LEVEL": ("general", "log_level"),
    "LOG_FORMAT": ("general", "log_format"),
    "LOG_FILE": ("general", "log_file"),
}


class GeneralSettings(BaseModel):
    """Logging and process-wide options."""

    log_level: str = "warning"
    log_format: str = "text"
    log_file: Path | None = None

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        value = value.lower()
        if value not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return value

    @field_validator("log_format")
    @classmethod
    def _check_format(cls, value: str) -> str:
        value = value.lower()
        if value not in _LOG_FORMATS:
            raise ValueError(f"log_format must be one of {', '.join(_LOG_FORMATS)}")
        return value


class DisplaySettings(BaseModel):
    """How a timer session is presented."""

    name: str = ""
    fullscreen: bool = False
    time_format: str = Field(default="", description="24h or kitchen")


class Settings(BaseModel):
    """Complete toki configuration."""

    general: GeneralSettings = Field(default_factory=GeneralSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)


def _deep_merge(base: dict[str, Any], overlay: Mapping[str, Any]) -> dict[str, Any]:
    for key, value in overlay.items():
        if isinstance(value, Mapping) and isinstance(base.get(key), dict):
            base[key] = _deep_merge(base[key], value)
        elif value is not None:
            base[key] = value
    return base


def env_overrides(environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    """Collect ``TOKI_*`` variables into a nested settings mapping."""
    environ = os.environ if environ is None else environ
    result: dict[str, dict[str, Any]] = {}
    for suffix, (section, key) in ENV_KEYS.items():
        value = environ.get(f"{ENV_PREFIX}{suffix}")
        if value is not None and value != "":
            result.setdefault(section, {})[key] = value
    return result


def load_settings(
    overrides: Mapping[str, Any] | None = None,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Build validated settings from defaults, environment and overrides.

    Args:
        overrides: Nested mapping of CLI values; ``None`` entries are ignored
        environ: Environment to read instead of ``os.environ``

    Raises:
        pydantic.ValidationError: If a layered value fails validation
    """
    merged = copy.deepcopy(DEFAULT_CONFIG)
    _deep_merge(merged, env_overrides(environ))
    if overrides:
        _deep_merge(merged, overrides)
    return Settings.model_validate(merged)


__all__ = [
    "ENV_KEYS",
    "GeneralSettings",
    "DisplaySettings",
    "Settings",
    "env_overrides",
    "load_settings",
]
