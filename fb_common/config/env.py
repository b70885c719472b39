"""Environment variables recognised by the feature browser."""

from __future__ import annotations

import os
from typing import Mapping

LOG_LEVEL_ENV = "FB_LOG_LEVEL"
LOG_JSON_ENV = "FB_LOG_JSON"
LOG_FILE_ENV = "FB_LOG_FILE"
GUI_SCALE_ENV = "FB_GUI_SCALE"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def parse_bool_env(value: str | None) -> bool | None:
    """Parse a boolean flag; None stays None, anything not truthy is False."""
    if value is None:
        return None
    return value.strip().lower() in _TRUTHY


def parse_float_env(value: str | None) -> float | None:
    """Parse a float, or None when unset or unparsable."""
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def env_value(name: str, environ: Mapping[str, str] | None = None) -> str | None:
    """Read a variable, treating blank values as unset."""
    raw = (os.environ if environ is None else environ).get(name)
    if raw is None or not raw.strip():
        return None
    return raw


def env_bool(name: str, environ: Mapping[str, str] | None = None) -> bool | None:
    return parse_bool_env(env_value(name, environ))


def env_float(name: str, environ: Mapping[str, str] | None = None) -> float | None:
    return parse_float_env(env_value(name, environ))
