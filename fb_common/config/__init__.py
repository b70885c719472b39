"""Configuration helpers for fb_common."""

from .env import (
    GUI_SCALE_ENV,
    LOG_FILE_ENV,
    LOG_JSON_ENV,
    LOG_LEVEL_ENV,
    env_bool,
    env_float,
    env_value,
    parse_bool_env,
    parse_float_env,
)

__all__ = [
    "GUI_SCALE_ENV",
    "LOG_FILE_ENV",
    "LOG_JSON_ENV",
    "LOG_LEVEL_ENV",
    "env_bool",
    "env_float",
    "env_value",
    "parse_bool_env",
    "parse_float_env",
]
