"""Public API surface for fb_common."""

from fb_common.errors import (
    CatalogError,
    FBError,
    PreferenceError,
    error_to_payload,
    wrap_error,
)
from fb_common.logging import LogSettings, configure_logging

__all__ = [
    "configure_logging",
    "LogSettings",
    "FBError",
    "CatalogError",
    "PreferenceError",
    "error_to_payload",
    "wrap_error",
]
