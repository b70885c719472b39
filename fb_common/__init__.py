"""Shared helpers for the feature browser."""

from fb_common.api import CatalogError, FBError, PreferenceError, configure_logging

__all__ = ["configure_logging", "FBError", "CatalogError", "PreferenceError"]
