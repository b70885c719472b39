"""Service layer wrappers around the catalog and desktop collaborators."""

from fb_gui.services.catalog_service import CatalogService
from fb_gui.services.clipboard_service import ClipboardService
from fb_gui.services.preference_store import PreferenceStore, SettingsPreferenceStore

__all__ = [
    "CatalogService",
    "ClipboardService",
    "PreferenceStore",
    "SettingsPreferenceStore",
]
