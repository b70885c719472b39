"""Application setup and global services."""

from __future__ import annotations

from fb_gui.services.catalog_service import CatalogService
from fb_gui.services.clipboard_service import ClipboardService
from fb_gui.services.preference_store import PreferenceStore, SettingsPreferenceStore
from fb_gui.windows.main_window import MainWindow


class ServiceContainer:
    """Container for all GUI services (dependency injection)."""

    def __init__(self) -> None:
        self._catalog_service: CatalogService | None = None
        self._clipboard_service: ClipboardService | None = None
        self._preference_store: PreferenceStore | None = None

    @property
    def catalog_service(self) -> CatalogService:
        if self._catalog_service is None:
            self._catalog_service = CatalogService()
        return self._catalog_service

    @property
    def clipboard_service(self) -> ClipboardService:
        if self._clipboard_service is None:
            self._clipboard_service = ClipboardService()
        return self._clipboard_service

    @property
    def preference_store(self) -> PreferenceStore:
        if self._preference_store is None:
            self._preference_store = SettingsPreferenceStore()
        return self._preference_store


def create_app(services: ServiceContainer | None = None) -> MainWindow:
    """Create and wire up the main application window."""
    return MainWindow(services or ServiceContainer())
