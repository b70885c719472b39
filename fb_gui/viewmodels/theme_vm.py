"""ViewModel for the persisted light/dark theme."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import QObject, Signal

from fb_gui.resources.theme import (
    DEFAULT_THEME,
    clamp_scale,
    get_preferred_scale,
    get_preferred_theme,
    other_theme,
    save_scale_preference,
    save_theme_preference,
    theme_icon,
)

if TYPE_CHECKING:
    from fb_gui.services import PreferenceStore


class ThemeViewModel(QObject):
    """ViewModel for theme and UI scale preferences."""

    # Signals
    theme_changed = Signal(str)  # theme name
    scale_changed = Signal(float)

    def __init__(
        self,
        preference_store: "PreferenceStore",
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._store = preference_store

        # State
        self._theme: str = DEFAULT_THEME
        self._scale: float = 1.0

    @property
    def theme(self) -> str:
        return self._theme

    @property
    def icon(self) -> str:
        """Toggle button icon for the current theme."""
        return theme_icon(self._theme)

    @property
    def scale(self) -> float:
        return self._scale

    def restore(self) -> str:
        """Load saved preferences and announce them. Call once at startup."""
        self._theme = get_preferred_theme(self._store)
        self._scale = get_preferred_scale(self._store)
        self.theme_changed.emit(self._theme)
        return self._theme

    def toggle(self) -> str:
        """Flip between light and dark and persist the result."""
        self._theme = other_theme(self._theme)
        save_theme_preference(self._store, self._theme)
        self.theme_changed.emit(self._theme)
        return self._theme

    def set_scale(self, scale: float) -> None:
        self._scale = clamp_scale(scale)
        save_scale_preference(self._store, self._scale)
        self.scale_changed.emit(self._scale)
