"""Light/dark themes, the persisted theme choice and UI scaling."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final

from fb_common.config.env import GUI_SCALE_ENV, env_float, parse_float_env
from fb_common.errors import PreferenceError
from fb_gui.resources import read_resource

if TYPE_CHECKING:
    from PySide6.QtWidgets import QApplication

    from fb_gui.services.preference_store import PreferenceStore

logger = logging.getLogger(__name__)

THEMES: Final[dict[str, str]] = {
    "dark": "theme_dark.qss",
    "light": "theme_light.qss",
}
DEFAULT_THEME: Final[str] = "dark"

# Icon shown on the toggle button: the theme a click switches to.
THEME_ICONS: Final[dict[str, str]] = {
    "light": "🌙",
    "dark": "☀️",
}

THEME_KEY: Final[str] = "theme"
SCALE_KEY: Final[str] = "ui/scale"

_MIN_SCALE: Final[float] = 0.8
_MAX_SCALE: Final[float] = 1.8

# (selector, {property: base pixel values}) rewritten for non-default scales.
_SCALED_RULES: Final[tuple[tuple[str, dict[str, tuple[int, ...]]], ...]] = (
    ("QWidget", {"font-size": (13,)}),
    ('QLabel[role="title"]', {"font-size": (22,)}),
    ("QPlainTextEdit#codeView, QPlainTextEdit#outputView", {"font-size": (13,)}),
    ("QPushButton", {"min-height": (26,), "padding": (6, 12)}),
    ("QLineEdit, QPlainTextEdit", {"padding": (6, 8)}),
    ("QGroupBox", {"margin-top": (14,), "padding": (10,)}),
    ("QListWidget::item", {"padding": (6, 8)}),
)


def list_themes() -> list[str]:
    """Names of the shipped themes."""
    return list(THEMES.keys())


def normalize_theme(value: object) -> str:
    """Map a stored value to a known theme, falling back to the default."""
    if isinstance(value, str) and value in THEMES:
        return value
    return DEFAULT_THEME


def other_theme(name: str) -> str:
    """Return the theme a toggle switches to."""
    return "dark" if name == "light" else "light"


def theme_icon(name: str) -> str:
    return THEME_ICONS[normalize_theme(name)]


def get_preferred_theme(store: "PreferenceStore") -> str:
    """Resolve the saved theme, defaulting to dark when absent or unreadable."""
    try:
        saved = store.get(THEME_KEY)
    except PreferenceError as exc:
        logger.warning("Could not read theme preference: %s", exc)
        return DEFAULT_THEME
    return normalize_theme(saved)


def save_theme_preference(store: "PreferenceStore", name: str) -> bool:
    """Persist the theme. Returns False if the store rejected the write."""
    try:
        store.set(THEME_KEY, normalize_theme(name))
    except PreferenceError as exc:
        logger.warning("Could not save theme preference: %s", exc)
        return False
    return True


def get_preferred_scale(store: "PreferenceStore") -> float:
    """UI scale: FB_GUI_SCALE when in range, else the saved value, else 1.0."""
    forced = env_float(GUI_SCALE_ENV)
    if forced is not None and _MIN_SCALE <= forced <= _MAX_SCALE:
        return forced
    try:
        saved = parse_float_env(store.get(SCALE_KEY))
    except PreferenceError as exc:
        logger.warning("Could not read scale preference: %s", exc)
        return 1.0
    if saved is not None:
        return clamp_scale(saved)
    return 1.0


def save_scale_preference(store: "PreferenceStore", scale: float) -> bool:
    try:
        store.set(SCALE_KEY, str(clamp_scale(scale)))
    except PreferenceError as exc:
        logger.warning("Could not save scale preference: %s", exc)
        return False
    return True


def clamp_scale(scale: float) -> float:
    if scale < _MIN_SCALE:
        return _MIN_SCALE
    if scale > _MAX_SCALE:
        return _MAX_SCALE
    return scale


def build_stylesheet(name: str, scale: float = 1.0) -> str:
    """Return the QSS for a theme with optional scale overrides."""
    qss = read_resource(THEMES[normalize_theme(name)])
    scale = clamp_scale(scale)
    if scale != 1.0:
        qss = f"{qss}\n{_scale_overrides(scale)}"
    return qss


def apply_theme(app: "QApplication", name: str, scale: float = 1.0) -> str:
    """Apply a theme and UI scale. Returns the applied theme name."""
    selected = normalize_theme(name)
    app.setStyleSheet(build_stylesheet(selected, scale))
    logger.debug("Applied theme %s at scale %.2f", selected, scale)
    return selected


def _scale_value(value: int, scale: float) -> int:
    return max(1, int(round(value * scale)))


def _scale_overrides(scale: float) -> str:
    blocks: list[str] = []
    for selector, properties in _SCALED_RULES:
        lines = [
            f"    {prop}: {' '.join(f'{_scale_value(v, scale)}px' for v in values)};"
            for prop, values in properties.items()
        ]
        blocks.append(selector + " {\n" + "\n".join(lines) + "\n}")
    return "\n".join(blocks) + "\n"


__all__ = [
    "THEMES",
    "DEFAULT_THEME",
    "THEME_ICONS",
    "THEME_KEY",
    "SCALE_KEY",
    "list_themes",
    "normalize_theme",
    "other_theme",
    "theme_icon",
    "get_preferred_theme",
    "save_theme_preference",
    "get_preferred_scale",
    "save_scale_preference",
    "clamp_scale",
    "build_stylesheet",
    "apply_theme",
]
