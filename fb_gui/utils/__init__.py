"""Qt utilities and helpers."""

from fb_gui.utils.qt import clear_layout, label_texts, set_widget_role

__all__ = [
    "clear_layout",
    "label_texts",
    "set_widget_role",
]
