"""Small helpers shared by views and widgets."""

from __future__ import annotations

from PySide6.QtWidgets import QLabel, QLayout, QWidget


def clear_layout(layout: QLayout) -> int:
    """Detach and schedule deletion of every widget in a layout.

    Nested layouts are emptied too. Returns the number of widgets removed.
    """
    removed = 0
    while layout.count():
        item = layout.takeAt(0)
        widget = item.widget()
        if widget is not None:
            widget.setParent(None)
            widget.deleteLater()
            removed += 1
        elif item.layout() is not None:
            removed += clear_layout(item.layout())
    return removed


def label_texts(layout: QLayout) -> list[str]:
    """Texts of the QLabels directly held by a layout, top to bottom."""
    texts: list[str] = []
    for i in range(layout.count()):
        widget = layout.itemAt(i).widget()
        if isinstance(widget, QLabel):
            texts.append(widget.text())
    return texts


def set_widget_role(widget: QWidget, role: str | None) -> None:
    """Update the QSS ``role`` property and repolish when it changes."""
    if widget.property("role") == role:
        return
    widget.setProperty("role", role)
    style = widget.style()
    style.unpolish(widget)
    style.polish(widget)
