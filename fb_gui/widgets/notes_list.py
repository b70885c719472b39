"""Numbered list of feature notes."""

from __future__ import annotations

from PySide6.QtWidgets import QLabel, QVBoxLayout, QWidget

from fb_gui.utils import clear_layout, label_texts


class NotesList(QWidget):
    """Ordered list of short text notes, one label per note."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self._layout.setSpacing(6)
        self._notes: tuple[str, ...] = ()

    @property
    def notes(self) -> tuple[str, ...]:
        return self._notes

    def set_notes(self, notes: tuple[str, ...] | list[str]) -> None:
        """Replace the list contents, keeping source order."""
        clear_layout(self._layout)
        self._notes = tuple(notes)
        for index, note in enumerate(self._notes, start=1):
            label = QLabel(f"{index}. {note}")
            label.setWordWrap(True)
            self._layout.addWidget(label)

    def item_texts(self) -> list[str]:
        """Rendered label texts, top to bottom."""
        return label_texts(self._layout)
