"""Grouped list of catalog features."""

from __future__ import annotations

from PySide6.QtCore import Property, Qt, Signal
from PySide6.QtGui import QBrush, QColor, QFont
from PySide6.QtWidgets import QAbstractItemView, QListWidget, QListWidgetItem, QWidget

from fb_catalog.api import FeatureRow

FEATURE_ID_ROLE = Qt.ItemDataRole.UserRole
ROW_KIND_ROLE = Qt.ItemDataRole.UserRole + 1
ACTIVE_ROLE = Qt.ItemDataRole.UserRole + 2


class FeatureList(QListWidget):
    """List widget that reconciles FeatureRow descriptions by full replace.

    The active row is painted from ACTIVE_ROLE, not from Qt's selection, so
    arrow keys and header clicks never move it. Themes set the colours
    through ``qproperty-activeBackground`` and ``qproperty-activeForeground``.
    """

    feature_clicked = Signal(str)  # feature id

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("featureList")
        self.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
        self.setUniformItemSizes(False)

        self._active_background = QColor("#2f4a7a")
        self._active_foreground = QColor("#ffffff")

        self.itemClicked.connect(self._on_item_clicked)
        # Enter on the current row
        self.itemActivated.connect(self._on_item_clicked)

    def _get_active_background(self) -> QColor:
        return QColor(self._active_background)

    def _set_active_background(self, color: QColor) -> None:
        self._active_background = QColor(color)
        self._repaint_active()

    def _get_active_foreground(self) -> QColor:
        return QColor(self._active_foreground)

    def _set_active_foreground(self, color: QColor) -> None:
        self._active_foreground = QColor(color)
        self._repaint_active()

    activeBackground = Property(QColor, _get_active_background, _set_active_background)
    activeForeground = Property(QColor, _get_active_foreground, _set_active_foreground)

    def set_rows(self, rows: list[FeatureRow]) -> None:
        """Rebuild the list from scratch."""
        self.clear()
        for row in rows:
            if row.kind == "header":
                self.addItem(self._make_header(row))
            else:
                item = self._make_feature(row)
                self.addItem(item)
                self._set_item_active(item, row.active)

    def mark_active(self, feature_id: str | None) -> None:
        """Mark the row carrying feature_id active and every other row inactive."""
        for item in self._feature_items():
            active = feature_id is not None and item.data(FEATURE_ID_ROLE) == feature_id
            self._set_item_active(item, active)

    def active_feature_ids(self) -> list[str]:
        return [item.data(FEATURE_ID_ROLE) for item in self._feature_items() if item.data(ACTIVE_ROLE)]

    def header_texts(self) -> list[str]:
        return [
            self.item(i).text()
            for i in range(self.count())
            if self.item(i).data(ROW_KIND_ROLE) == "header"
        ]

    def feature_ids(self) -> list[str]:
        return [item.data(FEATURE_ID_ROLE) for item in self._feature_items()]

    def find_feature_item(self, feature_id: str) -> QListWidgetItem | None:
        for item in self._feature_items():
            if item.data(FEATURE_ID_ROLE) == feature_id:
                return item
        return None

    def snapshot(self) -> list[tuple[str, str, bool]]:
        """(kind, text, active) for every row, top to bottom."""
        return [
            (
                self.item(i).data(ROW_KIND_ROLE),
                self.item(i).text(),
                bool(self.item(i).data(ACTIVE_ROLE)),
            )
            for i in range(self.count())
        ]

    def _feature_items(self) -> list[QListWidgetItem]:
        return [
            self.item(i)
            for i in range(self.count())
            if self.item(i).data(ROW_KIND_ROLE) == "feature"
        ]

    def _make_header(self, row: FeatureRow) -> QListWidgetItem:
        item = QListWidgetItem(row.text)
        item.setData(ROW_KIND_ROLE, "header")
        item.setFlags(Qt.ItemFlag.ItemIsEnabled)
        font = item.font()
        font.setWeight(QFont.Weight.Bold)
        item.setFont(font)
        return item

    def _make_feature(self, row: FeatureRow) -> QListWidgetItem:
        item = QListWidgetItem(row.text)
        item.setData(ROW_KIND_ROLE, "feature")
        item.setData(FEATURE_ID_ROLE, row.feature_id)
        item.setToolTip(row.text)
        return item

    def _set_item_active(self, item: QListWidgetItem, active: bool) -> None:
        item.setData(ACTIVE_ROLE, active)
        if active:
            item.setBackground(QBrush(self._active_background))
            item.setForeground(QBrush(self._active_foreground))
        else:
            item.setData(Qt.ItemDataRole.BackgroundRole, None)
            item.setData(Qt.ItemDataRole.ForegroundRole, None)

    def _repaint_active(self) -> None:
        for item in self._feature_items():
            if item.data(ACTIVE_ROLE):
                self._set_item_active(item, True)

    def _on_item_clicked(self, item: QListWidgetItem) -> None:
        feature_id = item.data(FEATURE_ID_ROLE)
        if item.data(ROW_KIND_ROLE) == "feature" and feature_id:
            self.feature_clicked.emit(feature_id)
