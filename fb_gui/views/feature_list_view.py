"""Sidebar view: search box and grouped feature list."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtWidgets import QLabel, QLineEdit, QVBoxLayout, QWidget

from fb_catalog.api import FeatureRow
from fb_gui.widgets import FeatureList

if TYPE_CHECKING:
    from fb_gui.viewmodels.browser_vm import FeatureBrowserViewModel


class FeatureListView(QWidget):
    """Searchable, category-grouped list of features."""

    def __init__(
        self,
        viewmodel: "FeatureBrowserViewModel",
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._vm = viewmodel

        self._setup_ui()
        self._connect_signals()

    @property
    def search_input(self) -> QLineEdit:
        return self._search

    @property
    def feature_list(self) -> FeatureList:
        return self._list

    @property
    def match_label(self) -> QLabel:
        return self._match_label

    def _setup_ui(self) -> None:
        """Set up the UI layout."""
        self.setObjectName("sidebar")
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(8)

        self._search = QLineEdit()
        self._search.setObjectName("searchInput")
        self._search.setPlaceholderText("Search features...")
        self._search.setClearButtonEnabled(True)
        layout.addWidget(self._search)

        self._match_label = QLabel("")
        self._match_label.setProperty("role", "muted")
        layout.addWidget(self._match_label)

        self._list = FeatureList()
        layout.addWidget(self._list, 1)

    def _connect_signals(self) -> None:
        """Connect widget and viewmodel signals."""
        self._search.textChanged.connect(self._vm.search)
        self._list.feature_clicked.connect(self._vm.select_feature)

        self._vm.rows_changed.connect(self._on_rows_changed)
        self._vm.active_feature_changed.connect(self._list.mark_active)
        self._vm.match_count_changed.connect(self._match_label.setText)

    def _on_rows_changed(self, rows: list[FeatureRow]) -> None:
        self._list.set_rows(rows)
