"""ViewModel for the feature browser (list, selection, detail, copy)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from PySide6.QtCore import QObject, QTimer, Signal

from fb_catalog.api import (
    FeatureRecord,
    FeatureRow,
    FilteredView,
    build_detail,
    build_feature_rows,
    format_match_count,
)
from fb_common.errors import CatalogError

if TYPE_CHECKING:
    from fb_gui.services import CatalogService, ClipboardService

logger = logging.getLogger(__name__)

COPY_FEEDBACK_MS = 2000
CODE_LANGUAGE = "javascript"


class FeatureBrowserViewModel(QObject):
    """ViewModel for the feature browser.

    Holds the current query, the filtered view and the selected feature.
    Filtering and row building are delegated to pure functions; this class
    only keeps state and tells views what changed.
    """

    # Signals
    summary_changed = Signal(int, int)  # total features, distinct categories
    rows_changed = Signal(list)  # list of FeatureRow
    match_count_changed = Signal(str)
    active_feature_changed = Signal(str)  # feature id
    feature_selected = Signal(object)  # FeatureDetail
    copy_feedback_changed = Signal(bool)  # acknowledgment visible
    error_occurred = Signal(str)

    def __init__(
        self,
        catalog_service: "CatalogService",
        clipboard_service: "ClipboardService",
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._catalog_service = catalog_service
        self._clipboard = clipboard_service

        # State
        self._query: str = ""
        self._view: FilteredView = FilteredView(query="")
        self._rows: list[FeatureRow] = []
        self._current: FeatureRecord | None = None
        self._total: int = 0
        self._category_count: int = 0

        self._copy_timer = QTimer(self)
        self._copy_timer.setSingleShot(True)
        self._copy_timer.setInterval(COPY_FEEDBACK_MS)
        self._copy_timer.timeout.connect(self._on_copy_feedback_expired)

    @property
    def query(self) -> str:
        return self._query

    @property
    def filtered_view(self) -> FilteredView:
        """Most recent filter result."""
        return self._view

    @property
    def rows(self) -> list[FeatureRow]:
        """Rows from the last render."""
        return self._rows

    @property
    def current_feature(self) -> FeatureRecord | None:
        """The selected feature, or None before the first selection."""
        return self._current

    @property
    def is_showing(self) -> bool:
        return self._current is not None

    @property
    def total(self) -> int:
        return self._total

    @property
    def category_count(self) -> int:
        return self._category_count

    @property
    def copy_feedback_active(self) -> bool:
        return self._copy_timer.isActive()

    def load(self) -> bool:
        """Load the catalog, publish summary counts and render everything."""
        try:
            catalog = self._catalog_service.catalog
        except CatalogError as e:
            logger.error("Failed to load catalog: %s", e)
            self.error_occurred.emit(f"Failed to load catalog: {e}")
            return False

        self._total = catalog.total
        self._category_count = catalog.category_count
        self.summary_changed.emit(self._total, self._category_count)
        self.search("")
        return True

    def search(self, query: str) -> None:
        """Filter the catalog with the latest query text and re-render."""
        self._query = query
        self._view = self._catalog_service.search(query)
        self._render()

    def select_feature(self, feature_id: str) -> None:
        """Show a feature in the detail pane."""
        feature = self._catalog_service.get_feature(feature_id)
        if feature is None:
            logger.warning("Unknown feature id %r", feature_id)
            return

        self._current = feature
        self._rows = build_feature_rows(self._view, feature.id)
        self.active_feature_changed.emit(feature.id)
        self.feature_selected.emit(build_detail(feature, CODE_LANGUAGE))

    def copy_code(self) -> bool:
        """Copy the displayed code. No-op until a feature is shown."""
        if self._current is None:
            return False
        if not self._clipboard.write(self._current.code):
            return False
        # start() on a running timer restarts the window
        self._copy_timer.start()
        self.copy_feedback_changed.emit(True)
        return True

    def _render(self) -> None:
        selected_id = self._current.id if self._current is not None else None
        self._rows = build_feature_rows(self._view, selected_id)
        self.rows_changed.emit(self._rows)
        self.match_count_changed.emit(format_match_count(self._view, self._total))

    def _on_copy_feedback_expired(self) -> None:
        self.copy_feedback_changed.emit(False)
