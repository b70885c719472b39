"""Detail pane: welcome page until a feature is selected, then its details."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPlainTextEdit,
    QPushButton,
    QScrollArea,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from fb_catalog.api import FeatureDetail
from fb_gui.utils import set_widget_role
from fb_gui.widgets import CodeView, NotesList

if TYPE_CHECKING:
    from fb_gui.viewmodels.browser_vm import FeatureBrowserViewModel

COPY_LABEL = "📋 Copy"
COPIED_LABEL = "✓ Copied!"


class FeatureDetailView(QWidget):
    """View showing the selected feature's code, output and notes."""

    WELCOME_PAGE = 0
    DETAIL_PAGE = 1

    def __init__(
        self,
        viewmodel: "FeatureBrowserViewModel",
        parent: QWidget | None = None,
        theme: str = "dark",
    ) -> None:
        super().__init__(parent)
        self._vm = viewmodel
        self._theme = theme

        self._setup_ui()
        self._connect_signals()

    # Accessors used by the main window and tests
    @property
    def is_showing_detail(self) -> bool:
        return self._stack.currentIndex() == self.DETAIL_PAGE

    @property
    def code_view(self) -> CodeView:
        return self._code_view

    @property
    def copy_button(self) -> QPushButton:
        return self._copy_btn

    @property
    def output_visible(self) -> bool:
        return not self._output_group.isHidden()

    @property
    def notes_visible(self) -> bool:
        return not self._notes_group.isHidden()

    @property
    def notes_list(self) -> NotesList:
        return self._notes_list

    @property
    def scroll_area(self) -> QScrollArea:
        return self._scroll

    def title_text(self) -> str:
        return self._title_label.text()

    def category_text(self) -> str:
        return self._category_label.text()

    def description_text(self) -> str:
        return self._description_label.text()

    def output_text(self) -> str:
        return self._output_text.toPlainText()

    def _setup_ui(self) -> None:
        """Set up the UI layout."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self._stack = QStackedWidget()
        self._stack.addWidget(self._build_welcome_page())
        self._stack.addWidget(self._build_detail_page())
        self._stack.setCurrentIndex(self.WELCOME_PAGE)
        layout.addWidget(self._stack)

    def _build_welcome_page(self) -> QWidget:
        page = QWidget()
        page.setObjectName("welcomeScreen")
        layout = QVBoxLayout(page)
        layout.setContentsMargins(40, 40, 40, 40)
        layout.addStretch()

        title = QLabel("JavaScript Feature Reference")
        title.setProperty("role", "title")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title)

        hint = QLabel(
            "Pick a feature from the sidebar to see an example, its output and notes.\n"
            "Use the search box to filter by title, description or category."
        )
        hint.setProperty("role", "muted")
        hint.setAlignment(Qt.AlignmentFlag.AlignCenter)
        hint.setWordWrap(True)
        layout.addWidget(hint)

        layout.addStretch()
        return page

    def _build_detail_page(self) -> QWidget:
        self._scroll = QScrollArea()
        self._scroll.setObjectName("contentArea")
        self._scroll.setWidgetResizable(True)

        page = QWidget()
        page.setObjectName("featureDisplay")
        layout = QVBoxLayout(page)
        layout.setContentsMargins(24, 20, 24, 20)
        layout.setSpacing(14)

        # Header
        self._title_label = QLabel("")
        self._title_label.setProperty("role", "title")
        self._title_label.setWordWrap(True)
        layout.addWidget(self._title_label)

        category_row = QHBoxLayout()
        self._category_label = QLabel("")
        self._category_label.setProperty("role", "badge")
        category_row.addWidget(self._category_label)
        category_row.addStretch()
        layout.addLayout(category_row)

        self._description_label = QLabel("")
        self._description_label.setWordWrap(True)
        self._description_label.setTextInteractionFlags(
            Qt.TextInteractionFlag.TextSelectableByMouse
        )
        layout.addWidget(self._description_label)

        # Code
        code_group = QGroupBox("Example")
        code_layout = QVBoxLayout(code_group)
        btn_row = QHBoxLayout()
        btn_row.addStretch()
        self._copy_btn = QPushButton(COPY_LABEL)
        self._copy_btn.setObjectName("copyBtn")
        btn_row.addWidget(self._copy_btn)
        code_layout.addLayout(btn_row)
        self._code_view = CodeView(theme=self._theme)
        self._code_view.setMinimumHeight(260)
        code_layout.addWidget(self._code_view)
        layout.addWidget(code_group)

        # Output
        self._output_group = QGroupBox("Output")
        output_layout = QVBoxLayout(self._output_group)
        self._output_text = QPlainTextEdit()
        self._output_text.setObjectName("outputView")
        self._output_text.setReadOnly(True)
        self._output_text.setMaximumHeight(160)
        output_layout.addWidget(self._output_text)
        layout.addWidget(self._output_group)

        # Notes
        self._notes_group = QGroupBox("Notes")
        notes_layout = QVBoxLayout(self._notes_group)
        self._notes_list = NotesList()
        notes_layout.addWidget(self._notes_list)
        layout.addWidget(self._notes_group)

        layout.addStretch()
        self._scroll.setWidget(page)
        return self._scroll

    def _connect_signals(self) -> None:
        """Connect widget and viewmodel signals."""
        self._copy_btn.clicked.connect(self._on_copy)
        self._vm.feature_selected.connect(self._on_feature_selected)
        self._vm.copy_feedback_changed.connect(self._on_copy_feedback)

    def set_code_theme(self, theme: str) -> None:
        """Switch the highlighting palette, restyling any displayed code."""
        self._theme = theme
        self._code_view.set_theme(theme)

    def _on_copy(self) -> None:
        self._vm.copy_code()

    def _on_feature_selected(self, detail: FeatureDetail) -> None:
        self._stack.setCurrentIndex(self.DETAIL_PAGE)

        self._title_label.setText(detail.title)
        self._category_label.setText(detail.category)
        self._description_label.setText(detail.description)
        self._code_view.show_code(detail.code, detail.language)

        if detail.show_output:
            self._output_text.setPlainText(detail.output or "")
            self._output_group.setVisible(True)
        else:
            self._output_text.clear()
            self._output_group.setVisible(False)

        if detail.show_notes:
            self._notes_list.set_notes(detail.notes)
            self._notes_group.setVisible(True)
        else:
            self._notes_list.set_notes(())
            self._notes_group.setVisible(False)

        self._scroll.verticalScrollBar().setValue(0)

    def _on_copy_feedback(self, active: bool) -> None:
        if active:
            self._copy_btn.setText(COPIED_LABEL)
            set_widget_role(self._copy_btn, "copied")
        else:
            self._copy_btn.setText(COPY_LABEL)
            set_widget_role(self._copy_btn, None)
