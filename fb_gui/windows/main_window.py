"""Main application window: header, sidebar list and detail pane."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtGui import QActionGroup
from PySide6.QtWidgets import (
    QApplication,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QSplitter,
    QVBoxLayout,
    QWidget,
)

from fb_gui.resources.theme import apply_theme

if TYPE_CHECKING:
    from fb_gui.app import ServiceContainer
    from fb_gui.viewmodels import FeatureBrowserViewModel, ThemeViewModel


class MainWindow(QMainWindow):
    """Main application window."""

    SCALE_OPTIONS = [
        ("100%", 1.0),
        ("115%", 1.15),
        ("130%", 1.3),
    ]

    def __init__(self, services: "ServiceContainer", parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.services = services

        self._setup_viewmodels()
        self._setup_ui()
        self._connect_signals()
        self._setup_menu()

        # Theme first so nothing is ever drawn in the wrong palette.
        self._theme_vm.restore()
        self._browser_vm.load()

    @property
    def browser_vm(self) -> "FeatureBrowserViewModel":
        return self._browser_vm

    @property
    def theme_vm(self) -> "ThemeViewModel":
        return self._theme_vm

    @property
    def list_view(self) -> QWidget:
        return self._list_view

    @property
    def detail_view(self) -> QWidget:
        return self._detail_view

    @property
    def theme_button(self) -> QPushButton:
        return self._theme_btn

    def _setup_viewmodels(self) -> None:
        from fb_gui.viewmodels import FeatureBrowserViewModel, ThemeViewModel

        self._browser_vm = FeatureBrowserViewModel(
            self.services.catalog_service,
            self.services.clipboard_service,
            parent=self,
        )
        self._theme_vm = ThemeViewModel(self.services.preference_store, parent=self)

    def _setup_ui(self) -> None:
        """Set up the main UI layout."""
        from fb_gui.views import FeatureDetailView, FeatureListView

        self.setWindowTitle("JavaScript Feature Reference")
        self.setMinimumSize(1100, 720)

        central = QWidget()
        central.setObjectName("mainRoot")
        self.setCentralWidget(central)
        root_layout = QVBoxLayout(central)
        root_layout.setContentsMargins(0, 0, 0, 0)
        root_layout.setSpacing(0)

        root_layout.addWidget(self._build_header())

        splitter = QSplitter()
        splitter.setChildrenCollapsible(False)
        self._list_view = FeatureListView(self._browser_vm)
        self._list_view.setMinimumWidth(260)
        self._detail_view = FeatureDetailView(self._browser_vm, theme=self._theme_vm.theme)
        splitter.addWidget(self._list_view)
        splitter.addWidget(self._detail_view)
        splitter.setStretchFactor(0, 0)
        splitter.setStretchFactor(1, 1)
        splitter.setSizes([300, 800])
        root_layout.addWidget(splitter, 1)

    def _build_header(self) -> QWidget:
        header = QWidget()
        header.setObjectName("headerBar")
        layout = QHBoxLayout(header)
        layout.setContentsMargins(16, 10, 16, 10)
        layout.setSpacing(16)

        title = QLabel("JavaScript Feature Reference")
        title.setProperty("role", "title")
        layout.addWidget(title)
        layout.addStretch()

        self._total_label = QLabel("0 features")
        self._total_label.setProperty("role", "stat")
        layout.addWidget(self._total_label)

        self._categories_label = QLabel("0 categories")
        self._categories_label.setProperty("role", "stat")
        layout.addWidget(self._categories_label)

        self._theme_btn = QPushButton(self._theme_vm.icon)
        self._theme_btn.setObjectName("themeToggle")
        self._theme_btn.setToolTip("Toggle light/dark theme")
        layout.addWidget(self._theme_btn)
        return header

    def _setup_menu(self) -> None:
        """Create the application menu."""
        menu_bar = self.menuBar()
        view_menu = menu_bar.addMenu("View")

        toggle_action = view_menu.addAction("Toggle Theme")
        toggle_action.setShortcut("Ctrl+T")
        toggle_action.triggered.connect(self._theme_vm.toggle)

        focus_action = view_menu.addAction("Find Feature")
        focus_action.setShortcut("Ctrl+F")
        focus_action.triggered.connect(self._focus_search)

        scale_menu = view_menu.addMenu("UI Scale")
        scale_group = QActionGroup(self)
        scale_group.setExclusive(True)
        self._scale_group = scale_group

        for label, scale in self.SCALE_OPTIONS:
            action = scale_menu.addAction(label)
            action.setCheckable(True)
            action.setData(scale)
            scale_group.addAction(action)

        def on_scale_selected(action) -> None:  # type: ignore[no-untyped-def]
            self._theme_vm.set_scale(float(action.data()))

        scale_group.triggered.connect(on_scale_selected)

    def _connect_signals(self) -> None:
        """Connect UI and viewmodel signals."""
        self._theme_btn.clicked.connect(self._theme_vm.toggle)
        self._theme_vm.theme_changed.connect(self._on_theme_changed)
        self._theme_vm.scale_changed.connect(self._on_scale_changed)
        self._browser_vm.summary_changed.connect(self._on_summary_changed)
        self._browser_vm.error_occurred.connect(self._on_error)

    def _on_theme_changed(self, theme: str) -> None:
        """Apply a theme to the app chrome, the toggle icon and the code block."""
        app = QApplication.instance()
        if isinstance(app, QApplication):
            apply_theme(app, theme, self._theme_vm.scale)
        self._theme_btn.setText(self._theme_vm.icon)
        self._detail_view.set_code_theme(theme)
        self._sync_scale_actions()

    def _on_scale_changed(self, scale: float) -> None:
        app = QApplication.instance()
        if isinstance(app, QApplication):
            apply_theme(app, self._theme_vm.theme, scale)
        self._sync_scale_actions()

    def _sync_scale_actions(self) -> None:
        current = self._theme_vm.scale
        for action in self._scale_group.actions():
            action.setChecked(abs(float(action.data()) - current) < 0.01)

    def _on_summary_changed(self, total: int, categories: int) -> None:
        self._total_label.setText(f"{total} features")
        self._categories_label.setText(f"{categories} categories")

    def _on_error(self, message: str) -> None:
        self.statusBar().showMessage(message)

    def _focus_search(self) -> None:
        search = self._list_view.search_input
        search.setFocus()
        search.selectAll()
