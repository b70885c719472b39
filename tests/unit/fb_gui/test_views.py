"""Unit tests for the list and detail views."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from fb_catalog.api import Catalog, FeatureRecord
from fb_gui.services.catalog_service import CatalogService
from fb_gui.viewmodels.browser_vm import FeatureBrowserViewModel
from fb_gui.views import FeatureDetailView, FeatureListView
from fb_gui.views.feature_detail_view import COPIED_LABEL, COPY_LABEL


pytestmark = pytest.mark.unit_gui


@pytest.fixture
def vm(qapp, sample_catalog: Catalog) -> FeatureBrowserViewModel:
    clipboard = MagicMock()
    clipboard.write.return_value = True
    return FeatureBrowserViewModel(CatalogService(loader=lambda: sample_catalog), clipboard)


class TestFeatureDetailView:
    """Tests for the detail pane."""

    def test_welcome_page_until_selection(self, vm: FeatureBrowserViewModel) -> None:
        view = FeatureDetailView(vm)
        vm.load()

        assert view.is_showing_detail is False

    def test_feature_with_output_and_notes(self, vm: FeatureBrowserViewModel) -> None:
        view = FeatureDetailView(vm)
        vm.load()

        vm.select_feature("a")

        assert view.is_showing_detail is True
        assert view.title_text() == "Foo"
        assert view.category_text() == "X"
        assert view.description_text() == "First feature"
        assert view.code_view.code_text() == "const a = 1;"
        assert view.output_visible is True
        assert view.output_text() == "1"
        assert view.notes_visible is True
        assert view.notes_list.item_texts() == ["1. first note", "2. second note"]

    def test_panels_hidden_when_absent(self, vm: FeatureBrowserViewModel) -> None:
        view = FeatureDetailView(vm)
        vm.load()
        vm.select_feature("a")

        vm.select_feature("b")

        assert view.title_text() == "Bar"
        assert view.output_visible is False
        assert view.output_text() == ""
        assert view.notes_visible is False
        assert view.notes_list.item_texts() == []

    def test_output_without_notes(self, vm: FeatureBrowserViewModel) -> None:
        view = FeatureDetailView(vm)
        vm.load()

        vm.select_feature("c")

        assert view.output_visible is True
        assert view.notes_visible is False

    def test_empty_output_hides_panel(self, qapp) -> None:
        record = FeatureRecord(
            id="e", category="C", title="T", description="D", code="x;", output=""
        )
        clipboard = MagicMock()
        vm = FeatureBrowserViewModel(CatalogService(loader=lambda: Catalog([record])), clipboard)
        view = FeatureDetailView(vm)
        vm.load()

        vm.select_feature("e")

        assert view.is_showing_detail is True
        assert view.output_visible is False
        assert view.output_text() == ""

    def test_each_selection_restyles_code(self, vm: FeatureBrowserViewModel) -> None:
        view = FeatureDetailView(vm)
        vm.load()

        vm.select_feature("a")
        vm.select_feature("d")

        assert view.code_view.style_passes == 2
        assert view.code_view.code_text() == "Promise.resolve(4);"

    def test_scroll_reset_on_selection(self, vm: FeatureBrowserViewModel) -> None:
        view = FeatureDetailView(vm)
        vm.load()
        vm.select_feature("a")
        view.scroll_area.verticalScrollBar().setValue(50)

        vm.select_feature("c")

        assert view.scroll_area.verticalScrollBar().value() == 0

    def test_copy_button_labels(self, vm: FeatureBrowserViewModel) -> None:
        view = FeatureDetailView(vm)
        vm.load()
        vm.select_feature("a")
        assert view.copy_button.text() == COPY_LABEL

        view.copy_button.click()

        assert view.copy_button.text() == COPIED_LABEL
        assert view.copy_button.property("role") == "copied"

        vm.copy_feedback_changed.emit(False)

        assert view.copy_button.text() == COPY_LABEL

    def test_copy_before_selection_keeps_label(self, vm: FeatureBrowserViewModel) -> None:
        view = FeatureDetailView(vm)
        vm.load()

        view.copy_button.click()

        assert view.copy_button.text() == COPY_LABEL

    def test_code_theme_switch(self, vm: FeatureBrowserViewModel) -> None:
        view = FeatureDetailView(vm, theme="dark")
        vm.load()
        vm.select_feature("a")

        view.set_code_theme("light")

        assert view.code_view.theme == "light"
        assert view.code_view.style_passes == 2


class TestFeatureListView:
    """Tests for the sidebar."""

    def test_initial_render(self, vm: FeatureBrowserViewModel) -> None:
        view = FeatureListView(vm)
        vm.load()

        assert view.feature_list.feature_ids() == ["d", "a", "c", "b"]
        assert view.match_label.text() == "4 feature(s)"
        assert view.search_input.placeholderText() == "Search features..."

    def test_typing_filters(self, vm: FeatureBrowserViewModel) -> None:
        view = FeatureListView(vm)
        vm.load()

        view.search_input.setText("FOO")

        assert view.feature_list.header_texts() == ["X"]
        assert view.feature_list.feature_ids() == ["a", "c"]
        assert view.match_label.text() == "2 of 4 feature(s)"

    def test_clearing_search_restores_list(self, vm: FeatureBrowserViewModel) -> None:
        view = FeatureListView(vm)
        vm.load()
        initial = view.feature_list.snapshot()

        view.search_input.setText("zzz")
        assert view.feature_list.count() == 0
        view.search_input.setText("")

        assert view.feature_list.snapshot() == initial

    def test_click_selects_and_marks_active(self, vm: FeatureBrowserViewModel) -> None:
        view = FeatureListView(vm)
        vm.load()
        item = [
            view.feature_list.item(i)
            for i in range(view.feature_list.count())
            if view.feature_list.item(i).text() == "Bar"
        ][0]

        view.feature_list.itemClicked.emit(item)

        assert vm.current_feature.id == "b"
        assert view.feature_list.active_feature_ids() == ["b"]

    def test_active_row_kept_while_visible(self, vm: FeatureBrowserViewModel) -> None:
        view = FeatureListView(vm)
        vm.load()
        vm.select_feature("a")

        view.search_input.setText("f")

        assert view.feature_list.active_feature_ids() == ["a"]
