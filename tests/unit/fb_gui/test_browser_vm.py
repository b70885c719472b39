"""Unit tests for FeatureBrowserViewModel."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from PySide6.QtTest import QTest

from fb_catalog.api import Catalog, FeatureDetail
from fb_common.errors import CatalogError
from fb_gui.services.catalog_service import CatalogService
from fb_gui.viewmodels.browser_vm import COPY_FEEDBACK_MS, FeatureBrowserViewModel


pytestmark = pytest.mark.unit_gui


@pytest.fixture
def clipboard() -> MagicMock:
    service = MagicMock()
    service.write.return_value = True
    return service


@pytest.fixture
def vm(qapp, sample_catalog: Catalog, clipboard: MagicMock) -> FeatureBrowserViewModel:
    return FeatureBrowserViewModel(CatalogService(loader=lambda: sample_catalog), clipboard)


def _record(signal) -> list:
    captured: list = []
    signal.connect(lambda *args: captured.append(args if len(args) != 1 else args[0]))
    return captured


class TestLoad:
    """Tests for the initial load."""

    def test_publishes_summary_and_all_rows(self, vm: FeatureBrowserViewModel) -> None:
        summaries = _record(vm.summary_changed)
        rows = _record(vm.rows_changed)
        counts = _record(vm.match_count_changed)

        assert vm.load() is True

        assert summaries == [(4, 3)]
        assert vm.total == 4
        assert vm.category_count == 3
        assert len(rows) == 1
        assert [r.text for r in rows[0] if r.kind == "header"] == ["Async", "X", "Y"]
        assert counts == ["4 feature(s)"]

    def test_starts_empty(self, vm: FeatureBrowserViewModel) -> None:
        vm.load()
        assert vm.current_feature is None
        assert vm.is_showing is False

    def test_catalog_error_is_reported(self, qapp, clipboard: MagicMock) -> None:
        loader = MagicMock(side_effect=CatalogError("duplicate id"))
        vm = FeatureBrowserViewModel(CatalogService(loader=loader), clipboard)
        errors = _record(vm.error_occurred)
        rows = _record(vm.rows_changed)

        assert vm.load() is False
        assert len(errors) == 1
        assert "duplicate id" in errors[0]
        assert rows == []


class TestSearch:
    """Tests for query handling."""

    def test_every_change_rerenders(self, vm: FeatureBrowserViewModel) -> None:
        vm.load()
        rows = _record(vm.rows_changed)

        vm.search("f")
        vm.search("fo")
        vm.search("foo")

        assert len(rows) == 3
        assert vm.query == "foo"
        assert vm.filtered_view.feature_ids() == ["a", "c"]

    def test_no_matches_gives_empty_list(self, vm: FeatureBrowserViewModel) -> None:
        vm.load()
        counts = _record(vm.match_count_changed)

        vm.search("zzz")

        assert vm.rows == []
        assert vm.filtered_view.is_empty
        assert counts == ["0 of 4 feature(s)"]

    def test_clearing_restores_initial_list(self, vm: FeatureBrowserViewModel) -> None:
        vm.load()
        initial = list(vm.rows)

        vm.search("zzz")
        vm.search("")

        assert vm.rows == initial

    def test_active_row_survives_filtering(self, vm: FeatureBrowserViewModel) -> None:
        vm.load()
        vm.select_feature("a")

        vm.search("foo")

        active = [r.feature_id for r in vm.rows if r.active]
        assert active == ["a"]

    def test_hidden_selection_has_no_active_row(self, vm: FeatureBrowserViewModel) -> None:
        vm.load()
        vm.select_feature("a")

        vm.search("bar")

        assert [r for r in vm.rows if r.active] == []
        assert vm.current_feature is not None
        assert vm.current_feature.id == "a"


class TestSelection:
    """Tests for feature selection."""

    def test_select_emits_detail(self, vm: FeatureBrowserViewModel) -> None:
        vm.load()
        details = _record(vm.feature_selected)
        active = _record(vm.active_feature_changed)

        vm.select_feature("a")

        assert active == ["a"]
        assert len(details) == 1
        detail = details[0]
        assert isinstance(detail, FeatureDetail)
        assert detail.title == "Foo"
        assert detail.language == "javascript"
        assert detail.show_output is True
        assert detail.notes == ("first note", "second note")

    def test_switching_selection(self, vm: FeatureBrowserViewModel) -> None:
        vm.load()
        vm.select_feature("a")
        vm.select_feature("b")

        assert vm.current_feature.id == "b"
        assert [r.feature_id for r in vm.rows if r.active] == ["b"]

    def test_unknown_id_is_ignored(self, vm: FeatureBrowserViewModel) -> None:
        vm.load()
        vm.select_feature("a")
        details = _record(vm.feature_selected)

        vm.select_feature("missing")

        assert details == []
        assert vm.current_feature.id == "a"


class TestCopy:
    """Tests for copy and its acknowledgment window."""

    def test_noop_without_selection(self, vm: FeatureBrowserViewModel, clipboard: MagicMock) -> None:
        vm.load()
        feedback = _record(vm.copy_feedback_changed)

        assert vm.copy_code() is False

        clipboard.write.assert_not_called()
        assert feedback == []

    def test_copies_current_code(self, vm: FeatureBrowserViewModel, clipboard: MagicMock) -> None:
        vm.load()
        vm.select_feature("b")
        feedback = _record(vm.copy_feedback_changed)

        assert vm.copy_code() is True

        clipboard.write.assert_called_once_with("let b = 2;")
        assert feedback == [True]
        assert vm.copy_feedback_active is True

    def test_failed_copy_shows_nothing(self, vm: FeatureBrowserViewModel, clipboard: MagicMock) -> None:
        clipboard.write.return_value = False
        vm.load()
        vm.select_feature("a")
        feedback = _record(vm.copy_feedback_changed)

        assert vm.copy_code() is False

        assert feedback == []
        assert vm.copy_feedback_active is False

    def test_default_window_is_two_seconds(self, vm: FeatureBrowserViewModel) -> None:
        assert COPY_FEEDBACK_MS == 2000
        assert vm._copy_timer.interval() == 2000
        assert vm._copy_timer.isSingleShot()

    def test_acknowledgment_expires(self, vm: FeatureBrowserViewModel) -> None:
        vm._copy_timer.setInterval(20)
        vm.load()
        vm.select_feature("a")
        feedback = _record(vm.copy_feedback_changed)

        vm.copy_code()
        QTest.qWait(100)

        assert feedback == [True, False]
        assert vm.copy_feedback_active is False

    def test_second_copy_restarts_window(self, vm: FeatureBrowserViewModel) -> None:
        vm._copy_timer.setInterval(300)
        vm.load()
        vm.select_feature("a")
        feedback = _record(vm.copy_feedback_changed)

        vm.copy_code()
        QTest.qWait(150)
        vm.copy_code()
        QTest.qWait(150)

        # 300ms after the first click but only 150ms after the second
        assert feedback == [True, True]
        assert vm.copy_feedback_active is True

        QTest.qWait(400)
        assert feedback == [True, True, False]
