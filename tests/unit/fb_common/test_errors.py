"""Tests for shared error helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from fb_common.errors import (
    CatalogError,
    FBError,
    PreferenceError,
    error_to_payload,
    wrap_error,
)


pytestmark = pytest.mark.unit_common


def test_error_to_payload_normalizes_context() -> None:
    err = CatalogError(
        "boom",
        context={
            "path": Path("/tmp/features.yaml"),
            "index": 3,
            "nested": {"value": Path("nested")},
            "items": (Path("a"), "b"),
        },
    )
    payload = error_to_payload(err)
    assert payload["error_type"] == "CatalogError"
    assert payload["error"] == "boom"
    assert payload["error_context"]["path"].endswith("features.yaml")
    assert payload["error_context"]["index"] == 3
    assert payload["error_context"]["nested"]["value"] == "nested"
    assert payload["error_context"]["items"] == ["a", "b"]


def test_wrap_error_sets_cause() -> None:
    cause = ValueError("bad value")
    err = wrap_error(PreferenceError, "cannot save", context={"key": "theme"}, cause=cause)

    assert isinstance(err, FBError)
    assert err.__cause__ is cause
    assert err.to_dict() == {
        "type": "PreferenceError",
        "message": "cannot save",
        "context": {"key": "theme"},
    }


def test_payload_includes_cause() -> None:
    err = wrap_error(CatalogError, "bad yaml", cause=ValueError("line 3"))

    payload = error_to_payload(err)

    assert payload["error_cause"] == "ValueError('line 3')"
    assert "error_cause" not in error_to_payload(CatalogError("plain"))


def test_context_sets_become_lists() -> None:
    err = FBError("x", context={"ids": frozenset({"a"})})
    assert err.context == {"ids": ["a"]}
