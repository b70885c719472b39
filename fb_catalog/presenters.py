"""Declarative descriptions of the feature list and detail pane.

Widgets reconcile these descriptions; nothing here touches Qt.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from fb_catalog.models import FeatureRecord, FilteredView

RowKind = Literal["header", "feature"]


@dataclass(frozen=True)
class FeatureRow:
    """One line of the sidebar list."""

    kind: RowKind
    text: str
    feature_id: str | None = None  # click key, feature rows only
    active: bool = False


@dataclass(frozen=True)
class FeatureDetail:
    """Content and panel visibility for the detail pane."""

    feature_id: str
    title: str
    category: str
    description: str
    code: str
    language: str
    output: str | None
    notes: tuple[str, ...]

    @property
    def show_output(self) -> bool:
        return bool(self.output)

    @property
    def show_notes(self) -> bool:
        return len(self.notes) > 0


def build_feature_rows(
    view: FilteredView, selected_id: str | None = None
) -> list[FeatureRow]:
    """Flatten a filtered view into header and feature rows.

    At most one row is active: the one whose id equals selected_id.
    """
    rows: list[FeatureRow] = []
    for group in view.groups:
        rows.append(FeatureRow(kind="header", text=group.category))
        for feature in group.features:
            rows.append(
                FeatureRow(
                    kind="feature",
                    text=feature.title,
                    feature_id=feature.id,
                    active=selected_id is not None and feature.id == selected_id,
                )
            )
    return rows


def build_detail(feature: FeatureRecord, language: str = "javascript") -> FeatureDetail:
    """Describe what the detail pane shows for a feature."""
    return FeatureDetail(
        feature_id=feature.id,
        title=feature.title,
        category=feature.category,
        description=feature.description,
        code=feature.code,
        language=language,
        output=feature.output,
        notes=tuple(feature.notes),
    )


def format_match_count(view: FilteredView, total: int) -> str:
    """Sidebar caption for the current filter."""
    if view.query == "":
        return f"{total} feature(s)"
    return f"{view.feature_count} of {total} feature(s)"
