"""Data model for catalog entries and derived views."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


class FeatureRecord(BaseModel):
    """One documented language feature."""

    id: str = Field(..., min_length=1)
    category: str = Field(...)
    title: str = Field(...)
    description: str = Field(...)
    code: str = Field(...)
    output: str | None = None
    notes: tuple[str, ...] = ()

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def has_output(self) -> bool:
        return bool(self.output)

    @property
    def has_notes(self) -> bool:
        return len(self.notes) > 0


@dataclass(frozen=True)
class FeatureGroup:
    """Records sharing one category, in catalog order."""

    category: str
    features: tuple[FeatureRecord, ...]


@dataclass(frozen=True)
class FilteredView:
    """Category-grouped subsequence of the catalog matching a query."""

    query: str
    groups: tuple[FeatureGroup, ...] = ()

    @property
    def feature_count(self) -> int:
        return sum(len(group.features) for group in self.groups)

    @property
    def is_empty(self) -> bool:
        return not self.groups

    def feature_ids(self) -> list[str]:
        """Return matching ids in display order."""
        return [feature.id for group in self.groups for feature in group.features]
