"""Free-text filtering and category grouping over the catalog."""

from __future__ import annotations

from typing import Iterable

from fb_catalog.models import FeatureGroup, FeatureRecord, FilteredView


def matches(feature: FeatureRecord, query: str) -> bool:
    """Return True if the query is a case-insensitive substring of the
    feature's title, description, or category.

    The empty query matches every feature.
    """
    needle = query.casefold()
    return (
        needle in feature.title.casefold()
        or needle in feature.description.casefold()
        or needle in feature.category.casefold()
    )


def group_by_category(features: Iterable[FeatureRecord]) -> tuple[FeatureGroup, ...]:
    """Partition features by exact category.

    Groups are ordered by category name; members keep their input order.
    """
    grouped: dict[str, list[FeatureRecord]] = {}
    for feature in features:
        grouped.setdefault(feature.category, []).append(feature)
    return tuple(
        FeatureGroup(category=category, features=tuple(grouped[category]))
        for category in sorted(grouped)
    )


def filter_catalog(catalog: Iterable[FeatureRecord], query: str) -> FilteredView:
    """Return the grouped subset of the catalog matching query."""
    if query == "":
        selected = list(catalog)
    else:
        selected = [feature for feature in catalog if matches(feature, query)]
    return FilteredView(query=query, groups=group_by_category(selected))
