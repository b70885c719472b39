"""Feature catalog, query engine, and presenters (no Qt dependency)."""

from fb_catalog.api import (
    Catalog,
    FeatureRecord,
    FilteredView,
    filter_catalog,
    load_catalog,
)

__all__ = [
    "Catalog",
    "FeatureRecord",
    "FilteredView",
    "filter_catalog",
    "load_catalog",
]
