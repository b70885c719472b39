"""Public API surface for fb_catalog."""

from fb_catalog.catalog import Catalog, load_catalog, load_catalog_text, parse_catalog
from fb_catalog.models import FeatureGroup, FeatureRecord, FilteredView
from fb_catalog.presenters import (
    FeatureDetail,
    FeatureRow,
    build_detail,
    build_feature_rows,
    format_match_count,
)
from fb_catalog.query import filter_catalog, group_by_category, matches

__all__ = [
    "Catalog",
    "FeatureDetail",
    "FeatureGroup",
    "FeatureRecord",
    "FeatureRow",
    "FilteredView",
    "build_detail",
    "build_feature_rows",
    "filter_catalog",
    "format_match_count",
    "group_by_category",
    "load_catalog",
    "load_catalog_text",
    "matches",
    "parse_catalog",
]
