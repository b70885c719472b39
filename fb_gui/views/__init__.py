"""GUI views (Qt widgets for each pane)."""

from fb_gui.views.feature_detail_view import FeatureDetailView
from fb_gui.views.feature_list_view import FeatureListView

__all__ = [
    "FeatureDetailView",
    "FeatureListView",
]
