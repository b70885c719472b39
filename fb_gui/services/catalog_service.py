"""Catalog access service."""

from __future__ import annotations

from typing import Callable

from fb_catalog.api import Catalog, FeatureRecord, FilteredView, filter_catalog, load_catalog


class CatalogService:
    """Service wrapping the packaged catalog and the query engine."""

    def __init__(self, loader: Callable[[], Catalog] = load_catalog) -> None:
        self._loader = loader
        self._catalog: Catalog | None = None

    @property
    def catalog(self) -> Catalog:
        """The catalog, loaded on first access."""
        if self._catalog is None:
            self._catalog = self._loader()
        return self._catalog

    def search(self, query: str) -> FilteredView:
        """Filter and group the catalog by a free-text query."""
        return filter_catalog(self.catalog, query)

    def get_feature(self, feature_id: str) -> FeatureRecord | None:
        return self.catalog.get(feature_id)
