"""Loading and lookup for the packaged feature catalog."""

from __future__ import annotations

import logging
from functools import lru_cache
from importlib import resources
from typing import Any, Iterable, Iterator, Sequence

import yaml
from pydantic import ValidationError

from fb_catalog.models import FeatureRecord
from fb_common.errors import CatalogError, wrap_error

logger = logging.getLogger(__name__)

CATALOG_RESOURCE = "features.yaml"


class Catalog:
    """Immutable ordered collection of feature records."""

    def __init__(self, features: Iterable[FeatureRecord]) -> None:
        self._features: tuple[FeatureRecord, ...] = tuple(features)
        self._by_id: dict[str, FeatureRecord] = {}
        for feature in self._features:
            if feature.id in self._by_id:
                raise CatalogError(
                    f"Duplicate feature id '{feature.id}'",
                    context={"id": feature.id},
                )
            self._by_id[feature.id] = feature

    def __iter__(self) -> Iterator[FeatureRecord]:
        return iter(self._features)

    def __len__(self) -> int:
        return len(self._features)

    @property
    def features(self) -> tuple[FeatureRecord, ...]:
        return self._features

    @property
    def total(self) -> int:
        """Number of records in the catalog."""
        return len(self._features)

    @property
    def categories(self) -> list[str]:
        """Distinct category values, sorted."""
        return sorted({feature.category for feature in self._features})

    @property
    def category_count(self) -> int:
        return len(self.categories)

    def get(self, feature_id: str) -> FeatureRecord | None:
        """Look up a record by id."""
        return self._by_id.get(feature_id)


def parse_catalog(raw: Any) -> Catalog:
    """Build a Catalog from the decoded YAML document."""
    if not isinstance(raw, dict) or not isinstance(raw.get("features"), list):
        raise CatalogError("Catalog document must contain a 'features' list")

    entries: Sequence[Any] = raw["features"]
    records: list[FeatureRecord] = []
    for index, entry in enumerate(entries):
        try:
            records.append(FeatureRecord.model_validate(entry))
        except ValidationError as exc:
            raise wrap_error(
                CatalogError,
                f"Invalid catalog entry at position {index}",
                context={"index": index, "id": _entry_id(entry), "errors": exc.errors()},
                cause=exc,
            ) from exc
    return Catalog(records)


def _entry_id(entry: Any) -> str | None:
    if isinstance(entry, dict) and isinstance(entry.get("id"), str):
        return entry["id"]
    return None


def load_catalog_text(text: str) -> Catalog:
    """Parse a YAML catalog document."""
    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise wrap_error(CatalogError, "Catalog is not valid YAML", cause=exc) from exc
    return parse_catalog(raw)


@lru_cache(maxsize=1)
def load_catalog() -> Catalog:
    """Load the catalog shipped with the package.

    The result is cached; the catalog is fixed for the process lifetime.
    """
    path = resources.files("fb_catalog.data") / CATALOG_RESOURCE
    catalog = load_catalog_text(path.read_text(encoding="utf-8"))
    logger.info(
        "Loaded feature catalog: %d features in %d categories",
        catalog.total,
        catalog.category_count,
    )
    return catalog
