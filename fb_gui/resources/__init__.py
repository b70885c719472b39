"""Packaged QSS themes."""

from __future__ import annotations

from importlib import resources
from pathlib import Path


def resource_path(name: str) -> Path:
    """Filesystem path of a file shipped in this package."""
    return Path(resources.files(__name__) / name)


def read_resource(name: str) -> str:
    """Text of a packaged file, or an empty string when it is missing."""
    path = resource_path(name)
    if not path.is_file():
        return ""
    return path.read_text(encoding="utf-8")


__all__ = ["read_resource", "resource_path"]
