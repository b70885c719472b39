"""Pytest configuration for window workflow tests."""

from pathlib import Path

from tests.helpers.qt_support import HAS_PYSIDE6, qt_test_modules

if not HAS_PYSIDE6:
    collect_ignore = qt_test_modules(Path(__file__).parent)
