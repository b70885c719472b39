"""Pytest configuration for fb_gui tests."""

from pathlib import Path

from tests.helpers.qt_support import HAS_PYSIDE6, qt_test_modules

# Skip collection of test files if GUI deps are missing.
if not HAS_PYSIDE6:
    collect_ignore = qt_test_modules(Path(__file__).parent)
