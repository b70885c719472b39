import os
from collections import defaultdict

import pytest
from rich.console import Console
from rich.table import Table

# Widget tests run without a display.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from fb_catalog.api import Catalog, FeatureRecord  # noqa: E402


@pytest.fixture
def sample_records() -> list[FeatureRecord]:
    """Small catalog covering output/notes presence and shared categories."""
    return [
        FeatureRecord(
            id="a",
            category="X",
            title="Foo",
            description="First feature",
            code="const a = 1;",
            output="1",
            notes=("first note", "second note"),
        ),
        FeatureRecord(
            id="b",
            category="Y",
            title="Bar",
            description="Second feature",
            code="let b = 2;",
        ),
        FeatureRecord(
            id="c",
            category="X",
            title="Baz",
            description="Mentions foo in passing",
            code="var c = 3;",
            output="3",
        ),
        FeatureRecord(
            id="d",
            category="Async",
            title="Promises",
            description="Deferred values",
            code="Promise.resolve(4);",
            notes=(),
        ),
    ]


@pytest.fixture
def sample_catalog(sample_records: list[FeatureRecord]) -> Catalog:
    return Catalog(sample_records)


@pytest.fixture(scope="session")
def qapp():
    """Shared QApplication for widget and viewmodel tests."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


MARKERS = ("unit_common", "unit_catalog", "unit_gui", "gui")
OUTCOMES = ("passed", "failed", "skipped")


def _counted(report) -> bool:
    # Test bodies, plus tests skipped before they ran.
    return report.when == "call" or (report.when == "setup" and report.outcome == "skipped")


def _collect_marker_stats(terminalreporter) -> dict[str, dict[str, float]]:
    stats: dict[str, dict[str, float]] = defaultdict(lambda: dict.fromkeys((*OUTCOMES, "duration"), 0))
    for outcome in OUTCOMES:
        for report in terminalreporter.stats.get(outcome, []):
            if not _counted(report):
                continue
            for marker in MARKERS:
                if marker in report.keywords:
                    stats[marker][outcome] += 1
                    stats[marker]["duration"] += getattr(report, "duration", 0.0)
    return stats


def pytest_terminal_summary(terminalreporter, exitstatus, config):
    """Print a per-marker pass/fail table after the run."""
    _ = (exitstatus, config)
    stats = _collect_marker_stats(terminalreporter)
    if not stats:
        return

    table = Table(title="Feature browser tests by marker", header_style="bold magenta")
    table.add_column("Marker", style="cyan")
    for outcome, style in zip(OUTCOMES, ("green", "red", "yellow")):
        table.add_column(outcome.capitalize(), justify="right", style=style)
    table.add_column("Seconds", justify="right", style="blue")

    for marker in MARKERS:
        if marker not in stats:
            continue
        row = stats[marker]
        table.add_row(marker, *(str(int(row[o])) for o in OUTCOMES), f"{row['duration']:.2f}")

    Console().print("\n", table)
