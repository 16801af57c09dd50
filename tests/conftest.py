from collections import defaultdict
from typing import Any, Callable

import pytest
from rich.console import Console
from rich.table import Table

from lr_options.models import Option, OptionSet, OptionType

KNOWN_MARKERS = {"unit_common", "unit_options", "unit_client", "unit_ui"}


def pytest_terminal_summary(terminalreporter, exitstatus, config):
    """
    Print statistics by marker at the end of the test session.
    """
    _ = (exitstatus, config)
    marker_stats = defaultdict(lambda: {"passed": 0, "failed": 0, "skipped": 0, "total": 0, "duration": 0.0})

    for outcome in ["passed", "failed", "skipped"]:
        for report in terminalreporter.stats.get(outcome, []):
            # Only count the actual test call, or setup skips
            if report.when == "call" or (report.when == "setup" and report.outcome == "skipped"):
                duration = getattr(report, "duration", 0.0)
                for marker in KNOWN_MARKERS:
                    if marker in report.keywords:
                        stats = marker_stats[marker]
                        stats[outcome] += 1
                        stats["total"] += 1
                        stats["duration"] += duration

    if not marker_stats:
        return

    table = Table(title="Test Statistics by Marker", show_header=True, header_style="bold magenta")
    table.add_column("Marker", style="cyan")
    table.add_column("Total", justify="right")
    table.add_column("Passed", justify="right", style="green")
    table.add_column("Failed", justify="right", style="red")
    table.add_column("Skipped", justify="right", style="yellow")
    table.add_column("Duration (s)", justify="right", style="blue")

    for marker in sorted(marker_stats):
        stats = marker_stats[marker]
        table.add_row(
            marker,
            str(stats["total"]),
            str(stats["passed"]),
            str(stats["failed"]),
            str(stats["skipped"]),
            f"{stats['duration']:.2f}",
        )

    console = Console()
    console.print("\n")
    console.print(table)


def _make_option(option_id: str, type: str = "CHECKBOX", **kwargs: Any) -> Option:
    data: dict[str, Any] = {"id": option_id, "name": option_id.title(), "type": type}
    data.update(kwargs)
    return Option.model_validate(data)


@pytest.fixture
def make_option() -> Callable[..., Option]:
    """Build an Option; ``type`` defaults to CHECKBOX."""
    return _make_option


@pytest.fixture
def make_options() -> Callable[..., OptionSet]:
    """Build an OptionSet from Option objects, keyed by id in the given order."""

    def _build(*options: Option) -> OptionSet:
        return {option.id: option for option in options}

    return _build


@pytest.fixture
def scenario_options() -> OptionSet:
    """A checkbox, a checkbox that needs it ticked, and a dropdown."""
    options = [
        _make_option("A"),
        _make_option("B", dependencies={"A": [True]}),
        _make_option("C", type=OptionType.DROPDOWN.value, choices=["x", "y"]),
    ]
    return {option.id: option for option in options}
