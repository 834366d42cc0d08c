"""Pytest fixtures shared across the benchReports test suite."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import pytest

from benchmarks.dto import BenchMeasurement, CommitInfo, Committer, DataSet, DataSetEntry


def make_entry(
    *,
    commit_id: str = "0123456789abcdef0123456789abcdef01234567",
    value: float = 12.5,
    unit: str = "ns",
    range: str | None = None,
    tool: str = "go",
    message: str = "Speed up the hot loop",
    timestamp: str = "2024-03-01T10:00:00Z",
    username: str = "octocat",
) -> DataSetEntry:
    """Build a DataSetEntry with sensible defaults."""

    return DataSetEntry(
        commit=CommitInfo(
            id=commit_id,
            url=f"https://github.com/example/repo/commit/{commit_id}",
            message=message,
            timestamp=timestamp,
            committer=Committer(username=username),
        ),
        bench=BenchMeasurement(value=value, unit=unit, range=range),
        tool=tool,
    )


@pytest.fixture
def entry_factory() -> Callable[..., DataSetEntry]:
    """Return the DataSetEntry builder."""

    return make_entry


@pytest.fixture
def dataset() -> DataSet:
    """Return a three-commit go dataset, oldest first."""

    return (
        make_entry(commit_id="aaaaaaa1111111", value=10.0, range="± 0.1"),
        make_entry(commit_id="bbbbbbb2222222", value=12.5, range=None),
        make_entry(commit_id="ccccccc3333333", value=11.0, range="± 0.3"),
    )


def make_entry_payload(**overrides: object) -> dict[str, object]:
    """Return the upstream JSON shape for one entry."""

    payload: dict[str, object] = {
        "commit": {
            "id": "0123456789abcdef",
            "url": "https://github.com/example/repo/commit/0123456789abcdef",
            "message": "Add benchmark",
            "timestamp": "2024-03-01T10:00:00Z",
            "committer": {"username": "octocat"},
        },
        "bench": {"value": 12.5, "unit": "ns", "range": "± 0.2"},
        "tool": "cargo",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def payload_factory() -> Callable[..., dict[str, object]]:
    """Return the upstream entry payload builder."""

    return make_entry_payload


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    - `unit`: pure, fast tests with no Django request cycle.
    - `integration`: tests touching Django views, templates or the filesystem.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
