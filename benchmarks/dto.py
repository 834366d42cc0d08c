"""DTO types describing a per-benchmark commit history.

A dataset is produced upstream for one (platform, benchmark) pair and one
benchmarking tool. DTOs are plain, immutable data containers with no Django
dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ToolIdentifier(StrEnum):
    """Benchmarking tool that produced a measurement.

    Values match the identifiers emitted by the upstream result collector.
    `fallback` is used when no tool can be determined.
    """

    cargo = "cargo"
    go = "go"
    benchmarkjs = "benchmarkjs"
    benchmarkluau = "benchmarkluau"
    pytest = "pytest"
    googlecpp = "googlecpp"
    catch2 = "catch2"
    julia = "julia"
    jmh = "jmh"
    benchmarkdotnet = "benchmarkdotnet"
    custom_bigger_is_better = "customBiggerIsBetter"
    custom_smaller_is_better = "customSmallerIsBetter"
    fallback = "_"


@dataclass(frozen=True, slots=True)
class Committer:
    """Author of a commit as reported by the upstream collector."""

    username: str


@dataclass(frozen=True, slots=True)
class CommitInfo:
    """A single historical revision.

    Attributes:
        id: Full commit hash.
        url: Link to the commit on the hosting service.
        message: Full commit message.
        timestamp: Commit timestamp, already formatted upstream.
        committer: Committer metadata.
    """

    id: str
    url: str
    message: str
    timestamp: str
    committer: Committer


@dataclass(frozen=True, slots=True)
class BenchMeasurement:
    """A measurement recorded for one commit.

    Attributes:
        value: Measured value.
        unit: Display unit for `value` (e.g. "ns/iter").
        range: Optional uncertainty annotation (e.g. "± 0.3").
    """

    value: float
    unit: str
    range: str | None = None


@dataclass(frozen=True, slots=True)
class DataSetEntry:
    """One (commit, measurement, tool) triple.

    Attributes:
        commit: Commit the measurement belongs to.
        bench: The measurement itself.
        tool: Tool identifier string. Unknown strings are kept as-is so color
            resolution can fall back to the default color.
    """

    commit: CommitInfo
    bench: BenchMeasurement
    tool: str = ToolIdentifier.fallback


DataSet = tuple[DataSetEntry, ...]


def lookup_entry(dataset: DataSet, index: int) -> DataSetEntry | None:
    """Return the entry at `index`, or None when the index is out of range.

    Negative indices are treated as out of range; chart callbacks never refer
    to points from the end of the series.
    """

    if 0 <= index < len(dataset):
        return dataset[index]
    return None
