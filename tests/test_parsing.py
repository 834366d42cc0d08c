"""Unit tests for upstream dataset payload parsing."""

from __future__ import annotations

import pytest

from benchmarks.dto import ToolIdentifier
from benchmarks.parsing import DataSetParseError, parse_dataset, parse_entry

pytestmark = pytest.mark.unit


def test_parse_entry_builds_dtos(payload_factory) -> None:
    """All commit and bench fields are carried over."""

    entry = parse_entry(payload_factory())

    assert entry.commit.id == "0123456789abcdef"
    assert entry.commit.committer.username == "octocat"
    assert entry.bench.value == 12.5
    assert entry.bench.unit == "ns"
    assert entry.bench.range == "± 0.2"
    assert entry.tool == ToolIdentifier.cargo


def test_parse_dataset_preserves_order(payload_factory) -> None:
    """Entry order defines the x-axis and must survive parsing."""

    first = payload_factory()
    second = payload_factory()
    second["bench"] = {"value": 3, "unit": "ns"}

    dataset = parse_dataset([first, second])

    assert [entry.bench.value for entry in dataset] == [12.5, 3.0]
    assert isinstance(dataset[1].bench.value, float)


def test_parse_empty_dataset() -> None:
    """A benchmark with no history is a valid empty dataset."""

    assert parse_dataset([]) == ()


@pytest.mark.parametrize("raw_range", [None, ""])
def test_missing_or_blank_range_is_none(payload_factory, raw_range) -> None:
    """Blank ranges are normalised to None."""

    payload = payload_factory()
    payload["bench"] = {"value": 1.0, "unit": "ns", "range": raw_range}

    assert parse_entry(payload).bench.range is None


def test_missing_tool_defaults_to_fallback(payload_factory) -> None:
    """Entries without a tool get the fallback identifier."""

    payload = payload_factory()
    del payload["tool"]

    assert parse_entry(payload).tool == ToolIdentifier.fallback


def test_unknown_tool_is_kept(payload_factory) -> None:
    """Unknown tools are preserved; color resolution handles them."""

    assert parse_entry(payload_factory(tool="zig")).tool == "zig"


def test_non_list_dataset_is_rejected() -> None:
    """The dataset must be a JSON array."""

    with pytest.raises(DataSetParseError) as excinfo:
        parse_dataset({"commit": {}})
    assert excinfo.value.path == "dataset"


def test_error_names_offending_field(payload_factory) -> None:
    """Errors carry the path of the bad field."""

    bad = payload_factory()
    bad["bench"] = {"value": "fast", "unit": "ns"}

    with pytest.raises(DataSetParseError) as excinfo:
        parse_dataset([payload_factory(), bad])
    assert excinfo.value.path == "dataset[1].bench.value"


@pytest.mark.parametrize(
    ("mutate", "path"),
    [
        (lambda p: p.pop("commit"), "entry.commit"),
        (lambda p: p["commit"].pop("url"), "entry.commit.url"),
        (lambda p: p["commit"].update(committer="octocat"), "entry.commit.committer"),
        (lambda p: p["bench"].update(value=True), "entry.bench.value"),
        (lambda p: p["bench"].update(range=0.2), "entry.bench.range"),
        (lambda p: p.update(tool=7), "entry.tool"),
    ],
)
def test_malformed_entries_are_rejected(payload_factory, mutate, path: str) -> None:
    """Shape and type violations fail fast."""

    payload = payload_factory()
    mutate(payload)

    with pytest.raises(DataSetParseError) as excinfo:
        parse_entry(payload)
    assert excinfo.value.path == path


def test_value_too_large_for_float_is_rejected(payload_factory) -> None:
    """Integers beyond float range are parse errors, not crashes."""

    payload = payload_factory()
    payload["bench"] = {"value": 10**400, "unit": "ns"}

    with pytest.raises(DataSetParseError) as excinfo:
        parse_dataset([payload])
    assert excinfo.value.path == "dataset[0].bench.value"


@pytest.mark.parametrize(
    "url",
    ["javascript:alert(1)", "data:text/html,hi", "/relative/commit", "http://[::1"],
)
def test_commit_url_must_be_http(payload_factory, url: str) -> None:
    """Only http(s) commit links are accepted; they are opened on click."""

    payload = payload_factory()
    payload["commit"]["url"] = url

    with pytest.raises(DataSetParseError) as excinfo:
        parse_entry(payload)
    assert excinfo.value.path == "entry.commit.url"


def test_http_commit_url_is_accepted(payload_factory) -> None:
    """Plain http links are valid alongside https."""

    payload = payload_factory()
    payload["commit"]["url"] = "HTTP://git.example.test/commit/1"

    assert parse_entry(payload).commit.url == "HTTP://git.example.test/commit/1"
