"""Parse upstream dataset payloads into DTOs.

The upstream collector emits one JSON object per commit. Parsing is strict
about shape and types and fails fast with the path of the offending field, so
malformed payloads never reach the renderer.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlsplit

from .dto import BenchMeasurement, CommitInfo, Committer, DataSet, DataSetEntry, ToolIdentifier

HTTP_SCHEMES = frozenset({"http", "https"})


class DataSetParseError(ValueError):
    """Raised when a dataset payload does not match the expected shape."""

    def __init__(self, path: str, problem: str) -> None:
        """Initialize the error.

        Args:
            path: Dotted path of the offending field (e.g. "dataset[2].bench.value").
            problem: Human-readable description of the problem.
        """

        super().__init__(f"{path}: {problem}")
        self.path = path
        self.problem = problem


def parse_dataset(payload: Any, *, path: str = "dataset") -> DataSet:
    """Parse a JSON array of entries into a DataSet.

    Args:
        payload: Decoded JSON value; must be a list.
        path: Path prefix used in error messages.

    Returns:
        A DataSet preserving payload order.

    Raises:
        DataSetParseError: When the payload or any entry is malformed.
    """

    if not isinstance(payload, list):
        raise DataSetParseError(path, "expected a list of entries")
    return tuple(parse_entry(item, path=f"{path}[{idx}]") for idx, item in enumerate(payload))


def parse_entry(payload: Any, *, path: str = "entry") -> DataSetEntry:
    """Parse a single dataset entry.

    Args:
        payload: Decoded JSON object for one commit.
        path: Path prefix used in error messages.

    Returns:
        The parsed DataSetEntry.

    Raises:
        DataSetParseError: When the entry is malformed.
    """

    entry = _require_mapping(payload, path)
    commit = _require_mapping(entry.get("commit"), f"{path}.commit")
    committer = _require_mapping(commit.get("committer"), f"{path}.commit.committer")
    bench = _require_mapping(entry.get("bench"), f"{path}.bench")

    tool = entry.get("tool")
    if tool is None:
        tool = ToolIdentifier.fallback.value
    elif not isinstance(tool, str):
        raise DataSetParseError(f"{path}.tool", "expected a string")

    return DataSetEntry(
        commit=CommitInfo(
            id=_require_str(commit, "id", f"{path}.commit"),
            url=_require_http_url(commit, "url", f"{path}.commit"),
            message=_require_str(commit, "message", f"{path}.commit"),
            timestamp=_require_str(commit, "timestamp", f"{path}.commit"),
            committer=Committer(username=_require_str(committer, "username", f"{path}.commit.committer")),
        ),
        bench=BenchMeasurement(
            value=_require_number(bench, "value", f"{path}.bench"),
            unit=_require_str(bench, "unit", f"{path}.bench"),
            range=_optional_str(bench, "range", f"{path}.bench"),
        ),
        tool=tool,
    )


def _require_mapping(value: Any, path: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise DataSetParseError(path, "expected an object")
    return value


def _require_str(obj: Mapping[str, Any], key: str, path: str) -> str:
    value = obj.get(key)
    if not isinstance(value, str):
        raise DataSetParseError(f"{path}.{key}", "expected a string")
    return value


def _optional_str(obj: Mapping[str, Any], key: str, path: str) -> str | None:
    value = obj.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise DataSetParseError(f"{path}.{key}", "expected a string or null")
    return value or None


def _require_number(obj: Mapping[str, Any], key: str, path: str) -> float:
    value = obj.get(key)
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DataSetParseError(f"{path}.{key}", "expected a number")
    try:
        return float(value)
    except OverflowError as exc:
        raise DataSetParseError(f"{path}.{key}", "number is out of range") from exc


def _require_http_url(obj: Mapping[str, Any], key: str, path: str) -> str:
    value = _require_str(obj, key, path)
    try:
        scheme = urlsplit(value).scheme.lower()
    except ValueError as exc:
        raise DataSetParseError(f"{path}.{key}", "malformed URL") from exc
    if scheme not in HTTP_SCHEMES:
        raise DataSetParseError(f"{path}.{key}", "expected an http(s) URL")
    return value
