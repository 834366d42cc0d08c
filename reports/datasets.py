"""Read-only file store for per-benchmark datasets.

Datasets are laid out as `<root>/<platform>/<bench>.json`, each holding the
JSON array produced by the upstream collector.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from benchmarks.dto import DataSet
from benchmarks.parsing import DataSetParseError, parse_dataset

logger = logging.getLogger(__name__)


class DataSetNotFound(LookupError):
    """Raised when no dataset exists for a (platform, benchmark) pair."""

    def __init__(self, platform_name: str, bench_name: str) -> None:
        super().__init__(f"No dataset for {bench_name!r} on {platform_name!r}.")
        self.platform_name = platform_name
        self.bench_name = bench_name


def dataset_path(root: Path, platform_name: str, bench_name: str) -> Path:
    """Return the file path for a dataset, rejecting names that escape `root`.

    Raises:
        DataSetNotFound: When either name is empty, contains a NUL byte or is not a
            single path segment.
    """

    for name in (platform_name, bench_name):
        if not name or name in {".", ".."} or any(ch in name for ch in "/\\\x00"):
            raise DataSetNotFound(platform_name, bench_name)
    return root / platform_name / f"{bench_name}.json"


def load_dataset(platform_name: str, bench_name: str, *, root: Path) -> DataSet:
    """Load and parse the dataset for a (platform, benchmark) pair.

    Args:
        platform_name: Platform directory name.
        bench_name: Benchmark file stem.
        root: Dataset root directory.

    Returns:
        The parsed DataSet.

    Raises:
        DataSetNotFound: When the dataset file does not exist.
        DataSetParseError: When the file is not valid JSON or has the wrong shape.
    """

    path = dataset_path(root, platform_name, bench_name)
    try:
        raw = path.read_text(encoding="utf-8")
    except (FileNotFoundError, IsADirectoryError, NotADirectoryError) as exc:
        logger.info("Dataset file missing: %s", path)
        raise DataSetNotFound(platform_name, bench_name) from exc
    except UnicodeDecodeError as exc:
        raise DataSetParseError("dataset", "file is not valid UTF-8") from exc

    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise DataSetParseError("dataset", f"invalid JSON ({exc.msg})") from exc
    except ValueError as exc:
        raise DataSetParseError("dataset", f"invalid JSON ({exc})") from exc
    return parse_dataset(payload)
