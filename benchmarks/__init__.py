"""Pure benchmark data package for benchReports.

This package contains the dataset DTOs and deterministic helpers that operate
on in-memory inputs. It must not import Django or perform any I/O.
"""

from .dto import BenchMeasurement, CommitInfo, Committer, DataSet, DataSetEntry, ToolIdentifier
from .parsing import DataSetParseError, parse_dataset

__all__ = [
    "BenchMeasurement",
    "CommitInfo",
    "Committer",
    "DataSet",
    "DataSetEntry",
    "DataSetParseError",
    "ToolIdentifier",
    "parse_dataset",
]
