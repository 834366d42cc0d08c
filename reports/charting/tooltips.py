"""Tooltip text for trend graph points."""

from __future__ import annotations

from dataclasses import dataclass

from benchmarks.dto import DataSet, lookup_entry
from benchmarks.text import ELLIPSIS, format_number, truncate

MESSAGE_MAX_LENGTH = 140


@dataclass(frozen=True, slots=True)
class TooltipFormatter:
    """Build hover text for points of a single dataset.

    Both callbacks are keyed by the chart point index and never raise for a
    stale index.
    """

    dataset: DataSet

    def after_title(self, index: int) -> str:
        """Return the commit detail block shown under the tooltip title.

        Args:
            index: Chart point index.

        Returns:
            The truncated commit message, timestamp and committer, or "" when
            the index does not resolve to an entry.
        """

        entry = lookup_entry(self.dataset, index)
        if entry is None:
            return ""
        commit = entry.commit
        message = truncate(commit.message, length=MESSAGE_MAX_LENGTH, omission=ELLIPSIS)
        return f"\n{message}\n\n{commit.timestamp} committed by @{commit.committer.username}\n"

    def label(self, value: float, index: int) -> str:
        """Return the primary tooltip line, e.g. "12.5 ns (±0.2)".

        Args:
            value: Point value as reported by the chart.
            index: Chart point index.

        Returns:
            The value with its unit and optional range. A stale index yields
            the bare value.
        """

        text = format_number(value)
        entry = lookup_entry(self.dataset, index)
        if entry is None:
            return text
        text += f" {entry.bench.unit}"
        if entry.bench.range:
            text += f" ({entry.bench.range})"
        return text
