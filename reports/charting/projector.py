"""Project a commit-ordered dataset into chart series data."""

from __future__ import annotations

from dataclasses import dataclass, field

from benchmarks.dto import DataSet

from .colors import ColorResolver

SHORT_HASH_LENGTH = 7
FILL_ALPHA = "50"


@dataclass(frozen=True, slots=True)
class ProjectedSeries:
    """Chart-ready series data derived from a dataset.

    Attributes:
        labels: Short commit hashes, one per entry, in dataset order.
        values: Measurement values aligned to `labels`.
        series_color: Line color resolved from the dataset's tool.
        fill_color: `series_color` with an alpha channel for the filled area.
        y_axis_unit: Unit of the first entry, or "" for an empty dataset.
    """

    labels: tuple[str, ...]
    values: tuple[float, ...]
    series_color: str
    fill_color: str
    y_axis_unit: str


@dataclass(frozen=True, slots=True)
class DatasetProjector:
    """Convert a DataSet into a ProjectedSeries.

    Homogeneity of tool and unit across entries is an upstream contract; only
    the first entry is inspected for both.
    """

    colors: ColorResolver = field(default_factory=ColorResolver)

    def project(self, dataset: DataSet) -> ProjectedSeries:
        """Project `dataset` into labels, values, colors and the y-axis unit.

        Args:
            dataset: Commit-ordered entries, oldest first. May be empty.

        Returns:
            ProjectedSeries aligned 1:1 with `dataset`.
        """

        series_color = self.colors.for_dataset(dataset)
        return ProjectedSeries(
            labels=tuple(entry.commit.id[:SHORT_HASH_LENGTH] for entry in dataset),
            values=tuple(entry.bench.value for entry in dataset),
            series_color=series_color,
            fill_color=f"{series_color}{FILL_ALPHA}",
            y_axis_unit=dataset[0].bench.unit if dataset else "",
        )
