"""Compose a trend graph configuration and hand it to a chart backend."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Protocol, TypedDict

from benchmarks.dto import DataSet

from .interaction import InteractionHandler, NavigationPort
from .projector import DatasetProjector, ProjectedSeries
from .tooltips import TooltipFormatter

logger = logging.getLogger(__name__)

GRAPH_HEIGHT = 75
ASPECT_RATIO = 4
X_AXIS_LABEL = "commit"
TOOLTIP_BACKGROUND = "rgba(0, 0, 0, 1)"


class ChartDataset(TypedDict):
    """A Chart.js dataset payload for a single trend series."""

    label: str
    data: list[float]
    borderColor: str
    borderWidth: int
    fill: bool
    backgroundColor: str


class ChartData(TypedDict):
    """Chart.js data payload (labels + datasets)."""

    labels: list[str]
    datasets: list[ChartDataset]


@dataclass(frozen=True, slots=True)
class GraphConfig:
    """Declarative configuration for one trend graph.

    `data` and `options` are JSON-compatible Chart.js structures. The click,
    hover and tooltip hooks are carried as the `interaction` and `tooltip`
    components; backends decide how to deliver them to the client.

    Attributes:
        chart_id: Artifact key, "<platform>-<bench>".
        height: Canvas height.
        chart_type: Chart.js chart type.
        data: Labels and series data.
        options: Axis, animation and tooltip options.
        tooltip: Tooltip callbacks bound to the dataset.
        interaction: Click and hover callbacks bound to the dataset.
    """

    chart_id: str
    height: int
    chart_type: str
    data: ChartData
    options: dict[str, Any]
    tooltip: TooltipFormatter
    interaction: InteractionHandler

    def as_chartjs(self) -> dict[str, Any]:
        """Return the JSON-compatible part of the configuration."""

        return {"type": self.chart_type, "data": self.data, "options": self.options}


@dataclass(frozen=True, slots=True)
class RenderedGraph:
    """A graph configuration together with the artifact a backend produced."""

    config: GraphConfig
    artifact: str


class ChartBackend(Protocol):
    """Charting capability that turns a GraphConfig into an interactive visual."""

    def mount(self, config: GraphConfig) -> str:
        """Render `config` and return the resulting artifact."""


def chart_id_for(platform_name: str, bench_name: str) -> str:
    """Return the artifact key for a (platform, benchmark) pair."""

    return f"{platform_name}-{bench_name}"


@dataclass(frozen=True, slots=True)
class GraphRenderer:
    """Render a trend graph for one (platform, benchmark) pair.

    Args:
        backend: Charting capability the configuration is handed to.
        navigator: Port used by click handling to open commit URLs.
        projector: Dataset projector (owns the color table).
    """

    backend: ChartBackend
    navigator: NavigationPort
    projector: DatasetProjector = field(default_factory=DatasetProjector)

    def build_config(self, platform_name: str, bench_name: str, dataset: DataSet) -> GraphConfig:
        """Build the graph configuration without mounting it.

        Args:
            platform_name: Platform the benchmark ran on.
            bench_name: Benchmark name, used as the series label.
            dataset: Commit-ordered entries, oldest first. May be empty.

        Returns:
            A GraphConfig that depends only on the three inputs.
        """

        series = self.projector.project(dataset)
        return GraphConfig(
            chart_id=chart_id_for(platform_name, bench_name),
            height=GRAPH_HEIGHT,
            chart_type="line",
            data=_chart_data(bench_name, series),
            options=_chart_options(series),
            tooltip=TooltipFormatter(dataset=dataset),
            interaction=InteractionHandler(dataset=dataset, navigator=self.navigator),
        )

    def render(self, platform_name: str, bench_name: str, dataset: DataSet) -> RenderedGraph:
        """Build the configuration and mount it on the backend.

        Backend failures propagate to the caller.
        """

        config = self.build_config(platform_name, bench_name, dataset)
        logger.debug("Rendering graph %s with %d entries", config.chart_id, len(dataset))
        return RenderedGraph(config=config, artifact=self.backend.mount(config))


def _chart_data(bench_name: str, series: ProjectedSeries) -> ChartData:
    return {
        "labels": list(series.labels),
        "datasets": [
            {
                "label": bench_name,
                "data": list(series.values),
                "borderColor": series.series_color,
                "borderWidth": 1,
                "fill": True,
                "backgroundColor": series.fill_color,
            }
        ],
    }


def _chart_options(series: ProjectedSeries) -> dict[str, Any]:
    # Chart.js 2 option layout; all animation is off.
    return {
        "animation": {"duration": 0},
        "hover": {"animationDuration": 0},
        "responsiveAnimationDuration": 0,
        "aspectRatio": ASPECT_RATIO,
        "scales": {
            "xAxes": [
                {"scaleLabel": {"display": True, "labelString": X_AXIS_LABEL}},
            ],
            "yAxes": [
                {
                    "scaleLabel": {"display": True, "labelString": series.y_axis_unit},
                    "ticks": {"beginAtZero": True},
                }
            ],
        },
        "tooltips": {"backgroundColor": TOOLTIP_BACKGROUND},
    }
