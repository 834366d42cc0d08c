"""Chart.js backend for trend graphs.

Chart.js draws the graph in the browser, so Python callbacks cannot be sent
as-is. The backend evaluates the tooltip and click callbacks for every point
ahead of time and ships the results next to the Chart.js configuration; the
page script only looks them up by point index.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from django.template.loader import render_to_string
from django.utils.safestring import SafeString

from .interaction import ActiveElement, RecordingNavigator
from .render import GraphConfig

DEFAULT_TEMPLATE = "reports/graph.html"


def materialize(config: GraphConfig) -> dict[str, Any]:
    """Return a JSON-compatible payload for a GraphConfig.

    Args:
        config: Graph configuration produced by GraphRenderer.

    Returns:
        Dict with the chart id, height, Chart.js config, per-point tooltip
        text, per-point click targets and the hover cursor styles.
    """

    values = config.data["datasets"][0]["data"] if config.data["datasets"] else []
    return {
        "id": config.chart_id,
        "height": config.height,
        "chart": config.as_chartjs(),
        "tooltips": {
            "afterTitle": [config.tooltip.after_title(idx) for idx in range(len(values))],
            "label": [config.tooltip.label(value, idx) for idx, value in enumerate(values)],
        },
        "clickTargets": [_click_target(config, idx) for idx in range(len(values))],
        "cursor": {
            "active": config.interaction.on_hover([ActiveElement(index=0)]),
            "idle": config.interaction.on_hover([]),
        },
    }


def _click_target(config: GraphConfig, index: int) -> dict[str, str] | None:
    recorder = RecordingNavigator()
    replace(config.interaction, navigator=recorder).on_click([ActiveElement(index=index)])
    if not recorder.requests:
        return None
    request = recorder.requests[0]
    return {"url": request.url, "target": request.target}


@dataclass(frozen=True, slots=True)
class ChartJsBackend:
    """Render graphs as a canvas plus a Chart.js bootstrap script.

    Args:
        chartjs_url: Script URL for Chart.js 2.x.
        template_name: Django template used for the artifact.
    """

    chartjs_url: str
    template_name: str = DEFAULT_TEMPLATE

    def mount(self, config: GraphConfig) -> SafeString:
        """Render `config` into an HTML fragment.

        Template errors propagate to the caller.
        """

        return render_to_string(
            self.template_name,
            {
                "chart_id": config.chart_id,
                "height": config.height,
                "payload": materialize(config),
                "payload_id": f"{config.chart_id}-payload",
                "chartjs_url": self.chartjs_url,
            },
        )
