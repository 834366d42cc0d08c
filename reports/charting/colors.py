"""Display colors for benchmarking tools."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from benchmarks.dto import DataSet, ToolIdentifier

DEFAULT_COLOR = "#333333"

TOOL_COLORS: Mapping[str, str] = MappingProxyType(
    {
        ToolIdentifier.cargo: "#020077",
        ToolIdentifier.go: "#00add8",
        ToolIdentifier.benchmarkjs: "#f1e05a",
        ToolIdentifier.benchmarkluau: "#000080",
        ToolIdentifier.pytest: "#3572a5",
        ToolIdentifier.googlecpp: "#f34b7d",
        ToolIdentifier.catch2: "#f34b7d",
        ToolIdentifier.julia: "#a270ba",
        ToolIdentifier.jmh: "#b07219",
        ToolIdentifier.benchmarkdotnet: "#178600",
        ToolIdentifier.custom_bigger_is_better: "#38ff38",
        ToolIdentifier.custom_smaller_is_better: "#ff3838",
        ToolIdentifier.fallback: DEFAULT_COLOR,
    }
)


@dataclass(frozen=True, slots=True)
class ColorResolver:
    """Resolve a tool identifier to a fixed display color.

    Args:
        colors: Immutable tool-to-color table.
        default: Color used for unknown tools and empty datasets.
    """

    colors: Mapping[str, str] = field(default_factory=lambda: TOOL_COLORS)
    default: str = DEFAULT_COLOR

    def resolve(self, tool: str | None) -> str:
        """Return the color for `tool`, or the default color when unknown or None."""

        if tool is None:
            return self.default
        return self.colors.get(tool, self.default)

    def for_dataset(self, dataset: DataSet) -> str:
        """Return the color for a dataset, keyed by its first entry's tool."""

        return self.resolve(dataset[0].tool if dataset else None)
