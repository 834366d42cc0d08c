"""Trend graph rendering for a single (platform, benchmark) pair.

`GraphRenderer` composes color resolution, dataset projection, tooltip
formatting and interaction handling into one declarative `GraphConfig` that is
handed to a chart backend.
"""

from .render import GraphConfig, GraphRenderer, RenderedGraph

__all__ = ["GraphConfig", "GraphRenderer", "RenderedGraph"]
