"""Pointer interaction for trend graphs.

Clicking a point opens the commit it belongs to. Navigation is a host effect,
so it goes through a `NavigationPort` that can be swapped out for recording.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Literal, Protocol

from benchmarks.dto import DataSet, lookup_entry

CursorStyle = Literal["pointer", "default"]

NEW_BROWSING_CONTEXT = "_blank"


@dataclass(frozen=True, slots=True)
class ActiveElement:
    """A chart element under the pointer, identified by its data index."""

    index: int


@dataclass(frozen=True, slots=True)
class NavigationRequest:
    """A request to open `url` in the browsing context named by `target`."""

    url: str
    target: str = NEW_BROWSING_CONTEXT


class NavigationPort(Protocol):
    """Host capability that opens URLs."""

    def open(self, url: str, *, target: str) -> None:
        """Open `url` in the browsing context named by `target`."""


@dataclass(slots=True)
class RecordingNavigator:
    """NavigationPort that records requests instead of performing them."""

    requests: list[NavigationRequest] = field(default_factory=list)

    def open(self, url: str, *, target: str) -> None:
        self.requests.append(NavigationRequest(url=url, target=target))


@dataclass(frozen=True, slots=True)
class InteractionHandler:
    """React to click and hover events on a trend graph.

    Args:
        dataset: Dataset the chart points were projected from.
        navigator: Port used to open commit URLs.
    """

    dataset: DataSet
    navigator: NavigationPort

    def on_click(self, active_elements: Sequence[ActiveElement]) -> None:
        """Open the commit of the first clicked point in a new browsing context.

        Nothing happens when no element is under the pointer or when the
        element's index no longer resolves to an entry.
        """

        if not active_elements:
            return
        entry = lookup_entry(self.dataset, active_elements[0].index)
        if entry is None:
            return
        self.navigator.open(entry.commit.url, target=NEW_BROWSING_CONTEXT)

    def on_hover(self, active_elements: Sequence[ActiveElement]) -> CursorStyle:
        """Return the cursor style for the elements under the pointer."""

        return "pointer" if active_elements else "default"
