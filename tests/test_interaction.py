"""Unit tests for click and hover handling."""

from __future__ import annotations

import pytest

from reports.charting.interaction import (
    ActiveElement,
    InteractionHandler,
    NavigationRequest,
    RecordingNavigator,
)

pytestmark = pytest.mark.unit


def test_click_without_elements_does_not_navigate(dataset) -> None:
    """Clicking empty chart space is a no-op."""

    navigator = RecordingNavigator()
    InteractionHandler(dataset=dataset, navigator=navigator).on_click([])

    assert navigator.requests == []


def test_click_opens_commit_in_new_context(dataset) -> None:
    """Clicking point 2 opens that commit's URL exactly once."""

    navigator = RecordingNavigator()
    InteractionHandler(dataset=dataset, navigator=navigator).on_click([ActiveElement(index=2)])

    assert navigator.requests == [NavigationRequest(url=dataset[2].commit.url, target="_blank")]


def test_click_uses_first_active_element(dataset) -> None:
    """Only the first element under the pointer is navigated to."""

    navigator = RecordingNavigator()
    handler = InteractionHandler(dataset=dataset, navigator=navigator)
    handler.on_click([ActiveElement(index=0), ActiveElement(index=1)])

    assert [request.url for request in navigator.requests] == [dataset[0].commit.url]


def test_click_with_stale_index_does_not_navigate(dataset) -> None:
    """An index past the end of the dataset is ignored."""

    navigator = RecordingNavigator()
    InteractionHandler(dataset=dataset, navigator=navigator).on_click([ActiveElement(index=len(dataset))])

    assert navigator.requests == []


def test_hover_cursor(dataset) -> None:
    """The cursor signals clickability only over a chart element."""

    handler = InteractionHandler(dataset=dataset, navigator=RecordingNavigator())

    assert handler.on_hover([ActiveElement(index=0)]) == "pointer"
    assert handler.on_hover([]) == "default"
