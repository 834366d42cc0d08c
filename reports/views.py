"""Views for benchmark trend graphs."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from django.conf import settings
from django.http import Http404, HttpRequest, HttpResponse, JsonResponse
from django.shortcuts import render
from django.views.decorators.csrf import csrf_exempt

from benchmarks.dto import DataSet
from benchmarks.parsing import DataSetParseError, parse_dataset
from reports.charting.backend import ChartJsBackend, materialize
from reports.charting.interaction import RecordingNavigator
from reports.charting.render import GraphRenderer
from reports.datasets import DataSetNotFound, load_dataset

logger = logging.getLogger(__name__)

EMPTY_STATE = "No results have been recorded for this benchmark yet."


def _renderer() -> GraphRenderer:
    # Per-request recorder; the browser performs real navigation.
    return GraphRenderer(
        backend=ChartJsBackend(chartjs_url=settings.BENCHMARK_CHARTJS_URL),
        navigator=RecordingNavigator(),
    )


def _stored_dataset(platform_name: str, bench_name: str) -> DataSet:
    """Load a stored dataset, translating a missing file into a 404."""

    try:
        return load_dataset(platform_name, bench_name, root=Path(settings.BENCHMARK_DATASETS_DIR))
    except DataSetNotFound as exc:
        raise Http404(str(exc)) from exc


def graph_page(request: HttpRequest, platform_name: str, bench_name: str) -> HttpResponse:
    """Render the trend graph page for a stored (platform, benchmark) dataset."""

    try:
        dataset = _stored_dataset(platform_name, bench_name)
    except DataSetParseError as exc:
        logger.warning("Rejected stored dataset %s/%s: %s", platform_name, bench_name, exc)
        return HttpResponse(f"Invalid dataset: {exc}", status=400, content_type="text/plain")

    graph = _renderer().render(platform_name, bench_name, dataset)
    return render(
        request,
        "reports/graph_page.html",
        {
            "platform_name": platform_name,
            "bench_name": bench_name,
            "graph": graph,
            "chartjs_url": settings.BENCHMARK_CHARTJS_URL,
            "empty_state": EMPTY_STATE if not dataset else None,
        },
    )


def graph_api(request: HttpRequest, platform_name: str, bench_name: str) -> JsonResponse:
    """Return the materialized chart payload for a stored dataset."""

    try:
        dataset = _stored_dataset(platform_name, bench_name)
    except DataSetParseError as exc:
        logger.warning("Rejected stored dataset %s/%s: %s", platform_name, bench_name, exc)
        return JsonResponse({"ok": False, "error": str(exc)}, status=400)

    config = _renderer().build_config(platform_name, bench_name, dataset)
    return JsonResponse(materialize(config))


@csrf_exempt
def render_graph_api(request: HttpRequest) -> JsonResponse:
    """Return the materialized chart payload for an inline dataset.

    The request body is `{"platformName": ..., "benchName": ..., "dataset": [...]}`.
    """

    if request.method != "POST":
        return JsonResponse({"ok": False, "error": "POST required."}, status=405)

    try:
        body = json.loads(request.body)
    except ValueError:
        return JsonResponse({"ok": False, "error": "Request body must be JSON."}, status=400)
    if not isinstance(body, dict):
        return JsonResponse({"ok": False, "error": "Request body must be a JSON object."}, status=400)

    platform_name = body.get("platformName")
    bench_name = body.get("benchName")
    if not isinstance(platform_name, str) or not isinstance(bench_name, str):
        return JsonResponse({"ok": False, "error": "platformName and benchName must be strings."}, status=400)

    try:
        dataset = parse_dataset(body.get("dataset"))
    except DataSetParseError as exc:
        logger.warning("Rejected inline dataset for %s-%s: %s", platform_name, bench_name, exc)
        return JsonResponse({"ok": False, "error": str(exc)}, status=400)

    config = _renderer().build_config(platform_name, bench_name, dataset)
    return JsonResponse(materialize(config))
