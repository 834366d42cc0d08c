"""URL configuration for reports views."""

from __future__ import annotations

from django.urls import path

from reports import views

app_name = "reports"

urlpatterns = [
    path("graphs/<str:platform_name>/<str:bench_name>/", views.graph_page, name="graph_page"),
    path("api/graphs/render/", views.render_graph_api, name="render_graph_api"),
    path("api/graphs/<str:platform_name>/<str:bench_name>/", views.graph_api, name="graph_api"),
]
