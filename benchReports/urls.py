"""Root URL configuration for benchReports."""

from __future__ import annotations

from django.urls import include, path

urlpatterns = [
    path("", include("reports.urls")),
]
