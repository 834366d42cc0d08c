"""App configuration for the reports Django app."""

from __future__ import annotations

from django.apps import AppConfig


class ReportsConfig(AppConfig):
    """Configuration for the `reports` app."""

    name = "reports"
