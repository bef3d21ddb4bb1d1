# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Renderer interface for extracted metrics reports."""

from typing import Protocol

from cmr.model import MetricName, MetricsReport

# Column order shared by every renderer: (metric name, column title).
METRIC_COLUMNS: tuple[tuple[MetricName, str], ...] = (
    ("MaintainabilityIndex", "Maintainability"),
    ("CyclomaticComplexity", "Complexity"),
    ("ClassCoupling", "ClassCoupling"),
    ("SourceLines", "Lines of Code"),
    ("ExecutableLines", "Lines of Executable Code"),
)


class Renderer(Protocol):
    """Format-agnostic report rendering contract."""

    def render(self, report: MetricsReport) -> str:
        """Render a complete output document from an extracted report."""
