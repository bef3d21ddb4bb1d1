# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Severity classification of metric values."""

from typing import Literal

from cmr.model import MetricName

Severity = Literal["Good", "Warn", "Bad"]

SEVERITY_COLORS: dict[Severity, str] = {
    "Good": "#d1e7dd00",
    "Warn": "#415f01",
    "Bad": "#ca3505",
}

# Lower bounds of the warn and bad bands for metrics where lower is better.
_LOWER_IS_BETTER: dict[str, tuple[int, int]] = {
    "CyclomaticComplexity": (50, 100),
    "SourceLines": (500, 1000),
    "ExecutableLines": (500, 1000),
    "ClassCoupling": (30, 50),
}

_MAINTAINABILITY_GOOD = 75
_MAINTAINABILITY_WARN = 60


def classify(metric_kind: MetricName, value: int) -> Severity:
    """Map a metric value to its severity band.

    Args:
        metric_kind: One of the five recognized metric names.
        value: Metric value.

    Returns:
        ``Good``, ``Warn`` or ``Bad``.

    Raises:
        ValueError: If ``metric_kind`` is not a recognized metric name.
    """
    if metric_kind == "MaintainabilityIndex":
        if value >= _MAINTAINABILITY_GOOD:
            return "Good"
        if value >= _MAINTAINABILITY_WARN:
            return "Warn"
        return "Bad"

    bounds = _LOWER_IS_BETTER.get(metric_kind)
    if bounds is None:
        raise ValueError(f"Unsupported metric kind: {metric_kind}")
    warn_from, bad_from = bounds
    if value >= bad_from:
        return "Bad"
    if value >= warn_from:
        return "Warn"
    return "Good"


def severity_color(metric_kind: MetricName, value: int) -> str:
    """Return the colour token for the band of a metric value."""
    return SEVERITY_COLORS[classify(metric_kind, value)]
