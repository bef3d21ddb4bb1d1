# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Errors raised while loading and extracting a metrics report."""


class ReportError(RuntimeError):
    """Represent a fatal report processing failure."""


class MalformedXmlError(ReportError):
    """Represent a report document that cannot be parsed as XML."""


class MissingSectionError(ReportError):
    """Represent a required element missing from the report."""


class MissingAttributeError(ReportError):
    """Represent a required attribute missing from an element."""


class MalformedMetricError(ReportError):
    """Represent a metric value that is not a non-negative base-10 integer."""
