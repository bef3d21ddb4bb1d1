# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Output renderers for the code metrics report."""

from cmr.renderers.csv import CsvRenderer
from cmr.renderers.html import HtmlRenderer

__all__ = ["CsvRenderer", "HtmlRenderer"]
