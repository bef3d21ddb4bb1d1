# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""CSV rendering of a metrics report."""

import logging

from cmr.model import MetricRecord, MetricsReport
from cmr.renderer import METRIC_COLUMNS

logger = logging.getLogger(__name__)


def escape_csv_field(value: str) -> str:
    """Quote a free-text field, doubling embedded quotes."""
    return '"' + value.replace('"', '""') + '"'


class CsvRenderer:
    """Render a report as consecutive delimited sections."""

    def __init__(self, delimiter: str = ",") -> None:
        self._delimiter = delimiter

    def render(self, report: MetricsReport) -> str:
        """Render assembly, assembly metric, type and member sections.

        Args:
            report: Extracted report.

        Returns:
            CSV text; names are quoted, numbers are emitted raw.
        """
        lines: list[str] = []
        lines.append(self._row("Section", "Assembly", "Version"))
        lines.append(
            self._row(
                "Assembly Info",
                escape_csv_field(report.assembly.name),
                report.assembly.version,
            )
        )

        lines.append(self._row("Section", "Metric Name", "Value"))
        for metric in report.assembly_metrics:
            lines.append(
                self._row(
                    "Assembly Metrics", escape_csv_field(metric.name), str(metric.value)
                )
            )

        lines.append(
            self._row("Section", "Type", *(title for _, title in METRIC_COLUMNS))
        )
        for record in report.types:
            lines.append(
                self._row(
                    "Type Metrics",
                    escape_csv_field(record.full_name),
                    *self._metric_values(record),
                )
            )

        lines.append(
            self._row(
                "Section",
                "Member",
                "Kind",
                "Container",
                *(title for _, title in METRIC_COLUMNS),
            )
        )
        for record in report.members:
            lines.append(
                self._row(
                    "Member Metrics",
                    escape_csv_field(record.name),
                    str(record.member_kind),
                    escape_csv_field(record.namespace_or_container),
                    *self._metric_values(record),
                )
            )

        logger.debug(f"CSV rendered (rows={len(lines)})")
        return "".join(f"{line}\n" for line in lines)

    def _row(self, *fields: str) -> str:
        return self._delimiter.join(fields)

    def _metric_values(self, record: MetricRecord) -> list[str]:
        return [str(record.metric(name)) for name, _ in METRIC_COLUMNS]
