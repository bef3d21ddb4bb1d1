# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""HTML rendering of a metrics report with severity colouring."""

import logging

from cmr.model import MetricRecord, MetricsReport
from cmr.renderer import METRIC_COLUMNS
from cmr.severity import severity_color

logger = logging.getLogger(__name__)

CONTENT_PLACEHOLDER = "{{CONTENT}}"

HTML_SHELL = """<!doctype html>
<html lang='en'>
  <head>
    <meta charset='utf-8'>
    <meta name='viewport' content='width=device-width, initial-scale=1'>
    <link rel='stylesheet' href='https://unpkg.com/@picocss/pico@1.*/css/pico.min.css'>
    <title>Code Metrics Report</title>
  </head>
  <body>
    <main class='container'>
      {{CONTENT}}
    </main>
  </body>
</html>"""


def escape_html_text(value: str) -> str:
    """Escape angle brackets and turn newlines into line breaks."""
    return (
        value.replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace("\r", "")
        .replace("\n", "<br>")
    )


class HtmlRenderer:
    """Render a report as a single HTML document."""

    def render(self, report: MetricsReport) -> str:
        """Render the report sections into the document shell.

        Args:
            report: Extracted report.

        Returns:
            Complete HTML document text.
        """
        lines: list[str] = []
        self._add_assembly(lines, report)
        self._add_table(
            lines,
            title="Metrics by Type",
            name_headers=("Type",),
            rows=[((record.full_name,), record) for record in report.types],
        )
        self._add_table(
            lines,
            title="Metrics by Member",
            name_headers=("Member", "Kind", "Container"),
            rows=[
                (
                    (record.name, str(record.member_kind), record.namespace_or_container),
                    record,
                )
                for record in report.members
            ],
        )
        logger.debug(f"HTML rendered (lines={len(lines)})")
        content = "".join(f"{line}\n" for line in lines)
        return HTML_SHELL.replace(CONTENT_PLACEHOLDER, content)

    def _add_assembly(self, lines: list[str], report: MetricsReport) -> None:
        assembly = report.assembly
        lines.append("<h3>Assembly Metrics</h3>")
        lines.append(
            f"<p>Assembly: <code>{escape_html_text(assembly.name)} "
            f"{escape_html_text(assembly.version)}</code></p>"
        )
        for metric in report.assembly_metrics:
            lines.append(
                f"<p>{escape_html_text(metric.name)}: <code>{metric.value:,}</code></p>"
            )

    def _add_table(
        self,
        lines: list[str],
        title: str,
        name_headers: tuple[str, ...],
        rows: list[tuple[tuple[str, ...], MetricRecord]],
    ) -> None:
        lines.append(f"<h3>{title}</h3>")
        lines.append("<table>")
        lines.append("<tr>")
        for header in (*name_headers, *(column for _, column in METRIC_COLUMNS)):
            lines.append(f"<th><b>{header}</b></th>")
        lines.append("</tr>")
        for names, record in rows:
            lines.append("<tr>")
            for name in names:
                lines.append(f"<td><code>{escape_html_text(name)}</code></td>")
            for metric_name, _ in METRIC_COLUMNS:
                value = record.metric(metric_name)
                lines.append(
                    f"<td style='background-color: {severity_color(metric_name, value)};'>{value}</td>"
                )
            lines.append("</tr>")
        lines.append("</table>")
