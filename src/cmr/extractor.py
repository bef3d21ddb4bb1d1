# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Extraction of metric records from a code metrics XML report."""

import logging
import re
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import cast

from cmr.errors import (
    MalformedMetricError,
    MalformedXmlError,
    MissingAttributeError,
    MissingSectionError,
)
from cmr.model import (
    MEMBER_KINDS,
    AssemblyInfo,
    AssemblyMetric,
    MemberKind,
    MetricRecord,
    MetricsReport,
)

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"^\s*\+?[0-9]+\s*$")
_VERSION_PREFIX = "Version="

# XML metric name -> MetricRecord field.
_RECORD_FIELDS: dict[str, str] = {
    "MaintainabilityIndex": "maintainability_index",
    "CyclomaticComplexity": "cyclomatic_complexity",
    "SourceLines": "source_lines",
    "ExecutableLines": "executable_lines",
    "ClassCoupling": "class_coupling",
}


def load_document(xml_path: Path) -> ET.Element:
    """Read and parse a report document.

    Args:
        xml_path: Path to the XML report.

    Returns:
        Root element of the parsed document.

    Raises:
        FileNotFoundError: If ``xml_path`` does not exist.
        MalformedXmlError: If the document is not well-formed XML.
    """
    xml_path = xml_path.resolve()
    if not xml_path.is_file():
        raise FileNotFoundError(str(xml_path))

    try:
        return ET.fromstring(xml_path.read_bytes())
    except ET.ParseError as exc:
        raise MalformedXmlError(f"Cannot parse {xml_path}: {exc}") from exc


def require_attribute(element: ET.Element, name: str) -> str:
    """Return a required attribute value.

    Raises:
        MissingAttributeError: If the attribute is absent.
    """
    value = element.get(name)
    if value is None:
        raise MissingAttributeError(
            f"Element <{element.tag}> is missing attribute '{name}'"
        )
    return value


def require_child(element: ET.Element, tag: str) -> ET.Element:
    """Return a required direct child element.

    Raises:
        MissingSectionError: If no direct child named ``tag`` exists.
    """
    child = element.find(tag)
    if child is None:
        raise MissingSectionError(f"Element <{element.tag}> has no <{tag}> child")
    return child


def parse_metric_value(metric: ET.Element) -> tuple[str, int]:
    """Read the name and integer value of one metric element.

    Args:
        metric: Element carrying ``Name`` and ``Value`` attributes.

    Returns:
        Metric name and parsed value.

    Raises:
        MissingAttributeError: If ``Name`` or ``Value`` is absent.
        MalformedMetricError: If ``Value`` is not a non-negative integer.
    """
    name = require_attribute(metric, "Name")
    raw_value = require_attribute(metric, "Value")
    if not _INTEGER_RE.match(raw_value):
        raise MalformedMetricError(
            f"Metric '{name}' has non-integer value '{raw_value}'"
        )
    return name, int(raw_value)


def parse_assembly_name(raw_name: str) -> AssemblyInfo:
    """Split a ``"Name, Version=x.y.z, ..."`` attribute into name and version.

    Raises:
        MissingAttributeError: If the version component is absent.
    """
    parts = raw_name.split(", ")
    if len(parts) < 2 or not parts[1].startswith(_VERSION_PREFIX):
        raise MissingAttributeError(
            f"Assembly name '{raw_name}' has no '{_VERSION_PREFIX}' component"
        )
    version = parts[1][len(_VERSION_PREFIX) :].split(",")[0]
    return AssemblyInfo(name=parts[0], version=version)


class ReportExtractor:
    """Walk a parsed report and build metric records in document order."""

    def extract(self, root: ET.Element) -> MetricsReport:
        """Extract assembly info, assembly metrics, types and members.

        Only the first ``Assembly`` element of the document is processed.

        Args:
            root: Root element of the parsed report.

        Returns:
            The extracted report.

        Raises:
            MissingSectionError: If a required element is absent.
            MissingAttributeError: If a required attribute is absent.
            MalformedMetricError: If a metric value is not an integer.
        """
        assembly_element = next(root.iter("Assembly"), None)
        if assembly_element is None:
            raise MissingSectionError("Report has no <Assembly> element")

        assembly = parse_assembly_name(require_attribute(assembly_element, "Name"))
        assembly_metrics = self._extract_assembly_metrics(assembly_element)

        types: list[MetricRecord] = []
        members: list[MetricRecord] = []
        namespaces = require_child(assembly_element, "Namespaces")
        for namespace_element in namespaces.findall("Namespace"):
            namespace = require_attribute(namespace_element, "Name")
            for type_element in namespace_element.findall("Types/NamedType"):
                record = self._extract_type(type_element, namespace)
                types.append(record)
                members.extend(self._extract_members(type_element, record.full_name))

        logger.info(
            f"Report extracted (assembly={assembly.name} version={assembly.version} "
            f"assembly_metrics={len(assembly_metrics)} types={len(types)} members={len(members)})"
        )
        return MetricsReport(
            assembly=assembly,
            assembly_metrics=tuple(assembly_metrics),
            types=tuple(types),
            members=tuple(members),
        )

    def _extract_assembly_metrics(
        self, assembly_element: ET.Element
    ) -> list[AssemblyMetric]:
        """Keep every assembly-level metric, recognized or not."""
        metrics_element = require_child(assembly_element, "Metrics")
        metrics: list[AssemblyMetric] = []
        for metric in metrics_element.iter():
            if metric is metrics_element:
                continue
            name, value = parse_metric_value(metric)
            metrics.append(AssemblyMetric(name=name, value=value))
        return metrics

    def _extract_type(self, type_element: ET.Element, namespace: str) -> MetricRecord:
        values = self._extract_record_metrics(require_child(type_element, "Metrics"))
        return MetricRecord(
            name=require_attribute(type_element, "Name"),
            namespace_or_container=namespace,
            **values,
        )

    def _extract_members(
        self, type_element: ET.Element, container: str
    ) -> list[MetricRecord]:
        members_element = type_element.find("Members")
        if members_element is None:
            return []

        members: list[MetricRecord] = []
        for member_element in members_element:
            name = member_element.get("Name", "")
            if member_element.tag not in MEMBER_KINDS or not name:
                logger.debug(
                    f"Skipping member element (container={container} tag={member_element.tag} name={name!r})"
                )
                continue
            metrics_element = member_element.find("Metrics")
            values = (
                self._extract_record_metrics(metrics_element)
                if metrics_element is not None
                else {}
            )
            members.append(
                MetricRecord(
                    name=name,
                    namespace_or_container=container,
                    member_kind=cast(MemberKind, member_element.tag),
                    **values,
                )
            )
        return members

    def _extract_record_metrics(self, metrics_element: ET.Element) -> dict[str, int]:
        """Collect the five recognized metrics; other names are ignored.

        Metrics absent from the element keep their default of 0.
        """
        values: dict[str, int] = {}
        for metric in metrics_element.findall("Metric"):
            name, value = parse_metric_value(metric)
            field_name = _RECORD_FIELDS.get(name)
            if field_name is not None:
                values[field_name] = value
        return values
