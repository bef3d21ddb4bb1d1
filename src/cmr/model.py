# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Domain models for code metrics reports."""

from dataclasses import dataclass
from typing import Literal

MemberKind = Literal["Method", "Field", "Property"]
MetricName = Literal[
    "MaintainabilityIndex",
    "CyclomaticComplexity",
    "SourceLines",
    "ExecutableLines",
    "ClassCoupling",
]

MEMBER_KINDS: tuple[MemberKind, ...] = ("Method", "Field", "Property")


@dataclass(frozen=True)
class MetricRecord:
    """Represent one measured assembly, type or member.

    Attributes:
        name: Short identifier of the measured unit.
        namespace_or_container: Namespace for types, owning type full name for
            members, empty for the assembly.
        member_kind: Member category; ``None`` for assembly and type records.
        maintainability_index: Maintainability index (higher is better).
        cyclomatic_complexity: Cyclomatic complexity.
        source_lines: Lines of source code.
        executable_lines: Lines of executable code.
        class_coupling: Number of coupled classes.
    """

    name: str
    namespace_or_container: str
    member_kind: MemberKind | None = None
    maintainability_index: int = 0
    cyclomatic_complexity: int = 0
    source_lines: int = 0
    executable_lines: int = 0
    class_coupling: int = 0

    @property
    def full_name(self) -> str:
        """Return the fully qualified name of the unit."""
        if not self.namespace_or_container:
            return self.name
        return f"{self.namespace_or_container}.{self.name}"

    def metric(self, name: MetricName) -> int:
        """Return the value stored for one of the recognized metrics.

        Raises:
            KeyError: If ``name`` is not a recognized metric name.
        """
        return {
            "MaintainabilityIndex": self.maintainability_index,
            "CyclomaticComplexity": self.cyclomatic_complexity,
            "SourceLines": self.source_lines,
            "ExecutableLines": self.executable_lines,
            "ClassCoupling": self.class_coupling,
        }[name]


@dataclass(frozen=True)
class AssemblyInfo:
    """Represent the assembly display name and version."""

    name: str
    version: str


@dataclass(frozen=True)
class AssemblyMetric:
    """Represent one assembly-level metric as reported, name and value."""

    name: str
    value: int


@dataclass(frozen=True)
class MetricsReport:
    """Bundle every value extracted from one report document.

    Attributes:
        assembly: Assembly name and version.
        assembly_metrics: Assembly-level metrics in document order.
        types: Type records in document order.
        members: Member records in document order.
    """

    assembly: AssemblyInfo
    assembly_metrics: tuple[AssemblyMetric, ...]
    types: tuple[MetricRecord, ...]
    members: tuple[MetricRecord, ...]
