"""Analysis report: the analyzer's output contract."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from archconform.domain.exceptions.violation import ConformanceViolationError
from archconform.domain.model.enums import Severity, ViolationKind, ViolationScope

if TYPE_CHECKING:
    from collections.abc import Mapping

    from archconform.domain.model.violation import Violation


_KIND_METRIC_NAMES: dict[ViolationKind, str] = {
    ViolationKind.CYCLE: "Cycles",
    ViolationKind.UPWARD_DEPENDENCY: "UpwardDependencies",
    ViolationKind.DOWNWARD_DEPENDENCY: "DownwardDependencies",
    ViolationKind.PARENT_HAS_CODE: "ParentsWithCode",
}


@dataclass(frozen=True, slots=True)
class MetricKey:
    """One (kind, scope) count slot of the report.

    Attributes:
        scope: MODULE or PACKAGE
        kind: Violation kind
    """

    scope: ViolationScope
    kind: ViolationKind

    @property
    def name(self) -> str:
        """Stable camelCase metric name, e.g. "moduleCycles"."""
        return f"{self.scope.name.lower()}{_KIND_METRIC_NAMES[self.kind]}"

    def matches(self, violation: Violation) -> bool:
        """Check if violation is counted in this slot."""
        return violation.kind is self.kind and violation.scope is self.scope


ALL_METRICS: tuple[MetricKey, ...] = tuple(
    MetricKey(scope=scope, kind=kind) for scope in ViolationScope for kind in ViolationKind
)


@dataclass(frozen=True, slots=True)
class Report:
    """Immutable result snapshot of one analysis run.

    Zero-optimal: on a conformant graph every count is exactly 0.

    Invariants (FAIL-FIRST):
    - counts has one entry per MetricKey, all >= 0
    - counts[key] == number of violations matching key
    - violations are classified and unique

    Attributes:
        counts: MetricKey → count
        violations: Surviving violations in report order
        pattern_matches: Pattern name → violations it removed
    """

    counts: Mapping[MetricKey, int]
    violations: tuple[Violation, ...]
    pattern_matches: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if set(self.counts) != set(ALL_METRICS):
            raise ValueError("counts must have exactly one entry per (kind, scope)")
        for key, count in self.counts.items():
            if count < 0:
                raise ValueError(f"{key.name} must be >= 0, got {count}")
            actual = sum(1 for v in self.violations if key.matches(v))
            if actual != count:
                raise ValueError(f"{key.name} is {count} but {actual} violations match")
        if len(set(self.violations)) != len(self.violations):
            raise ValueError("violations must be unique")
        for violation in self.violations:
            if not violation.classified:
                raise ValueError(f"violation not classified: {violation}")
        for name, matched in self.pattern_matches.items():
            if matched < 0:
                raise ValueError(f"pattern_matches['{name}'] must be >= 0, got {matched}")

    @property
    def passed(self) -> bool:
        """True if graph is fully conformant."""
        return not self.violations

    @property
    def total(self) -> int:
        """Number of surviving violations."""
        return len(self.violations)

    def count(self, kind: ViolationKind, scope: ViolationScope) -> int:
        """Count for one (kind, scope) pair."""
        return self.counts[MetricKey(scope=scope, kind=kind)]

    def count_kind(self, kind: ViolationKind) -> int:
        """Count for a kind across both scopes."""
        return sum(self.count(kind, scope) for scope in ViolationScope)

    def count_severity(self, severity: Severity) -> int:
        """Number of violations with severity."""
        return sum(1 for v in self.violations if v.severity is severity)

    @property
    def metrics(self) -> dict[str, int]:
        """Metric name → count, in stable order."""
        return {key.name: self.counts[key] for key in ALL_METRICS}

    def raise_for_violations(self) -> None:
        """Raise if any violation survived.

        Raises:
            ConformanceViolationError: If report did not pass
        """
        if self.violations:
            raise ConformanceViolationError(self.violations)

    def to_dict(self) -> dict[str, object]:
        """Convert to JSON-serializable dict (output contract)."""
        return {
            "passed": self.passed,
            "total": self.total,
            "metrics": self.metrics,
            "violations": [
                {
                    "kind": v.kind.name,
                    "scope": v.scope.name,
                    "severity": v.severity.name if v.severity is not None else None,
                    "members": list(v.members),
                }
                for v in self.violations
            ],
            "patternMatches": dict(sorted(self.pattern_matches.items())),
        }

    @classmethod
    def empty(cls) -> Report:
        """Report for a conformant graph."""
        return cls(
            counts=MappingProxyType(dict.fromkeys(ALL_METRICS, 0)),
            violations=(),
        )
