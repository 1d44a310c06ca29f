"""Severity classification of violations.

Separate from detection so the mapping can change without touching
detector logic.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from archconform.domain.model.enums import Severity, ViolationKind, ViolationScope

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from archconform.domain.model.violation import Violation


# Total over ViolationKind x ViolationScope
SEVERITY_TABLE: Mapping[tuple[ViolationKind, ViolationScope], Severity] = MappingProxyType(
    {
        (ViolationKind.CYCLE, ViolationScope.MODULE): Severity.HIGH,
        (ViolationKind.CYCLE, ViolationScope.PACKAGE): Severity.MEDIUM,
        (ViolationKind.UPWARD_DEPENDENCY, ViolationScope.MODULE): Severity.MEDIUM,
        (ViolationKind.UPWARD_DEPENDENCY, ViolationScope.PACKAGE): Severity.MEDIUM,
        (ViolationKind.DOWNWARD_DEPENDENCY, ViolationScope.MODULE): Severity.MEDIUM,
        (ViolationKind.DOWNWARD_DEPENDENCY, ViolationScope.PACKAGE): Severity.MEDIUM,
        (ViolationKind.PARENT_HAS_CODE, ViolationScope.MODULE): Severity.MEDIUM,
        (ViolationKind.PARENT_HAS_CODE, ViolationScope.PACKAGE): Severity.MEDIUM,
    }
)


class SeverityClassifier:
    """Stateless (kind, scope) → severity mapping.

    Never fails: the table is total over the closed enums.
    """

    def __init__(
        self,
        table: Mapping[tuple[ViolationKind, ViolationScope], Severity] = SEVERITY_TABLE,
    ) -> None:
        """Initialize with severity table.

        Args:
            table: Mapping covering every (kind, scope) pair

        Raises:
            ValueError: If table is not total
        """
        missing = {(k, s) for k in ViolationKind for s in ViolationScope} - set(table)
        if missing:
            pairs = ", ".join(sorted(f"{k.name}/{s.name}" for k, s in missing))
            raise ValueError(f"severity table missing: {pairs}")
        self._table = table

    def severity_of(self, kind: ViolationKind, scope: ViolationScope) -> Severity:
        """Look up severity for (kind, scope)."""
        return self._table[(kind, scope)]

    def classify(self, violation: Violation) -> Violation:
        """Return violation with severity assigned."""
        return violation.with_severity(self.severity_of(violation.kind, violation.scope))

    def classify_all(self, violations: Iterable[Violation]) -> tuple[Violation, ...]:
        """Classify violations, preserving order."""
        return tuple(self.classify(v) for v in violations)
