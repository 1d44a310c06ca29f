"""Structural violation value object."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from archconform.domain.model.enums import Severity, ViolationKind, ViolationScope

if TYPE_CHECKING:
    from archconform.domain.model.edge import Edge


_DESCRIPTIONS: dict[ViolationKind, str] = {
    ViolationKind.CYCLE: "Cyclic dependency",
    ViolationKind.UPWARD_DEPENDENCY: "Descendant depends on ancestor",
    ViolationKind.DOWNWARD_DEPENDENCY: "Ancestor depends on descendant",
    ViolationKind.PARENT_HAS_CODE: "Organizing package owns declarations",
}


@dataclass(frozen=True, slots=True)
class Violation:
    """Structural violation found by a detector.

    Detectors emit violations without severity; SeverityClassifier
    assigns it. Identity (equality, hashing, ordering) ignores
    severity and evidence edges: two detectors reporting the same
    shape report the same violation.

    Attributes:
        kind: What rule was broken
        scope: MODULE or PACKAGE graph scope
        members: Involved node identifiers, ordered (never empty)
        edges: Dependency edges forming the violation (evidence for patterns)
        severity: Assigned by SeverityClassifier, None until classified
    """

    kind: ViolationKind
    scope: ViolationScope
    members: tuple[str, ...]
    edges: tuple[Edge, ...] = field(default=(), compare=False)
    severity: Severity | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.members:
            raise ValueError("members must not be empty")
        if len(set(self.members)) != len(self.members):
            raise ValueError(f"members must be unique, got {self.members}")
        if self.kind is ViolationKind.CYCLE and len(self.members) < 2:
            raise ValueError("cycle requires at least 2 members")
        if self.kind.is_vertical and len(self.members) != 2:
            raise ValueError("vertical dependency requires exactly 2 members")
        if self.kind is ViolationKind.PARENT_HAS_CODE and len(self.members) != 1:
            raise ValueError("parent-has-code requires exactly 1 member")

    @property
    def key(self) -> tuple[ViolationKind, ViolationScope, tuple[str, ...]]:
        """Identity of the violation (kind, scope, members)."""
        return (self.kind, self.scope, self.members)

    @property
    def classified(self) -> bool:
        """True once severity is assigned."""
        return self.severity is not None

    @property
    def description(self) -> str:
        """Human-readable description of kind."""
        return _DESCRIPTIONS[self.kind]

    def with_severity(self, severity: Severity) -> Violation:
        """Return copy with severity assigned."""
        return replace(self, severity=severity)

    def sort_key(self) -> tuple[int, str, str, tuple[str, ...]]:
        """Report order: severity, kind, scope, members."""
        rank = self.severity.value if self.severity is not None else len(Severity)
        return (rank, self.kind.name, self.scope.name, self.members)

    def __str__(self) -> str:
        """Format violation for display."""
        severity = self.severity.name if self.severity is not None else "UNCLASSIFIED"
        joiner = " → " if self.kind is not ViolationKind.PARENT_HAS_CODE else ", "
        return (
            f"[{severity}] {self.description} ({self.scope.name.lower()} scope): "
            f"{joiner.join(self.members)}"
        )
