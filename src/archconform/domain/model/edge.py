"""Dependency edge value objects."""

from __future__ import annotations

from dataclasses import dataclass

from archconform.domain.model.enums import EdgeScope, Evidence


@dataclass(frozen=True, slots=True)
class EdgeDeclaration:
    """Raw reference as reported by the source-parsing front end.

    Several declarations may exist for one (source, target) pair;
    the graph builder collapses them into one Edge.

    Attributes:
        source: Referencing node identifier
        target: Referenced node identifier
        scope: MODULE_LEVEL or PACKAGE_LEVEL
        evidence: INVOCATION or DATA_REFERENCE
    """

    source: str
    target: str
    scope: EdgeScope
    evidence: Evidence = Evidence.INVOCATION

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.source:
            raise ValueError("source must not be empty")
        if not self.target:
            raise ValueError("target must not be empty")
        if not isinstance(self.scope, EdgeScope):
            raise TypeError(f"scope must be EdgeScope, got {type(self.scope).__name__}")
        if not isinstance(self.evidence, Evidence):
            raise TypeError(f"evidence must be Evidence, got {type(self.evidence).__name__}")


@dataclass(frozen=True, slots=True)
class Edge:
    """Collapsed dependency edge: source references target.

    Invariants (FAIL-FIRST):
    - source != target (self-edges are rejected by the builder)
    - weight >= 1

    Attributes:
        source: Referencing node identifier
        target: Referenced node identifier
        scope: MODULE_LEVEL or PACKAGE_LEVEL
        evidence: INVOCATION if any raw reference was an invocation
        weight: Number of raw references collapsed into this edge
    """

    source: str
    target: str
    scope: EdgeScope
    evidence: Evidence
    weight: int = 1

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.source:
            raise ValueError("source must not be empty")
        if not self.target:
            raise ValueError("target must not be empty")
        if self.source == self.target:
            raise ValueError(f"edge must not be a self-loop: {self.source}")
        if self.weight < 1:
            raise ValueError(f"weight must be >= 1, got {self.weight}")

    @property
    def pair(self) -> tuple[str, str]:
        """(source, target) tuple."""
        return (self.source, self.target)

    def merge(self, other: EdgeDeclaration) -> Edge:
        """Collapse another raw reference for the same pair into this edge.

        Invocation evidence dominates data-reference evidence.

        Raises:
            ValueError: If other is for a different pair or scope
        """
        if (other.source, other.target) != self.pair:
            raise ValueError(f"cannot merge {other.source}→{other.target} into {self}")
        if other.scope is not self.scope:
            raise ValueError(
                f"conflicting scope for {self}: {self.scope.name} vs {other.scope.name}"
            )
        evidence = self.evidence
        if other.evidence is Evidence.INVOCATION:
            evidence = Evidence.INVOCATION
        return Edge(
            source=self.source,
            target=self.target,
            scope=self.scope,
            evidence=evidence,
            weight=self.weight + 1,
        )

    def __str__(self) -> str:
        return f"{self.source} → {self.target}"

    @classmethod
    def from_declaration(cls, declaration: EdgeDeclaration) -> Edge:
        """Create single-reference edge from a raw declaration."""
        return cls(
            source=declaration.source,
            target=declaration.target,
            scope=declaration.scope,
            evidence=declaration.evidence,
        )
