"""Statistics of one analysis run."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AnalysisStats:
    """Statistics from an analysis run.

    Immutable value object; kept out of the report so that
    reports for identical input stay identical.

    Attributes:
        nodes_analyzed: Number of declared nodes
        edges_analyzed: Number of collapsed edges
        raw_references: Number of raw edge declarations before collapsing
        detectors_run: Number of detectors executed
        raw_violations: Violations before exception filtering
        suppressed_violations: Violations removed by exception patterns
        analysis_time_ms: Total analysis time in milliseconds
    """

    nodes_analyzed: int
    edges_analyzed: int
    raw_references: int
    detectors_run: int
    raw_violations: int
    suppressed_violations: int
    analysis_time_ms: float

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.nodes_analyzed < 0:
            raise ValueError(f"nodes_analyzed must be >= 0, got {self.nodes_analyzed}")
        if self.edges_analyzed < 0:
            raise ValueError(f"edges_analyzed must be >= 0, got {self.edges_analyzed}")
        if self.raw_references < self.edges_analyzed:
            raise ValueError(
                f"raw_references ({self.raw_references}) must be >= "
                f"edges_analyzed ({self.edges_analyzed})"
            )
        if self.detectors_run < 0:
            raise ValueError(f"detectors_run must be >= 0, got {self.detectors_run}")
        if self.raw_violations < 0:
            raise ValueError(f"raw_violations must be >= 0, got {self.raw_violations}")
        if not 0 <= self.suppressed_violations <= self.raw_violations:
            raise ValueError(
                f"suppressed_violations must be in 0..{self.raw_violations}, "
                f"got {self.suppressed_violations}"
            )
        if self.analysis_time_ms < 0:
            raise ValueError(f"analysis_time_ms must be >= 0, got {self.analysis_time_ms}")

    @classmethod
    def empty(cls) -> AnalysisStats:
        """Create empty stats."""
        return cls(
            nodes_analyzed=0,
            edges_analyzed=0,
            raw_references=0,
            detectors_run=0,
            raw_violations=0,
            suppressed_violations=0,
            analysis_time_ms=0.0,
        )
