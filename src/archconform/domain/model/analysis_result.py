"""Analysis result aggregate."""

from dataclasses import dataclass

from archconform.domain.model.analysis_stats import AnalysisStats
from archconform.domain.model.dependency_graph import DependencyGraph
from archconform.domain.model.report import Report


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Result of one analysis run.

    Attributes:
        report: Output contract (counts + surviving violations)
        graph: Graph the run analyzed
        stats: Run statistics
    """

    report: Report
    graph: DependencyGraph
    stats: AnalysisStats

    @property
    def passed(self) -> bool:
        """Check if graph is conformant."""
        return self.report.passed
