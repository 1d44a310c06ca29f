"""Main facade for conformance analysis.

ConformanceAnalyzer is the primary entry point. Data flows one way:
declarations → graph → detectors → exception patterns → severity → report.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING, Self

from archconform.application.detectors import default_detectors, detectors_from_config
from archconform.application.exceptions_engine import PatternExceptionEngine
from archconform.application.graph_builder import build_graph, count_raw_references
from archconform.application.metrics import MetricsReporter
from archconform.application.severity import SeverityClassifier
from archconform.domain.model.analysis_result import AnalysisResult
from archconform.domain.model.analysis_stats import AnalysisStats
from archconform.domain.model.configuration import AnalyzerConfig

if TYPE_CHECKING:
    from collections.abc import Iterable

    from archconform.domain.model.dependency_graph import DependencyGraph
    from archconform.domain.model.edge import EdgeDeclaration
    from archconform.domain.model.node import NodeDeclaration
    from archconform.domain.model.pattern import PatternTable
    from archconform.domain.model.report import Report
    from archconform.domain.model.violation import Violation
    from archconform.domain.ports.detector import DetectorProtocol
    from archconform.domain.ports.reporter import ReporterProtocol

logger = logging.getLogger(__name__)


class ConformanceAnalyzer:
    """Main facade for conformance analysis.

    Composition-based: accepts detectors, exception patterns and reporter.
    Each run works on its own immutable graph; the analyzer itself
    holds no per-run state.

    Factory methods:
    - with_defaults(): All detectors, all checks
    - from_config(): Detectors based on AnalyzerConfig

    Example:
        analyzer = ConformanceAnalyzer.from_config(AnalyzerConfig(), patterns=table)
        result = analyzer.run(nodes, edges)
        if not result.passed:
            print(result.report.metrics)
    """

    def __init__(
        self,
        *,
        detectors: Sequence[DetectorProtocol] = (),
        patterns: PatternTable | None = None,
        config: AnalyzerConfig | None = None,
        classifier: SeverityClassifier | None = None,
        reporter: ReporterProtocol | None = None,
    ) -> None:
        """Initialize analyzer with dependencies.

        Args:
            detectors: Detectors to run
            patterns: Governed exception patterns. None = no exceptions.
            config: Analyzer configuration (separator, parallelism)
            classifier: Severity mapping. None = default table.
            reporter: Optional reporter for output

        Raises:
            InvalidPatternError: If a pattern cannot be compiled
        """
        self._detectors = tuple(detectors)
        self._config = config or AnalyzerConfig()
        self._engine = PatternExceptionEngine(patterns, separator=self._config.separator)
        self._classifier = classifier or SeverityClassifier()
        self._metrics = MetricsReporter()
        self._reporter = reporter

    @classmethod
    def with_defaults(
        cls,
        *,
        patterns: PatternTable | None = None,
        config: AnalyzerConfig | None = None,
        reporter: ReporterProtocol | None = None,
    ) -> Self:
        """Create analyzer with every detector enabled.

        Detector toggles in config are ignored; separator and
        parallelism are taken from it.

        Args:
            patterns: Governed exception patterns
            config: Analyzer configuration. None = defaults.
            reporter: Optional reporter
        """
        return cls(
            detectors=default_detectors(),
            patterns=patterns,
            config=config,
            reporter=reporter,
        )

    @classmethod
    def from_config(
        cls,
        config: AnalyzerConfig,
        *,
        patterns: PatternTable | None = None,
        reporter: ReporterProtocol | None = None,
    ) -> Self:
        """Create analyzer with detectors enabled by config.

        Args:
            config: Analyzer configuration
            patterns: Governed exception patterns
            reporter: Optional reporter

        Returns:
            ConformanceAnalyzer with config-based detectors
        """
        return cls(
            detectors=detectors_from_config(config),
            patterns=patterns,
            config=config,
            reporter=reporter,
        )

    @property
    def detector_count(self) -> int:
        """Number of configured detectors."""
        return len(self._detectors)

    def run(
        self,
        nodes: Iterable[NodeDeclaration],
        edges: Iterable[EdgeDeclaration],
    ) -> AnalysisResult:
        """Build graph from declarations and analyze it.

        Args:
            nodes: Node declarations from the front end
            edges: Raw references from the front end

        Returns:
            AnalysisResult with report and stats

        Raises:
            MalformedEdgeError: Invalid input graph
            SelfReferenceError: Edge with source == target
        """
        graph = build_graph(nodes, edges, separator=self._config.separator)
        return self.run_graph(graph)

    def run_graph(self, graph: DependencyGraph) -> AnalysisResult:
        """Analyze an already built graph.

        Args:
            graph: Immutable dependency graph

        Returns:
            AnalysisResult with report and stats
        """
        start_time = time.perf_counter()

        raw = self._detect(graph)
        filtered = self._engine.evaluate(raw)
        classified = self._classifier.classify_all(filtered.kept)
        report = self._metrics.build(classified, filtered.matches)

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        stats = AnalysisStats(
            nodes_analyzed=graph.node_count,
            edges_analyzed=graph.edge_count,
            raw_references=count_raw_references(graph),
            detectors_run=len(self._detectors),
            raw_violations=len(raw),
            suppressed_violations=len(filtered.removed),
            analysis_time_ms=elapsed_ms,
        )

        logger.info(
            "Analyzed %d nodes, %d edges: %d violation(s), %d removed by exceptions (%.1f ms)",
            stats.nodes_analyzed,
            stats.edges_analyzed,
            report.total,
            stats.suppressed_violations,
            elapsed_ms,
        )

        if self._reporter is not None:
            self._reporter.report(report)

        return AnalysisResult(report=report, graph=graph, stats=stats)

    def _detect(self, graph: DependencyGraph) -> tuple[Violation, ...]:
        """Run detectors and concatenate violations in detector order.

        Detectors run as concurrent tasks when enabled; the fan-out is
        one task per detector. Any detector error propagates and the
        run produces no report.
        """
        if not self._detectors:
            return ()

        if self._config.parallel and len(self._detectors) > 1:
            with ThreadPoolExecutor(
                max_workers=len(self._detectors),
                thread_name_prefix="archconform-detector",
            ) as pool:
                futures = [pool.submit(self._run_detector, d, graph) for d in self._detectors]
                results = [future.result() for future in futures]
        else:
            results = [self._run_detector(d, graph) for d in self._detectors]

        return tuple(violation for violations in results for violation in violations)

    @staticmethod
    def _run_detector(detector: DetectorProtocol, graph: DependencyGraph) -> tuple[Violation, ...]:
        start_time = time.perf_counter()
        violations = detector.detect(graph)
        logger.debug(
            "Detector %s found %d violation(s) in %.1f ms",
            detector.name,
            len(violations),
            (time.perf_counter() - start_time) * 1000,
        )
        return violations


def analyze(
    nodes: Iterable[NodeDeclaration],
    edges: Iterable[EdgeDeclaration],
    patterns: PatternTable | None = None,
    config: AnalyzerConfig | None = None,
) -> Report:
    """Run one analysis and return its report.

    Args:
        nodes: Node declarations
        edges: Raw references
        patterns: Governed exception patterns. None = no exceptions.
        config: Analyzer configuration. None = defaults.

    Returns:
        Immutable Report

    Raises:
        MalformedEdgeError: Invalid input graph
        SelfReferenceError: Edge with source == target
        InvalidPatternError: Pattern cannot be compiled
    """
    analyzer = ConformanceAnalyzer.from_config(config or AnalyzerConfig(), patterns=patterns)
    return analyzer.run(nodes, edges).report
