"""Tests for services/analyzer.py."""

import threading

import pytest

from archconform.application.detectors import BaseDetector, CycleDetector, HierarchyValidator
from archconform.application.services.analyzer import ConformanceAnalyzer, analyze
from archconform.domain.exceptions.graph import MalformedEdgeError, SelfReferenceError
from archconform.domain.exceptions.pattern import InvalidPatternError
from archconform.domain.model.configuration import AnalyzerConfig
from archconform.domain.model.enums import Severity, ViolationKind, ViolationScope
from archconform.domain.model.pattern import ExceptionPattern, PatternTable
from tests.factories import code, mod_edge, organizing, pkg_edge

NODES = [
    organizing("a", has_declarations=True),
    code("a.b"),
    code("a.c"),
    code("a.Foo$Impl"),
    code("a.Foo$Api"),
]
EDGES = [
    pkg_edge("a.b", "a.c"),
    pkg_edge("a.c", "a.b"),
    pkg_edge("a.c", "a"),
    pkg_edge("a.Foo$Impl", "a.Foo$Api"),
    pkg_edge("a.Foo$Api", "a.Foo$Impl"),
]

INNER_TABLE = PatternTable(
    version="1",
    patterns=(ExceptionPattern(name="inner", version="1", predicate="shared_stem", argument="$"),),
)


class RecordingReporter:
    """Reporter collecting reports in memory."""

    def __init__(self) -> None:
        self.reports = []

    def report(self, report) -> None:
        self.reports.append(report)


class FailingDetector(BaseDetector):
    """Detector that always raises."""

    name = "failing"

    def detect(self, graph):
        raise RuntimeError("detector broke")

    @classmethod
    def from_config(cls, config):
        return cls()


class ThreadRecordingDetector(BaseDetector):
    """Detector recording the thread it ran on."""

    name = "thread-recording"

    def __init__(self) -> None:
        self.thread_name: str | None = None

    def detect(self, graph):
        self.thread_name = threading.current_thread().name
        return ()

    @classmethod
    def from_config(cls, config):
        return cls()


class TestConformanceAnalyzerFactories:
    """Tests for analyzer construction."""

    def test_with_defaults(self) -> None:
        assert ConformanceAnalyzer.with_defaults().detector_count == 2

    def test_from_config_respects_toggles(self) -> None:
        analyzer = ConformanceAnalyzer.from_config(AnalyzerConfig(detect_cycles=False))
        assert analyzer.detector_count == 1

    def test_invalid_pattern_fails_at_construction(self) -> None:
        table = PatternTable(
            version="1",
            patterns=(ExceptionPattern(name="bad", version="1", predicate="nope"),),
        )
        with pytest.raises(InvalidPatternError):
            ConformanceAnalyzer.with_defaults(patterns=table)


class TestConformanceAnalyzerRun:
    """Tests for ConformanceAnalyzer.run."""

    def test_full_pipeline(self) -> None:
        result = ConformanceAnalyzer.with_defaults().run(NODES, EDGES)
        report = result.report

        assert not result.passed
        assert report.count(ViolationKind.CYCLE, ViolationScope.PACKAGE) == 2
        assert report.count(ViolationKind.UPWARD_DEPENDENCY, ViolationScope.PACKAGE) == 1
        assert report.count(ViolationKind.PARENT_HAS_CODE, ViolationScope.MODULE) == 1
        assert report.total == 4
        assert all(v.severity is Severity.MEDIUM for v in report.violations)

    def test_patterns_remove_violations(self) -> None:
        result = ConformanceAnalyzer.with_defaults(patterns=INNER_TABLE).run(NODES, EDGES)

        assert result.report.count(ViolationKind.CYCLE, ViolationScope.PACKAGE) == 1
        assert dict(result.report.pattern_matches) == {"inner": 1}
        assert result.stats.raw_violations == 4
        assert result.stats.suppressed_violations == 1

    def test_stats(self) -> None:
        result = ConformanceAnalyzer.with_defaults().run(NODES, EDGES + [pkg_edge("a.b", "a.c")])
        stats = result.stats

        assert stats.nodes_analyzed == 5
        assert stats.edges_analyzed == 5
        assert stats.raw_references == 6
        assert stats.detectors_run == 2
        assert stats.analysis_time_ms >= 0

    def test_module_cycle_is_high(self) -> None:
        result = ConformanceAnalyzer.with_defaults().run(
            [code("x", module="M1"), code("y", module="M2")],
            [mod_edge("x", "y"), mod_edge("y", "x")],
        )
        (violation,) = result.report.violations
        assert violation.scope is ViolationScope.MODULE
        assert violation.severity is Severity.HIGH

    def test_parallel_and_sequential_agree(self) -> None:
        parallel = ConformanceAnalyzer.from_config(AnalyzerConfig(parallel=True)).run(NODES, EDGES)
        sequential = ConformanceAnalyzer.from_config(AnalyzerConfig(parallel=False)).run(
            NODES, EDGES
        )
        assert parallel.report == sequential.report
        assert parallel.report.to_dict() == sequential.report.to_dict()

    def test_parallel_runs_on_worker_threads(self) -> None:
        detectors = [ThreadRecordingDetector(), ThreadRecordingDetector()]
        ConformanceAnalyzer(detectors=detectors).run(NODES, [])
        assert all(d.thread_name.startswith("archconform-detector") for d in detectors)

    def test_sequential_runs_on_caller_thread(self) -> None:
        detectors = [ThreadRecordingDetector(), ThreadRecordingDetector()]
        analyzer = ConformanceAnalyzer(detectors=detectors, config=AnalyzerConfig(parallel=False))
        analyzer.run(NODES, [])
        caller = threading.current_thread().name
        assert all(d.thread_name == caller for d in detectors)

    def test_detector_error_propagates(self) -> None:
        reporter = RecordingReporter()
        analyzer = ConformanceAnalyzer(
            detectors=[CycleDetector(), FailingDetector()], reporter=reporter
        )
        with pytest.raises(RuntimeError, match="detector broke"):
            analyzer.run(NODES, EDGES)
        assert reporter.reports == []

    def test_reporter_called_once(self) -> None:
        reporter = RecordingReporter()
        result = ConformanceAnalyzer.with_defaults(reporter=reporter).run(NODES, EDGES)
        assert reporter.reports == [result.report]

    def test_no_detectors_passes(self) -> None:
        result = ConformanceAnalyzer().run(NODES, EDGES)
        assert result.passed
        assert result.stats.detectors_run == 0

    def test_malformed_input_raises(self) -> None:
        with pytest.raises(MalformedEdgeError):
            ConformanceAnalyzer.with_defaults().run(NODES, [pkg_edge("a.b", "a.missing")])

    def test_self_reference_raises(self) -> None:
        with pytest.raises(SelfReferenceError):
            ConformanceAnalyzer.with_defaults().run(NODES, [pkg_edge("a.b", "a.b")])

    def test_custom_separator(self) -> None:
        config = AnalyzerConfig(separator="/")
        result = ConformanceAnalyzer.from_config(config).run(
            [organizing("a", module="a"), code("a/b", module="a")],
            [pkg_edge("a/b", "a")],
        )
        assert result.report.count(ViolationKind.UPWARD_DEPENDENCY, ViolationScope.PACKAGE) == 1

    def test_run_graph_reuses_graph(self) -> None:
        analyzer = ConformanceAnalyzer.with_defaults()
        first = analyzer.run(NODES, EDGES)
        second = analyzer.run_graph(first.graph)
        assert first.report == second.report


class TestSeparatorConfig:
    """Separator from config reaches graph building and exception patterns."""

    NODES = [organizing("m", module="m"), code("m/a/x", module="m"), code("m/a/y/z", module="m")]
    EDGES = [pkg_edge("m/a/x", "m/a/y/z"), pkg_edge("m/a/y/z", "m/a/x")]
    ONE_LEVEL = PatternTable(
        version="1",
        patterns=(
            ExceptionPattern(
                name="one-level", version="1", predicate="member_glob", argument="m/a/*"
            ),
        ),
    )

    def test_one_segment_glob_keeps_deeper_cycle(self) -> None:
        config = AnalyzerConfig(separator="/")
        analyzer = ConformanceAnalyzer.from_config(config, patterns=self.ONE_LEVEL)

        report = analyzer.run(self.NODES, self.EDGES).report

        assert report.count(ViolationKind.CYCLE, ViolationScope.PACKAGE) == 1
        assert dict(report.pattern_matches) == {"one-level": 0}

    def test_with_defaults_uses_config(self) -> None:
        config = AnalyzerConfig(separator="/", parallel=False)
        analyzer = ConformanceAnalyzer.with_defaults(patterns=self.ONE_LEVEL, config=config)

        report = analyzer.run(self.NODES, self.EDGES).report

        assert analyzer.detector_count == 2
        assert report.count(ViolationKind.CYCLE, ViolationScope.PACKAGE) == 1


class TestAnalyzeFunction:
    """Tests for analyze()."""

    def test_returns_report(self) -> None:
        report = analyze(NODES, EDGES, patterns=INNER_TABLE)
        assert report.total == 3

    def test_config_toggles(self) -> None:
        report = analyze(NODES, EDGES, config=AnalyzerConfig(detect_parent_code=False))
        assert report.count_kind(ViolationKind.PARENT_HAS_CODE) == 0

    def test_hierarchy_only(self) -> None:
        detectors = [HierarchyValidator(check_parent_code=False)]
        result = ConformanceAnalyzer(detectors=detectors).run(NODES, EDGES)
        assert [v.kind for v in result.report.violations] == [ViolationKind.UPWARD_DEPENDENCY]
