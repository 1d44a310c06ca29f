"""Domain model: value objects and aggregates."""

from archconform.domain.model.analysis_result import AnalysisResult
from archconform.domain.model.analysis_stats import AnalysisStats
from archconform.domain.model.configuration import AnalyzerConfig
from archconform.domain.model.dependency_graph import DependencyGraph
from archconform.domain.model.edge import Edge, EdgeDeclaration
from archconform.domain.model.enums import (
    EdgeScope,
    Evidence,
    NodeKind,
    Severity,
    ViolationKind,
    ViolationScope,
)
from archconform.domain.model.graph import DiGraph, find_cycles, strongly_connected_components
from archconform.domain.model.node import Node, NodeDeclaration
from archconform.domain.model.pattern import ExceptionPattern, PatternTable
from archconform.domain.model.report import ALL_METRICS, MetricKey, Report
from archconform.domain.model.violation import Violation

__all__ = [
    # Enums
    "NodeKind",
    "EdgeScope",
    "Evidence",
    "ViolationKind",
    "ViolationScope",
    "Severity",
    # Input
    "NodeDeclaration",
    "EdgeDeclaration",
    # Graph
    "Node",
    "Edge",
    "DiGraph",
    "DependencyGraph",
    "strongly_connected_components",
    "find_cycles",
    # Violations and patterns
    "Violation",
    "ExceptionPattern",
    "PatternTable",
    # Output
    "MetricKey",
    "ALL_METRICS",
    "Report",
    "AnalysisStats",
    "AnalysisResult",
    # Configuration
    "AnalyzerConfig",
]
