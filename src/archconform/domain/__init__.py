"""archconform domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum, types, collections.abc
"""

from archconform.domain.exceptions import (
    ArchConformError,
    ConformanceViolationError,
    InvalidPatternError,
    MalformedEdgeError,
    SelfReferenceError,
)
from archconform.domain.model import (
    AnalysisResult,
    AnalyzerConfig,
    DependencyGraph,
    Edge,
    EdgeDeclaration,
    EdgeScope,
    Evidence,
    ExceptionPattern,
    Node,
    NodeDeclaration,
    NodeKind,
    PatternTable,
    Report,
    Severity,
    Violation,
    ViolationKind,
    ViolationScope,
)
from archconform.domain.ports import DetectorProtocol, ReporterProtocol

__all__ = [
    # Exceptions
    "ArchConformError",
    "MalformedEdgeError",
    "SelfReferenceError",
    "InvalidPatternError",
    "ConformanceViolationError",
    # Enums
    "NodeKind",
    "EdgeScope",
    "Evidence",
    "ViolationKind",
    "ViolationScope",
    "Severity",
    # Value objects
    "NodeDeclaration",
    "EdgeDeclaration",
    "Node",
    "Edge",
    "Violation",
    "ExceptionPattern",
    "PatternTable",
    # Aggregates
    "DependencyGraph",
    "Report",
    "AnalysisResult",
    "AnalyzerConfig",
    # Ports
    "DetectorProtocol",
    "ReporterProtocol",
]
