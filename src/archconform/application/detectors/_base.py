"""Base detector class for structural detectors.

Provides default implementation of DetectorProtocol.
Concrete detectors inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Self

if TYPE_CHECKING:
    from archconform.domain.model.configuration import AnalyzerConfig
    from archconform.domain.model.dependency_graph import DependencyGraph
    from archconform.domain.model.violation import Violation


class BaseDetector(ABC):
    """Base class for detectors implementing DetectorProtocol.

    Concrete detectors must:
    1. Set `name` class attribute
    2. Implement `detect()` method
    3. Optionally override `from_config()` for conditional activation
    """

    name: str
    """Detector name for logs and statistics."""

    @abstractmethod
    def detect(self, graph: DependencyGraph) -> tuple[Violation, ...]:
        """Find violations in graph.

        Args:
            graph: Read-only dependency graph

        Returns:
            Unclassified violations (empty if conformant)
        """

    @classmethod
    def from_config(cls, config: AnalyzerConfig) -> Self | None:
        """Create detector from config.

        Default: always enabled (returns new instance).
        Override in subclass for conditional activation.

        Args:
            config: Analyzer configuration

        Returns:
            Detector instance if enabled, None if disabled
        """
        return cls()
