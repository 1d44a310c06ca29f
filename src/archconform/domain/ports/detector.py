"""Detector protocol for structural checks.

Detectors are stateless and read the graph only.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Self

if TYPE_CHECKING:
    from archconform.domain.model.configuration import AnalyzerConfig
    from archconform.domain.model.dependency_graph import DependencyGraph
    from archconform.domain.model.violation import Violation


class DetectorProtocol(Protocol):
    """Contract for detectors.

    Key pattern: from_config() returns None if detector should be disabled.
    """

    name: str
    """Detector name for logs and statistics."""

    def detect(self, graph: DependencyGraph) -> tuple[Violation, ...]:
        """Find violations in graph.

        Must not mutate shared state: detectors may run concurrently
        over the same graph.

        Args:
            graph: Read-only dependency graph

        Returns:
            Unclassified violations (empty if conformant)
        """
        ...

    @classmethod
    def from_config(cls, config: AnalyzerConfig) -> Self | None:
        """Create detector from config.

        Args:
            config: Analyzer configuration

        Returns:
            Detector instance if enabled, None if disabled
        """
        ...
