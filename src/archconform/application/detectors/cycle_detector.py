"""Cycle detection at module and package scope.

Module cycles use only module-level edges over the whole graph.
Package cycles use package-level edges inside each owning module;
package-level edges never cross modules, so no package cycle can either.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from archconform.application.detectors._base import BaseDetector
from archconform.domain.model.enums import EdgeScope, ViolationKind, ViolationScope
from archconform.domain.model.graph import find_cycles
from archconform.domain.model.violation import Violation

if TYPE_CHECKING:
    from archconform.domain.model.configuration import AnalyzerConfig
    from archconform.domain.model.dependency_graph import DependencyGraph
    from archconform.domain.model.edge import Edge


class CycleDetector(BaseDetector):
    """Strongly connected component detector (Tarjan).

    One CYCLE violation per SCC of size > 1. Members are in traversal
    order rotated to start at the smallest identifier.
    """

    name = "cycles"

    def detect(self, graph: DependencyGraph) -> tuple[Violation, ...]:
        """Detect module-scope and package-scope cycles.

        Args:
            graph: Dependency graph to check

        Returns:
            Module cycles first, then package cycles by module
        """
        violations: list[Violation] = []

        violations.extend(
            self._cycles_in(graph, EdgeScope.MODULE_LEVEL, ViolationScope.MODULE, None)
        )
        for module in sorted(graph.modules):
            violations.extend(
                self._cycles_in(graph, EdgeScope.PACKAGE_LEVEL, ViolationScope.PACKAGE, module)
            )

        return tuple(violations)

    def _cycles_in(
        self,
        graph: DependencyGraph,
        edge_scope: EdgeScope,
        scope: ViolationScope,
        module: str | None,
    ) -> list[Violation]:
        subgraph = graph.scoped(edge_scope, module)
        return [
            Violation(
                kind=ViolationKind.CYCLE,
                scope=scope,
                members=members,
                edges=_edges_within(graph, members, edge_scope),
            )
            for members in find_cycles(subgraph)
        ]

    @classmethod
    def from_config(cls, config: AnalyzerConfig) -> Self | None:
        """Create if cycle detection is enabled."""
        if not config.detect_cycles:
            return None
        return cls()


def _edges_within(
    graph: DependencyGraph,
    members: tuple[str, ...],
    scope: EdgeScope,
) -> tuple[Edge, ...]:
    """Scoped edges with both endpoints in members, sorted by pair."""
    inside = frozenset(members)
    edges = []
    for source in sorted(inside):
        for target in sorted(graph.structure.successors(source) & inside):
            edge = graph.edges[(source, target)]
            if edge.scope is scope:
                edges.append(edge)
    return tuple(edges)
