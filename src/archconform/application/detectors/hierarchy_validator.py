"""Hierarchy validation: vertical dependencies and parents with code.

Only the ancestor/descendant relation is checked. Horizontal
relationships (siblings, a node and its sibling's descendants or
ancestors other than common ones) are always legal.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from archconform.application.detectors._base import BaseDetector
from archconform.domain.model.enums import NodeKind, ViolationKind, ViolationScope
from archconform.domain.model.violation import Violation

if TYPE_CHECKING:
    from archconform.domain.model.configuration import AnalyzerConfig
    from archconform.domain.model.dependency_graph import DependencyGraph
    from archconform.domain.model.edge import Edge


class HierarchyValidator(BaseDetector):
    """Package hierarchy validator.

    Two independent checks, each can be disabled:
    - vertical: edge between a node and its strict ancestor
    - parent code: ORGANIZING node that owns declarations, or CODE node
      that has declared child nodes
    """

    name = "hierarchy"

    def __init__(self, *, check_vertical: bool = True, check_parent_code: bool = True) -> None:
        """Initialize with enabled checks.

        Args:
            check_vertical: Report vertical dependencies
            check_parent_code: Report organizing nodes with declarations
        """
        if not (check_vertical or check_parent_code):
            raise ValueError("at least one hierarchy check must be enabled")
        self._check_vertical = check_vertical
        self._check_parent_code = check_parent_code

    def detect(self, graph: DependencyGraph) -> tuple[Violation, ...]:
        """Run enabled hierarchy checks.

        Args:
            graph: Dependency graph to check

        Returns:
            Vertical dependencies (by edge), then parents with code (by node)
        """
        violations: list[Violation] = []

        if self._check_vertical:
            for edge in graph.sorted_edges():
                violation = self._vertical(graph, edge)
                if violation is not None:
                    violations.append(violation)

        if self._check_parent_code:
            violations.extend(self._parents_with_code(graph))

        return tuple(violations)

    def _vertical(self, graph: DependencyGraph, edge: Edge) -> Violation | None:
        if graph.is_ancestor(edge.target, edge.source):
            kind = ViolationKind.UPWARD_DEPENDENCY
        elif graph.is_ancestor(edge.source, edge.target):
            kind = ViolationKind.DOWNWARD_DEPENDENCY
        else:
            return None

        return Violation(
            kind=kind,
            scope=ViolationScope.of_edge(edge.scope),
            members=edge.pair,
            edges=(edge,),
        )

    def _parents_with_code(self, graph: DependencyGraph) -> list[Violation]:
        violations: list[Violation] = []
        for identifier in sorted(graph.nodes):
            node = graph.nodes[identifier]
            if node.kind is NodeKind.ORGANIZING:
                if not node.has_declarations:
                    continue
            elif not graph.children(identifier):
                # Code packages are leaves
                continue
            scope = ViolationScope.MODULE if node.is_module_root() else ViolationScope.PACKAGE
            violations.append(
                Violation(
                    kind=ViolationKind.PARENT_HAS_CODE,
                    scope=scope,
                    members=(identifier,),
                )
            )
        return violations

    @classmethod
    def from_config(cls, config: AnalyzerConfig) -> Self | None:
        """Create if any hierarchy check is enabled.

        Args:
            config: Analyzer configuration

        Returns:
            HierarchyValidator if enabled, else None
        """
        if not config.has_hierarchy_config():
            return None
        return cls(
            check_vertical=config.detect_vertical,
            check_parent_code=config.detect_parent_code,
        )
