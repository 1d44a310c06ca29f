"""Dependency graph aggregate (GraphModel).

Read-only for the whole analysis run: detectors only traverse it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from archconform.domain.model.enums import EdgeScope
from archconform.domain.model.graph import DiGraph
from archconform.domain.model.node import DEFAULT_SEPARATOR

if TYPE_CHECKING:
    from collections.abc import Mapping

    from archconform.domain.model.edge import Edge
    from archconform.domain.model.node import Node


@dataclass(frozen=True, slots=True)
class DependencyGraph:
    """Nodes, collapsed edges and the package hierarchy.

    Invariants (FAIL-FIRST):
    - nodes keys equal node identifiers
    - every edge endpoint is a declared node, no self-loops
    - structure holds exactly the edge pairs over all nodes
    - hierarchy links each node to its nearest declared ancestor

    Attributes:
        nodes: Identifier → Node
        edges: (source, target) → Edge
        structure: Dependency adjacency (forward + reverse index)
        hierarchy: Parent → children adjacency over declared nodes
        separator: Identifier segment separator
    """

    nodes: Mapping[str, Node]
    edges: Mapping[tuple[str, str], Edge]
    structure: DiGraph[str]
    hierarchy: DiGraph[str]
    separator: str = DEFAULT_SEPARATOR

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.separator:
            raise ValueError("separator must not be empty")

        for identifier, node in self.nodes.items():
            if identifier != node.identifier:
                raise ValueError(f"node key '{identifier}' != identifier '{node.identifier}'")

        for (source, target), edge in self.edges.items():
            if (source, target) != edge.pair:
                raise ValueError(f"edge key {source}→{target} != edge {edge}")
            if source not in self.nodes:
                raise ValueError(f"edge source '{source}' not in nodes")
            if target not in self.nodes:
                raise ValueError(f"edge target '{target}' not in nodes")
            if not self.structure.has_edge(source, target):
                raise ValueError(f"edge {source}→{target} missing from structure")

        if self.structure.nodes != frozenset(self.nodes):
            raise ValueError("structure nodes must equal declared nodes")
        if self.structure.edge_count != len(self.edges):
            raise ValueError("structure has edges not in edge map")
        if self.hierarchy.nodes != frozenset(self.nodes):
            raise ValueError("hierarchy nodes must equal declared nodes")

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def node(self, identifier: str) -> Node:
        """Get node by identifier.

        Raises:
            KeyError: If node is not declared
        """
        return self.nodes[identifier]

    def edge(self, source: str, target: str) -> Edge | None:
        """Get collapsed edge for pair, None if absent."""
        return self.edges.get((source, target))

    @property
    def node_count(self) -> int:
        """Number of declared nodes."""
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        """Number of collapsed edges."""
        return len(self.edges)

    @property
    def modules(self) -> frozenset[str]:
        """All owning module identifiers."""
        return frozenset(node.owning_module for node in self.nodes.values())

    def sorted_edges(self) -> tuple[Edge, ...]:
        """All edges sorted by (source, target)."""
        return tuple(self.edges[pair] for pair in sorted(self.edges))

    # -------------------------------------------------------------------------
    # Hierarchy queries
    # -------------------------------------------------------------------------

    def parent(self, identifier: str) -> str | None:
        """Nearest declared ancestor, None for hierarchy roots."""
        parents = self.hierarchy.predecessors(identifier)
        if not parents:
            return None
        (parent,) = parents
        return parent

    def children(self, identifier: str) -> frozenset[str]:
        """Declared nodes whose nearest declared ancestor is identifier."""
        return self.hierarchy.successors(identifier)

    def ancestors(self, identifier: str) -> tuple[str, ...]:
        """Declared strict ancestors, nearest first."""
        result: list[str] = []
        current = self.parent(identifier)
        while current is not None:
            result.append(current)
            current = self.parent(current)
        return tuple(result)

    def descendants(self, identifier: str) -> frozenset[str]:
        """All declared strict descendants."""
        result: set[str] = set()
        pending = list(self.children(identifier))
        while pending:
            child = pending.pop()
            result.add(child)
            pending.extend(self.children(child))
        return frozenset(result)

    def is_ancestor(self, ancestor: str, descendant: str) -> bool:
        """Check strict package-path ancestry of two identifiers."""
        return descendant.startswith(ancestor + self.separator)

    # -------------------------------------------------------------------------
    # Scoped views
    # -------------------------------------------------------------------------

    def scoped(self, scope: EdgeScope, module: str | None = None) -> DiGraph[str]:
        """Subgraph with only edges of one scope.

        Args:
            scope: Edge scope to keep
            module: Restrict nodes (and so edges) to one owning module.
                None = all nodes.

        Returns:
            DiGraph over the selected nodes, isolated nodes included
        """
        if module is None:
            members = self.structure.nodes
        else:
            members = frozenset(
                identifier
                for identifier, node in self.nodes.items()
                if node.owning_module == module
            )
        pairs = (
            pair
            for pair, edge in self.edges.items()
            if edge.scope is scope and pair[0] in members and pair[1] in members
        )
        return DiGraph.from_edges(pairs, extra_nodes=members)

    @classmethod
    def empty(cls) -> DependencyGraph:
        """Create graph with no nodes or edges."""
        return cls(
            nodes={},
            edges={},
            structure=DiGraph.empty(),
            hierarchy=DiGraph.empty(),
        )
