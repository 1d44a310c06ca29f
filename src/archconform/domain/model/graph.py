"""Generic directed graph and strongly connected components.

DiGraph keeps both adjacency directions so detectors can walk edges
either way without rebuilding indexes. Components are found with an
iterative Tarjan search, safe for deep package trees.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class DiGraph(Generic[T]):
    """Read-only adjacency of a directed graph.

    reverse mirrors forward exactly; both only mention known nodes.

    Attributes:
        forward: Node → successors
        reverse: Node → predecessors
        nodes: Every node, isolated ones included
    """

    forward: Mapping[T, frozenset[T]]
    reverse: Mapping[T, frozenset[T]]
    nodes: frozenset[T]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        _check_side(self.forward, self.reverse, self.nodes, "forward", "successor")
        _check_side(self.reverse, self.forward, self.nodes, "reverse", "predecessor")

    def successors(self, node: T) -> frozenset[T]:
        """Targets of edges leaving node."""
        return self.forward.get(node, frozenset())

    def predecessors(self, node: T) -> frozenset[T]:
        """Sources of edges entering node."""
        return self.reverse.get(node, frozenset())

    def has_edge(self, source: T, target: T) -> bool:
        return target in self.successors(source)

    def has_node(self, node: T) -> bool:
        return node in self.nodes

    @property
    def edge_count(self) -> int:
        return sum(map(len, self.forward.values()))

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[tuple[T, T]],
        extra_nodes: Iterable[T] | None = None,
    ) -> DiGraph[T]:
        """Build graph from (source, target) pairs.

        Repeated pairs collapse into one edge.

        Args:
            edges: (source, target) pairs
            extra_nodes: Nodes to include even without edges
        """
        forward: defaultdict[T, set[T]] = defaultdict(set)
        reverse: defaultdict[T, set[T]] = defaultdict(set)
        nodes: set[T] = set(extra_nodes or ())

        for source, target in edges:
            forward[source].add(target)
            reverse[target].add(source)
            nodes.update((source, target))

        return cls(
            forward={node: frozenset(targets) for node, targets in forward.items()},
            reverse={node: frozenset(sources) for node, sources in reverse.items()},
            nodes=frozenset(nodes),
        )

    @classmethod
    def empty(cls) -> DiGraph[T]:
        """Graph without nodes."""
        return cls(forward={}, reverse={}, nodes=frozenset())


def _check_side(
    side: Mapping[T, frozenset[T]],
    mirror: Mapping[T, frozenset[T]],
    nodes: frozenset[T],
    side_name: str,
    neighbor_name: str,
) -> None:
    forward_side = side_name == "forward"
    for node, neighbors in side.items():
        if node not in nodes:
            raise ValueError(f"{side_name} key '{node}' not in nodes")
        for other in neighbors:
            if other not in nodes:
                raise ValueError(f"{neighbor_name} '{other}' of '{node}' not in nodes")
            if node not in mirror.get(other, frozenset()):
                source, target = (node, other) if forward_side else (other, node)
                raise ValueError(f"inconsistent: {source}→{target} in {side_name} only")


# =============================================================================
# GRAPH ALGORITHMS
# =============================================================================


def strongly_connected_components(graph: DiGraph[T]) -> tuple[tuple[T, ...], ...]:
    """Find all strongly connected components (iterative Tarjan).

    Nodes and successors are visited in sorted order, so the result
    is the same for equal graphs regardless of set iteration order.

    Args:
        graph: Directed graph (node type must be orderable)

    Returns:
        Tuple of components, each in discovery (DFS preorder) order.
        Trivial single-node components are included.

    Time: O(V + E log E) (sorting successors dominates)
    """
    index_of: dict[T, int] = {}
    lowlink: dict[T, int] = {}
    on_stack: set[T] = set()
    stack: list[T] = []
    components: list[tuple[T, ...]] = []
    counter = 0

    for root in sorted(graph.nodes):  # type: ignore[type-var]
        if root in index_of:
            continue

        # Explicit DFS stack of (node, iterator over sorted successors)
        index_of[root] = lowlink[root] = counter
        counter += 1
        stack.append(root)
        on_stack.add(root)
        work = [(root, iter(sorted(graph.successors(root))))]  # type: ignore[type-var]

        while work:
            node, successors = work[-1]
            advanced = False
            for succ in successors:
                if succ not in index_of:
                    index_of[succ] = lowlink[succ] = counter
                    counter += 1
                    stack.append(succ)
                    on_stack.add(succ)
                    work.append((succ, iter(sorted(graph.successors(succ)))))  # type: ignore[type-var]
                    advanced = True
                    break
                if succ in on_stack:
                    lowlink[node] = min(lowlink[node], index_of[succ])
            if advanced:
                continue

            work.pop()
            if work:
                parent = work[-1][0]
                lowlink[parent] = min(lowlink[parent], lowlink[node])

            if lowlink[node] == index_of[node]:
                component: list[T] = []
                while True:
                    member = stack.pop()
                    on_stack.discard(member)
                    component.append(member)
                    if member == node:
                        break
                # Popped in reverse discovery order
                component.reverse()
                components.append(tuple(component))

    return tuple(components)


def find_cycles(graph: DiGraph[T]) -> tuple[tuple[T, ...], ...]:
    """Get non-trivial SCCs, each rotated to start at its smallest node.

    A single node is never a cycle: self-loops are rejected upstream.

    Args:
        graph: Directed graph to check

    Returns:
        Empty tuple if acyclic, otherwise one tuple of members per cycle
    """
    cycles: list[tuple[T, ...]] = []
    for component in strongly_connected_components(graph):
        if len(component) < 2:
            continue
        start = component.index(min(component))  # type: ignore[type-var]
        cycles.append(component[start:] + component[:start])
    return tuple(cycles)
