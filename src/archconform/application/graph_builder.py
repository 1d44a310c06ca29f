"""Graph construction from front-end declarations (GraphModel.build).

Single pass, single writer. Any input error aborts construction:
there is no partial graph.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from archconform.domain.exceptions.graph import MalformedEdgeError, SelfReferenceError
from archconform.domain.model.dependency_graph import DependencyGraph
from archconform.domain.model.edge import Edge
from archconform.domain.model.enums import EdgeScope
from archconform.domain.model.graph import DiGraph
from archconform.domain.model.node import DEFAULT_SEPARATOR, Node, parent_of

if TYPE_CHECKING:
    from collections.abc import Iterable

    from archconform.domain.model.edge import EdgeDeclaration
    from archconform.domain.model.node import NodeDeclaration

logger = logging.getLogger(__name__)


def build_graph(
    nodes: Iterable[NodeDeclaration],
    edges: Iterable[EdgeDeclaration],
    *,
    separator: str = DEFAULT_SEPARATOR,
) -> DependencyGraph:
    """Build immutable dependency graph.

    Args:
        nodes: Node declarations. First occurrence wins; identical
            redeclarations are accepted.
        edges: Raw references. Duplicates per (source, target) collapse.
        separator: Identifier segment separator

    Returns:
        DependencyGraph ready for detection

    Raises:
        MalformedEdgeError: Undeclared endpoint, conflicting node
            redeclaration, conflicting edge scope, invalid identifier,
            or package-level edge across modules
        SelfReferenceError: Edge with source == target
    """
    if not separator:
        raise ValueError("separator must not be empty")

    interned = _intern_nodes(nodes, separator)
    collapsed, raw_count = _collapse_edges(edges, interned)

    structure = DiGraph.from_edges(collapsed, extra_nodes=interned)
    hierarchy = _build_hierarchy(interned, separator)

    logger.debug(
        "Built graph: %d nodes, %d edges (%d raw references)",
        len(interned),
        len(collapsed),
        raw_count,
    )

    return DependencyGraph(
        nodes=interned,
        edges=collapsed,
        structure=structure,
        hierarchy=hierarchy,
        separator=separator,
    )


def count_raw_references(graph: DependencyGraph) -> int:
    """Total raw references collapsed into graph edges."""
    return sum(edge.weight for edge in graph.edges.values())


def _intern_nodes(declarations: Iterable[NodeDeclaration], separator: str) -> dict[str, Node]:
    """Intern declarations by identifier, rejecting conflicts."""
    interned: dict[str, Node] = {}

    for declaration in declarations:
        identifier = declaration.identifier
        if any(not segment for segment in identifier.split(separator)):
            raise MalformedEdgeError(identifier, "identifier has an empty path segment")

        node = Node.from_declaration(declaration)
        existing = interned.get(identifier)
        if existing is None:
            interned[identifier] = node
        elif existing != node:
            raise MalformedEdgeError(
                identifier,
                f"conflicting redeclaration: {_describe(existing)} vs {_describe(node)}",
            )

    return interned


def _collapse_edges(
    declarations: Iterable[EdgeDeclaration],
    nodes: dict[str, Node],
) -> tuple[dict[tuple[str, str], Edge], int]:
    """Collapse raw references into one edge per (source, target)."""
    collapsed: dict[tuple[str, str], Edge] = {}
    raw_count = 0

    for declaration in declarations:
        raw_count += 1
        source, target = declaration.source, declaration.target
        label = f"{source}→{target}"

        if source == target:
            raise SelfReferenceError(source)
        if source not in nodes:
            raise MalformedEdgeError(label, f"source '{source}' is not declared")
        if target not in nodes:
            raise MalformedEdgeError(label, f"target '{target}' is not declared")

        if declaration.scope is EdgeScope.PACKAGE_LEVEL:
            source_module = nodes[source].owning_module
            target_module = nodes[target].owning_module
            if source_module != target_module:
                raise MalformedEdgeError(
                    label,
                    f"package-level edge crosses modules '{source_module}' and '{target_module}'",
                )

        existing = collapsed.get((source, target))
        if existing is None:
            collapsed[(source, target)] = Edge.from_declaration(declaration)
            continue
        try:
            collapsed[(source, target)] = existing.merge(declaration)
        except ValueError as e:
            raise MalformedEdgeError(label, str(e)) from e

    return collapsed, raw_count


def _build_hierarchy(nodes: dict[str, Node], separator: str) -> DiGraph[str]:
    """Link every node to its nearest declared ancestor.

    Intermediate path segments need not be declared: "a.b.c" under
    declared "a" (without "a.b") is a child of "a".
    """
    links: list[tuple[str, str]] = []
    for identifier in nodes:
        parent = parent_of(identifier, separator)
        while parent is not None and parent not in nodes:
            parent = parent_of(parent, separator)
        if parent is not None:
            links.append((parent, identifier))
    return DiGraph.from_edges(links, extra_nodes=nodes)


def _describe(node: Node) -> str:
    return (
        f"{node.kind.name}/module={node.owning_module}/"
        f"declarations={'yes' if node.has_declarations else 'no'}"
    )
