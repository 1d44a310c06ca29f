"""Tests for application/graph_builder.py."""

import pytest

from archconform.application.graph_builder import build_graph, count_raw_references
from archconform.domain.exceptions.graph import MalformedEdgeError, SelfReferenceError
from archconform.domain.model.enums import EdgeScope, Evidence, NodeKind
from tests.factories import code, mod_edge, organizing, pkg_edge


class TestBuildGraphNodes:
    """Node interning."""

    def test_empty_input(self) -> None:
        graph = build_graph([], [])
        assert graph.node_count == 0
        assert graph.edge_count == 0

    def test_isolated_nodes_kept(self) -> None:
        graph = build_graph([organizing("a"), code("a.b")], [])
        assert set(graph.nodes) == {"a", "a.b"}

    def test_identical_redeclaration_accepted(self) -> None:
        graph = build_graph([code("a.b"), code("a.b")], [])
        assert graph.node_count == 1

    def test_conflicting_kind_raises(self) -> None:
        with pytest.raises(MalformedEdgeError, match="conflicting redeclaration") as exc_info:
            build_graph([code("a.b"), organizing("a.b")], [])
        assert exc_info.value.identifier == "a.b"

    def test_conflicting_module_raises(self) -> None:
        with pytest.raises(MalformedEdgeError, match="conflicting redeclaration"):
            build_graph([code("a.b", module="a"), code("a.b", module="other")], [])

    def test_conflicting_declarations_flag_raises(self) -> None:
        with pytest.raises(MalformedEdgeError, match="conflicting redeclaration"):
            build_graph([code("a.b"), code("a.b", has_declarations=False)], [])

    @pytest.mark.parametrize("identifier", ["a..b", ".a", "a."])
    def test_empty_segment_raises(self, identifier: str) -> None:
        with pytest.raises(MalformedEdgeError, match="empty path segment"):
            build_graph([code(identifier, module="a")], [])

    def test_custom_separator(self) -> None:
        graph = build_graph(
            [organizing("a", module="a"), code("a/b", module="a")],
            [],
            separator="/",
        )
        assert graph.parent("a/b") == "a"


class TestBuildGraphEdges:
    """Edge insertion and collapsing."""

    def test_adjacency_and_reverse_index(self) -> None:
        graph = build_graph([code("a.b"), code("a.c")], [pkg_edge("a.b", "a.c")])
        assert graph.structure.successors("a.b") == frozenset({"a.c"})
        assert graph.structure.predecessors("a.c") == frozenset({"a.b"})

    def test_duplicates_collapse(self) -> None:
        graph = build_graph(
            [code("a.b"), code("a.c")],
            [pkg_edge("a.b", "a.c"), pkg_edge("a.b", "a.c"), pkg_edge("a.b", "a.c")],
        )
        assert graph.edge_count == 1
        assert count_raw_references(graph) == 3

    def test_collapsed_evidence_invocation_dominates(self) -> None:
        graph = build_graph(
            [code("a.b"), code("a.c")],
            [
                pkg_edge("a.b", "a.c", Evidence.DATA_REFERENCE),
                pkg_edge("a.b", "a.c", Evidence.INVOCATION),
            ],
        )
        edge = graph.edge("a.b", "a.c")
        assert edge is not None
        assert edge.evidence is Evidence.INVOCATION

    def test_direction_matters(self) -> None:
        graph = build_graph(
            [code("a.b"), code("a.c")],
            [pkg_edge("a.b", "a.c"), pkg_edge("a.c", "a.b")],
        )
        assert graph.edge_count == 2

    def test_self_reference_raises(self) -> None:
        with pytest.raises(SelfReferenceError) as exc_info:
            build_graph([code("a.b")], [pkg_edge("a.b", "a.b")])
        assert exc_info.value.identifier == "a.b"

    def test_undeclared_source_raises(self) -> None:
        with pytest.raises(MalformedEdgeError, match="source 'a.x' is not declared") as exc_info:
            build_graph([code("a.b")], [pkg_edge("a.x", "a.b")])
        assert exc_info.value.identifier == "a.x→a.b"

    def test_undeclared_target_raises(self) -> None:
        with pytest.raises(MalformedEdgeError, match="target 'a.x' is not declared"):
            build_graph([code("a.b")], [pkg_edge("a.b", "a.x")])

    def test_package_edge_across_modules_raises(self) -> None:
        with pytest.raises(MalformedEdgeError, match="crosses modules"):
            build_graph([code("x", module="m1"), code("y", module="m2")], [pkg_edge("x", "y")])

    def test_module_edge_across_modules_allowed(self) -> None:
        graph = build_graph([code("x", module="m1"), code("y", module="m2")], [mod_edge("x", "y")])
        edge = graph.edge("x", "y")
        assert edge is not None
        assert edge.scope is EdgeScope.MODULE_LEVEL

    def test_conflicting_scope_raises(self) -> None:
        with pytest.raises(MalformedEdgeError, match="conflicting scope"):
            build_graph(
                [code("a.b"), code("a.c")],
                [pkg_edge("a.b", "a.c"), mod_edge("a.b", "a.c")],
            )

    def test_edges_accepted_from_generator(self) -> None:
        edges = (pkg_edge("a.b", "a.c") for _ in range(2))
        graph = build_graph([code("a.b"), code("a.c")], edges)
        assert graph.edge_count == 1


class TestBuildGraphHierarchy:
    """Hierarchy index."""

    def test_children_of_declared_parent(self) -> None:
        graph = build_graph([organizing("a"), code("a.b"), code("a.c")], [])
        assert graph.children("a") == frozenset({"a.b", "a.c"})

    def test_undeclared_intermediate_is_skipped(self) -> None:
        graph = build_graph([organizing("a"), code("a.b.c")], [])
        assert graph.parent("a.b.c") == "a"

    def test_node_kinds_preserved(self) -> None:
        graph = build_graph([organizing("a"), code("a.b")], [])
        assert graph.node("a").kind is NodeKind.ORGANIZING
        assert graph.node("a.b").kind is NodeKind.CODE
