"""Loaders for front-end output and governed pattern tables.

The only file I/O of archconform. Runs before an analysis batch.

Input document (JSON):
    {
      "nodes": [{"identifier": "a.b", "kind": "Code",
                 "owningModule": "a", "hasDeclarations": true}],
      "edges": [{"from": "a.b", "to": "a.c",
                 "scope": "PackageLevel", "evidence": "Invocation"}]
    }

Pattern table (TOML or JSON, chosen by file suffix):
    version = "3"

    [[patterns]]
    name = "inner-classes"
    version = "1"
    predicate = "shared_stem"
    argument = "$"
    kinds = ["Cycle"]
    rationale = "Nested types compile to sibling units"
"""

from __future__ import annotations

import json
import tomllib
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, TypeVar

from archconform.domain.exceptions.graph import MalformedEdgeError
from archconform.domain.exceptions.pattern import InvalidPatternError
from archconform.domain.model.edge import EdgeDeclaration
from archconform.domain.model.enums import EdgeScope, Evidence, NodeKind, ViolationKind
from archconform.domain.model.node import NodeDeclaration
from archconform.domain.model.pattern import ExceptionPattern, PatternTable

if TYPE_CHECKING:
    from pathlib import Path

E = TypeVar("E", bound=Enum)


@dataclass(frozen=True, slots=True)
class GraphInput:
    """Parsed front-end document.

    Attributes:
        nodes: Node declarations in document order
        edges: Raw references in document order
    """

    nodes: tuple[NodeDeclaration, ...]
    edges: tuple[EdgeDeclaration, ...]


def parse_enum(enum_cls: type[E], value: object) -> E:
    """Parse enum member by name, ignoring case and underscores.

    "ModuleLevel", "MODULE_LEVEL" and "module_level" all map to
    EdgeScope.MODULE_LEVEL.

    Raises:
        ValueError: If value is not a string or names no member
    """
    if not isinstance(value, str):
        raise ValueError(f"expected {enum_cls.__name__} name, got {type(value).__name__}")
    wanted = value.replace("_", "").replace("-", "").lower()
    for member in enum_cls:
        if member.name.replace("_", "").lower() == wanted:
            return member
    choices = ", ".join(m.name for m in enum_cls)
    raise ValueError(f"unknown {enum_cls.__name__} '{value}' (expected one of: {choices})")


# =============================================================================
# Graph input
# =============================================================================


def parse_graph_input(document: object) -> GraphInput:
    """Convert decoded JSON document to declarations.

    Raises:
        MalformedEdgeError: Missing fields, wrong types, unknown enum names
    """
    if not isinstance(document, dict):
        raise MalformedEdgeError("<document>", "top level must be an object")

    raw_nodes = document.get("nodes", [])
    raw_edges = document.get("edges", [])
    if not isinstance(raw_nodes, list):
        raise MalformedEdgeError("<document>", "'nodes' must be a list")
    if not isinstance(raw_edges, list):
        raise MalformedEdgeError("<document>", "'edges' must be a list")

    nodes = tuple(_parse_node(i, raw) for i, raw in enumerate(raw_nodes))
    edges = tuple(_parse_edge(i, raw) for i, raw in enumerate(raw_edges))
    return GraphInput(nodes=nodes, edges=edges)


def load_graph_input(path: Path) -> GraphInput:
    """Read and parse front-end JSON document.

    Raises:
        FileNotFoundError: If path does not exist
        MalformedEdgeError: Invalid JSON or invalid content
    """
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise MalformedEdgeError(str(path), f"invalid JSON: {e}") from e
    return parse_graph_input(document)


def _parse_node(index: int, raw: object) -> NodeDeclaration:
    label = f"nodes[{index}]"
    if not isinstance(raw, dict):
        raise MalformedEdgeError(label, "node declaration must be an object")
    identifier = raw.get("identifier")
    if isinstance(identifier, str) and identifier:
        label = identifier
    try:
        has_declarations = raw.get("hasDeclarations", False)
        if not isinstance(has_declarations, bool):
            raise ValueError("hasDeclarations must be a boolean")
        return NodeDeclaration(
            identifier=_require_str(raw, "identifier"),
            kind=parse_enum(NodeKind, raw.get("kind")),
            owning_module=_require_str(raw, "owningModule"),
            has_declarations=has_declarations,
        )
    except (TypeError, ValueError) as e:
        raise MalformedEdgeError(label, str(e)) from e


def _parse_edge(index: int, raw: object) -> EdgeDeclaration:
    label = f"edges[{index}]"
    if not isinstance(raw, dict):
        raise MalformedEdgeError(label, "edge declaration must be an object")
    try:
        evidence = raw.get("evidence", Evidence.INVOCATION.name)
        return EdgeDeclaration(
            source=_require_str(raw, "from"),
            target=_require_str(raw, "to"),
            scope=parse_enum(EdgeScope, raw.get("scope")),
            evidence=parse_enum(Evidence, evidence),
        )
    except (TypeError, ValueError) as e:
        raise MalformedEdgeError(label, str(e)) from e


def _require_str(raw: dict[str, Any], key: str) -> str:
    value = raw.get(key)
    if not isinstance(value, str) or not value:
        raise ValueError(f"'{key}' must be a non-empty string")
    return value


# =============================================================================
# Pattern tables
# =============================================================================


def parse_pattern_table(document: object) -> PatternTable:
    """Convert decoded TOML/JSON document to a pattern table.

    Predicate names are not checked here; PatternExceptionEngine
    rejects unknown predicates when it compiles the table.

    Raises:
        InvalidPatternError: Missing fields, wrong types, duplicate names
    """
    if not isinstance(document, dict):
        raise InvalidPatternError("<table>", "top level must be a table")

    version = document.get("version")
    if not isinstance(version, str) or not version:
        raise InvalidPatternError("<table>", "'version' must be a non-empty string")

    raw_patterns = document.get("patterns", [])
    if not isinstance(raw_patterns, list):
        raise InvalidPatternError("<table>", "'patterns' must be a list")

    patterns = tuple(_parse_pattern(i, raw) for i, raw in enumerate(raw_patterns))
    try:
        return PatternTable(version=version, patterns=patterns)
    except ValueError as e:
        raise InvalidPatternError("<table>", str(e)) from e


def load_pattern_table(path: Path) -> PatternTable:
    """Read pattern table from a .toml or .json file.

    Raises:
        FileNotFoundError: If path does not exist
        InvalidPatternError: Unsupported suffix, syntax error or invalid content
    """
    suffix = path.suffix.lower()
    try:
        if suffix == ".toml":
            with path.open("rb") as f:
                document: object = tomllib.load(f)
        elif suffix == ".json":
            document = json.loads(path.read_text(encoding="utf-8"))
        else:
            raise InvalidPatternError(str(path), f"unsupported pattern table format '{suffix}'")
    except (tomllib.TOMLDecodeError, json.JSONDecodeError) as e:
        raise InvalidPatternError(str(path), f"cannot parse: {e}") from e
    return parse_pattern_table(document)


def _parse_pattern(index: int, raw: object) -> ExceptionPattern:
    label = f"patterns[{index}]"
    if not isinstance(raw, dict):
        raise InvalidPatternError(label, "pattern must be a table")
    name = raw.get("name")
    if isinstance(name, str) and name:
        label = name
    try:
        argument = raw.get("argument")
        if argument is not None and not isinstance(argument, str):
            raise ValueError("'argument' must be a string")
        active = raw.get("active", True)
        if not isinstance(active, bool):
            raise ValueError("'active' must be a boolean")
        rationale = raw.get("rationale", "")
        if not isinstance(rationale, str):
            raise ValueError("'rationale' must be a string")
        return ExceptionPattern(
            name=_require_str(raw, "name"),
            version=_require_str(raw, "version"),
            predicate=_require_str(raw, "predicate"),
            argument=argument,
            kinds=_parse_kinds(raw.get("kinds")),
            active=active,
            rationale=rationale,
        )
    except (TypeError, ValueError) as e:
        raise InvalidPatternError(label, str(e)) from e


def _parse_kinds(raw: object) -> frozenset[ViolationKind] | None:
    if raw is None:
        return None
    if not isinstance(raw, list):
        raise ValueError("'kinds' must be a list")
    return frozenset(parse_enum(ViolationKind, item) for item in raw)
