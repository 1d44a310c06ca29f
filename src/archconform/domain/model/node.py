"""Graph node value objects."""

from __future__ import annotations

from dataclasses import dataclass

from archconform.domain.model.enums import NodeKind

DEFAULT_SEPARATOR = "."


@dataclass(frozen=True, slots=True)
class NodeDeclaration:
    """Node as declared by the source-parsing front end.

    Attributes:
        identifier: Fully qualified dotted path (must not be empty)
        kind: ORGANIZING or CODE
        owning_module: Release unit owning this node (must not be empty)
        has_declarations: Front end saw declarations directly in this node
    """

    identifier: str
    kind: NodeKind
    owning_module: str
    has_declarations: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.identifier:
            raise ValueError("identifier must not be empty")
        if not self.owning_module:
            raise ValueError("owning_module must not be empty")
        if not isinstance(self.kind, NodeKind):
            raise TypeError(f"kind must be NodeKind, got {type(self.kind).__name__}")


@dataclass(frozen=True, slots=True)
class Node:
    """Interned graph node.

    Created once per identifier by the graph builder.
    Ordering is by identifier so sorted() gives report order.

    Attributes:
        identifier: Fully qualified dotted path
        kind: ORGANIZING or CODE
        owning_module: Release unit owning this node
        has_declarations: Node directly owns declarations
    """

    identifier: str
    kind: NodeKind
    owning_module: str
    has_declarations: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.identifier:
            raise ValueError("identifier must not be empty")
        if not self.owning_module:
            raise ValueError("owning_module must not be empty")

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.identifier < other.identifier

    def __str__(self) -> str:
        return self.identifier

    @classmethod
    def from_declaration(cls, declaration: NodeDeclaration) -> Node:
        """Intern a front-end declaration."""
        return cls(
            identifier=declaration.identifier,
            kind=declaration.kind,
            owning_module=declaration.owning_module,
            has_declarations=declaration.has_declarations,
        )

    def is_ancestor_of(self, other: Node, separator: str = DEFAULT_SEPARATOR) -> bool:
        """Check strict package-path ancestry.

        Examples:
            "a" is ancestor of "a.b" and "a.b.c"
            "a" is NOT ancestor of "ab" or "a"
        """
        return is_ancestor(self.identifier, other.identifier, separator)

    def is_module_root(self) -> bool:
        """True if node is the root package of its module."""
        return self.identifier == self.owning_module


def is_ancestor(ancestor: str, descendant: str, separator: str = DEFAULT_SEPARATOR) -> bool:
    """Check if ancestor is a strict path prefix of descendant.

    Args:
        ancestor: Candidate ancestor identifier
        descendant: Candidate descendant identifier
        separator: Path segment separator

    Returns:
        True if descendant starts with ancestor + separator
    """
    return descendant.startswith(ancestor + separator)


def parent_of(identifier: str, separator: str = DEFAULT_SEPARATOR) -> str | None:
    """Get parent path of identifier, None for top-level."""
    head, sep, _ = identifier.rpartition(separator)
    if not sep:
        return None
    return head
