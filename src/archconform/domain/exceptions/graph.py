"""Graph construction exceptions.

Both are fatal to an analysis run: construction aborts before any
detector sees the graph.
"""

from archconform.domain.exceptions.base import ArchConformError


class MalformedEdgeError(ArchConformError, ValueError):
    """Input graph is structurally invalid.

    Raised when an edge references an undeclared node, a node is
    redeclared with conflicting metadata, or an edge contradicts
    the module structure.

    Attributes:
        identifier: Offending node or edge identifier (must not be empty)
        reason: Why input is invalid (must not be empty)
    """

    def __init__(self, identifier: str, reason: str) -> None:
        # FAIL-FIRST validation
        if not identifier:
            raise ValueError("identifier must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.identifier = identifier
        self.reason = reason
        super().__init__(f"Malformed input at '{identifier}': {reason}")


class SelfReferenceError(ArchConformError, ValueError):
    """Edge points from a node to itself.

    Self-edges are a data error, never a cycle.

    Attributes:
        identifier: Node that references itself
    """

    def __init__(self, identifier: str) -> None:
        if not identifier:
            raise ValueError("identifier must not be empty")

        self.identifier = identifier
        super().__init__(f"Self-referencing edge: {identifier} → {identifier}")
