"""Domain enumerations.

All variants are closed: the severity table in the application layer
must cover every ViolationKind x ViolationScope pair.
"""

from __future__ import annotations

from enum import Enum, auto


class NodeKind(Enum):
    """Package role in the hierarchy."""

    ORGANIZING = auto()  # children only, no declarations
    CODE = auto()  # declarations only, no children


class EdgeScope(Enum):
    """Granularity at which a dependency was observed."""

    MODULE_LEVEL = auto()  # between release units
    PACKAGE_LEVEL = auto()  # between packages of one module


class Evidence(Enum):
    """What kind of reference produced an edge."""

    INVOCATION = auto()  # call of a function or method
    DATA_REFERENCE = auto()  # type, constant or field reference


class ViolationKind(Enum):
    """Structural violation kind."""

    CYCLE = auto()
    UPWARD_DEPENDENCY = auto()  # descendant → ancestor
    DOWNWARD_DEPENDENCY = auto()  # ancestor → descendant
    PARENT_HAS_CODE = auto()

    @property
    def is_vertical(self) -> bool:
        """True for both directions of ancestor/descendant dependency."""
        return self in (ViolationKind.UPWARD_DEPENDENCY, ViolationKind.DOWNWARD_DEPENDENCY)


class ViolationScope(Enum):
    """Graph scope a violation was found in."""

    MODULE = auto()
    PACKAGE = auto()

    @classmethod
    def of_edge(cls, scope: EdgeScope) -> ViolationScope:
        """Map edge scope to violation scope."""
        if scope is EdgeScope.MODULE_LEVEL:
            return cls.MODULE
        return cls.PACKAGE


class Severity(Enum):
    """Violation severity, ordered from most to least urgent."""

    HIGH = 0
    MEDIUM = 1
    LOW = 2
