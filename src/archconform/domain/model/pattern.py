"""Governed exception patterns.

Patterns are maintained outside the analyzer (versioned, named,
reviewed); the analyzer only evaluates them.
"""

from __future__ import annotations

from dataclasses import dataclass

from archconform.domain.model.enums import ViolationKind


@dataclass(frozen=True, slots=True)
class ExceptionPattern:
    """Declarative predicate over a violation's structural shape.

    Attributes:
        name: Unique pattern name within its table (must not be empty)
        version: Pattern revision (must not be empty)
        predicate: Registered predicate name, e.g. "member_contains"
        argument: Predicate argument, None for argument-less predicates
        kinds: Violation kinds the pattern applies to. None = all kinds.
        active: Inactive patterns stay in the table but never match
        rationale: Why the exception was granted
    """

    name: str
    version: str
    predicate: str
    argument: str | None = None
    kinds: frozenset[ViolationKind] | None = None
    active: bool = True
    rationale: str = ""

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        if not self.version:
            raise ValueError("version must not be empty")
        if not self.predicate:
            raise ValueError("predicate must not be empty")
        if self.kinds is not None and not self.kinds:
            raise ValueError("kinds must not be empty (use None for all kinds)")

    def applies_to(self, kind: ViolationKind) -> bool:
        """Check if pattern is evaluated for violations of kind."""
        return self.active and (self.kinds is None or kind in self.kinds)

    def __str__(self) -> str:
        return f"{self.name}@{self.version}"


@dataclass(frozen=True, slots=True)
class PatternTable:
    """Versioned, ordered table of exception patterns.

    Order matters only for attribution: a removed violation is
    credited to the first matching pattern.

    Attributes:
        version: Table revision (must not be empty)
        patterns: Patterns in evaluation order, names unique
    """

    version: str
    patterns: tuple[ExceptionPattern, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.version:
            raise ValueError("version must not be empty")
        seen: set[str] = set()
        for pattern in self.patterns:
            if pattern.name in seen:
                raise ValueError(f"duplicate pattern name '{pattern.name}'")
            seen.add(pattern.name)

    @property
    def active_patterns(self) -> tuple[ExceptionPattern, ...]:
        """Patterns that can match."""
        return tuple(p for p in self.patterns if p.active)

    def __len__(self) -> int:
        return len(self.patterns)

    @classmethod
    def empty(cls) -> PatternTable:
        """Table with no patterns (identity filter)."""
        return cls(version="0", patterns=())
