"""Pattern exception engine.

Removes violations fully matched by a governed exception pattern.
This is the only way a violation leaves the report; there is no
ignore list and no suppression by identifier.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from archconform.application.exceptions_engine.predicates import PREDICATES
from archconform.domain.exceptions.pattern import InvalidPatternError
from archconform.domain.model.node import DEFAULT_SEPARATOR
from archconform.domain.model.pattern import PatternTable

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from archconform.application.exceptions_engine.predicates import ViolationPredicate
    from archconform.domain.model.pattern import ExceptionPattern
    from archconform.domain.model.violation import Violation

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FilterResult:
    """Outcome of evaluating patterns against violations.

    Attributes:
        kept: Violations no pattern matched, input order preserved
        removed: Violations removed, input order preserved
        matches: Pattern name → removed violations credited to it
            (every active pattern present, 0 if unused)
    """

    kept: tuple[Violation, ...]
    removed: tuple[Violation, ...]
    matches: Mapping[str, int]

    @property
    def unused_patterns(self) -> tuple[str, ...]:
        """Active patterns that removed nothing, sorted."""
        return tuple(sorted(name for name, count in self.matches.items() if count == 0))


@dataclass(frozen=True, slots=True)
class _CompiledPattern:
    pattern: ExceptionPattern
    predicate: ViolationPredicate


class PatternExceptionEngine:
    """Evaluates an exception pattern table against violations.

    Overlapping patterns: a violation is removed if ANY active,
    applicable pattern matches. Removal is credited to the first
    matching pattern in table order.

    Example:
        table = PatternTable(
            version="3",
            patterns=(ExceptionPattern("inner-classes", "1", "shared_stem", "$"),),
        )
        engine = PatternExceptionEngine(table)
        result = engine.evaluate(violations)
    """

    def __init__(
        self,
        table: PatternTable | None = None,
        *,
        separator: str = DEFAULT_SEPARATOR,
    ) -> None:
        """Compile all patterns, active or not.

        Args:
            table: Governed pattern table. None = no patterns (identity).
            separator: Identifier separator used by segment-aware predicates

        Raises:
            InvalidPatternError: Unknown predicate or rejected argument
        """
        self._table = table if table is not None else PatternTable.empty()
        self._compiled = tuple(_compile(p, separator) for p in self._table.patterns)

    @property
    def table(self) -> PatternTable:
        """Pattern table being evaluated."""
        return self._table

    @property
    def pattern_count(self) -> int:
        """Number of active patterns."""
        return len(self._table.active_patterns)

    def evaluate(self, violations: Iterable[Violation]) -> FilterResult:
        """Split violations into kept and removed.

        Args:
            violations: Raw violations from detectors

        Returns:
            FilterResult; with no active patterns everything is kept
        """
        kept: list[Violation] = []
        removed: list[Violation] = []
        matches = {p.name: 0 for p in self._table.active_patterns}

        for violation in violations:
            matched = self._first_match(violation)
            if matched is None:
                kept.append(violation)
                continue
            removed.append(violation)
            matches[matched.name] += 1
            logger.debug("Exception %s removed %s", matched, violation)

        if removed:
            logger.info(
                "Exception patterns (table %s) removed %d of %d violations",
                self._table.version,
                len(removed),
                len(kept) + len(removed),
            )

        return FilterResult(
            kept=tuple(kept),
            removed=tuple(removed),
            matches=MappingProxyType(matches),
        )

    def matches(self, violation: Violation) -> bool:
        """Check if any active pattern removes violation."""
        return self._first_match(violation) is not None

    def _first_match(self, violation: Violation) -> ExceptionPattern | None:
        for compiled in self._compiled:
            if compiled.pattern.applies_to(violation.kind) and compiled.predicate(violation):
                return compiled.pattern
        return None


def _compile(pattern: ExceptionPattern, separator: str) -> _CompiledPattern:
    factory = PREDICATES.get(pattern.predicate)
    if factory is None:
        known = ", ".join(sorted(PREDICATES))
        raise InvalidPatternError(
            pattern.name,
            f"unknown predicate '{pattern.predicate}' (known: {known})",
        )
    try:
        predicate = factory(pattern.argument, separator)
    except ValueError as e:
        raise InvalidPatternError(pattern.name, str(e)) from e
    return _CompiledPattern(pattern=pattern, predicate=predicate)
