"""Metrics aggregation into the report contract."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from archconform.domain.model.report import ALL_METRICS, Report

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from archconform.domain.model.violation import Violation


class MetricsReporter:
    """Builds the Report from classified violations.

    - duplicates (same kind, scope and members) are reported once
    - order: severity, kind, scope, members
    - each violation is counted in exactly one (kind, scope) slot
    """

    def build(
        self,
        violations: Iterable[Violation],
        pattern_matches: Mapping[str, int] | None = None,
    ) -> Report:
        """Aggregate violations into a report.

        Args:
            violations: Classified violations that survived exception patterns
            pattern_matches: Pattern name → violations it removed

        Returns:
            Immutable Report

        Raises:
            ValueError: If a violation is not classified
        """
        unique: dict[Violation, Violation] = {}
        for violation in violations:
            if not violation.classified:
                raise ValueError(f"violation not classified: {violation}")
            unique.setdefault(violation, violation)

        ordered = tuple(sorted(unique.values(), key=lambda v: v.sort_key()))

        counts = dict.fromkeys(ALL_METRICS, 0)
        for violation in ordered:
            for key in ALL_METRICS:
                if key.matches(violation):
                    counts[key] += 1

        return Report(
            counts=MappingProxyType(counts),
            violations=ordered,
            pattern_matches=MappingProxyType(dict(pattern_matches or {})),
        )
