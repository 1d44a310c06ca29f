"""Conformance violation exception."""

from __future__ import annotations

from typing import TYPE_CHECKING

from archconform.domain.exceptions.base import ArchConformError

if TYPE_CHECKING:
    from archconform.domain.model.violation import Violation


class ConformanceViolationError(ArchConformError):
    """Graph is not conformant.

    Raised by Report.raise_for_violations() when violations survived.

    Attributes:
        violations: All surviving violations
    """

    def __init__(self, violations: tuple[Violation, ...]) -> None:
        if not violations:
            raise ValueError("ConformanceViolationError requires at least one violation")

        self.violations = violations

        msg_parts = [f"Found {len(violations)} conformance violation(s):"]
        for v in violations:
            msg_parts.append(str(v))

        super().__init__("\n".join(msg_parts))
