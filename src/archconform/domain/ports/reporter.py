"""Reporter protocol for output serialization.

Users extend archconform by implementing this Protocol.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from archconform.domain.model.report import Report


class ReporterProtocol(Protocol):
    """Contract for reporters.

    archconform provides JSONReporter. Rendering for humans is left
    to callers implementing this Protocol.
    """

    def report(self, report: Report) -> None:
        """Emit report.

        Args:
            report: Immutable analysis report
        """
        ...
