"""Base reporter class for report output.

Provides default implementation of ReporterProtocol.
Concrete reporters inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from archconform.domain.model.report import Report


class BaseReporter(ABC):
    """Base class for reporters implementing ReporterProtocol.

    Example:
        class CountReporter(BaseReporter):
            def report(self, report: Report) -> None:
                print(f"Violations: {report.total}")
    """

    @abstractmethod
    def report(self, report: Report) -> None:
        """Emit report.

        Args:
            report: Immutable analysis report
        """
