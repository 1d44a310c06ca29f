"""JSON reporter for machine-readable output.

Keys are sorted so identical reports serialize to identical bytes.
"""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, TextIO

from archconform.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from archconform.domain.model.report import Report


class JSONReporter(BaseReporter):
    """JSON reporter for CI/CD integration and metric dashboards."""

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        self._output = output if output is not None else sys.stdout
        self._indent = indent

    def report(self, report: Report) -> None:
        """Write report as JSON followed by a newline."""
        self._output.write(self.dumps(report))
        self._output.write("\n")

    def dumps(self, report: Report) -> str:
        """Serialize report to JSON string."""
        return json.dumps(report.to_dict(), indent=self._indent, sort_keys=True)
