"""Analyzer configuration.

None/False = feature disabled, value = feature enabled with that config.
"""

from __future__ import annotations

from dataclasses import dataclass

from archconform.domain.model.node import DEFAULT_SEPARATOR


@dataclass(frozen=True, slots=True)
class AnalyzerConfig:
    """Analyzer configuration DTO.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        separator: Identifier segment separator (must not be empty)
        parallel: Run detectors as concurrent tasks over the shared graph
        detect_cycles: Enable CycleDetector
        detect_vertical: Enable vertical dependency check of HierarchyValidator
        detect_parent_code: Enable parent-has-code check of HierarchyValidator
    """

    separator: str = DEFAULT_SEPARATOR
    parallel: bool = True
    detect_cycles: bool = True
    detect_vertical: bool = True
    detect_parent_code: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.separator:
            raise ValueError("separator must not be empty")
        if self.separator.strip() != self.separator:
            raise ValueError(f"separator must not contain whitespace, got {self.separator!r}")

    def has_hierarchy_config(self) -> bool:
        """Check if any hierarchy check is enabled."""
        return self.detect_vertical or self.detect_parent_code
