"""Structural detectors for dependency graphs.

Detectors read a DependencyGraph and emit unclassified violations:
- CycleDetector: module and package cycles
- HierarchyValidator: vertical dependencies, parents with code
"""

from archconform.application.detectors._base import BaseDetector
from archconform.application.detectors._registry import (
    default_detectors,
    detectors_from_config,
)
from archconform.application.detectors.cycle_detector import CycleDetector
from archconform.application.detectors.hierarchy_validator import HierarchyValidator

__all__ = [
    # Base
    "BaseDetector",
    # Detectors
    "CycleDetector",
    "HierarchyValidator",
    # Factory functions
    "default_detectors",
    "detectors_from_config",
]
