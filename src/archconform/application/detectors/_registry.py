"""Detector registry.

Central registry of all detectors with factory functions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from archconform.application.detectors._base import BaseDetector
from archconform.application.detectors.cycle_detector import CycleDetector
from archconform.application.detectors.hierarchy_validator import HierarchyValidator

if TYPE_CHECKING:
    from archconform.domain.model.configuration import AnalyzerConfig
    from archconform.domain.ports.detector import DetectorProtocol


# Registry - tuple for immutability
# Order matters: violations are concatenated in this order
_ALL_DETECTORS: tuple[type[BaseDetector], ...] = (
    CycleDetector,
    HierarchyValidator,
)


def default_detectors() -> tuple[DetectorProtocol, ...]:
    """Instantiate all detectors with every check enabled."""
    return (CycleDetector(), HierarchyValidator())


def detectors_from_config(config: AnalyzerConfig) -> tuple[DetectorProtocol, ...]:
    """Instantiate detectors based on config.

    Detectors are created using their from_config() factory method.
    If from_config() returns None, the detector is disabled.

    Args:
        config: Analyzer configuration

    Returns:
        Tuple of enabled detectors, in registry order
    """
    detectors: list[DetectorProtocol] = []

    for detector_cls in _ALL_DETECTORS:
        detector = detector_cls.from_config(config)
        if detector is not None:
            detectors.append(detector)

    return tuple(detectors)
