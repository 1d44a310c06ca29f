"""Tests for detectors/_registry.py."""

from archconform.application.detectors import (
    CycleDetector,
    HierarchyValidator,
    default_detectors,
    detectors_from_config,
)
from archconform.domain.model.configuration import AnalyzerConfig


class TestRegistry:
    """Tests for detector factory functions."""

    def test_default_detectors(self) -> None:
        detectors = default_detectors()
        assert [type(d) for d in detectors] == [CycleDetector, HierarchyValidator]

    def test_from_default_config(self) -> None:
        detectors = detectors_from_config(AnalyzerConfig())
        assert [d.name for d in detectors] == ["cycles", "hierarchy"]

    def test_disabled_detectors_not_instantiated(self) -> None:
        config = AnalyzerConfig(detect_cycles=False)
        assert [type(d) for d in detectors_from_config(config)] == [HierarchyValidator]

    def test_all_disabled(self) -> None:
        config = AnalyzerConfig(
            detect_cycles=False, detect_vertical=False, detect_parent_code=False
        )
        assert detectors_from_config(config) == ()
