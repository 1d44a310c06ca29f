"""archconform - architectural conformance analyzer for module/package graphs."""

__version__ = "0.1.0"

from archconform.application.services.analyzer import ConformanceAnalyzer, analyze

__all__ = ["ConformanceAnalyzer", "analyze", "__version__"]
