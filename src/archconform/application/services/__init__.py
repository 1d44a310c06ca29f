"""Application services."""

from archconform.application.services.analyzer import ConformanceAnalyzer, analyze

__all__ = ["ConformanceAnalyzer", "analyze"]
