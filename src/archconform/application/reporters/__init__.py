"""Reporters for analysis reports."""

from archconform.application.reporters._base import BaseReporter
from archconform.application.reporters.json_reporter import JSONReporter

__all__ = [
    "BaseReporter",
    "JSONReporter",
]
