"""Domain exceptions."""

from archconform.domain.exceptions.base import ArchConformError
from archconform.domain.exceptions.graph import MalformedEdgeError, SelfReferenceError
from archconform.domain.exceptions.pattern import InvalidPatternError
from archconform.domain.exceptions.violation import ConformanceViolationError

__all__ = [
    "ArchConformError",
    "MalformedEdgeError",
    "SelfReferenceError",
    "InvalidPatternError",
    "ConformanceViolationError",
]
