"""Governed exception patterns: compilation and evaluation."""

from archconform.application.exceptions_engine.engine import FilterResult, PatternExceptionEngine
from archconform.application.exceptions_engine.globs import CompiledGlob, compile_glob
from archconform.application.exceptions_engine.predicates import PREDICATES

__all__ = [
    "PatternExceptionEngine",
    "FilterResult",
    "PREDICATES",
    "CompiledGlob",
    "compile_glob",
]
