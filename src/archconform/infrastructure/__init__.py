"""Infrastructure adapters: file loaders for input and pattern tables."""

from archconform.infrastructure.loaders import (
    GraphInput,
    load_graph_input,
    load_pattern_table,
    parse_graph_input,
    parse_pattern_table,
)

__all__ = [
    "GraphInput",
    "load_graph_input",
    "load_pattern_table",
    "parse_graph_input",
    "parse_pattern_table",
]
