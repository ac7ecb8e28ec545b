# utils/__init__.py
# This file is part of Execgraph - Memory-Model Execution Graphs
#
# Utility module exports

from .execution_reader import (
    read_executions,
    parse_executions,
    validate_execution_file,
    summarize_executions,
    ExecutionFormatError,
)
from .graph_export import export_graph, GRAPHVIZ_AVAILABLE

__all__ = [
    "read_executions",
    "parse_executions",
    "validate_execution_file",
    "summarize_executions",
    "ExecutionFormatError",
    "export_graph",
    "GRAPHVIZ_AVAILABLE",
]
