# core/__init__.py
# This file is part of Execgraph - Memory-Model Execution Graphs
#
# Core module public API for rendering candidate executions

"""Core components for rendering memory-model executions as graphs.

A memory-model evaluator produces one or more candidate executions of a
concurrent litmus program: per-thread instruction events plus relations
such as reads-from, coherence and from-reads. This package turns the
selected candidate into Graphviz DOT text, one dashed cluster per thread
with its program-order chain, and one colored edge per relation pair for
every relation on the draw list.

Primary Components:
    GraphRenderer: Holds the candidates, the current selection and the draw list
    render_execution: Pure serialization of one execution into DOT text
    RelationStyle: Color and layout hint for a relation name

Example:
    >>> from core import GraphRenderer
    >>> from utils import read_executions
    >>> renderer = GraphRenderer(read_executions("executions.json"))
    >>> renderer.draw = ["rf", "co"]
    >>> dot = renderer.render()
"""

from .exceptions import (
    EmptyExecutionListError,
    ExecutionGraphError,
    ExecutionSelectionError,
)
from .relation_style import (
    DEFAULT_RELATION_STYLE,
    RELATION_STYLES,
    RelationStyle,
    color_of,
    extra_attributes_of,
    style_of,
)
from .renderer import DEFAULT_DRAW_ORDER, GraphRenderer, render_execution

__all__ = [
    "GraphRenderer",
    "render_execution",
    "DEFAULT_DRAW_ORDER",
    "RelationStyle",
    "RELATION_STYLES",
    "DEFAULT_RELATION_STYLE",
    "style_of",
    "color_of",
    "extra_attributes_of",
    "ExecutionGraphError",
    "EmptyExecutionListError",
    "ExecutionSelectionError",
]

__version__ = "1.0.0"
__description__ = "Graphviz rendering of memory-model candidate executions"
