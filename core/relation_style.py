# core/relation_style.py
# This file is part of Execgraph - Memory-Model Execution Graphs
#
# Display colors and layout hints for memory-model relations

"""Relation styling for rendered executions.

Each relation name the evaluator knows about maps to a fixed Graphviz
color and an optional attribute fragment appended to every edge of that
relation. Names outside the table fall back to the default style.
Coherence alone takes part in ranking, so writes to one location line up
in coherence order.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True, slots=True)
class RelationStyle:
    color: str
    extra: str = ""


DEFAULT_RELATION_STYLE = RelationStyle(color="black")

RELATION_STYLES: Dict[str, RelationStyle] = {
    "rf": RelationStyle(color="crimson"),
    "co": RelationStyle(color="goldenrod", extra=",constraint=true"),
    "fr": RelationStyle(color="limegreen"),
    "addr": RelationStyle(color="blue2"),
    "data": RelationStyle(color="darkgreen"),
    "ctrl": RelationStyle(color="darkorange2"),
    "rmw": RelationStyle(color="firebrick4"),
}


def style_of(relation_name: str) -> RelationStyle:
    """Return the style for `relation_name`, or the default for unknown names."""
    return RELATION_STYLES.get(relation_name, DEFAULT_RELATION_STYLE)


def color_of(relation_name: str) -> str:
    return style_of(relation_name).color


def extra_attributes_of(relation_name: str) -> str:
    """Attribute fragment (leading comma included) appended to the edge, or ''."""
    return style_of(relation_name).extra
