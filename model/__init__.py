# model/__init__.py

"""
Data shapes for candidate executions of a concurrent program as emitted by
the memory-model evaluator: instruction events, named event sets, named
relations and the execution record bundling them. These types carry no
rendering logic.
"""

from .event import ModelEvent
from .execution import Edge, Execution, ModelRelation, ModelSet
from .initial_state import (
    INITIAL_STATE_LABEL,
    INITIAL_STATE_NODE,
    INITIAL_STATE_SHAPE,
)

__all__ = [
    "ModelEvent",
    "ModelSet",
    "ModelRelation",
    "Execution",
    "Edge",
    "INITIAL_STATE_NODE",
    "INITIAL_STATE_LABEL",
    "INITIAL_STATE_SHAPE",
]
