# core/renderer.py
# This file is part of Execgraph - Memory-Model Execution Graphs
#
# Serialization of a candidate execution into Graphviz DOT text

"""Graph renderer for candidate executions.

The renderer holds every candidate execution the evaluator produced, an
index selecting the current one, and the draw list naming the relations to
emit. `render()` turns the current execution into DOT text for an external
layout engine:

    digraph Exec {
      IW [label="Initial State",shape=hexagon];
      subgraph cluster0 {
        ...one box per event, then the program-order chain...
      }
      IW -> <earliest event of thread 0> [style=invis,constraint=true]
      <src> -> <dst> [color=crimson,label="  rf  ",fontcolor=crimson]
    }

No escaping or validation is performed: event names are used verbatim as
node identifiers, and relation edges naming unknown events are emitted
as-is.
"""

from __future__ import annotations
from typing import Iterable, List, Optional, Sequence, Tuple

from model.event import ModelEvent
from model.execution import Execution
from model.initial_state import (
    INITIAL_STATE_LABEL,
    INITIAL_STATE_NODE,
    INITIAL_STATE_SHAPE,
)
from utils.logger import get_logger

from .exceptions import EmptyExecutionListError, ExecutionSelectionError
from .relation_style import color_of, extra_attributes_of

DEFAULT_DRAW_ORDER: Tuple[str, ...] = ("rf", "co", "fr", "addr", "data", "ctrl", "rmw")

logger = get_logger()


def _event_node(ev: ModelEvent) -> str:
    if ev.value:
        return f'    {ev.name} [shape=box,label="{ev.label}\\l{ev.value}"];\n'
    return f'    {ev.name} [shape=box,label="{ev.label}"];\n'


def _earliest_event(events: Sequence[ModelEvent]) -> Optional[ModelEvent]:
    """Event with the lowest po; the first one wins on ties."""
    earliest = None
    for ev in events:
        if earliest is None or ev.po < earliest.po:
            earliest = ev
    return earliest


def _thread_cluster(thread_id: int, events: Sequence[ModelEvent]) -> str:
    out = [
        f"  subgraph cluster{thread_id} {{\n",
        f'    label="Thread #{thread_id}"\n',
        "    style=dashed\n",
        "    color=gray50\n",
    ]
    out.extend(_event_node(ev) for ev in events)
    # Chained in event-list order; the evaluator emits each thread po-sorted.
    out.append("    " + " -> ".join(ev.name for ev in events) + ";\n")
    out.append("  }\n")

    earliest = _earliest_event(events)
    if earliest is not None:
        out.append(f"  {INITIAL_STATE_NODE} -> {earliest.name} [style=invis,constraint=true]\n")
    return "".join(out)


def _relation_edges(execution: Execution, draw: Iterable[str]) -> str:
    out = []
    for to_draw in draw:
        for rel in execution.relations_named(to_draw):
            color = color_of(rel.name)
            extra = extra_attributes_of(rel.name)
            for src, dst in rel.edges:
                # Padding around the label spaces the layout out
                out.append(
                    f'  {src} -> {dst} [color={color},label="  {rel.name}  ",'
                    f"fontcolor={color}{extra}]\n"
                )
    return "".join(out)


def render_execution(execution: Execution, draw: Iterable[str] = DEFAULT_DRAW_ORDER) -> str:
    """Serialize one execution into DOT text.

    Args:
        execution: The candidate execution to draw
        draw: Relation names to emit, in emission order

    Returns:
        Complete `digraph Exec { ... }` description ending in a newline
    """
    parts = [
        "digraph Exec {\n",
        f'  {INITIAL_STATE_NODE} [label="{INITIAL_STATE_LABEL}",shape={INITIAL_STATE_SHAPE}];\n',
    ]
    for thread_id in execution.thread_ids():
        parts.append(_thread_cluster(thread_id, execution.events_of(thread_id)))
    parts.append(_relation_edges(execution, draw))
    parts.append("}\n")
    return "".join(parts)


class GraphRenderer:
    """Renders the currently selected candidate execution as DOT text.

    The candidate list is fixed at construction. The current execution is
    tracked by index and the draw list is owned by the renderer; both may be
    changed between calls to `render()`. Instances are not meant to be
    shared across threads.
    """

    def __init__(self, executions: Iterable[Execution]) -> None:
        """Initialize the renderer with the first candidate selected.

        Args:
            executions: Candidate executions in evaluator order

        Raises:
            EmptyExecutionListError: If no candidate execution is given
        """
        self._executions: Tuple[Execution, ...] = tuple(executions)
        if not self._executions:
            raise EmptyExecutionListError("GraphRenderer needs at least one candidate execution")
        self._current = 0
        self._draw: List[str] = list(DEFAULT_DRAW_ORDER)
        logger.debug(f"Renderer created with {len(self._executions)} candidate execution(s)")

    @property
    def executions(self) -> Tuple[Execution, ...]:
        return self._executions

    @property
    def current_index(self) -> int:
        return self._current

    @property
    def current(self) -> Execution:
        return self._executions[self._current]

    def __len__(self) -> int:
        return len(self._executions)

    def select(self, index: int) -> Execution:
        """Make the candidate at `index` current.

        Raises:
            ExecutionSelectionError: If `index` is negative or past the end
        """
        if not 0 <= index < len(self._executions):
            raise ExecutionSelectionError(index, len(self._executions))
        self._current = index
        logger.execution_selected(index, len(self._executions))
        return self.current

    def next(self) -> int:
        """Step to the following candidate, wrapping around; returns the new index."""
        self.select((self._current + 1) % len(self._executions))
        return self._current

    def previous(self) -> int:
        self.select((self._current - 1) % len(self._executions))
        return self._current

    @property
    def draw(self) -> List[str]:
        return list(self._draw)

    @draw.setter
    def draw(self, names: Iterable[str]) -> None:
        self._draw = list(names)
        logger.debug(f"Draw list set to {self._draw}")

    def toggle_relation(self, name: str) -> bool:
        """Add `name` to the end of the draw list, or remove it if present.

        Returns:
            True if the relation is drawn after the call
        """
        if name in self._draw:
            self._draw = [n for n in self._draw if n != name]
            return False
        self._draw.append(name)
        return True

    def reset_draw(self) -> None:
        self._draw = list(DEFAULT_DRAW_ORDER)

    def draw_shown(self) -> None:
        """Replace the draw list with the current execution's `show` hint."""
        self._draw = list(self.current.show)

    def render(self) -> str:
        dot = render_execution(self.current, self._draw)
        logger.render_summary(
            self._current, len(self.current.events), len(self.current.thread_ids()), dot.count("\n")
        )
        return dot
