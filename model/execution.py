# model/execution.py

"""
Execution
=========

One candidate execution as emitted by the evaluator: its events, the named
event sets, the named relations between events and the evaluator's `show`
hint. All containers are tuples so an Execution can be shared freely
between views.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from .event import ModelEvent

Edge = Tuple[str, str]


@dataclass(frozen=True, slots=True)
class ModelSet:
    name: str
    elems: Tuple[str, ...] = field(default_factory=tuple)

    def __contains__(self, event_name: object) -> bool:
        return event_name in self.elems

    def __len__(self) -> int:
        return len(self.elems)


@dataclass(frozen=True, slots=True)
class ModelRelation:
    name: str
    edges: Tuple[Edge, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.edges)


@dataclass(frozen=True, slots=True)
class Execution:
    events: Tuple[ModelEvent, ...] = field(default_factory=tuple)
    sets: Tuple[ModelSet, ...] = field(default_factory=tuple)
    relations: Tuple[ModelRelation, ...] = field(default_factory=tuple)
    show: Tuple[str, ...] = field(default_factory=tuple)

    def thread_ids(self) -> Tuple[int, ...]:
        """Thread identifiers in the order they are first seen in `events`."""
        return tuple(dict.fromkeys(ev.thread_id for ev in self.events))

    def events_of(self, thread_id: int) -> Tuple[ModelEvent, ...]:
        """Events of one thread, in event-list order (not re-sorted by po)."""
        return tuple(ev for ev in self.events if ev.thread_id == thread_id)

    def event_named(self, name: str) -> Optional[ModelEvent]:
        for ev in self.events:
            if ev.name == name:
                return ev
        return None

    def relations_named(self, name: str) -> Tuple[ModelRelation, ...]:
        """All relations carrying `name`, in the order the evaluator sent them."""
        return tuple(rel for rel in self.relations if rel.name == name)

    def relation(self, name: str) -> Optional[ModelRelation]:
        found = self.relations_named(name)
        return found[0] if found else None

    def set_named(self, name: str) -> Optional[ModelSet]:
        for s in self.sets:
            if s.name == name:
                return s
        return None

    def edge_counts(self) -> Dict[str, int]:
        """Number of edges per relation name."""
        counts: Dict[str, int] = {}
        for rel in self.relations:
            counts[rel.name] = counts.get(rel.name, 0) + len(rel.edges)
        return counts

    def __str__(self) -> str:
        return (
            f"Execution(events={len(self.events)}, threads={len(self.thread_ids())}, "
            f"relations={','.join(rel.name for rel in self.relations) or '-'})"
        )
