# model/event.py

"""
ModelEvent
==========

Immutable record of one dynamic instruction instance in a candidate
execution. Events are produced once by the memory-model evaluator and
never mutated. The `name` doubles as the node identifier in the rendered
graph, so it is expected to be a plain alphanumeric/underscore token.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class ModelEvent:
    instr: Optional[str]
    opcode: str
    po: int
    thread_id: int
    name: str
    value: Optional[str] = None

    @property
    def label(self) -> str:
        """Decoded mnemonic, or the raw opcode when disassembly failed."""
        return self.instr if self.instr else self.opcode

    def __str__(self) -> str:
        return f"{self.name}@T{self.thread_id}#{self.po}:{self.label}"
