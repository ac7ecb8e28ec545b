# tests/conftest.py
# This file is part of Execgraph - Memory-Model Execution Graphs
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for execution graph tests.

Puts the project root on the import path and provides small candidate
executions shared by the model, renderer, reader and CLI tests.
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from model import Execution, ModelEvent, ModelRelation, ModelSet  # noqa: E402


def make_event(name, thread_id, po, opcode="0x0", instr=None, value=None) -> ModelEvent:
    """Factory for ModelEvent objects in tests."""
    return ModelEvent(
        instr=instr, opcode=opcode, po=po, thread_id=thread_id, name=name, value=value
    )


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Skip the session if the project packages cannot be imported."""
    try:
        import core
        import model
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def two_event_execution():
    """Two events on thread 0 joined by a single rf edge."""
    return Execution(
        events=(
            make_event("a", 0, 0, opcode="MOV"),
            make_event("b", 0, 1, opcode="MOV", instr="mov x0, x1", value="5"),
        ),
        relations=(ModelRelation("rf", (("a", "b"),)),),
    )


@pytest.fixture
def message_passing_execution():
    """Message-passing litmus shape: writer on thread 0, reader on thread 1."""
    return Execution(
        events=(
            make_event("W0", 0, 0, instr="str x1, [x0]", value="1"),
            make_event("W1", 0, 1, instr="str x1, [x2]", value="1"),
            make_event("R0", 1, 0, instr="ldr x3, [x2]", value="1"),
            make_event("R1", 1, 1, instr="ldr x4, [x0]", value="0"),
        ),
        sets=(ModelSet("W", ("W0", "W1")), ModelSet("R", ("R0", "R1"))),
        relations=(
            ModelRelation("co", (("IW0", "W0"),)),
            ModelRelation("rf", (("W1", "R0"),)),
            ModelRelation("fr", (("R1", "W0"),)),
            ModelRelation("addr", (("R0", "R1"),)),
            ModelRelation("po", (("W0", "W1"), ("R0", "R1"))),
        ),
        show=("rf", "fr"),
    )


@pytest.fixture
def execution_payload():
    """Decoded evaluator response with two candidate executions."""
    return [
        {
            "events": [
                {"instr": "mov x0, x1", "opcode": "0xaa0103e0", "po": 0,
                 "thread_id": 0, "name": "R0", "value": "5"},
                {"instr": None, "opcode": "0xd503201f", "po": 1,
                 "thread_id": 0, "name": "E1", "value": None},
            ],
            "sets": [{"name": "R", "elems": ["R0"]}],
            "relations": [{"name": "rf", "edges": [["E1", "R0"]]}],
            "show": ["rf"],
        },
        {
            "events": [
                {"instr": "str x1, [x0]", "opcode": "0xf9000001", "po": 0,
                 "thread_id": 1, "name": "W0", "value": 1},
            ],
            "sets": [],
            "relations": [],
            "show": [],
        },
    ]
