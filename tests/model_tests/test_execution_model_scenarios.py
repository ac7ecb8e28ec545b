# tests/model_tests/test_execution_model_scenarios.py

import pytest
from dataclasses import FrozenInstanceError

from model import Execution, ModelEvent, ModelRelation, ModelSet
from conftest import make_event


class TestModelEvent:
    """ModelEvent labels, immutability and string form."""

    def test_label_prefers_decoded_instruction(self):
        ev = make_event("e", 0, 0, opcode="0xaa0103e0", instr="mov x0, x1")
        assert ev.label == "mov x0, x1"

    def test_label_falls_back_to_opcode(self):
        assert make_event("e", 0, 0, opcode="0xd503201f").label == "0xd503201f"
        assert make_event("e", 0, 0, opcode="0xd503201f", instr="").label == "0xd503201f"

    def test_events_are_immutable(self):
        ev = make_event("e", 0, 0)
        with pytest.raises(FrozenInstanceError):
            ev.po = 3

    def test_equality_and_hash(self):
        e1 = make_event("e", 1, 2, value="7")
        e2 = make_event("e", 1, 2, value="7")
        assert e1 == e2
        assert hash(e1) == hash(e2)
        assert e1 != make_event("e", 1, 3, value="7")

    def test_str(self):
        assert str(make_event("R0", 1, 4, opcode="LDR")) == "R0@T1#4:LDR"


class TestExecutionQueries:
    """Thread discovery and lookups over an Execution."""

    def test_thread_ids_in_first_seen_order(self):
        execution = Execution(
            events=(
                make_event("c", 2, 0),
                make_event("a", 0, 0),
                make_event("d", 2, 1),
                make_event("b", 1, 0),
            )
        )
        assert execution.thread_ids() == (2, 0, 1)

    def test_events_of_keeps_list_order(self):
        execution = Execution(
            events=(make_event("late", 0, 5), make_event("x", 1, 0), make_event("early", 0, 1))
        )
        assert [ev.name for ev in execution.events_of(0)] == ["late", "early"]
        assert execution.events_of(7) == ()

    def test_empty_execution(self):
        execution = Execution()
        assert execution.thread_ids() == ()
        assert execution.relation("rf") is None
        assert execution.edge_counts() == {}

    def test_relation_lookup(self, message_passing_execution):
        rf = message_passing_execution.relation("rf")
        assert rf == ModelRelation("rf", (("W1", "R0"),))
        assert len(message_passing_execution.relations_named("po")[0]) == 2
        assert message_passing_execution.relation("ctrl") is None

    def test_relations_named_returns_duplicates_in_order(self):
        first = ModelRelation("rf", (("a", "b"),))
        second = ModelRelation("rf", (("c", "d"),))
        execution = Execution(relations=(first, ModelRelation("co"), second))
        assert execution.relations_named("rf") == (first, second)
        assert execution.edge_counts() == {"rf": 2, "co": 0}

    def test_named_sets(self, message_passing_execution):
        writes = message_passing_execution.set_named("W")
        assert isinstance(writes, ModelSet)
        assert "W1" in writes
        assert "R0" not in writes
        assert len(writes) == 2
        assert message_passing_execution.set_named("F") is None

    def test_event_named(self, message_passing_execution):
        ev = message_passing_execution.event_named("R1")
        assert isinstance(ev, ModelEvent)
        assert ev.value == "0"
        assert message_passing_execution.event_named("IW0") is None

    def test_str_summary(self, message_passing_execution):
        assert str(message_passing_execution) == (
            "Execution(events=4, threads=2, relations=co,rf,fr,addr,po)"
        )
        assert str(Execution()) == "Execution(events=0, threads=0, relations=-)"
