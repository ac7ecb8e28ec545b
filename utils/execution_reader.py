# utils/execution_reader.py
# This file is part of Execgraph - Memory-Model Execution Graphs
#
# JSON reader for candidate executions emitted by the memory-model evaluator

import json
from pathlib import Path
from typing import Any, List, Tuple

from model.event import ModelEvent
from model.execution import Edge, Execution, ModelRelation, ModelSet
from utils.logger import get_logger


class ExecutionFormatError(Exception):
    """Exception raised when execution data has an invalid shape."""

    pass


def read_executions(filepath: str) -> List[Execution]:
    """Read candidate executions from a JSON file.

    The file holds the evaluator's response, either a list of executions,
    a single execution, or an object with a "graphs" list:

        [{"events": [{"instr": "mov x0, x1", "opcode": "0xaa0103e0",
                      "po": 0, "thread_id": 0, "name": "R0", "value": null}],
          "sets": [{"name": "W", "elems": []}],
          "relations": [{"name": "rf", "edges": [["IW0", "R0"]]}],
          "show": ["rf"]}]

    Args:
        filepath: Path to the JSON file

    Returns:
        Parsed executions in file order

    Raises:
        ExecutionFormatError: If the file is missing, not JSON, or malformed
    """
    logger = get_logger()
    path = Path(filepath)

    if not path.exists():
        raise ExecutionFormatError(f"Execution file not found: {filepath}")

    logger.debug(f"Reading execution file: {filepath}")

    try:
        with open(path, "r", encoding="utf-8") as file:
            data = json.load(file)
    except json.JSONDecodeError as e:
        raise ExecutionFormatError(f"Invalid JSON in {filepath}: {e}") from e
    except OSError as e:
        raise ExecutionFormatError(f"Cannot open execution file: {filepath}: {e}") from e

    executions = parse_executions(data)
    logger.executions_loaded(len(executions), str(filepath))
    return executions


def parse_executions(data: Any) -> List[Execution]:
    """Convert a decoded evaluator response into Execution objects.

    Args:
        data: A list of execution objects, one execution object, or
            an object whose "graphs" key holds the list

    Returns:
        Parsed executions in input order

    Raises:
        ExecutionFormatError: If any execution is malformed
    """
    if isinstance(data, dict) and "graphs" in data:
        data = data["graphs"]
    elif isinstance(data, dict):
        data = [data]

    if not isinstance(data, list):
        raise ExecutionFormatError(
            f"Expected a list of executions, got {type(data).__name__}"
        )

    executions = []
    for index, raw in enumerate(data):
        try:
            executions.append(_parse_execution(raw))
        except ExecutionFormatError as e:
            raise ExecutionFormatError(f"Execution {index}: {e}") from e
    return executions


def validate_execution_file(filepath: str) -> None:
    """Validate an execution file by parsing all of it.

    Args:
        filepath: Path to the JSON file

    Raises:
        ExecutionFormatError: If validation fails
    """
    logger = get_logger()
    logger.debug(f"Validating execution file: {filepath}")

    try:
        executions = read_executions(filepath)
        logger.debug(f"Execution validation successful: {len(executions)} executions")
    except ExecutionFormatError as e:
        logger.error(f"❌ Execution validation failed: {e}")
        raise


def summarize_executions(executions: List[Execution]) -> List[Tuple[int, str]]:
    """One (index, description) pair per candidate execution."""
    return [(i, str(execution)) for i, execution in enumerate(executions)]


def _parse_execution(raw: Any) -> Execution:
    if not isinstance(raw, dict):
        raise ExecutionFormatError(f"Expected an object, got {type(raw).__name__}")
    if "events" not in raw:
        raise ExecutionFormatError("Missing required key: 'events'")

    events = []
    for i, ev in enumerate(_as_list(raw["events"], "events")):
        try:
            events.append(_parse_event(ev))
        except ExecutionFormatError as e:
            raise ExecutionFormatError(f"event {i}: {e}") from e

    return Execution(
        events=tuple(events),
        sets=tuple(_parse_set(s) for s in _as_list(raw.get("sets", []), "sets")),
        relations=tuple(
            _parse_relation(r) for r in _as_list(raw.get("relations", []), "relations")
        ),
        show=tuple(_parse_string(s, "show") for s in _as_list(raw.get("show", []), "show")),
    )


def _parse_event(raw: Any) -> ModelEvent:
    """Parse one event object.

    `instr` is null when the evaluator could not disassemble the opcode,
    and `value` is null for events that observe no value.
    """
    if not isinstance(raw, dict):
        raise ExecutionFormatError(f"Expected an object, got {type(raw).__name__}")
    try:
        instr = raw.get("instr")
        value = raw.get("value")
        return ModelEvent(
            instr=None if instr is None else _parse_string(instr, "instr"),
            opcode=_parse_string(raw["opcode"], "opcode"),
            po=_parse_int(raw["po"], "po"),
            thread_id=_parse_int(raw["thread_id"], "thread_id"),
            name=_parse_string(raw["name"], "name"),
            value=None if value is None else str(value),
        )
    except KeyError as e:
        raise ExecutionFormatError(f"Missing required key: {e}") from e


def _parse_set(raw: Any) -> ModelSet:
    if not isinstance(raw, dict):
        raise ExecutionFormatError(f"Invalid set: {raw!r}")
    try:
        return ModelSet(
            name=_parse_string(raw["name"], "set name"),
            elems=tuple(_parse_string(e, "set element") for e in _as_list(raw["elems"], "elems")),
        )
    except KeyError as e:
        raise ExecutionFormatError(f"Set missing required key: {e}") from e


def _parse_relation(raw: Any) -> ModelRelation:
    if not isinstance(raw, dict):
        raise ExecutionFormatError(f"Invalid relation: {raw!r}")
    try:
        name = _parse_string(raw["name"], "relation name")
        edges = tuple(_parse_edge(edge, name) for edge in _as_list(raw["edges"], "edges"))
    except KeyError as e:
        raise ExecutionFormatError(f"Relation missing required key: {e}") from e
    return ModelRelation(name=name, edges=edges)


def _parse_edge(raw: Any, relation_name: str) -> Edge:
    """Parse a [source, target] pair.

    Endpoints are not checked against the execution's events.
    """
    if not isinstance(raw, (list, tuple)) or len(raw) != 2:
        raise ExecutionFormatError(f"Edge of relation '{relation_name}' is not a pair: {raw!r}")
    src, dst = raw
    return (_parse_string(src, "edge source"), _parse_string(dst, "edge target"))


def _as_list(raw: Any, what: str) -> List[Any]:
    if not isinstance(raw, list):
        raise ExecutionFormatError(f"Field '{what}' must be a list, got {type(raw).__name__}")
    return raw


def _parse_string(raw: Any, what: str) -> str:
    if not isinstance(raw, str):
        raise ExecutionFormatError(f"Field '{what}' must be a string, got {raw!r}")
    return raw


def _parse_int(raw: Any, what: str) -> int:
    # bool is an int subclass but never a valid index
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise ExecutionFormatError(f"Field '{what}' must be an integer, got {raw!r}")
    return raw
