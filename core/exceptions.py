# core/exceptions.py
# This file is part of Execgraph - Memory-Model Execution Graphs
#
# Custom exceptions for execution selection and renderer construction

"""Domain-specific exceptions raised by the graph renderer.

The renderer is a formatting layer and trusts the shape of its input, so
the only errors it reports concern the caller's use of the candidate list:
constructing without candidates, or selecting a candidate that does not
exist. Malformed event names or dangling edge endpoints are not detected
here and surface only when the layout engine rejects the output.
"""


class ExecutionGraphError(RuntimeError):
    """Base class for errors raised by the execution graph renderer."""

    pass


class EmptyExecutionListError(ExecutionGraphError, ValueError):
    """Raised when a renderer is built without any candidate execution."""

    pass


class ExecutionSelectionError(ExecutionGraphError, IndexError):
    """Raised when selecting an execution index outside the candidate list."""

    def __init__(self, index: int, count: int) -> None:
        super().__init__(
            f"Execution index {index} out of range for {count} candidate execution(s)"
        )
        self.index = index
        self.count = count
