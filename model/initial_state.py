# model/initial_state.py

"""
Constants for the distinguished node standing for the memory state before
any thread runs. Every thread's earliest event is anchored beneath it.
"""

INITIAL_STATE_NODE = "IW"  #: Node identifier of the initial state in the rendered graph.
INITIAL_STATE_LABEL = "Initial State"
INITIAL_STATE_SHAPE = "hexagon"
