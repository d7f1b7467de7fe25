"""Lifecycle of a lint run."""

from enum import Enum
from typing import Dict, FrozenSet, List

from ..exceptions import InvalidStateTransition


class RunState(str, Enum):
    """States a run passes through, in order."""
    IDLE = "idle"
    CONFIG_RESOLVED = "config_resolved"
    TARGETS_RESOLVED = "targets_resolved"
    PARTITIONED = "partitioned"
    RUNNING = "running"
    FINALIZING = "finalizing"
    TERMINATED = "terminated"


_TRANSITIONS: Dict[RunState, FrozenSet[RunState]] = {
    RunState.IDLE: frozenset({RunState.CONFIG_RESOLVED}),
    RunState.CONFIG_RESOLVED: frozenset({RunState.TARGETS_RESOLVED}),
    RunState.TARGETS_RESOLVED: frozenset({RunState.PARTITIONED}),
    RunState.PARTITIONED: frozenset({RunState.RUNNING}),
    RunState.RUNNING: frozenset({RunState.RUNNING, RunState.FINALIZING}),
    RunState.FINALIZING: frozenset({RunState.TERMINATED}),
    RunState.TERMINATED: frozenset(),
}


class RunStateMachine:
    """
    Tracks a run's state and the number of workers still pending.

    RUNNING is re-entered once per worker completion; FINALIZING is only
    reachable once no worker is pending. ``abort`` ends a run early from
    any state (a fatal startup error).
    """

    def __init__(self):
        self.state = RunState.IDLE
        self.pending_workers = 0
        self.aborted = False
        self.history: List[RunState] = [RunState.IDLE]

    def transition(self, new_state: RunState):
        if new_state not in _TRANSITIONS[self.state]:
            raise InvalidStateTransition(
                f"Cannot move from {self.state.value} to {new_state.value}"
            )
        if new_state == RunState.FINALIZING and self.pending_workers:
            raise InvalidStateTransition(
                f"{self.pending_workers} worker(s) still pending"
            )
        self.state = new_state
        self.history.append(new_state)

    def start(self, workers: int):
        """Enter RUNNING with the given number of spawned workers."""
        self.pending_workers = workers
        self.transition(RunState.RUNNING)

    def worker_finished(self):
        """Record one worker completion."""
        if self.state != RunState.RUNNING or self.pending_workers <= 0:
            raise InvalidStateTransition("No worker is pending")
        self.pending_workers -= 1
        self.transition(RunState.RUNNING)

    def abort(self):
        self.aborted = True
        self.state = RunState.TERMINATED
        self.history.append(RunState.TERMINATED)
