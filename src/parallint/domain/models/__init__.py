"""Domain models."""

from .lint import (
    Severity,
    Diagnostic,
    FileResult,
    FileChunk,
    WorkerOutcome,
    RunOptions,
    LintRunSummary,
)
from .run_state import RunState, RunStateMachine

__all__ = [
    "Severity",
    "Diagnostic",
    "FileResult",
    "FileChunk",
    "WorkerOutcome",
    "RunOptions",
    "LintRunSummary",
    "RunState",
    "RunStateMachine",
]
