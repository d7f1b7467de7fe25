"""Parallel processing infrastructure for concurrent linting."""

from .worker_pool import (
    LintWorkerPool,
    WorkerConfig,
    run_worker,
)

__all__ = [
    "LintWorkerPool",
    "WorkerConfig",
    "run_worker",
]
