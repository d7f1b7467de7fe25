"""Accumulates file results from all workers of a run."""

import threading
from typing import Iterable, List

from ..models.lint import FileResult


class ResultAggregator:
    """
    Run report for a single lint run.

    Batches arrive in any order, one per successful worker. File paths
    are unique across a run because chunks never overlap, so nothing is
    deduplicated here. Appends are serialized with a lock.
    """

    def __init__(self):
        self._results: List[FileResult] = []
        self._lock = threading.Lock()

    def append(self, results: Iterable[FileResult]):
        """Add one complete batch of file results."""
        batch = list(results)
        with self._lock:
            self._results.extend(batch)

    def has_any_error(self) -> bool:
        """True if at least one file result has an error."""
        with self._lock:
            return any(result.has_errors for result in self._results)

    def is_empty(self) -> bool:
        with self._lock:
            return not self._results

    def results(self) -> List[FileResult]:
        """Snapshot of everything aggregated so far."""
        with self._lock:
            return list(self._results)

    @property
    def error_count(self) -> int:
        with self._lock:
            return sum(result.error_count for result in self._results)

    @property
    def warning_count(self) -> int:
        with self._lock:
            return sum(result.warning_count for result in self._results)

    def __len__(self) -> int:
        with self._lock:
            return len(self._results)
