"""Worker pool for parallel linting of file chunks."""

from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Optional, Callable, Any, Dict, Sequence
import asyncio
import time

from ...domain.models.lint import FileChunk, RunOptions, WorkerOutcome
from ..engine.base import Analyzer
from ..logging import ParallintLogger


@dataclass
class WorkerConfig:
    """Configuration for the worker pool."""
    max_workers: Optional[int] = None  # None = one thread or process per chunk
    executor: str = "thread"


# Type alias for callbacks
OnWorkerCompleteCallback = Callable[[WorkerOutcome], None]


def run_worker(chunk: FileChunk, options: RunOptions, analyzer: Analyzer) -> WorkerOutcome:
    """
    Lint one chunk. Runs inside an executor thread or process.

    Either every file of the chunk is represented in the outcome or the
    outcome is a failure with no results at all.

    Args:
        chunk: Files assigned to this worker
        options: Run options (read only)
        analyzer: Analysis engine

    Returns:
        Worker outcome for the chunk
    """
    start_time = time.time()
    try:
        results = list(analyzer.analyze(list(chunk.files), fix=options.fix))
    except Exception as e:
        return WorkerOutcome(
            chunk_index=chunk.index,
            error=f"{type(e).__name__}: {e}",
            duration_seconds=time.time() - start_time,
        )

    return WorkerOutcome(
        chunk_index=chunk.index,
        results=results,
        duration_seconds=time.time() - start_time,
    )


class LintWorkerPool:
    """
    Runs one isolated worker per chunk and collects their outcomes.

    Workers execute in a concurrent.futures executor sized to the number
    of chunks, capped by WorkerConfig.max_workers. Outcomes are handled on the event loop as each worker
    finishes, so completion handling is serialized while the workers
    themselves run in parallel. A failing worker never affects its
    siblings. An exception raised by the completion callback is not a
    worker failure: it stops the run and propagates to the caller.
    """

    def __init__(
        self,
        config: WorkerConfig,
        analyzer: Analyzer,
    ):
        """
        Initialize the worker pool.

        Args:
            config: Worker pool configuration
            analyzer: Analysis engine shared by all workers
        """
        self.config = config
        self.analyzer = analyzer
        self.logger = ParallintLogger.get_instance()

        # Callbacks
        self._on_worker_complete: Optional[OnWorkerCompleteCallback] = None

        # Statistics
        self._stats = {
            "workers_spawned": 0,
            "workers_completed": 0,
            "workers_failed": 0,
            "files_linted": 0,
            "total_duration": 0.0,
        }

    def set_callbacks(
        self,
        on_worker_complete: Optional[OnWorkerCompleteCallback] = None,
    ):
        """
        Set callback functions for result handling.

        Args:
            on_worker_complete: Called once per worker with its outcome,
                on the event loop
        """
        self._on_worker_complete = on_worker_complete

    def _create_executor(self, chunks: int) -> Executor:
        size = min(chunks, self.config.max_workers or chunks)
        if self.config.executor == "process":
            return ProcessPoolExecutor(max_workers=size)
        return ThreadPoolExecutor(max_workers=size, thread_name_prefix="parallint-worker")

    async def run_chunks(
        self,
        chunks: Sequence[FileChunk],
        options: RunOptions,
    ) -> List[WorkerOutcome]:
        """
        Lint all chunks in parallel.

        Returns once every spawned worker has reported, successfully or
        not. No timeout is applied to individual workers.

        Args:
            chunks: Chunks to lint, one worker each
            options: Run options shared by all workers

        Returns:
            Outcomes in completion order
        """
        self._stats = {
            "workers_spawned": 0,
            "workers_completed": 0,
            "workers_failed": 0,
            "files_linted": 0,
            "total_duration": 0.0,
        }
        if not chunks:
            return []

        self.logger.info(
            "Starting parallel lint",
            extra={
                "chunks": len(chunks),
                "files": sum(len(chunk) for chunk in chunks),
                "executor": self.config.executor,
            }
        )

        start_time = time.time()
        loop = asyncio.get_running_loop()
        executor = self._create_executor(len(chunks))
        outcomes: List[WorkerOutcome] = []
        tasks = []

        try:
            for chunk in chunks:
                tasks.append(asyncio.ensure_future(self._spawn(loop, executor, chunk, options)))
                self._stats["workers_spawned"] += 1

            for next_done in asyncio.as_completed(tasks):
                outcome = await next_done
                outcomes.append(outcome)
                self._record(outcome)
                self._notify_complete(outcome)
        finally:
            # On cancellation or a callback error, outstanding workers are abandoned
            for task in tasks:
                task.cancel()
            executor.shutdown(wait=False, cancel_futures=True)

        total_duration = time.time() - start_time
        self._stats["total_duration"] = total_duration

        self.logger.info(
            "Parallel lint complete",
            extra={
                "workers_completed": self._stats["workers_completed"],
                "workers_failed": self._stats["workers_failed"],
                "files_linted": self._stats["files_linted"],
                "total_duration_seconds": round(total_duration, 2),
            }
        )

        return outcomes

    async def _spawn(
        self,
        loop: asyncio.AbstractEventLoop,
        executor: Executor,
        chunk: FileChunk,
        options: RunOptions,
    ) -> WorkerOutcome:
        """
        Run one worker and always produce an outcome for it.

        Failures of the executor itself (a crashed worker process, an
        analyzer that cannot be pickled) are turned into failure outcomes
        here, since run_worker never got the chance to report them.
        """
        try:
            return await loop.run_in_executor(executor, run_worker, chunk, options, self.analyzer)
        except Exception as e:
            return WorkerOutcome(chunk_index=chunk.index, error=f"{type(e).__name__}: {e}")

    def _record(self, outcome: WorkerOutcome):
        if outcome.success:
            self._stats["workers_completed"] += 1
            self._stats["files_linted"] += len(outcome.results)
            self.logger.debug(
                f"Worker {outcome.chunk_index} finished",
                extra={
                    "files": len(outcome.results),
                    "duration_seconds": round(outcome.duration_seconds, 2),
                }
            )
        else:
            self._stats["workers_failed"] += 1
            self.logger.warning(
                f"Worker {outcome.chunk_index} failed",
                extra={"chunk": outcome.chunk_index, "error": outcome.error}
            )

    def _notify_complete(self, outcome: WorkerOutcome):
        if self._on_worker_complete:
            self._on_worker_complete(outcome)

    def get_stats(self) -> Dict[str, Any]:
        """
        Get worker pool statistics.

        Returns:
            Dictionary with statistics
        """
        return dict(self._stats)
