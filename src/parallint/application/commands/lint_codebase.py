"""Lint codebase command and its handler."""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Sequence
import time

from ...domain.exceptions import ConfigurationNotFoundError, IgnorePatternError
from ...domain.models.lint import LintRunSummary, RunOptions, WorkerOutcome
from ...domain.models.run_state import RunState, RunStateMachine
from ...domain.services.partitioner import partition
from ...domain.services.result_aggregator import ResultAggregator
from ...infrastructure.engine.eslint_engine import find_engine_config, read_ignore_patterns
from ...infrastructure.discovery.file_discovery import resolve_targets
from ...infrastructure.logging import ParallintLogger
from ...infrastructure.parallel.worker_pool import LintWorkerPool
from ...adapters.formatters.console_reporter import ConsoleReporter


@dataclass(frozen=True)
class LintCodebaseCommand:
    """Request to lint a directory tree."""
    options: RunOptions
    working_dir: Path


class LintCodebaseHandler:
    """
    Runs a complete lint: config, targets, partitioning, workers, status.

    The handler owns the run's state machine and its result aggregator.
    Outcomes are consumed on the event loop one at a time as workers
    finish; the final status only depends on the set of results, never
    on the order they arrived in.
    """

    def __init__(
        self,
        worker_pool: LintWorkerPool,
        reporter: ConsoleReporter,
        config_files: Sequence[str],
        ignore_file: str,
        worker_count: Callable[[], int],
    ):
        """
        Args:
            worker_pool: Pool that runs one worker per chunk
            reporter: Receives every file result and worker failure
            config_files: ESLint config names to look for, in order
            ignore_file: Default ignore file name
            worker_count: Returns the number of available processing units
        """
        self.worker_pool = worker_pool
        self.reporter = reporter
        self.config_files = list(config_files)
        self.ignore_file = ignore_file
        self.worker_count = worker_count
        self.logger = ParallintLogger.get_instance()

        self.state = RunStateMachine()
        self.aggregator = ResultAggregator()
        self._failed_chunks: List[int] = []
        self._files_total = 0
        self._workers_spawned = 0

    async def handle(self, command: LintCodebaseCommand) -> LintRunSummary:
        """
        Execute a lint run.

        Args:
            command: Lint request

        Returns:
            Summary whose status is the process exit code

        Raises:
            ConfigurationNotFoundError: If no ESLint config exists; raised
                before any worker is spawned
        """
        options = command.options
        self.state = RunStateMachine()
        self.aggregator = ResultAggregator()
        self._failed_chunks = []
        self._files_total = 0
        self._workers_spawned = 0
        start_time = time.time()

        try:
            config_handle = find_engine_config(command.working_dir, self.config_files)
        except ConfigurationNotFoundError:
            self.state.abort()
            raise
        self.state.transition(RunState.CONFIG_RESOLVED)
        self.logger.info("Using eslint config", extra={"config": config_handle})

        ignore_patterns = self._resolve_ignore_patterns(options, config_handle, command.working_dir)

        files = resolve_targets(options.target, options.extensions, ignore_patterns)
        self._files_total = len(files)
        self.state.transition(RunState.TARGETS_RESOLVED)
        self.logger.info(
            "Resolved lint targets",
            extra={"target": options.target, "files": len(files), "extensions": ",".join(options.extensions)}
        )

        chunks = partition(files, self.worker_count())
        self._workers_spawned = len(chunks)
        self.state.transition(RunState.PARTITIONED)

        self.reporter.start()
        self.worker_pool.set_callbacks(
            on_worker_complete=lambda outcome: self._on_worker_complete(outcome, options),
        )
        self.state.start(len(chunks))
        await self.worker_pool.run_chunks(chunks, options)

        self.state.transition(RunState.FINALIZING)
        summary = self._finalize(
            options,
            files_total=len(files),
            workers_spawned=len(chunks),
            duration=time.time() - start_time,
        )
        self.state.transition(RunState.TERMINATED)
        return summary

    def _resolve_ignore_patterns(
        self,
        options: RunOptions,
        config_handle: Path,
        working_dir: Path,
    ) -> List[str]:
        try:
            return read_ignore_patterns(
                config_handle,
                options.ignore_path,
                working_dir / self.ignore_file,
            )
        except IgnorePatternError as e:
            self.logger.warning(f"Error getting eslint ignore patterns: {e}")
            return []

    def _on_worker_complete(self, outcome: WorkerOutcome, options: RunOptions):
        self.state.worker_finished()
        if not outcome.success:
            self._failed_chunks.append(outcome.chunk_index)
            self.reporter.worker_failed(outcome.chunk_index, outcome.error)
            return

        # Count before printing: a failing reporter must not lose results
        self.aggregator.append(outcome.results)
        for result in outcome.results:
            self.reporter.emit(result, quiet=options.quiet)

    def _finalize(
        self,
        options: RunOptions,
        files_total: int,
        workers_spawned: int,
        duration: float,
    ) -> LintRunSummary:
        no_files = files_total == 0
        if no_files:
            status = 0
            self.reporter.no_files()
        else:
            status = int(self.aggregator.has_any_error())
            if self._failed_chunks and options.fail_on_worker_error:
                status = 1

        summary = LintRunSummary(
            status=status,
            files_total=files_total,
            files_linted=len(self.aggregator),
            error_count=self.aggregator.error_count,
            warning_count=self.aggregator.warning_count,
            workers_spawned=workers_spawned,
            workers_failed=len(self._failed_chunks),
            failed_chunks=sorted(self._failed_chunks),
            duration_seconds=duration,
            no_files=no_files,
        )
        self.logger.info("Lint run finished", extra=summary.to_dict())
        return summary

    def partial_summary(self) -> Optional[LintRunSummary]:
        """
        Totals gathered so far, for a run that was interrupted.

        Returns:
            Summary with status 1, or None if no worker had reported yet
        """
        if self.aggregator.is_empty() and not self._failed_chunks:
            return None
        return LintRunSummary(
            status=1,
            files_total=self._files_total,
            files_linted=len(self.aggregator),
            error_count=self.aggregator.error_count,
            warning_count=self.aggregator.warning_count,
            workers_spawned=self._workers_spawned,
            workers_failed=len(self._failed_chunks),
            failed_chunks=sorted(self._failed_chunks),
        )
