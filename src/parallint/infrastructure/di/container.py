"""Dependency injection container for parallint."""

from dataclasses import dataclass
from functools import partial
from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config.config_loader import ConfigLoader
from ..config.config_models import ParallintConfig
from ..engine.base import Analyzer
from ..engine.eslint_engine import EslintAnalyzer
from ..logging import ParallintLogger
from ..parallel import LintWorkerPool, WorkerConfig
from ...domain.services.partitioner import available_workers
from ...application.commands.lint_codebase import LintCodebaseHandler
from ...adapters.formatters.console_reporter import ConsoleReporter


@dataclass
class DIContainer:
    """
    Dependency injection container for parallint.

    Assembles all components with proper dependency injection.
    Created once per CLI invocation.
    """

    # Configuration
    config: ParallintConfig

    # Infrastructure
    logger: ParallintLogger
    analyzer: Analyzer
    worker_pool: LintWorkerPool

    # Output
    console: Console
    error_console: Console
    reporter: ConsoleReporter

    # Application Handlers
    lint_handler: LintCodebaseHandler

    @classmethod
    def create(
        cls,
        config_path: Optional[str] = None,
        verbose: bool = False,
        analyzer: Optional[Analyzer] = None,
        working_dir: Optional[Path] = None,
    ) -> "DIContainer":
        """
        Create and wire all dependencies.

        Args:
            config_path: Optional path to a settings file
            verbose: Enable debug logging
            analyzer: Analysis engine override (defaults to ESLint)
            working_dir: Directory ESLint runs in (defaults to cwd)

        Returns:
            DIContainer with all dependencies wired
        """
        config = ConfigLoader.load(config_path)

        color = config.output.color
        console = Console(no_color=not color, highlight=False, soft_wrap=True)
        error_console = Console(stderr=True, no_color=not color, highlight=False, soft_wrap=True)

        logger = ParallintLogger.configure(config.logging, verbose=verbose, console=error_console)

        if analyzer is None:
            analyzer = EslintAnalyzer(
                command=tuple(config.engine.command),
                cwd=working_dir or Path.cwd(),
            )

        worker_pool = LintWorkerPool(
            config=WorkerConfig(
                max_workers=config.parallel.max_workers,
                executor=config.parallel.executor,
            ),
            analyzer=analyzer,
        )

        reporter = ConsoleReporter(console=console, error_console=error_console)

        lint_handler = LintCodebaseHandler(
            worker_pool=worker_pool,
            reporter=reporter,
            config_files=config.engine.config_files,
            ignore_file=config.engine.ignore_file,
            worker_count=partial(available_workers, config.parallel.max_workers),
        )

        return cls(
            config=config,
            logger=logger,
            analyzer=analyzer,
            worker_pool=worker_pool,
            console=console,
            error_console=error_console,
            reporter=reporter,
            lint_handler=lint_handler,
        )

    def __repr__(self) -> str:
        """String representation."""
        return f"<DIContainer: {type(self.analyzer).__name__}, executor={self.config.parallel.executor}>"
