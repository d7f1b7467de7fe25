"""CLI command implementations."""

import asyncio
from pathlib import Path
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape

from ...application.commands.lint_codebase import LintCodebaseCommand
from ...domain.exceptions import ConfigurationError, ConfigurationNotFoundError
from ...domain.models.lint import RunOptions
from ...infrastructure.config.config_loader import ConfigLoader
from ...infrastructure.di.container import DIContainer
from ...infrastructure.discovery.file_discovery import normalize_extensions, parse_extensions
from ...infrastructure.presentation.error_presenter import ErrorPresenter


def lint_command(
    path: Optional[Path],
    ext: Optional[str],
    fix: bool,
    ignore_path: Optional[Path],
    quiet: bool,
    fail_on_worker_error: bool,
    config_path: Optional[str],
    verbose: bool,
    console: Console,
    container: Optional[DIContainer] = None,
) -> int:
    """
    Execute lint command.

    Args:
        path: Directory to lint (defaults to the working directory)
        ext: Comma-separated extensions
        fix: Apply automatic fixes
        ignore_path: Ignore file override
        quiet: Only report errors
        fail_on_worker_error: Exit 1 when any worker fails
        config_path: Settings file path
        verbose: Verbose output
        console: Console used for fatal startup errors
        container: Pre-built container (tests)

    Returns:
        Process exit status
    """
    working_dir = Path.cwd()

    if container is None:
        try:
            container = DIContainer.create(config_path, verbose=verbose, working_dir=working_dir)
        except ConfigurationError as e:
            console.print(ErrorPresenter.present(e, verbose=verbose))
            return 1

    config = container.config
    extensions: Sequence[str] = (
        parse_extensions(ext) if ext else normalize_extensions(config.engine.default_extensions)
    )
    options = RunOptions(
        target=(path or working_dir).resolve(),
        extensions=tuple(extensions),
        fix=fix,
        ignore_path=ignore_path,
        quiet=quiet,
        fail_on_worker_error=fail_on_worker_error or config.parallel.fail_on_worker_error,
    )

    handler = container.lint_handler
    command = LintCodebaseCommand(options=options, working_dir=working_dir)

    try:
        summary = asyncio.run(handler.handle(command))

    except ConfigurationNotFoundError as e:
        container.error_console.print(ErrorPresenter.present(e, verbose=verbose))
        return 1

    except KeyboardInterrupt:
        container.error_console.print(ErrorPresenter.present(KeyboardInterrupt()))
        partial = handler.partial_summary()
        if partial is not None:
            container.reporter.summary(partial)
        return 1

    except Exception as e:
        container.error_console.print(ErrorPresenter.present(e, verbose=verbose))
        return 1

    container.reporter.summary(summary, quiet=quiet)
    return summary.status


def show_config_command(config_path: Optional[str], console: Console) -> int:
    """
    Print the effective settings and where they came from.

    Args:
        config_path: Settings file path
        console: Rich console

    Returns:
        Process exit status
    """
    try:
        config = ConfigLoader.load(config_path)
    except ConfigurationError as e:
        console.print(ErrorPresenter.present(e))
        return 1

    info = ConfigLoader.get_config_info()

    console.print("[bold]Configuration files:[/bold]")
    if info["existing_configs"] or config_path:
        for cfg in info["existing_configs"] + ([config_path] if config_path else []):
            console.print(f"  [green]{escape(cfg)}[/green]")
    else:
        console.print("  Using default configuration")

    console.print("\n[bold]Environment overrides:[/bold]")
    if info["env_overrides"]:
        for env_var in info["env_overrides"]:
            console.print(f"  {env_var}")
    else:
        console.print("  None")

    console.print("\n[bold]Effective settings:[/bold]")
    console.print(escape(config.to_yaml()))
    return 0
