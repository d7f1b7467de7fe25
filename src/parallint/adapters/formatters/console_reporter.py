"""Console output of lint results."""

from typing import Optional

from rich.console import Console
from rich.markup import escape

from ...domain.models.lint import FileResult, LintRunSummary, Severity


SEVERITY_COLORS = {
    Severity.PASS: "green",
    Severity.WARNING: "yellow",
    Severity.ERROR: "red",
}


class ConsoleReporter:
    """
    Writes per-file results as they arrive.

    Pass and informational lines go to stdout; diagnostic blocks and
    worker failures go to stderr. Results may arrive in any order.
    Lines are never wrapped to the terminal width, so each diagnostic
    stays on one line in pipes and CI logs.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
    ):
        self.console = console or Console()
        self.error_console = error_console or Console(stderr=True)

    @staticmethod
    def _severity(severity: Severity) -> str:
        color = SEVERITY_COLORS[severity]
        return f"[bold {color}]{severity.label}[/bold {color}]"

    def start(self):
        self.console.print("Start linting files...\n", highlight=False, soft_wrap=True)

    def emit(self, result: FileResult, quiet: bool = False):
        """
        Print one file result.

        Args:
            result: Result for a single file
            quiet: Suppress pass lines and warnings
        """
        path = escape(str(result.file_path))

        if quiet and not result.has_errors:
            return

        if result.error_count == 0 and result.warning_count == 0:
            self.console.print(f"{path} {self._severity(Severity.PASS)}", highlight=False, soft_wrap=True)
            return

        lines = []
        for diagnostic in result.diagnostics:
            if quiet and diagnostic.severity == Severity.WARNING:
                continue
            # rule_id is None for parse errors
            lines.append(
                f"{diagnostic.line}:{diagnostic.column} "
                f"{self._severity(diagnostic.severity)} "
                f"{escape(diagnostic.message)} {escape(diagnostic.rule_id or '')}".rstrip()
            )

        if not lines:
            return

        self.error_console.print(path + "\n" + "\n".join(lines) + "\n", highlight=False, soft_wrap=True)

    def worker_failed(self, chunk_index: int, error: Optional[str]):
        self.error_console.print(
            f"[red]Worker {chunk_index} error:[/red] {escape(error or 'unknown error')}",
            highlight=False,
            soft_wrap=True,
        )

    def no_files(self):
        self.console.print("No files to lint", highlight=False, soft_wrap=True)

    def summary(self, summary: LintRunSummary, quiet: bool = False):
        """Print the totals footer."""
        if summary.workers_failed:
            self.error_console.print(
                f"[yellow]{summary.workers_failed} of {summary.workers_spawned} workers failed; "
                f"{summary.files_missing} file(s) were not linted[/yellow]",
                highlight=False,
                soft_wrap=True,
            )
        if quiet or summary.no_files:
            return
        self.console.print(
            f"{summary.files_linted} file(s) linted in {summary.duration_seconds:.2f}s: "
            f"{summary.error_count} error(s), {summary.warning_count} warning(s)",
            highlight=False,
            soft_wrap=True,
        )
