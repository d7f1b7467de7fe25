"""Rendering of exceptions for the console."""

import traceback

from rich.markup import escape

from ...domain.exceptions import (
    ConfigurationError,
    ConfigurationNotFoundError,
    ParallintError,
)


class ErrorPresenter:
    """Turns exceptions into user-facing console messages."""

    @staticmethod
    def present(error: BaseException, verbose: bool = False) -> str:
        """
        Format an error.

        Args:
            error: Exception to present
            verbose: Append the traceback

        Returns:
            Rich markup string
        """
        if isinstance(error, KeyboardInterrupt):
            message = "[yellow]Lint cancelled by user[/yellow]"
        elif isinstance(error, ConfigurationNotFoundError):
            looked_for = ", ".join(error.candidates)
            message = (
                f"[red]{escape(str(error))}[/red]\n"
                f"Looked for {escape(looked_for)} in {escape(str(error.search_dir))}"
            )
        elif isinstance(error, ConfigurationError):
            message = f"[red]Configuration error:[/red] {escape(str(error))}"
        elif isinstance(error, ParallintError):
            message = f"[red]Error:[/red] {escape(str(error))}"
        else:
            message = f"[red]Unexpected error ({type(error).__name__}):[/red] {escape(str(error))}"

        if verbose and not isinstance(error, KeyboardInterrupt):
            trace = "".join(traceback.format_exception(type(error), error, error.__traceback__))
            message += "\n\n" + escape(trace)

        return message
