"""Exceptions raised by parallint."""

from pathlib import Path
from typing import Optional, Sequence


class ParallintError(Exception):
    """Base class for all parallint errors."""


class ConfigurationError(ParallintError):
    """Tool settings could not be loaded or failed validation."""


class ConfigurationNotFoundError(ParallintError):
    """No analysis engine configuration exists for the working directory."""

    def __init__(self, search_dir: Path, candidates: Sequence[str]):
        self.search_dir = search_dir
        self.candidates = list(candidates)
        super().__init__("No eslint config found")


class IgnorePatternError(ParallintError):
    """Ignore patterns could not be read. Callers fall back to no patterns."""


class AnalysisEngineError(ParallintError):
    """The analysis engine failed to produce a complete report for a chunk."""

    def __init__(self, message: str, exit_code: Optional[int] = None, stderr: str = ""):
        self.exit_code = exit_code
        self.stderr = stderr
        super().__init__(message)


class InvalidStateTransition(ParallintError):
    """A lint run tried to move between states out of order."""
