"""Analysis engine interface."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Sequence

from ...domain.models.lint import FileResult


class Analyzer(ABC):
    """
    Runs static analysis over a set of files.

    Implementations may block for a long time and may raise on any
    failure. Workers call them from an executor, so instances must be
    safe to share between threads and, for the process executor,
    picklable.
    """

    @abstractmethod
    def analyze(self, files: Sequence[Path], fix: bool = False) -> List[FileResult]:
        """
        Analyze files and return one result per file.

        Args:
            files: Files to analyze
            fix: Let the engine rewrite files with automatic fixes

        Returns:
            File results, one per analyzed file
        """
        pass
