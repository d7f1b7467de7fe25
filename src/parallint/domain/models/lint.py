"""Lint domain models."""

from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import List, Optional, Tuple, Dict, Any


class Severity(IntEnum):
    """Diagnostic severity, numerically identical to ESLint's."""
    PASS = 0
    WARNING = 1
    ERROR = 2

    @property
    def label(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class Diagnostic:
    """
    One finding reported by the analysis engine for one file.

    Diagnostics are only ever built from engine output; nothing in the
    orchestration layer creates or edits them.
    """
    severity: Severity
    rule_id: Optional[str]
    message: str
    line: int = 0
    column: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Diagnostic":
        """Build a diagnostic from one ESLint message object."""
        return cls(
            severity=Severity(data.get("severity", Severity.ERROR)),
            rule_id=data.get("ruleId"),
            message=data.get("message", ""),
            line=data.get("line") or 0,
            column=data.get("column") or 0,
        )


@dataclass
class FileResult:
    """All diagnostics for a single file plus derived counts."""
    file_path: Path
    diagnostics: List[Diagnostic] = field(default_factory=list)
    error_count: int = 0
    warning_count: int = 0
    fixable_error_count: int = 0
    fixable_warning_count: int = 0
    output: Optional[str] = None

    @property
    def passed(self) -> bool:
        return self.error_count == 0 and self.warning_count == 0

    @property
    def has_errors(self) -> bool:
        return self.error_count > 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FileResult":
        """Build a file result from one entry of ESLint's JSON report."""
        diagnostics = [Diagnostic.from_dict(m) for m in data.get("messages", [])]
        return cls(
            file_path=Path(data["filePath"]),
            diagnostics=diagnostics,
            error_count=data.get("errorCount", 0),
            warning_count=data.get("warningCount", 0),
            fixable_error_count=data.get("fixableErrorCount", 0),
            fixable_warning_count=data.get("fixableWarningCount", 0),
            output=data.get("output"),
        )


@dataclass(frozen=True)
class FileChunk:
    """A contiguous slice of the target file set handed to one worker."""
    index: int
    files: Tuple[Path, ...]

    def __len__(self) -> int:
        return len(self.files)


@dataclass
class WorkerOutcome:
    """Terminal report of one worker: its results, or why it failed."""
    chunk_index: int
    results: List[FileResult] = field(default_factory=list)
    error: Optional[str] = None
    duration_seconds: float = 0.0

    @property
    def success(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class RunOptions:
    """Options for one lint run. Shared read-only by every worker."""
    target: Path
    extensions: Tuple[str, ...] = ("js", "ts")
    fix: bool = False
    ignore_path: Optional[Path] = None
    quiet: bool = False
    fail_on_worker_error: bool = False


@dataclass
class LintRunSummary:
    """Outcome of a complete run."""
    status: int
    files_total: int = 0
    files_linted: int = 0
    error_count: int = 0
    warning_count: int = 0
    workers_spawned: int = 0
    workers_failed: int = 0
    failed_chunks: List[int] = field(default_factory=list)
    duration_seconds: float = 0.0
    no_files: bool = False

    @property
    def files_missing(self) -> int:
        """Files whose worker failed and so were never linted."""
        return self.files_total - self.files_linted

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status,
            "files_total": self.files_total,
            "files_linted": self.files_linted,
            "error_count": self.error_count,
            "warning_count": self.warning_count,
            "workers_spawned": self.workers_spawned,
            "workers_failed": self.workers_failed,
            "failed_chunks": list(self.failed_chunks),
            "duration_seconds": round(self.duration_seconds, 2),
            "no_files": self.no_files,
        }
