"""Pytest configuration and fixtures for parallint tests."""

import io
import json
import tempfile
import shutil
import threading
from pathlib import Path
from typing import Dict, Generator, List, Optional, Sequence, Tuple

import pytest
from rich.console import Console

from parallint.adapters.formatters.console_reporter import ConsoleReporter
from parallint.domain.models.lint import Diagnostic, FileResult, Severity
from parallint.infrastructure.engine.base import Analyzer


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Provide a temporary directory for test files.

    Automatically cleaned up after the test completes.
    """
    temp_path = Path(tempfile.mkdtemp(prefix="parallint_test_"))
    try:
        yield temp_path.resolve()
    finally:
        if temp_path.exists():
            shutil.rmtree(temp_path)


def make_result(path: Path, errors: int = 0, warnings: int = 0) -> FileResult:
    """Build a FileResult with the given number of error and warning diagnostics."""
    diagnostics = [
        Diagnostic(Severity.ERROR, "no-undef", f"error {i}", line=i + 1, column=1)
        for i in range(errors)
    ] + [
        Diagnostic(Severity.WARNING, "no-unused-vars", f"warning {i}", line=i + 1, column=5)
        for i in range(warnings)
    ]
    return FileResult(
        file_path=path,
        diagnostics=diagnostics,
        error_count=errors,
        warning_count=warnings,
    )


class FakeAnalyzer(Analyzer):
    """
    Analyzer returning canned counts per file name.

    Files not listed pass. Any chunk containing a name in ``failing``
    raises, as a crashing engine would.
    """

    def __init__(
        self,
        counts: Optional[Dict[str, Tuple[int, int]]] = None,
        failing: Sequence[str] = (),
        gate: Optional[threading.Event] = None,
        slow: Sequence[str] = (),
    ):
        self.counts = counts or {}
        self.failing = set(failing)
        self.gate = gate
        self.slow = set(slow)
        self.calls: List[Tuple[Tuple[str, ...], bool]] = []
        self._lock = threading.Lock()

    def analyze(self, files, fix=False):
        names = tuple(Path(f).name for f in files)
        with self._lock:
            self.calls.append((names, fix))

        if self.gate is not None and self.slow.intersection(names):
            assert self.gate.wait(timeout=10), "gate was never released"

        if self.failing.intersection(names):
            raise RuntimeError(f"engine crashed on {', '.join(sorted(self.failing.intersection(names)))}")

        return [make_result(Path(f), *self.counts.get(Path(f).name, (0, 0))) for f in files]


@pytest.fixture
def fake_analyzer_factory():
    """Factory for FakeAnalyzer instances."""
    return FakeAnalyzer


@pytest.fixture
def result_factory():
    """Factory for FileResult instances."""
    return make_result


class CapturedReporter(ConsoleReporter):
    """ConsoleReporter writing into string buffers."""

    def __init__(self):
        self.out = io.StringIO()
        self.err = io.StringIO()
        super().__init__(
            console=Console(file=self.out, width=200, color_system=None, highlight=False),
            error_console=Console(file=self.err, width=200, color_system=None, highlight=False),
        )

    @property
    def stdout(self) -> str:
        return self.out.getvalue()

    @property
    def stderr(self) -> str:
        return self.err.getvalue()


@pytest.fixture
def reporter() -> CapturedReporter:
    """Reporter whose output can be inspected."""
    return CapturedReporter()


@pytest.fixture
def eslint_project(temp_dir) -> Path:
    """
    A small project: an .eslintrc.json and three JavaScript files.

    Returns:
        Project root
    """
    (temp_dir / ".eslintrc.json").write_text(json.dumps({"root": True, "rules": {}}))
    for name in ("a.js", "b.js", "c.js"):
        (temp_dir / name).write_text("var x = 1;\n")
    return temp_dir


@pytest.fixture
def eslint_report() -> list:
    """Sample output of ``eslint --format json``."""
    return [
        {
            "filePath": "/project/a.js",
            "messages": [],
            "errorCount": 0,
            "warningCount": 0,
            "fixableErrorCount": 0,
            "fixableWarningCount": 0,
        },
        {
            "filePath": "/project/b.js",
            "messages": [
                {
                    "ruleId": "no-undef",
                    "severity": 2,
                    "message": "'foo' is not defined.",
                    "line": 3,
                    "column": 7,
                },
                {
                    "ruleId": None,
                    "severity": 2,
                    "message": "Parsing error: Unexpected token",
                    "line": 9,
                    "column": 1,
                    "fatal": True,
                },
            ],
            "errorCount": 2,
            "warningCount": 0,
            "fixableErrorCount": 0,
            "fixableWarningCount": 0,
        },
        {
            "filePath": "/project/c.js",
            "messages": [
                {
                    "ruleId": "no-unused-vars",
                    "severity": 1,
                    "message": "'x' is assigned a value but never used.",
                    "line": 1,
                    "column": 5,
                },
            ],
            "errorCount": 0,
            "warningCount": 1,
            "fixableErrorCount": 0,
            "fixableWarningCount": 1,
            "output": "let x = 1;\n",
        },
    ]
