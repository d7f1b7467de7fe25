"""ESLint integration: config lookup, ignore patterns and the analyzer."""

import json
import os
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from .base import Analyzer
from ...domain.exceptions import (
    AnalysisEngineError,
    ConfigurationNotFoundError,
    IgnorePatternError,
)
from ...domain.models.lint import FileResult


# ESLint exit codes: 0 clean, 1 lint errors, 2 configuration or internal error
ESLINT_FATAL_EXIT_CODE = 2

# Room left in the argument area for the environment and the command itself
ARG_MAX_HEADROOM = 64 * 1024
FALLBACK_ARG_MAX = 128 * 1024
# Each argument also costs a pointer in the argv array
ARG_POINTER_SIZE = 8


def argument_budget() -> int:
    """Bytes of command line available to file arguments for one invocation."""
    try:
        arg_max = os.sysconf("SC_ARG_MAX")
    except (AttributeError, ValueError, OSError):
        arg_max = -1
    if arg_max <= 0:
        arg_max = FALLBACK_ARG_MAX
    env_size = sum(len(k) + len(v) + 2 + ARG_POINTER_SIZE for k, v in os.environ.items())
    return max(arg_max - env_size - ARG_MAX_HEADROOM, 4096)


def split_arguments(files: Sequence[Path], budget: int) -> List[List[Path]]:
    """
    Split files into batches whose command-line size stays within budget.

    A single path longer than the budget still gets a batch of its own.

    Args:
        files: Files to pass as arguments
        budget: Maximum bytes of arguments per batch

    Returns:
        Non-empty batches in input order
    """
    batches: List[List[Path]] = []
    current: List[Path] = []
    used = 0
    for path in files:
        # NUL terminator plus the argv pointer
        size = len(os.fsencode(str(path))) + 1 + ARG_POINTER_SIZE
        if current and used + size > budget:
            batches.append(current)
            current, used = [], 0
        current.append(path)
        used += size
    if current:
        batches.append(current)
    return batches


def find_engine_config(search_dir: Path, config_files: Sequence[str]) -> Path:
    """
    Locate the ESLint configuration for a directory.

    Args:
        search_dir: Directory to look in (the working directory)
        config_files: Candidate file names, checked in order

    Returns:
        Path of the first candidate that exists

    Raises:
        ConfigurationNotFoundError: If none of the candidates exist
    """
    for name in config_files:
        candidate = search_dir / name
        if candidate.is_file():
            return candidate
    raise ConfigurationNotFoundError(search_dir, config_files)


def read_ignore_patterns(
    config_handle: Path,
    ignore_path: Optional[Path],
    default_ignore_path: Path,
) -> List[str]:
    """
    Collect ignore patterns for a run.

    Patterns come from the ignore file (gitignore syntax) followed by the
    ``ignorePatterns`` list of a JSON config. A missing default ignore
    file is not an error; a missing explicit one is.

    Args:
        config_handle: ESLint config file in use
        ignore_path: Ignore file given on the command line, if any
        default_ignore_path: Ignore file used otherwise

    Returns:
        Patterns in file order, without duplicates

    Raises:
        IgnorePatternError: If a source exists but cannot be read or parsed
    """
    patterns: List[str] = []

    source = ignore_path or default_ignore_path
    if ignore_path is not None or source.is_file():
        try:
            text = source.read_text(encoding="utf-8")
        except OSError as e:
            raise IgnorePatternError(f"Could not read ignore file {source}: {e}") from e
        for line in text.splitlines():
            line = line.strip()
            if line and not line.startswith("#"):
                patterns.append(line)

    if config_handle.suffix == ".json":
        try:
            data = json.loads(config_handle.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise IgnorePatternError(f"Could not parse {config_handle}: {e}") from e
        config_patterns = data.get("ignorePatterns", []) if isinstance(data, dict) else []
        if isinstance(config_patterns, str):
            config_patterns = [config_patterns]
        patterns.extend(str(p) for p in config_patterns)

    return list(dict.fromkeys(patterns))


@dataclass(frozen=True)
class EslintAnalyzer(Analyzer):
    """
    Runs the ESLint CLI in a child process and parses its JSON report.

    Each call is an independent ESLint process, so a crash in the engine
    only affects the chunk it was given. Chunks too large for one command
    line are linted by several consecutive ESLint processes.
    """
    command: Tuple[str, ...] = ("npx", "--no-install", "eslint")
    cwd: Optional[Path] = None
    arg_budget: Optional[int] = None
    env: Dict[str, str] = field(default_factory=lambda: {"ESLINT_USE_FLAT_CONFIG": "false"})

    def build_command(self, files: Sequence[Path], fix: bool = False) -> List[str]:
        args = list(self.command) + ["--format", "json"]
        if fix:
            args.append("--fix")
        args.append("--")
        args.extend(str(f) for f in files)
        return args

    def analyze(self, files: Sequence[Path], fix: bool = False) -> List[FileResult]:
        """
        Lint files with ESLint.

        Args:
            files: Files to lint
            fix: Pass --fix so ESLint writes fixes to disk

        Returns:
            One FileResult per file ESLint reported on

        Raises:
            AnalysisEngineError: If any ESLint process cannot run, exits
                with a fatal status or prints something other than a JSON
                report. Results of earlier batches are discarded.
        """
        if not files:
            return []

        budget = self.arg_budget if self.arg_budget is not None else argument_budget()
        results: List[FileResult] = []
        for batch in split_arguments(files, budget):
            results.extend(self._run_batch(batch, fix))
        return results

    def _run_batch(self, files: Sequence[Path], fix: bool) -> List[FileResult]:
        args = self.build_command(files, fix=fix)
        try:
            completed = subprocess.run(
                args,
                cwd=str(self.cwd) if self.cwd else None,
                env={**os.environ, **self.env},
                capture_output=True,
                text=True,
                stdin=subprocess.DEVNULL,
            )
        except OSError as e:
            raise AnalysisEngineError(f"Could not start {args[0]}: {e}") from e

        if completed.returncode >= ESLINT_FATAL_EXIT_CODE or completed.returncode < 0:
            stderr = completed.stderr.strip()
            raise AnalysisEngineError(
                f"eslint exited with code {completed.returncode}: "
                f"{stderr.splitlines()[-1] if stderr else 'no output'}",
                exit_code=completed.returncode,
                stderr=stderr,
            )

        return parse_report(completed.stdout)


def parse_report(stdout: str) -> List[FileResult]:
    """
    Parse ESLint's JSON formatter output.

    Raises:
        AnalysisEngineError: If the output is not a JSON list of file results
    """
    try:
        data = json.loads(stdout)
    except ValueError as e:
        raise AnalysisEngineError(f"eslint produced invalid JSON: {e}") from e

    if not isinstance(data, list):
        raise AnalysisEngineError("eslint report is not a list of file results")

    try:
        return [FileResult.from_dict(entry) for entry in data]
    except (KeyError, TypeError, ValueError) as e:
        raise AnalysisEngineError(f"Malformed eslint report entry: {e}") from e
