"""Discovery of the files to lint."""

import fnmatch
import os
from pathlib import Path
from typing import Iterable, List, Sequence, Tuple


def normalize_extensions(extensions: Iterable[str]) -> Tuple[str, ...]:
    """Strip dots and whitespace, drop empties, keep first-seen order."""
    cleaned = (ext.strip().replace(".", "") for ext in extensions)
    return tuple(dict.fromkeys(ext for ext in cleaned if ext))


def parse_extensions(value: str) -> Tuple[str, ...]:
    """Parse a comma-separated --ext value such as ``.js,ts``."""
    return normalize_extensions(value.split(","))


def expand_ignore_patterns(patterns: Sequence[str]) -> List[str]:
    """Expand each ignore pattern so it also covers its whole subtree."""
    expanded = []
    for pattern in patterns:
        base = pattern.rstrip("/")
        if not base:
            continue
        expanded.append(base)
        expanded.append(f"{base}/**")
    return expanded


def is_ignored(relative_path: str, patterns: Sequence[str]) -> bool:
    """
    Match a root-relative posix path against expanded ignore patterns.

    A leading slash anchors a pattern to the root. Patterns without a
    slash in their base name also match below any directory, the way
    gitignore-style ignore files treat them.
    """
    for pattern in patterns:
        if pattern.startswith("/"):
            if fnmatch.fnmatchcase(relative_path, pattern[1:]):
                return True
            continue
        if fnmatch.fnmatchcase(relative_path, pattern):
            return True
        if "/" not in pattern.split("/**")[0] and fnmatch.fnmatchcase(relative_path, f"*/{pattern}"):
            return True
    return False


def resolve_targets(
    root: Path,
    extensions: Sequence[str],
    ignore_patterns: Sequence[str] = (),
) -> List[Path]:
    """
    Find every file under root with a matching extension.

    Equivalent to globbing ``root/**/*.{ext,...}`` minus ignored paths.

    Args:
        root: Directory to search
        extensions: Extensions without dots
        ignore_patterns: Ignore patterns, unexpanded

    Returns:
        Sorted, deduplicated absolute paths
    """
    root = root.resolve()
    suffixes = tuple(f".{ext}" for ext in normalize_extensions(extensions))
    if not suffixes or not root.is_dir():
        return []

    expanded = expand_ignore_patterns(ignore_patterns)
    found = set()

    for dirpath, dirnames, filenames in os.walk(root):
        current = Path(dirpath)
        relative_dir = current.relative_to(root).as_posix()
        prefix = "" if relative_dir == "." else f"{relative_dir}/"

        # Prune hidden and ignored directories so large trees (node_modules, .git)
        # are never walked
        dirnames[:] = sorted(
            name for name in dirnames
            if not name.startswith(".") and not is_ignored(f"{prefix}{name}", expanded)
        )

        for name in filenames:
            if name.startswith(".") or not name.endswith(suffixes):
                continue
            relative = f"{prefix}{name}"
            if is_ignored(relative, expanded):
                continue
            found.add(current / name)

    return sorted(found)
