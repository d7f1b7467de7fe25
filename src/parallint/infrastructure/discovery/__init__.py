"""File discovery."""

from .file_discovery import (
    resolve_targets,
    expand_ignore_patterns,
    is_ignored,
    normalize_extensions,
    parse_extensions,
)

__all__ = [
    "resolve_targets",
    "expand_ignore_patterns",
    "is_ignored",
    "normalize_extensions",
    "parse_extensions",
]
