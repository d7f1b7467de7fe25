"""Analysis engine integration."""

from .base import Analyzer
from .eslint_engine import (
    EslintAnalyzer,
    find_engine_config,
    read_ignore_patterns,
    parse_report,
)

__all__ = [
    "Analyzer",
    "EslintAnalyzer",
    "find_engine_config",
    "read_ignore_patterns",
    "parse_report",
]
