"""Application commands."""

from .lint_codebase import LintCodebaseCommand, LintCodebaseHandler

__all__ = ["LintCodebaseCommand", "LintCodebaseHandler"]
