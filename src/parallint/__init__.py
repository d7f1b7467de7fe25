"""parallint: run ESLint across a codebase in parallel."""

__version__ = "1.0.0"
