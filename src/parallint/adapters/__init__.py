"""Adapters: CLI and output formatting."""
