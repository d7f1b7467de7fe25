"""Logging infrastructure."""

from .logger import ParallintLogger

__all__ = ["ParallintLogger"]
