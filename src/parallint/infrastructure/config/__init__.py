"""Configuration loading and models."""

from .config_models import (
    ParallintConfig,
    EngineConfig,
    ParallelConfig,
    OutputConfig,
    LoggingConfig,
)
from .config_loader import ConfigLoader

__all__ = [
    "ParallintConfig",
    "EngineConfig",
    "ParallelConfig",
    "OutputConfig",
    "LoggingConfig",
    "ConfigLoader",
]
