"""Application logger."""

import logging
import threading
from typing import Any, Dict, Optional

from rich.console import Console
from rich.logging import RichHandler

from ..config.config_models import LoggingConfig


LOGGER_NAME = "parallint"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s%(context)s"


class _ContextFormatter(logging.Formatter):
    """Appends structured context fields to the message."""

    def format(self, record: logging.LogRecord) -> str:
        context = getattr(record, "context", None) or {}
        record.context = (
            " [" + " ".join(f"{k}={v}" for k, v in context.items()) + "]"
            if context else ""
        )
        return super().format(record)


class ParallintLogger:
    """
    Process-wide logger.

    Wraps a stdlib logger. Structured fields are passed as ``extra`` and
    rendered after the message; they are namespaced so keys such as
    ``message`` or ``filename`` never clash with LogRecord attributes.
    """

    _instance: Optional["ParallintLogger"] = None
    _lock = threading.Lock()

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(LOGGER_NAME)
        if not self._logger.handlers:
            self._logger.addHandler(logging.NullHandler())

    @classmethod
    def get_instance(cls) -> "ParallintLogger":
        """Return the shared logger, creating it on first use."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def configure(
        cls,
        config: LoggingConfig,
        verbose: bool = False,
        console: Optional[Console] = None,
    ) -> "ParallintLogger":
        """
        Install handlers according to configuration.

        Args:
            config: Logging configuration
            verbose: Force DEBUG level
            console: Console for rich output (defaults to stderr)

        Returns:
            The shared logger
        """
        instance = cls.get_instance()
        logger = instance._logger
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        level = logging.DEBUG if verbose else getattr(logging, config.level)
        logger.setLevel(level)
        logger.propagate = False

        if config.console:
            rich_handler = RichHandler(
                console=console or Console(stderr=True),
                show_path=False,
                rich_tracebacks=verbose,
            )
            rich_handler.setFormatter(_ContextFormatter("%(message)s%(context)s"))
            logger.addHandler(rich_handler)

        if config.file:
            file_handler = logging.FileHandler(config.file, encoding="utf-8")
            file_handler.setFormatter(_ContextFormatter(FILE_FORMAT))
            logger.addHandler(file_handler)

        if not logger.handlers:
            logger.addHandler(logging.NullHandler())

        return instance

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def _log(self, level: int, msg: str, extra: Optional[Dict[str, Any]], **kwargs):
        self._logger.log(level, msg, extra={"context": extra or {}}, **kwargs)

    def debug(self, msg: str, extra: Optional[Dict[str, Any]] = None, **kwargs):
        self._log(logging.DEBUG, msg, extra, **kwargs)

    def info(self, msg: str, extra: Optional[Dict[str, Any]] = None, **kwargs):
        self._log(logging.INFO, msg, extra, **kwargs)

    def warning(self, msg: str, extra: Optional[Dict[str, Any]] = None, **kwargs):
        self._log(logging.WARNING, msg, extra, **kwargs)

    def error(self, msg: str, extra: Optional[Dict[str, Any]] = None, **kwargs):
        self._log(logging.ERROR, msg, extra, **kwargs)
