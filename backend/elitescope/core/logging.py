"""Logging configuration for the Elitescope backend.

Log records carry a set of *dimensions* (request id, user id, component, ...)
that are rendered as ``key=value`` pairs after the message. Locally the
output is human readable; in deployed environments one JSON object per line
is emitted so log shippers can index the dimensions.

Usage:
    from elitescope.core.logging import logger

    request_logger = logger.with_context(request_id="...")
    request_logger.info("Handling search")
"""

import json
import logging
import sys
from typing import Any, Dict, Optional

from elitescope.core.config import settings
from elitescope.core.config.enums import Environment


class _DimensionFormatter(logging.Formatter):
    """Human readable formatter that appends dimensions."""

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        dims = getattr(record, "dimensions", None)
        if not dims:
            return base
        rendered = " ".join(f"{k}={v}" for k, v in sorted(dims.items()))
        return f"{base} [{rendered}]"


class _JsonFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(getattr(record, "dimensions", None) or {})
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter that carries dimensions and an optional message prefix.

    Adapters are immutable; ``with_context`` and ``with_prefix`` return new ones.
    """

    def __init__(
        self,
        logger: logging.Logger,
        dimensions: Optional[Dict[str, Any]] = None,
        prefix: str = "",
    ):
        """Create a new ContextualLogger.

        Args:
            logger: The wrapped standard library logger.
            dimensions: Key/value pairs attached to every record.
            prefix: Text prepended to every message.
        """
        super().__init__(logger, dict(dimensions or {}))
        self.dimensions: Dict[str, Any] = dict(dimensions or {})
        self.prefix = prefix

    def process(self, msg, kwargs):
        """Attach dimensions and prefix to the record."""
        extra = kwargs.setdefault("extra", {})
        extra["dimensions"] = {**self.dimensions, **extra.get("dimensions", {})}
        return f"{self.prefix}{msg}", kwargs

    def with_context(self, **dimensions: Any) -> "ContextualLogger":
        """Return a logger with additional dimensions."""
        merged = {**self.dimensions, **{k: v for k, v in dimensions.items() if v is not None}}
        return ContextualLogger(self.logger, merged, self.prefix)

    def with_prefix(self, prefix: str) -> "ContextualLogger":
        """Return a logger that prefixes every message."""
        return ContextualLogger(self.logger, self.dimensions, f"{self.prefix}{prefix}")


class LoggerConfigurator:
    """Builds configured loggers."""

    _configured_names: set = set()

    @classmethod
    def _formatter(cls) -> logging.Formatter:
        if settings.ENVIRONMENT in (Environment.LOCAL, Environment.TEST):
            return _DimensionFormatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        return _JsonFormatter()

    @classmethod
    def configure_logger(
        cls, name: str, dimensions: Optional[Dict[str, Any]] = None
    ) -> ContextualLogger:
        """Configure (once) and return a ContextualLogger for ``name``.

        Args:
            name: Standard library logger name.
            dimensions: Initial dimensions.

        Returns:
            ContextualLogger: The adapter wrapping the named logger.
        """
        base = logging.getLogger(name)
        if name not in cls._configured_names:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(cls._formatter())
            base.addHandler(handler)
            base.setLevel(settings.LOG_LEVEL.upper())
            base.propagate = False
            cls._configured_names.add(name)
        return ContextualLogger(base, dimensions)


logger = LoggerConfigurator.configure_logger("elitescope")
