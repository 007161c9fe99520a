"""Logging entry points used across radius_vsa.

Modules call ``get_logger(__name__, component=...)`` and log with keyword
fields; applications call ``configure`` (or ``VsaConfig.setup_logging``)
to make the ``radius_vsa`` tree emit JSON lines.
"""

from __future__ import annotations

import logging
from typing import IO, Any

from .logging_config import StructuredLoggerAdapter, get_structured_logger
from .logging_config import configure_logging as _configure_logging

__all__ = ["configure", "get_logger"]


def configure(
    *,
    level: int | str = logging.WARNING,
    stream: IO[str] | None = None,
    handlers: list[logging.Handler] | None = None,
) -> None:
    """Emit radius_vsa log records as structured JSON at ``level``."""
    _configure_logging(level=level, stream=stream, handlers=handlers)


def get_logger(name: str, **context: Any) -> StructuredLoggerAdapter:
    return get_structured_logger(name, **context)
