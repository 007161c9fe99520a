"""Structured logging configuration helpers."""

from __future__ import annotations

import json
import logging
import os
import traceback
from collections.abc import Iterable, MutableMapping
from contextlib import contextmanager
from contextvars import ContextVar, Token
from datetime import UTC, datetime
from typing import Any

__all__ = [
    "configure_logging",
    "get_logger",
    "get_structured_logger",
    "bind_context",
    "clear_context",
    "logging_context",
    "level_from_name",
    "StructuredJSONFormatter",
    "StructuredLoggerAdapter",
]

SERVICE_NAME = "radius_vsa"

_STANDARD_ATTRS: Iterable[str] = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__
) | {"message", "context", "taskName"}

_context: ContextVar[dict[str, Any]] = ContextVar(
    "radius_vsa_logging_context", default={}
)
_logging_configured = False


def _json_default(value: Any) -> str:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).hex()
    return repr(value)


def level_from_name(name: str | int) -> int:
    """Resolve ``"DEBUG"``/``"info"``/``10`` to a logging level number."""
    if isinstance(name, int):
        return name
    level = logging.getLevelName(str(name).strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name}")
    return level


class StructuredJSONFormatter(logging.Formatter):
    """Formatter that renders log records as one JSON object per line."""

    def __init__(self, *, utc: bool = True) -> None:
        super().__init__()
        self.utc = utc

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "schema": "log.v1",
            "ts": datetime.now(UTC if self.utc else None).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": getattr(record, "service", None) or SERVICE_NAME,
            "env": os.getenv("RADIUS_VSA_ENV") or os.getenv("ENV") or "dev",
        }

        evt = getattr(record, "event", None)
        if evt:
            payload["event"] = evt

        context = getattr(record, "context", None) or _context.get()
        for k, v in dict(context or {}).items():
            payload.setdefault(k, v)

        for key, value in record.__dict__.items():
            if key in _STANDARD_ATTRS or key.startswith("_"):
                continue
            if key in payload and payload[key] not in (None, ""):
                continue
            payload[key] = value

        if record.exc_info:
            payload["error"] = {
                "type": str(getattr(record.exc_info[0], "__name__", "")),
                "message": str(record.exc_info[1]),
                "stack": "".join(traceback.format_exception(*record.exc_info)).strip(),
            }
        elif record.exc_text:
            payload["error"] = {"message": record.exc_text}

        return json.dumps(payload, default=_json_default, ensure_ascii=True)


class StructuredLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that turns keyword arguments into structured fields.

    ``logger.debug("msg", event="radius.vsa.x", vendor_id=9)`` is accepted;
    anything other than the stdlib keywords is moved into ``extra``.
    """

    def process(
        self, msg: str, kwargs: MutableMapping[str, Any]
    ) -> tuple[str, MutableMapping[str, Any]]:
        extra = kwargs.setdefault("extra", {})

        for key in list(kwargs.keys()):
            if key not in {"exc_info", "stack_info", "stacklevel", "extra"}:
                extra.setdefault(key, kwargs.pop(key))

        context_data = _context.get()
        if context_data or self.extra:
            extra.setdefault("context", {**dict(context_data), **dict(self.extra or {})})
        return msg, kwargs


def configure_logging(
    level: int | str = logging.INFO,
    *,
    stream: Any | None = None,
    handlers: Iterable[logging.Handler] | None = None,
    formatter: logging.Formatter | None = None,
    reset: bool = True,
) -> None:
    """Configure the ``radius_vsa`` logger tree with structured JSON output.

    Only the package logger is touched so that embedding applications keep
    control of the root logger.
    """

    global _logging_configured

    level = level_from_name(level)
    formatter = formatter or StructuredJSONFormatter()
    resolved_handlers = list(handlers) if handlers else [logging.StreamHandler(stream)]

    pkg_logger = logging.getLogger(SERVICE_NAME)
    if reset:
        pkg_logger.handlers = []

    for handler in resolved_handlers:
        if handler.level == logging.NOTSET:
            handler.setLevel(level)
        if handler.formatter is None:
            handler.setFormatter(formatter)
        pkg_logger.addHandler(handler)

    pkg_logger.setLevel(level)
    pkg_logger.propagate = False
    _logging_configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a stdlib logger; the library stays silent until configured."""
    pkg_logger = logging.getLogger(SERVICE_NAME)
    if not _logging_configured and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)


def get_structured_logger(name: str, **context: Any) -> StructuredLoggerAdapter:
    """Return a structured logger adapter with optional static context."""
    context = {k: v for k, v in context.items() if v is not None}
    return StructuredLoggerAdapter(get_logger(name), context)


def bind_context(**kwargs: Any) -> Token:
    """Bind key/value pairs to the contextual log scope."""
    current = dict(_context.get())
    current.update({k: v for k, v in kwargs.items() if v is not None})
    return _context.set(current)


def clear_context(token: Token | None = None) -> None:
    """Clear contextual information, optionally using a context token."""
    if token is not None:
        _context.reset(token)
    else:
        _context.set({})


@contextmanager
def logging_context(**kwargs: Any):
    """Context manager that binds log context for the enclosed block."""
    token = bind_context(**kwargs)
    try:
        yield
    finally:
        clear_context(token)
