"""JSON line logging plus a per-request context that every record inherits.

The context is a ``ContextVar`` holding a small mapping. The request id
middleware seeds it with ``request_id``; the validation endpoint adds the
challenge being checked and its outcome, so the validator's own records and
the access log line of the same request can be joined without threading ids
through every call.
"""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar, Token
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Final

LogContext = Mapping[str, Any]

_EMPTY_CONTEXT: Final[LogContext] = MappingProxyType({})
_LOG_CONTEXT: Final[ContextVar[LogContext]] = ContextVar("log_context", default=_EMPTY_CONTEXT)

_LOGGING_CONFIGURED: bool = False

# Libraries that log every statement or connection at INFO.
_NOISY_LOGGERS: Final[tuple[str, ...]] = (
    "aiosqlite",
    "sqlalchemy.engine",
    "sqlalchemy.pool",
)

# Attributes every LogRecord carries; anything else arrived through ``extra``.
_RECORD_ATTRS: Final[frozenset[str]] = frozenset(vars(logging.makeLogRecord({}))) | {
    "asctime",
    "message",
    "taskName",
}


class JsonLineFormatter(logging.Formatter):
    """One JSON object per line: base fields, then the bound context, then extras."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(current_log_context())
        entry.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and not key.startswith("_") and value is not None
        )

        if record.exc_info:
            entry["exc_info"] = _single_line(self.formatException(record.exc_info))
        if record.stack_info:
            entry["stack"] = _single_line(self.formatStack(record.stack_info))

        return json.dumps(entry, ensure_ascii=True, separators=(",", ":"), default=str)


def _single_line(text: str) -> str:
    return text.replace("\n", " | ")


def configure_logging(level_name: str) -> None:
    """Route the root logger to stdout as JSON lines. Later calls are no-ops."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(JsonLineFormatter())

    root_logger = logging.getLogger()
    root_logger.handlers[:] = [handler]
    root_logger.setLevel(_resolve_level(level_name))
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.captureWarnings(True)
    _LOGGING_CONFIGURED = True


def _resolve_level(level_name: str) -> int:
    return logging.getLevelNamesMapping().get(level_name.strip().upper(), logging.INFO)


def current_log_context() -> dict[str, Any]:
    return dict(_LOG_CONTEXT.get())


def _push(fields: Mapping[str, Any]) -> Token[LogContext]:
    merged = {**_LOG_CONTEXT.get(), **fields}
    return _LOG_CONTEXT.set(MappingProxyType(merged))


@contextmanager
def log_context(**fields: Any) -> Iterator[None]:
    """Add ``fields`` to every record logged inside the block."""

    token = _push(fields)
    try:
        yield
    finally:
        _LOG_CONTEXT.reset(token)


def bind_log_fields(**fields: Any) -> None:
    """Add fields to the innermost open context; they vanish when it closes."""

    _push(fields)


def bind_request_id(request_id: str) -> Token[LogContext]:
    return _push({"request_id": request_id})


def get_request_id() -> str | None:
    return _LOG_CONTEXT.get().get("request_id")


def reset_request_id(token: Token[LogContext]) -> None:
    _LOG_CONTEXT.reset(token)


__all__ = [
    "JsonLineFormatter",
    "bind_log_fields",
    "bind_request_id",
    "configure_logging",
    "current_log_context",
    "get_request_id",
    "log_context",
    "reset_request_id",
]
