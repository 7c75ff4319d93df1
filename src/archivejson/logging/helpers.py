from __future__ import annotations

"""Small logging helpers to standardize archivejson logger names, configuration and tracing.

This module provides:
    - JsonLogFormatter: JSON log formatter with stable fields and optional context.
    - setup_base_logger: Root logger configuration for the 'archivejson' logger.
    - get_logger: Namespaced logger factory ('archivejson.*').
    - trace_io utilities gated by `set_trace_io` or ARCHIVEJSON_TRACE_IO.

The version field is resolved lazily to avoid circular imports and falls
back to 'unknown' if it cannot be imported.
"""

import logging
import os
from typing import Optional, TextIO

from archivejson.core.interfaces.logging import LoggerLikeProtocol

BASE_LOGGER_NAME = "archivejson"

_BASE_HANDLER: Optional[logging.Handler] = None
_TRACE_IO = False


class JsonLogFormatter(logging.Formatter):
    """Emit logs as compact JSON with a fixed schema.

    Fields:
        - ts: ISO-8601 timestamp in UTC with millisecond precision.
        - level: Log level name.
        - module: Logger name (e.g., 'archivejson.parser').
        - msg: Formatted message string.
        - version: archivejson.__version__ (fixed per formatter instance).
        - ctx: Optional dictionary attached to the record as 'context'.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        try:
            from archivejson import __version__ as _v
            return str(_v)
        except ImportError:
            return os.getenv("ARCHIVEJSON_VERSION", "unknown")

    def format(self, record: logging.LogRecord) -> str:
        from datetime import datetime, timezone
        import json

        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        ts_str = ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")

        payload = {
            "ts": ts_str,
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self._version,
        }

        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            payload["ctx"] = ctx

        return json.dumps(payload, ensure_ascii=False)


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.WARNING, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Configure the base 'archivejson' logger once and return it.

    Args:
        json_logs: If True, configure a JSON formatter, else plain text.
        level: Logging level for the base logger.
        stream: Optional stream (stderr by default).

    Returns:
        The configured base logger.
    """
    global _BASE_HANDLER
    base = logging.getLogger(BASE_LOGGER_NAME)
    if _BASE_HANDLER is not None and _BASE_HANDLER in base.handlers:
        # Already configured: only level and output mode may change.
        base.setLevel(level)
        _BASE_HANDLER.setFormatter(_make_formatter(json_logs))
        return base

    import sys as _sys

    base.setLevel(level)
    base.propagate = False

    handler = logging.StreamHandler(stream or _sys.stderr)
    handler.setFormatter(_make_formatter(json_logs))
    base.addHandler(handler)
    _BASE_HANDLER = handler

    return base


def _make_formatter(json_logs: bool) -> logging.Formatter:
    if json_logs:
        return JsonLogFormatter()
    return logging.Formatter("%(levelname)s: %(message)s")


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'archivejson'."""
    if not name or name == BASE_LOGGER_NAME:
        return logging.getLogger(BASE_LOGGER_NAME)
    if name.startswith(BASE_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{BASE_LOGGER_NAME}.{name}")


def set_trace_io(enabled: bool) -> None:
    """Turn IO tracing on or off for the process, on top of the env flag."""
    global _TRACE_IO
    _TRACE_IO = bool(enabled)


def is_trace_io_enabled() -> bool:
    """Check if IO tracing is enabled via `set_trace_io` or the env flag."""
    return _TRACE_IO or os.getenv("ARCHIVEJSON_TRACE_IO") == "1"


def trace_io(logger: LoggerLikeProtocol, message: str, **ctx) -> None:
    """Emit debug-verbosity IO trace messages only when enabled.

    Args:
        logger: Target logger.
        message: Human-readable description.
        **ctx: Optional structured context, attached as the record 'context'.
    """
    if not is_trace_io_enabled():
        return
    if ctx:
        logger.debug("%s | ctx=%r", message, ctx, extra={"context": ctx})
    else:
        logger.debug("%s", message)
