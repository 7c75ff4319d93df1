from __future__ import annotations

"""Environment-driven settings for a single archivejson run.

The whole argv belongs to the build action's token stream, so the tool
reserves no options of its own; knobs come from the environment instead:

    ARCHIVEJSON_JSON_LOGS=1      JSON log lines on stderr
    ARCHIVEJSON_LOG_LEVEL=NAME   base log level (default WARNING)
    ARCHIVEJSON_TRACE_IO=1       params-file/output IO traces (implies DEBUG)
    DEBUG=1                      re-raise errors instead of exiting with 1
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_LOG_LEVEL = logging.WARNING


def _flag(environ: Mapping[str, str], name: str) -> bool:
    return environ.get(name) == '1'


def _level(raw: Optional[str]) -> int:
    if not raw:
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else DEFAULT_LOG_LEVEL


@dataclass(frozen=True)
class Settings:
    """Immutable per-run configuration."""
    json_logs: bool = False
    log_level: int = DEFAULT_LOG_LEVEL
    trace_io: bool = False
    debug: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        trace = _flag(env, 'ARCHIVEJSON_TRACE_IO')
        return cls(
            json_logs=_flag(env, 'ARCHIVEJSON_JSON_LOGS'),
            log_level=logging.DEBUG if trace else _level(env.get('ARCHIVEJSON_LOG_LEVEL')),
            trace_io=trace,
            debug=_flag(env, 'DEBUG'),
        )
