from __future__ import annotations
from typing import Protocol, runtime_checkable


@runtime_checkable
class LoggerLikeProtocol(Protocol):
    """Logging surface the parser, writer and CLI rely on.

    Any `logging.Logger` satisfies it; tests may pass a recording stub.
    """

    def debug(self, msg: str, *args, **kwargs) -> None: ...

    def info(self, msg: str, *args, **kwargs) -> None: ...

    def error(self, msg: str, *args, **kwargs) -> None: ...


@runtime_checkable
class LoggerFactoryProtocol(Protocol):
    """Configures output once and hands out 'archivejson.*' loggers."""

    def get_logger(self, name: str) -> LoggerLikeProtocol: ...
