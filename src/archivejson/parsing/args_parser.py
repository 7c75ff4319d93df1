from __future__ import annotations

"""
ArgsParser – flag-dispatch parser for build-action arguments.

Build systems hand a long, flat run of tokens to an action, either directly
on the command line or, when it would be too long, through a params file
referenced by a single '@path' argument. Tokens are grouped by the flag that
precedes them:

    --srcs a.go b.go --id //pkg:lib

routes 'a.go' and 'b.go' to the '--srcs' callback and '//pkg:lib' to the
'--id' callback, one call per value.
"""

from pathlib import Path
from typing import IO, Callable, Dict, FrozenSet, Optional, Sequence

from archivejson.constants import PARAMS_FILE_MARKER
from archivejson.core.interfaces.logging import LoggerLikeProtocol
from archivejson.core.interfaces.tokens import StreamProviderProtocol, TokenSourceProtocol
from archivejson.logging.helpers import get_logger, trace_io
from archivejson.parsing.scanner import LineTokenSource, SliceTokenSource
from archivejson.parsing.source import TokenOrigin

ValueCallback = Callable[[str], None]


class ArgsParseError(ValueError):
    """Base class for every argument parsing failure."""


class UsageError(ArgsParseError):
    """Raised when the invocation itself has an invalid shape."""


class UnexpectedFlagError(ArgsParseError):
    """Raised when a value token shows up before any flag."""

    def __init__(self, token: str, origin: Optional[TokenOrigin] = None) -> None:
        self.token = token
        self.origin = origin or TokenOrigin()
        super().__init__(f"unexpected flag {token} at {self.origin.format()}")


def open_params_file(handle: str) -> IO[bytes]:
    """Default stream provider: open *handle* as a local file path."""
    return open(handle, "rb")


class ArgsParser:
    """Route value tokens to the callback of the flag that precedes them."""

    def __init__(
        self,
        *,
        stream_provider: StreamProviderProtocol = open_params_file,
        marker: str = PARAMS_FILE_MARKER,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._args: Dict[str, ValueCallback] = {}
        self._stream_provider = stream_provider
        self._marker = marker
        self._log = logger or get_logger("parser")

    def register(self, flag: str, callback: ValueCallback) -> "ArgsParser":
        """Bind *callback* to *flag*, replacing any previous binding."""
        self._args[flag] = callback
        return self

    with_arg = register

    def with_stream_provider(self, provider: StreamProviderProtocol) -> "ArgsParser":
        """Replace the collaborator that opens params files."""
        self._stream_provider = provider
        return self

    @property
    def flags(self) -> FrozenSet[str]:
        return frozenset(self._args)

    def parse(self, arguments: Sequence[str]) -> None:
        """Dispatch every token of *arguments* (or of the params file it names).

        Raises:
            UsageError: A params file reference is mixed with other arguments.
            UnexpectedFlagError: A value token precedes every flag.
            OSError: Whatever the stream provider raises, unchanged.
        """
        if not arguments:
            return
        first = arguments[0]

        if not first.startswith(self._marker):
            self._dispatch(SliceTokenSource(arguments))
            return
        if len(arguments) > 1:
            raise UsageError("expected single argument with param file")

        handle = first[len(self._marker):]
        trace_io(self._log, "opening params file", handle=handle)
        with self._stream_provider(handle) as stream:
            self._dispatch(LineTokenSource(stream, path=Path(handle)))

    def _dispatch(self, source: TokenSourceProtocol) -> None:
        current: Optional[ValueCallback] = None
        for token in source:
            callback = self._args.get(token)
            if callback is not None:
                current = callback
                continue
            # Every stream must open with a flag.
            if current is None:
                raise UnexpectedFlagError(token, source.origin())
            current(token)
