from __future__ import annotations

"""
Token sources consumed by the flag-dispatch parser.

Two forward-only sources are provided:
    * SliceTokenSource – tokens already split by the shell (process argv).
    * LineTokenSource  – one token per line of a params file stream.

Both expose the same small surface (iteration + `origin()`), so the parser
picks one once at the top of a parse and never cares which it got.
"""

from pathlib import Path
from typing import IO, Iterator, Optional, Sequence, Union

from archivejson.parsing.source import TokenOrigin


class SliceTokenSource:
    """Yield tokens from an in-memory sequence, in order."""

    def __init__(self, tokens: Sequence[str]) -> None:
        self._tokens = list(tokens)
        self._origin = TokenOrigin()

    def __iter__(self) -> Iterator[str]:
        yield from self._tokens

    def origin(self) -> TokenOrigin:
        return self._origin


class LineTokenSource:
    """Yield one token per line of *stream*.

    Each line is stripped of its trailing '\\n' and then of a single trailing
    '\\r'. Blank lines inside the stream are empty tokens; a trailing line
    terminator does not produce an extra one.

    Byte streams are decoded with *encoding*; a decode failure is a terminal
    read error and propagates to the caller.
    """

    def __init__(
        self,
        stream: IO[Union[bytes, str]],
        *,
        path: Optional[Path] = None,
        encoding: str = "utf-8",
    ) -> None:
        self._stream = stream
        self._encoding = encoding
        self._origin = TokenOrigin(path=path)
        self._line = 0

    def __iter__(self) -> Iterator[str]:
        for raw in self._stream:
            self._line += 1
            line = raw.decode(self._encoding) if isinstance(raw, bytes) else raw
            if line.endswith("\n"):
                line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
            yield line

    def origin(self) -> TokenOrigin:
        return self._origin.with_line(self._line) if self._line else self._origin
