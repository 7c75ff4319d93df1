from __future__ import annotations

from typing import IO, Iterator, Protocol, Union, runtime_checkable

from archivejson.parsing.source import TokenOrigin


@runtime_checkable
class TokenSourceProtocol(Protocol):
    """Forward-only producer of string tokens."""

    def __iter__(self) -> Iterator[str]:
        ...

    def origin(self) -> TokenOrigin:
        """Return where the most recently produced token came from."""
        ...


@runtime_checkable
class StreamProviderProtocol(Protocol):
    """Turns a params-file handle into an open, closeable stream."""

    def __call__(self, handle: str) -> IO[Union[bytes, str]]:
        ...
