from __future__ import annotations
"""Token origin model.

This module defines a small, reusable data structure that carries the
location (params file and line) a token was read from. It is used by the
token sources and the dispatch parser to emit more helpful diagnostics.

The structure does not alter the token stream payload; it is used *only*
for logging/error messages.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class TokenOrigin:
    """Represents the origin of a token.

    Attributes:
        path: Params file path if the token was read from one.
        line: 1-based line number in the params file.
    """
    path: Optional[Path] = None
    line: Optional[int] = None

    def format(self) -> str:
        """Return a human-readable source label."""
        parts: list[str] = []
        if self.path:
            parts.append(str(self.path))
        if self.line is not None:
            parts.append(f"line {self.line}")
        return ":".join(parts) if parts else "<argv>"

    def with_line(self, line: int) -> "TokenOrigin":
        """Return a copy with the given line updated."""
        return TokenOrigin(path=self.path, line=line)
