from __future__ import annotations

"""Public surface for archivejson.core.

Stable import location for the record model and the Protocol types:

    from archivejson.core import Archive, TokenSourceProtocol
"""

from archivejson.core.models import Archive
from archivejson.core.interfaces import (
    LoggerFactoryProtocol,
    LoggerLikeProtocol,
    StreamProviderProtocol,
    TokenSourceProtocol,
)

__all__ = [
    "Archive",
    "LoggerFactoryProtocol",
    "LoggerLikeProtocol",
    "StreamProviderProtocol",
    "TokenSourceProtocol",
]
