from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .tokens import StreamProviderProtocol, TokenSourceProtocol

__all__ = [
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'StreamProviderProtocol',
    'TokenSourceProtocol',
]
