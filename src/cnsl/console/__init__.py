"""Platform console primitives and their implementations."""

from .protocol import Console
from .stream import NoOpConsole, StreamConsole, create_console

__all__ = [
    "Console",
    "NoOpConsole",
    "StreamConsole",
    "create_console",
]
