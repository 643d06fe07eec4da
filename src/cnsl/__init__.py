"""Cnsl - grouped, scoped, deferred console logging.

Adds nested named groups on top of a plain console. Logging into a group is
deferred until the group closes, then the whole block is emitted inside its
parent's bracket, so call trees render contiguously even when sibling groups
are open at the same time.

Quick Start:
    >>> from cnsl import get_cnsl
    >>>
    >>> log = get_cnsl()
    >>> log.info("starting")
    starting
    >>> db = log.group("db")
    >>> db.scoped("users").log("loaded", 42)     # deferred
    >>> log.warn("slow disk")                    # printed now
    slow disk
    >>> db.group_end()                           # whole block printed now
    db
      users | loaded 42

Structured Groups:
    >>> with log.group("request") as req:
    ...     req.log("GET /health")
    >>>
    >>> log.grouped("batch", lambda g: g.count("item").count("item"))

Call Instrumentation:
    >>> from cnsl import logged
    >>>
    >>> @logged(group_title="fetch")
    ... def fetch(key: str) -> dict:
    ...     return {"key": key}

Isolated Instances (tests, libraries):
    >>> from cnsl import Cnsl
    >>> from cnsl.foundation.testing import RecordingConsole
    >>>
    >>> console = RecordingConsole()
    >>> local = Cnsl(console=console)
"""

__version__ = "0.1.0"

from .console import Console, NoOpConsole, StreamConsole, create_console
from .core import (
    SCOPE_SEPARATOR,
    Action,
    Cnsl,
    GroupNode,
    Level,
    Phase,
    flatten,
    scoped_message,
)
from .foundation.config import CnslSettings, get_settings
from .observability import configure_logging
from .runtime import configure, get_cnsl, logged, reset_cnsl, set_cnsl

__all__ = [
    # Facade
    "Cnsl",
    "GroupNode",
    # Root lifecycle
    "configure",
    "get_cnsl",
    "reset_cnsl",
    "set_cnsl",
    # Instrumentation
    "logged",
    # Actions & scope
    "Action",
    "Level",
    "Phase",
    "SCOPE_SEPARATOR",
    "flatten",
    "scoped_message",
    # Consoles
    "Console",
    "NoOpConsole",
    "StreamConsole",
    "create_console",
    # Configuration
    "CnslSettings",
    "configure_logging",
    "get_settings",
]
