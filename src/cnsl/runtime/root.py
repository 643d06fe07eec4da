"""Process root lifecycle.

Nothing is built at import time. get_cnsl() creates the root lazily from
settings on first use; configure() and set_cnsl() install one explicitly, and
reset_cnsl() discards it so the next call starts fresh. The root is shared by
every thread and asyncio task in the process. A context-local override sits on
top of it so tests can swap in an isolated root without touching the shared one.

Example:
    >>> from cnsl import configure, get_cnsl
    >>> configure(console=StreamConsole(indent=4))
    >>> get_cnsl().group("boot").log("ready").group_end()
"""

from __future__ import annotations

import sys
import threading
from contextvars import ContextVar

from cnsl.console import Console, create_console
from cnsl.core import Cnsl
from cnsl.foundation.config import get_settings
from cnsl.observability import get_logger

_log = get_logger("cnsl.runtime")

_root: Cnsl | None = None
_root_lock = threading.Lock()

# Context-local override, consulted before the process root.
_override: ContextVar[Cnsl | None] = ContextVar("cnsl_root_override", default=None)


def get_cnsl() -> Cnsl:
    """Get the process root, creating it from settings if none is installed."""
    if (root := _override.get()) is not None:
        return root
    if (root := _root) is not None:
        return root
    with _root_lock:
        return _root if _root is not None else _install(_build())


def set_cnsl(root: Cnsl) -> None:
    """Install root as the process root."""
    with _root_lock:
        _install(root)


def reset_cnsl() -> None:
    """Discard the process root."""
    global _root
    with _root_lock:
        _root = None


def configure(console: Console | None = None) -> Cnsl:
    """Build a fresh root and install it. Without a console, one is built from settings."""
    root = _build(console)
    with _root_lock:
        return _install(root)


def _build(console: Console | None = None) -> Cnsl:
    if console is None:
        cfg = get_settings().console
        console = create_console(cfg.kind, output=getattr(sys, cfg.stream), indent=cfg.indent, colors=cfg.colors)
    _log.debug("root configured", console=type(console).__name__)
    return Cnsl(console=console)


def _install(root: Cnsl) -> Cnsl:
    global _root
    _root = root
    return root
