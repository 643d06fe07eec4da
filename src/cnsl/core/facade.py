"""Cnsl: the public logging facade.

Each leaf call records one action with its scope-resolved message and the
caller's trailing args, enqueues it on this node and returns the node, so calls
chain fluently:

    >>> root = Cnsl(console=StreamConsole())
    >>> root.scoped("api").info("listening", 8080).count("boot")
    api | listening 8080
    boot: 1
"""

from __future__ import annotations

from typing import Any, Self

from .actions import Assert, Clear, Count, Dump, DumpMarkup, Emit, Level, Phase, Profiler, Timer
from .node import GroupNode


class Cnsl(GroupNode):
    """Group node with the console-style leaf operations."""

    __slots__ = ()

    def _emit(self, level: Level, message: Any, args: tuple[Any, ...]) -> Self:
        self.enqueue(Emit(level, self.scoped_message(message), args))
        return self

    def log(self, message: Any, *args: Any) -> Self: return self._emit(Level.LOG, message, args)
    def info(self, message: Any, *args: Any) -> Self: return self._emit(Level.INFO, message, args)
    def warn(self, message: Any, *args: Any) -> Self: return self._emit(Level.WARN, message, args)
    def error(self, message: Any, *args: Any) -> Self: return self._emit(Level.ERROR, message, args)
    def debug(self, message: Any, *args: Any) -> Self: return self._emit(Level.DEBUG, message, args)
    def trace(self, message: Any, *args: Any) -> Self: return self._emit(Level.TRACE, message, args)

    warning = warn

    def assert_(self, condition: Any, message: Any, *args: Any) -> Self:
        """Report message only when condition is falsy (decided by the console at flush)."""
        self.enqueue(Assert(condition, self.scoped_message(message), args))
        return self

    def count(self, name: str) -> Self:
        self.enqueue(Count(name))
        return self

    def time(self, name: str) -> Self:
        self.enqueue(Timer(Phase.START, name))
        return self

    def time_end(self, name: str) -> Self:
        self.enqueue(Timer(Phase.END, name))
        return self

    def profile(self, name: str | None = None) -> Self:
        self.enqueue(Profiler(Phase.START, name))
        return self

    def profile_end(self) -> Self:
        self.enqueue(Profiler(Phase.END))
        return self

    def dir(self, value: Any, options: dict[str, Any] | None = None) -> Self:
        self.enqueue(Dump(value, options))
        return self

    def dirxml(self, value: Any) -> Self:
        self.enqueue(DumpMarkup(value))
        return self

    def clear(self) -> Self:
        self.enqueue(Clear())
        return self
