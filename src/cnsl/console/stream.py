"""Console implementations.

StreamConsole renders primitives as indented text on any TextIO, much like a
browser or Node console does: each open group indents following lines, counters
and timers report by label, and assertions print only when they fail.
"""

from __future__ import annotations

import cProfile
import io
import pstats
import sys
import time
import traceback
from dataclasses import dataclass, field
from pprint import pformat
from typing import Any, TextIO

_COLORS = {"reset": "\033[0m", "bold": "\033[1m", "dim": "\033[2m", "red": "\033[31m", "yellow": "\033[33m"}
_LEVEL_COLORS = {"warn": _COLORS["yellow"], "error": _COLORS["red"], "debug": _COLORS["dim"]}
_DIR_OPTIONS = frozenset({"depth", "width", "compact", "sort_dicts", "indent"})
_CLEAR = "\033[2J\033[H"


@dataclass(slots=True)
class StreamConsole:
    """Text console writing to a stream (stdout by default).

    Example:
        >>> console = StreamConsole()
        >>> console.group("db")
        >>> console.log("connected", "pool=4")
        >>> console.group_end()
        db
          connected pool=4
    """

    output: TextIO = field(default_factory=lambda: sys.stdout)
    indent: int = 2
    colors: bool | None = None  # None = auto-detect
    _depth: int = 0
    _counters: dict[str, int] = field(default_factory=dict)
    _timers: dict[str, float] = field(default_factory=dict)
    _profiler: cProfile.Profile | None = None
    _profile_name: str | None = None

    def __post_init__(self) -> None:
        if self.colors is None:
            self.colors = self._isatty()

    # Groups

    def group(self, title: str) -> None:
        self._write(title, _COLORS["bold"])
        self._depth += 1

    def group_collapsed(self, title: str) -> None:
        # Text output cannot collapse; the title still opens a level.
        self.group(title)

    def group_end(self) -> None:
        self._depth = max(0, self._depth - 1)

    # Messages

    def log(self, message: Any, *args: Any) -> None: self._emit("log", message, args)
    def info(self, message: Any, *args: Any) -> None: self._emit("info", message, args)
    def warn(self, message: Any, *args: Any) -> None: self._emit("warn", message, args)
    def error(self, message: Any, *args: Any) -> None: self._emit("error", message, args)
    def debug(self, message: Any, *args: Any) -> None: self._emit("debug", message, args)

    def trace(self, message: Any, *args: Any) -> None:
        self._write(f"Trace: {_join(message, args)}")
        self._write("".join(traceback.format_stack()[:-1]).rstrip())

    def assert_(self, condition: Any, message: Any, *args: Any) -> None:
        if not condition:
            self._write(f"Assertion failed: {_join(message, args)}", _LEVEL_COLORS["error"])

    # Inspection

    def dir(self, value: Any, options: dict[str, Any] | None = None) -> None:
        opts = {k: v for k, v in (options or {}).items() if k in _DIR_OPTIONS}
        self._write(pformat(value, **opts))

    def dirxml(self, value: Any) -> None:
        self.log(value)

    def clear(self) -> None:
        if self._isatty():
            self.output.write(_CLEAR)
            self.output.flush()

    # Counters, timers, profiles

    def count(self, name: str) -> None:
        self._counters[name] = self._counters.get(name, 0) + 1
        self._write(f"{name}: {self._counters[name]}")

    def time(self, name: str) -> None:
        self._timers[name] = time.perf_counter()

    def time_end(self, name: str) -> None:
        if (start := self._timers.pop(name, None)) is None:
            self._write(f"Timer '{name}' does not exist", _LEVEL_COLORS["warn"])
            return
        self._write(f"{name}: {(time.perf_counter() - start) * 1000:.3f}ms")

    def profile(self, name: str | None = None) -> None:
        if self._profiler is not None:
            return
        self._profiler, self._profile_name = cProfile.Profile(), name
        self._profiler.enable()

    def profile_end(self) -> None:
        if (profiler := self._profiler) is None:
            return
        profiler.disable()
        buf = io.StringIO()
        pstats.Stats(profiler, stream=buf).sort_stats("cumulative").print_stats(10)
        self._write(f"Profile '{self._profile_name or 'default'}' finished")
        self._write(buf.getvalue().strip())
        self._profiler, self._profile_name = None, None

    # Helpers

    def _emit(self, level: str, message: Any, args: tuple[Any, ...]) -> None:
        self._write(_join(message, args), _LEVEL_COLORS.get(level))

    def _write(self, text: str, color: str | None = None) -> None:
        pad = " " * (self.indent * self._depth)
        body = "\n".join(pad + line for line in text.split("\n"))
        if self.colors and color:
            body = f"{color}{body}{_COLORS['reset']}"
        print(body, file=self.output)

    def _isatty(self) -> bool:
        return getattr(self.output, "isatty", lambda: False)()


class NoOpConsole:
    """Console that discards everything."""

    __slots__ = ()

    def group(self, title: str) -> None: pass
    def group_collapsed(self, title: str) -> None: pass
    def group_end(self) -> None: pass
    def log(self, message: Any, *args: Any) -> None: pass
    def info(self, message: Any, *args: Any) -> None: pass
    def warn(self, message: Any, *args: Any) -> None: pass
    def error(self, message: Any, *args: Any) -> None: pass
    def debug(self, message: Any, *args: Any) -> None: pass
    def trace(self, message: Any, *args: Any) -> None: pass
    def assert_(self, condition: Any, message: Any, *args: Any) -> None: pass
    def dir(self, value: Any, options: dict[str, Any] | None = None) -> None: pass
    def dirxml(self, value: Any) -> None: pass
    def clear(self) -> None: pass
    def count(self, name: str) -> None: pass
    def time(self, name: str) -> None: pass
    def time_end(self, name: str) -> None: pass
    def profile(self, name: str | None = None) -> None: pass
    def profile_end(self) -> None: pass


def create_console(
    kind: str = "stream",
    *,
    output: TextIO | None = None,
    indent: int = 2,
    colors: bool | None = None,
) -> StreamConsole | NoOpConsole:
    """Build a console by kind: "stream" (indented text) or "none" (discard)."""
    match kind:
        case "stream": return StreamConsole(output=output or sys.stdout, indent=indent, colors=colors)
        case "none": return NoOpConsole()
        case _: raise ValueError(f"Unknown console: {kind}. Use 'stream' or 'none'")


def _join(message: Any, args: tuple[Any, ...]) -> str:
    return " ".join(v if isinstance(v, str) else pformat(v, compact=True) for v in (message, *args))
