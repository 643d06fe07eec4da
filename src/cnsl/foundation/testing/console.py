"""Recording console for tests.

Provides RecordingConsole and the recording_root context manager for:
- Observing exactly which primitives ran, in which order
- Asserting on flushed output without parsing text
- Swapping the process root for an isolated one during a test
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Generator

    from cnsl.core import Cnsl


@dataclass(frozen=True, slots=True)
class ConsoleCall:
    """Record of a single console primitive call."""
    method: str
    args: tuple[Any, ...] = ()


@dataclass
class RecordingConsole:
    """Console that records every primitive call instead of printing."""
    calls: list[ConsoleCall] = field(default_factory=list)

    @property
    def call_count(self) -> int:
        return len(self.calls)

    @property
    def methods(self) -> list[str]:
        return [c.method for c in self.calls]

    @property
    def last_call(self) -> ConsoleCall | None:
        return self.calls[-1] if self.calls else None

    def assert_called(self, method: str | None = None) -> None:
        if not self.calls:
            raise AssertionError("Expected console to be called")
        if method is not None and method not in self.methods:
            raise AssertionError(f"Expected '{method}' in {self.methods}")

    def assert_not_called(self) -> None:
        if self.calls:
            raise AssertionError(f"Console called {self.call_count} times: {self.methods}")

    def reset(self) -> None:
        self.calls.clear()

    def _record(self, method: str, *args: Any) -> None:
        self.calls.append(ConsoleCall(method, args))

    def group(self, title: str) -> None: self._record("group", title)
    def group_collapsed(self, title: str) -> None: self._record("group_collapsed", title)
    def group_end(self) -> None: self._record("group_end")
    def log(self, message: Any, *args: Any) -> None: self._record("log", message, *args)
    def info(self, message: Any, *args: Any) -> None: self._record("info", message, *args)
    def warn(self, message: Any, *args: Any) -> None: self._record("warn", message, *args)
    def error(self, message: Any, *args: Any) -> None: self._record("error", message, *args)
    def debug(self, message: Any, *args: Any) -> None: self._record("debug", message, *args)
    def trace(self, message: Any, *args: Any) -> None: self._record("trace", message, *args)
    def assert_(self, condition: Any, message: Any, *args: Any) -> None: self._record("assert_", condition, message, *args)
    def dir(self, value: Any, options: dict[str, Any] | None = None) -> None: self._record("dir", value, options)
    def dirxml(self, value: Any) -> None: self._record("dirxml", value)
    def clear(self) -> None: self._record("clear")
    def count(self, name: str) -> None: self._record("count", name)
    def time(self, name: str) -> None: self._record("time", name)
    def time_end(self, name: str) -> None: self._record("time_end", name)
    def profile(self, name: str | None = None) -> None: self._record("profile", name)
    def profile_end(self) -> None: self._record("profile_end")


@contextmanager
def recording_root() -> Generator[tuple[Cnsl, RecordingConsole], None, None]:
    """Install a fresh root backed by a RecordingConsole, restoring the previous root on exit.

    Example:
        >>> with recording_root() as (root, console):
        ...     get_cnsl().log("hi")
        >>> console.calls
        [ConsoleCall(method='log', args=('hi',))]
    """
    from cnsl.core import Cnsl
    from cnsl.runtime.root import _override

    console = RecordingConsole()
    root = Cnsl(console=console)
    token = _override.set(root)
    try:
        yield root, console
    finally:
        _override.reset(token)
