"""The platform console capability set consumed by the grouping engine."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Console(Protocol):
    """Console primitives. Grouping, deferral and scoping happen above this layer."""

    def group(self, title: str) -> None: ...
    def group_collapsed(self, title: str) -> None: ...
    def group_end(self) -> None: ...

    def log(self, message: Any, *args: Any) -> None: ...
    def info(self, message: Any, *args: Any) -> None: ...
    def warn(self, message: Any, *args: Any) -> None: ...
    def error(self, message: Any, *args: Any) -> None: ...
    def debug(self, message: Any, *args: Any) -> None: ...
    def trace(self, message: Any, *args: Any) -> None: ...
    def assert_(self, condition: Any, message: Any, *args: Any) -> None: ...

    def dir(self, value: Any, options: dict[str, Any] | None = None) -> None: ...
    def dirxml(self, value: Any) -> None: ...
    def clear(self) -> None: ...

    def count(self, name: str) -> None: ...
    def time(self, name: str) -> None: ...
    def time_end(self, name: str) -> None: ...
    def profile(self, name: str | None = None) -> None: ...
    def profile_end(self) -> None: ...
