"""Deferred console actions.

Every logging call is recorded as a tagged, immutable action instead of an
opaque closure. A queue of actions can be inspected and compared structurally,
and replayed onto any Console later. A closed child group hands its whole queue
to its parent as a single `Replay` entry, so nested blocks stay contiguous.

Example:
    >>> queue = [OpenGroup("db"), Emit(Level.INFO, "connected"), CloseGroup()]
    >>> for action in queue:
    ...     apply(action, console)
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Any, TypeAlias

if TYPE_CHECKING:
    from cnsl.console import Console


class Level(StrEnum):
    """Message levels understood by the console."""

    LOG = "log"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    DEBUG = "debug"
    TRACE = "trace"


class Phase(StrEnum):
    """Start/end marker for timers and profiles."""

    START = "start"
    END = "end"


# ─────────────────────────────────────────────────────────────────────────────
# Action Variants
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class OpenGroup:
    title: str
    collapsed: bool = False


@dataclass(frozen=True, slots=True)
class CloseGroup:
    pass


@dataclass(frozen=True, slots=True)
class Emit:
    """Leveled message with pass-through trailing args."""

    level: Level
    message: Any
    args: tuple[Any, ...] = ()


@dataclass(frozen=True, slots=True)
class Assert:
    condition: Any
    message: Any
    args: tuple[Any, ...] = ()


@dataclass(frozen=True, slots=True)
class Count:
    name: str


@dataclass(frozen=True, slots=True)
class Timer:
    phase: Phase
    name: str


@dataclass(frozen=True, slots=True)
class Profiler:
    phase: Phase
    name: str | None = None


@dataclass(frozen=True, slots=True)
class Dump:
    value: Any
    options: dict[str, Any] | None = field(default=None, hash=False)


@dataclass(frozen=True, slots=True)
class DumpMarkup:
    value: Any


@dataclass(frozen=True, slots=True)
class Clear:
    pass


@dataclass(frozen=True, slots=True)
class Replay:
    """A closed group's entire queue, replayed as one atomic unit."""

    actions: tuple[Action, ...]


Action: TypeAlias = (
    OpenGroup | CloseGroup | Emit | Assert | Count | Timer | Profiler | Dump | DumpMarkup | Clear | Replay
)


# ─────────────────────────────────────────────────────────────────────────────
# Execution
# ─────────────────────────────────────────────────────────────────────────────


def apply(action: Action, console: Console) -> None:
    """Execute one action against a console. Replay runs depth-first, in order."""
    match action:
        case OpenGroup(title=title, collapsed=True): console.group_collapsed(title)
        case OpenGroup(title=title): console.group(title)
        case CloseGroup(): console.group_end()
        case Emit(level=level, message=message, args=args): getattr(console, level.value)(message, *args)
        case Assert(condition=condition, message=message, args=args): console.assert_(condition, message, *args)
        case Count(name=name): console.count(name)
        case Timer(phase=Phase.START, name=name): console.time(name)
        case Timer(name=name): console.time_end(name)
        case Profiler(phase=Phase.START, name=name): console.profile(name)
        case Profiler(): console.profile_end()
        case Dump(value=value, options=options): console.dir(value, options)
        case DumpMarkup(value=value): console.dirxml(value)
        case Clear(): console.clear()
        case Replay(actions=actions):
            for inner in actions:
                apply(inner, console)
        case _:
            raise TypeError(f"Unknown action: {action!r}")


def flatten(actions: Iterable[Action]) -> Iterator[Action]:
    """Expand nested Replay entries into the linear order a flush produces."""
    for action in actions:
        if isinstance(action, Replay):
            yield from flatten(action.actions)
        else:
            yield action
