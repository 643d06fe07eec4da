"""Tests for deferred actions and their dispatch onto a console."""

from __future__ import annotations

import pytest

from cnsl.core import (
    Assert,
    Clear,
    CloseGroup,
    Count,
    Dump,
    DumpMarkup,
    Emit,
    Level,
    OpenGroup,
    Phase,
    Profiler,
    Replay,
    Timer,
    apply,
    flatten,
)
from cnsl.foundation.testing import ConsoleCall, RecordingConsole


@pytest.mark.parametrize(
    ("action", "expected"),
    [
        (OpenGroup("t"), ConsoleCall("group", ("t",))),
        (OpenGroup("t", collapsed=True), ConsoleCall("group_collapsed", ("t",))),
        (CloseGroup(), ConsoleCall("group_end")),
        (Emit(Level.TRACE, "m", (1, 2)), ConsoleCall("trace", ("m", 1, 2))),
        (Assert(False, "m", ("x",)), ConsoleCall("assert_", (False, "m", "x"))),
        (Count("c"), ConsoleCall("count", ("c",))),
        (Timer(Phase.START, "t"), ConsoleCall("time", ("t",))),
        (Timer(Phase.END, "t"), ConsoleCall("time_end", ("t",))),
        (Profiler(Phase.START, "p"), ConsoleCall("profile", ("p",))),
        (Profiler(Phase.END), ConsoleCall("profile_end")),
        (Dump({"a": 1}, {"depth": 1}), ConsoleCall("dir", ({"a": 1}, {"depth": 1}))),
        (DumpMarkup("<a/>"), ConsoleCall("dirxml", ("<a/>",))),
        (Clear(), ConsoleCall("clear")),
    ],
)
def test_apply_dispatches_to_primitive(action: object, expected: ConsoleCall) -> None:
    console = RecordingConsole()
    apply(action, console)  # type: ignore[arg-type]
    assert console.calls == [expected]


@pytest.mark.parametrize("level", list(Level))
def test_emit_uses_level_primitive(level: Level) -> None:
    console = RecordingConsole()
    apply(Emit(level, "msg"), console)
    assert console.calls == [ConsoleCall(level.value, ("msg",))]


def test_replay_runs_depth_first_in_order() -> None:
    inner = Replay((OpenGroup("in"), Emit(Level.LOG, 2), CloseGroup()))
    outer = Replay((OpenGroup("out"), Emit(Level.LOG, 1), inner, Emit(Level.LOG, 3), CloseGroup()))
    console = RecordingConsole()
    apply(outer, console)
    assert console.calls == [
        ConsoleCall("group", ("out",)),
        ConsoleCall("log", (1,)),
        ConsoleCall("group", ("in",)),
        ConsoleCall("log", (2,)),
        ConsoleCall("group_end"),
        ConsoleCall("log", (3,)),
        ConsoleCall("group_end"),
    ]


def test_flatten_expands_nested_replays() -> None:
    nested = [Emit(Level.LOG, "a"), Replay((Count("c"), Replay((Clear(),))))]
    assert list(flatten(nested)) == [Emit(Level.LOG, "a"), Count("c"), Clear()]


def test_actions_compare_structurally() -> None:
    assert Emit(Level.INFO, "m", (1,)) == Emit(Level.INFO, "m", (1,))
    assert Emit(Level.INFO, "m") != Emit(Level.WARN, "m")
    assert Timer(Phase.START, "t") != Timer(Phase.END, "t")


def test_actions_are_immutable() -> None:
    action = Count("c")
    with pytest.raises(AttributeError):
        action.name = "other"  # type: ignore[misc]


def test_apply_rejects_unknown_action() -> None:
    with pytest.raises(TypeError, match="Unknown action"):
        apply("not an action", RecordingConsole())  # type: ignore[arg-type]
