"""Tests for the leaf operations of the Cnsl facade."""

from __future__ import annotations

import pytest

from cnsl import Cnsl
from cnsl.core import Assert, Clear, Count, Dump, DumpMarkup, Emit, Level, Phase, Profiler, Timer
from cnsl.foundation.testing import ConsoleCall, RecordingConsole


@pytest.mark.parametrize("name", ["log", "info", "warn", "error", "debug", "trace"])
def test_level_methods_pass_args_through(root: Cnsl, console: RecordingConsole, name: str) -> None:
    """Trailing args reach the primitive spread, unchanged and in order."""
    payload = {"k": [1, 2]}
    getattr(root.scoped("s"), name)("msg", 1, payload, None)
    assert console.calls == [ConsoleCall(name, ("s | msg", 1, payload, None))]
    assert console.calls[0].args[2] is payload


def test_warning_is_warn(root: Cnsl, console: RecordingConsole) -> None:
    root.warning("careful")
    assert console.calls == [ConsoleCall("warn", ("careful",))]


def test_leaf_calls_chain(root: Cnsl, console: RecordingConsole) -> None:
    result = root.log("a").count("n").time("t").time_end("t").profile("p").profile_end().clear()
    assert result is root
    assert console.methods == ["log", "count", "time", "time_end", "profile", "profile_end", "clear"]


def test_leaf_calls_record_actions(root: Cnsl) -> None:
    grp = root.group("g")
    opts = {"depth": 2}
    (grp.log("m", 1)
        .assert_(0, "bad", "x")
        .count("c")
        .time("t")
        .time_end("t")
        .profile()
        .profile_end()
        .dir([1], opts)
        .dirxml("<a/>")
        .clear())
    assert grp.queue[1:] == (
        Emit(Level.LOG, "m", (1,)),
        Assert(0, "bad", ("x",)),
        Count("c"),
        Timer(Phase.START, "t"),
        Timer(Phase.END, "t"),
        Profiler(Phase.START, None),
        Profiler(Phase.END),
        Dump([1], opts),
        DumpMarkup("<a/>"),
        Clear(),
    )


def test_assert_message_is_scoped(root: Cnsl, console: RecordingConsole) -> None:
    root.scoped("check").assert_(1 == 2, "mismatch", 1, 2)
    assert console.calls == [ConsoleCall("assert_", (False, "check | mismatch", 1, 2))]


def test_dir_passes_value_and_options(root: Cnsl, console: RecordingConsole) -> None:
    value = {"nested": {"deep": True}}
    root.dir(value, {"depth": 1}).dir(value)
    assert console.calls == [ConsoleCall("dir", (value, {"depth": 1})), ConsoleCall("dir", (value, None))]


def test_counters_and_timers_are_not_scoped(root: Cnsl, console: RecordingConsole) -> None:
    root.scoped("s").count("hits").time("load")
    assert console.calls == [ConsoleCall("count", ("hits",)), ConsoleCall("time", ("load",))]


def test_group_returns_facade(root: Cnsl) -> None:
    child = root.group("g")
    assert isinstance(child, Cnsl)
    assert child.console is root.console
