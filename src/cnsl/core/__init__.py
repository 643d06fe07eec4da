"""Grouping engine: scope resolution, deferred actions, group nodes and the facade."""

from .actions import (
    Action,
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
from .facade import Cnsl
from .node import GroupNode
from .scope import SCOPE_SEPARATOR, join_scope, scoped_message

__all__ = [
    # Actions
    "Action",
    "Assert",
    "Clear",
    "CloseGroup",
    "Count",
    "Dump",
    "DumpMarkup",
    "Emit",
    "Level",
    "OpenGroup",
    "Phase",
    "Profiler",
    "Replay",
    "Timer",
    "apply",
    "flatten",
    # Nodes
    "Cnsl",
    "GroupNode",
    # Scope
    "SCOPE_SEPARATOR",
    "join_scope",
    "scoped_message",
]
