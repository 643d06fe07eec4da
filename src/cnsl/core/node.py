"""Group nodes: the deferred queue, the open-group registry and group lifecycle.

The root node (no parent) flushes every action as soon as it is enqueued. Any
other node defers: its output must land inside the parent's open/close bracket,
so it accumulates actions until group_end() hands the whole queue to the parent
as one Replay entry. A call made N levels deep is thus wrapped N times before
the root finally executes it.

Example:
    >>> root = Cnsl(console=StreamConsole())
    >>> db = root.group("db")
    >>> db.log("connected")         # deferred
    >>> root.log("unrelated")       # printed now
    >>> db.group_end()              # "db" block printed now, contiguous
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from functools import partial
from types import MappingProxyType, TracebackType
from typing import Self

from cnsl.console import Console, StreamConsole
from cnsl.observability import get_logger

from .actions import Action, CloseGroup, OpenGroup, Replay, apply
from .scope import join_scope, scoped_message

_log = get_logger("cnsl.node")


class GroupNode:
    """A logging context owning a deferred queue and a registry of open child groups.

    Args:
        console: Console the root flushes to. Children carry it but never write to it.
        title: Group title; when given, the node's first action opens the group.
        collapsed: Open the group collapsed.
        parent_scope: Scope chain inherited at construction, never re-read.
        parent_enqueue: Parent's enqueue. Absent only on the root.
        on_close: Called once when the node closes.
    """

    __slots__ = ("_console", "_title", "_queue", "_children", "_closed", "_scope",
                 "_parent_scope", "_parent_enqueue", "_on_close")

    def __init__(
        self,
        console: Console | None = None,
        *,
        title: str | None = None,
        collapsed: bool = False,
        parent_scope: str | None = None,
        parent_enqueue: Callable[[Action], None] | None = None,
        on_close: Callable[[], object] | None = None,
    ) -> None:
        self._console: Console = console if console is not None else StreamConsole()
        self._title = title
        self._queue: list[Action] = []
        self._children: dict[str, Self] = {}
        self._closed = False
        self._scope: str | None = None
        self._parent_scope = parent_scope or None
        self._parent_enqueue = parent_enqueue
        self._on_close = on_close
        if title is not None:
            self.enqueue(OpenGroup(title, collapsed))

    # ─────────────────────────────────────────────────────────────────────────
    # Queue
    # ─────────────────────────────────────────────────────────────────────────

    def enqueue(self, action: Action) -> None:
        """Append an action. The root executes it immediately; closed nodes drop it."""
        if self._closed:
            _log.debug("action dropped on closed group", title=self._title, action=type(action).__name__)
            return
        self._queue.append(action)
        if self._parent_enqueue is None:
            self._flush()

    def _flush(self) -> None:
        # Detach before replaying so a failing primitive never re-runs earlier actions.
        pending, self._queue = self._queue, []
        for action in pending:
            apply(action, self._console)

    # ─────────────────────────────────────────────────────────────────────────
    # Groups
    # ─────────────────────────────────────────────────────────────────────────

    def group(self, title: str, collapsed: bool = False) -> Self:
        """Open a child group, or join the one already open under the same title."""
        key = str(self.scoped_message(title))
        if (child := self._children.get(key)) is not None:
            _log.debug("group reused", title=key)
            return child
        child = type(self)(
            self._console,
            title=key,
            collapsed=collapsed,
            parent_scope=join_scope(self._parent_scope, self._scope),
            parent_enqueue=self.enqueue,
            on_close=partial(self._children.pop, key, None),
        )
        self._children[key] = child
        return child

    def grouped(self, title: str, body: Callable[[Self], object], collapsed: bool = False) -> None:
        """Run body inside a group, closing it afterwards even if body raises."""
        child = self.group(title, collapsed)
        try:
            body(child)
        finally:
            child.group_end()

    def group_end(self) -> None:
        """Close this group and hand its queue to the parent. Idempotent."""
        if self._closed:
            return
        self.enqueue(CloseGroup())
        try:
            if self._parent_enqueue is not None:
                self._parent_enqueue(Replay(tuple(self._queue)))
        finally:
            if self._on_close is not None:
                self._on_close()
            self._closed = True
        _log.debug("group closed", title=self._title, actions=len(self._queue))

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.group_end()

    # ─────────────────────────────────────────────────────────────────────────
    # Scope
    # ─────────────────────────────────────────────────────────────────────────

    def scoped(self, scope: str) -> Self:
        """Set this node's own scope in place. Already queued actions keep their prefix."""
        self._scope = scope or None
        return self

    def scoped_message(self, message: object) -> object:
        return scoped_message(message, self._parent_scope, self._scope)

    # ─────────────────────────────────────────────────────────────────────────
    # Views
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def console(self) -> Console:
        return self._console

    @property
    def title(self) -> str | None:
        return self._title

    @property
    def queue(self) -> tuple[Action, ...]:
        """Actions not yet handed on. Always empty on the root between calls."""
        return tuple(self._queue)

    @property
    def children(self) -> Mapping[str, Self]:
        """Open child groups keyed by resolved title (read-only view)."""
        return MappingProxyType(self._children)

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def scope(self) -> str | None:
        return self._scope

    @property
    def parent_scope(self) -> str | None:
        return self._parent_scope

    @property
    def is_root(self) -> bool:
        return self._parent_enqueue is None

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"{type(self).__name__}(title={self._title!r}, {state}, queued={len(self._queue)})"
