"""Scope resolution for grouped log messages.

A node's effective prefix is its inherited parent scope followed by its own
scope, joined with a fixed separator. Empty segments are dropped so no stray
separators appear. Without any scope the message passes through untouched,
non-string messages included.

Example:
    >>> scoped_message("loaded", parent_scope="app | db", own_scope="users")
    'app | db | users | loaded'
    >>> scoped_message("loaded")
    'loaded'
"""

from __future__ import annotations

SCOPE_SEPARATOR = " | "


def join_scope(*segments: str | None) -> str:
    """Join non-empty scope segments with the separator."""
    return SCOPE_SEPARATOR.join(s for s in segments if s)


def scoped_message(message: object, parent_scope: str | None = None, own_scope: str | None = None) -> object:
    """Prefix message with parent and own scope. Pure, no side effects."""
    if prefix := join_scope(parent_scope, own_scope):
        return f"{prefix}{SCOPE_SEPARATOR}{message}"
    return message
