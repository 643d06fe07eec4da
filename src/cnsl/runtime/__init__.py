"""Runtime: process root lifecycle and call instrumentation."""

from .logged import logged
from .root import configure, get_cnsl, reset_cnsl, set_cnsl

__all__ = [
    "configure",
    "get_cnsl",
    "logged",
    "reset_cnsl",
    "set_cnsl",
]
