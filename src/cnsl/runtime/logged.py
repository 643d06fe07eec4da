"""Call instrumentation: log a function's arguments and result on every call.

Without a group title each call produces one line:

    Call: Service.fetch([1,"a"]) => {"ok":true}

With a group title the call and result lines go into a group, emitted as one
block when the call returns:

    fetch
      Call: Service.fetch([1,"a"])
       => {"ok":true}

Lines and group titles inherit the scope of the node they are logged on; the
node's scope is never cleared or changed. Logging on a root scoped "app" gives
"app | fetch" and "app | Call: ...". Pass an unscoped node as cnsl= for bare lines.

Example:
    >>> @logged(group_title="fetch", method=True)
    ... def fetch(self, key: int, kind: str) -> dict: ...
    >>>
    >>> handler = logged(handle, label="api.handle", cnsl=my_root)
"""

from __future__ import annotations

import inspect
from functools import wraps
from typing import TYPE_CHECKING, Any, Callable, ParamSpec, TypeVar, overload

import orjson

from .root import get_cnsl

if TYPE_CHECKING:
    from cnsl.core import Cnsl

P = ParamSpec("P")
T = TypeVar("T")


@overload
def logged(func: Callable[P, T], *, label: str | None = ..., group_title: str | None = ...,
           collapsed: bool = ..., method: bool = ..., cnsl: Cnsl | None = ...) -> Callable[P, T]: ...

@overload
def logged(func: None = ..., *, label: str | None = ..., group_title: str | None = ...,
           collapsed: bool = ..., method: bool = ..., cnsl: Cnsl | None = ...) -> Callable[[Callable[P, T]], Callable[P, T]]: ...


def logged(
    func: Callable[P, T] | None = None,
    *,
    label: str | None = None,
    group_title: str | None = None,
    collapsed: bool = False,
    method: bool = False,
    cnsl: Cnsl | None = None,
) -> Callable[P, T] | Callable[[Callable[P, T]], Callable[P, T]]:
    """Wrap func so every invocation logs its arguments and return value.

    Args:
        func: Function to wrap (omit to use as a decorator with options)
        label: Name shown in the call line (defaults to func.__qualname__)
        group_title: Open a group with this title around each call
        collapsed: Open that group collapsed
        method: Leave the first positional argument (the instance) out of the call line
        cnsl: Node to log on (defaults to the process root, looked up per call)

    Exceptions raised by func are logged at error level and re-raised; the
    group, if any, is closed first.
    """
    def decorator(fn: Callable[P, T]) -> Callable[P, T]:
        name = label or fn.__qualname__

        def _open(args: tuple[Any, ...], kwargs: dict[str, Any]) -> tuple[Cnsl, str]:
            node = cnsl or get_cnsl()
            call = f"Call: {name}({_call_json(args[1:] if method else args, kwargs)})"
            if group_title is None:
                return node, call
            grp = node.group(group_title, collapsed)
            grp.log(call)
            return grp, ""

        def _done(node: Cnsl, call: str, result: object) -> None:
            node.log(f"{call} => {_to_json(result)}" if call else f" => {_to_json(result)}")

        def _failed(node: Cnsl, call: str, exc: BaseException) -> None:
            node.error(f"{call} !! {type(exc).__name__}: {exc}" if call else f" !! {type(exc).__name__}: {exc}")

        def _close(node: Cnsl) -> None:
            if group_title is not None:
                node.group_end()

        @wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            node, call = _open(args, kwargs)
            try:
                result = fn(*args, **kwargs)
                _done(node, call, result)
                return result
            except Exception as e:
                _failed(node, call, e)
                raise
            finally:
                _close(node)

        @wraps(fn)
        async def async_wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            node, call = _open(args, kwargs)
            try:
                result = await fn(*args, **kwargs)  # type: ignore[misc]
                _done(node, call, result)
                return result
            except Exception as e:
                _failed(node, call, e)
                raise
            finally:
                _close(node)

        return async_wrapper if inspect.iscoroutinefunction(fn) else wrapper  # type: ignore[return-value]

    return decorator(func) if func is not None else decorator


def _call_json(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    """Positional args as a JSON array, keyword args as a trailing object."""
    return _to_json([*args, kwargs] if kwargs else list(args))


def _to_json(value: object) -> str:
    """Compact JSON, falling back to repr for anything orjson cannot encode."""
    try:
        return orjson.dumps(value, default=repr, option=orjson.OPT_NON_STR_KEYS).decode()
    except orjson.JSONEncodeError:
        return repr(value)
