"""
Calling async functions with automatic lifting.

Functions and a decorator that turn async calls into deferred TaskMonads.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from functools import wraps

from ..monad import TaskMonad


def wrap_async[T](thunk: Callable[[], Awaitable[T]]) -> TaskMonad[T]:
    """
    Wrap lazy async computation (thunk) into TaskMonad.

    NOTE: thunk must be a zero-arg callable (lambda) for laziness.
          A coroutine object would have been created already and can
          only be awaited once.
    """
    async def run() -> T:
        return await thunk()

    return TaskMonad.unit_from(run)


def lifted[T, **P](func: Callable[P, Awaitable[T]]) -> Callable[P, TaskMonad[T]]:
    """
    Decorator making an async function return TaskMonad instead of a coroutine.

    Example:
        @L.lifted
        async def fetch_user(user_id: int) -> User: ...

        user = await fetch_user(42).map(lambda u: u.name)
    """
    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> TaskMonad[T]:
        return wrap_async(lambda: func(*args, **kwargs))

    return wrapper


def call[T, **P](
    func: Callable[P, Awaitable[T]],
    *args: P.args,
    **kwargs: P.kwargs,
) -> TaskMonad[T]:
    """
    Call async function with arguments, deferred until the TaskMonad runs.

    Example:
        result = await L.call(fetch_user_impl, 42).get_result()
    """
    return wrap_async(lambda: func(*args, **kwargs))


__all__ = (
    "call",
    "lifted",
    "wrap_async",
)
