"""
Lifting values into TaskMonad.

Functions for turning plain values, kungfu Results, Optionals and
exception-raising thunks into deferred computations.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Never

from kungfu import Error, LazyCoroResult, Ok, Result

from .._errors import ComputationError
from ..maybe import Maybe, to_task_monad
from ..monad import TaskMonad


def pure[T](value: T) -> TaskMonad[T]:
    """
    Lift pure value into always-succeeding TaskMonad.

    Short alias for TaskMonad.unit().

    Example:
        from taskmonad import lift as L

        user = L.up.pure(User(id=42))
        value = await L.down.unsafe(user)  # User(id=42)
    """
    return TaskMonad.unit(value)


def fail(error: BaseException) -> TaskMonad[Never]:
    """
    Create always-failing TaskMonad. Dual of pure().

    Example:
        error = L.up.fail(ValidationError("bad input"))
        result = await L.down.to_result(error)  # Error(ValidationError(...))
    """
    return TaskMonad.fail(error)


def from_result[T, E](value: Result[T, E]) -> TaskMonad[T]:
    """
    Lift already-computed kungfu Result into TaskMonad.

    Error payloads that are not exceptions are wrapped in ComputationError.

    NOTE: This is NOT lazy — result is already computed.
    """
    match value:
        case Ok(v):
            return TaskMonad.unit(v)
        case Error(err) if isinstance(err, BaseException):
            return TaskMonad.fail(err)
        case Error(err):
            return TaskMonad.fail(ComputationError(err))


def from_lazy_coro_result[T, E](lazy: LazyCoroResult[T, E]) -> TaskMonad[T]:
    """Lift kungfu LazyCoroResult into TaskMonad, staying lazy."""
    return TaskMonad.from_lazy_coro_result(lazy)


def optional[T](
    value: T | None,
    *,
    error: Callable[[], BaseException] | None = None,
) -> TaskMonad[T]:
    """
    Convert Optional to TaskMonad. None fails with error() or AbsentValueError.

    Example:
        def get_user(user_id: int) -> TaskMonad[User]:
            user = db.find(user_id)  # returns User | None
            return L.up.optional(user, error=lambda: NotFoundError(user_id))
    """
    return to_task_monad(Maybe.from_optional(value), error=error)


def catching[T](thunk: Callable[[], T]) -> TaskMonad[T]:
    """
    Defer a sync thunk; whatever it raises becomes the computation's failure.

    Example:
        import json

        def parse_json(raw: str) -> TaskMonad[dict]:
            return L.up.catching(lambda: json.loads(raw))
    """
    async def run() -> T:
        return thunk()

    return TaskMonad.unit_from(run)


def catching_async[T](thunk: Callable[[], Awaitable[T]]) -> TaskMonad[T]:
    """Async version of catching(). The thunk is called on every run."""
    async def run() -> T:
        return await thunk()

    return TaskMonad.unit_from(run)


__all__ = (
    "catching",
    "catching_async",
    "fail",
    "from_lazy_coro_result",
    "from_result",
    "optional",
    "pure",
)
