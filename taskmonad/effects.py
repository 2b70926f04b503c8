"""Side effects combinators

Effects execute for observation only (logging, metrics, notification)
and don't change the computation result."""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable

from .expr import Tap
from .monad import TaskMonad


def perform_side_effect[T](
    monad: TaskMonad[T],
    *,
    effect: Callable[[T], Awaitable[None] | None],
) -> TaskMonad[T]:
    """
    Execute a side effect on the resolved value, pass it through unchanged.

    Sync effects run inline; when the effect returns an awaitable it is
    awaited before the value is yielded. A raising effect fails the chain.
    """
    return TaskMonad(Tap(monad, effect))


def tap[T](monad: TaskMonad[T], *, effect: Callable[[T], typing.Any]) -> TaskMonad[T]:
    """
    Execute sync side effect on the value, pass through unchanged.

    NOTE: the effect's return value is discarded, never awaited.
    """

    def run(value: T) -> None:
        effect(value)

    return TaskMonad(Tap(monad, run))


def tap_async[T](
    monad: TaskMonad[T],
    *,
    effect: Callable[[T], Awaitable[typing.Any]],
) -> TaskMonad[T]:
    """Execute async side effect on the value, pass through unchanged."""

    async def run(value: T) -> None:
        await effect(value)

    return TaskMonad(Tap(monad, run))


__all__ = (
    "perform_side_effect",
    "tap",
    "tap_async",
)
