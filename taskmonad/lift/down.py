"""
Running TaskMonad down into a value.
"""

from __future__ import annotations

from kungfu import Error, Ok, Result

from ..monad import TaskMonad


async def to_result[T](monad: TaskMonad[T]) -> Result[T, Exception]:
    """
    Run and return kungfu Result.

    Example:
        result = await L.down.to_result(L.up.pure(42))  # Ok(42)
    """
    return await monad.to_result()


async def unsafe[T](monad: TaskMonad[T]) -> T:
    """
    Run and unwrap, raises the computation's error.

    NOTE: Same as await monad.get_result().
    """
    return await monad.get_result()


async def or_else[T](monad: TaskMonad[T], default: T) -> T:
    """Run and return value or default on any failure."""
    match await monad.to_result():
        case Ok(v):
            return v
        case Error(_):
            return default


__all__ = (
    "or_else",
    "to_result",
    "unsafe",
)
