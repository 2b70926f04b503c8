"""
Core type definitions for taskmonad.

Aliases for the callables a chain closes over.
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable

from kungfu import Result

if typing.TYPE_CHECKING:
    from .monad import TaskMonad

# ============================================================================
# Callable aliases
# ============================================================================

# Producer = zero-arg async thunk, invoked once per run
type Producer[T] = Callable[[], Awaitable[T]]

# Transform = plain function applied to the resolved value
type Transform[T, U] = Callable[[T], U]

# Continuation = function producing the next computation in a chain
type Continuation[T, U] = Callable[[T], TaskMonad[U]]

# Effect = side channel (logging, metrics, notification); return value ignored
# NOTE: may be sync (returns None) or async (returns an awaitable).
type Effect[T] = Callable[[T], Awaitable[None] | None]

# Outcome = value type produced by running a node
# NOTE: Exception, not BaseException: cancellation is never captured.
type Outcome[T] = Result[T, Exception]

__all__ = (
    "Continuation",
    "Effect",
    "Outcome",
    "Producer",
    "Transform",
)
