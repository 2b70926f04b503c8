"""
Expression nodes for deferred computations.

Architecture:
- Expr[T] - closed union of node variants (Pure, Map, Bind, Tap, Fail)
- evaluate() - pattern-matched interpreter, the only place work happens

Every run threads a kungfu Result through the tree. User callbacks that
raise are converted into Error(exc) at the point of catch, so callers see
a synchronous throw and an async failure the same way.
"""

from __future__ import annotations

import inspect
import logging
import typing
from dataclasses import dataclass
from typing import assert_never

from kungfu import Error, Ok

from ._types import Continuation, Effect, Outcome, Producer, Transform

if typing.TYPE_CHECKING:
    from .monad import TaskMonad

logger = logging.getLogger(__name__)


# ============================================================================
# Node variants
# ============================================================================


@dataclass(frozen=True, slots=True)
class Pure[T]:
    """
    Ready value or deferred producer.

    NOTE: producer is invoked at run time, never at construction.
    """

    value: T | None = None
    producer: Producer[T] | None = None

    @staticmethod
    def deferred[V](producer: Producer[V], /) -> Pure[V]:
        return Pure(producer=producer)


@dataclass(frozen=True, slots=True)
class Map[T, U]:
    source: TaskMonad[T]
    transform: Transform[T, U]


@dataclass(frozen=True, slots=True)
class Bind[T, U]:
    source: TaskMonad[T]
    continuation: Continuation[T, U]


@dataclass(frozen=True, slots=True)
class Tap[T]:
    """Run source, feed the value to effect, yield the original value."""

    source: TaskMonad[T]
    effect: Effect[T]


@dataclass(frozen=True, slots=True)
class Fail:
    error: BaseException


type Expr[T] = Pure[T] | Map[typing.Any, T] | Bind[typing.Any, T] | Tap[T] | Fail


# ============================================================================
# Interpreter
# ============================================================================


def _callback_failed(kind: str, exc: Exception) -> Error[Exception]:
    logger.debug("%s callback raised %s, failing the chain", kind, type(exc).__name__)
    return Error(exc)


type _Frame = Map[typing.Any, typing.Any] | Bind[typing.Any, typing.Any] | Tap[typing.Any]


async def _run_leaf(expr: Expr[typing.Any], frames: list[_Frame]) -> Outcome[typing.Any]:
    """Push the Map/Bind/Tap spine onto frames, then run the Pure/Fail leaf."""
    while isinstance(expr, Map | Bind | Tap):
        frames.append(expr)
        expr = expr.source.expr

    match expr:
        case Pure(value=value, producer=None):
            return Ok(value)

        case Pure(producer=producer) if producer is not None:
            try:
                return Ok(await producer())
            except Exception as exc:
                return _callback_failed("producer", exc)

        case Fail(error=error):
            # Each run raises with a fresh traceback
            error = error.with_traceback(None)
            if not isinstance(error, Exception):
                # BaseException (cancellation, interrupts) bypasses the Result channel
                raise error
            return Error(error)

        case _ as unreachable:
            assert_never(unreachable)


async def evaluate[T](expr: Expr[T]) -> Outcome[T]:
    """
    Run a node and return its outcome.

    Source runs before continuation/transform/effect; a source failure
    short-circuits and no later callback is invoked.

    NOTE: iterative over an explicit frame stack, so chain length is not
          bounded by the interpreter's recursion limit.
    """
    from .monad import TaskMonad

    frames: list[_Frame] = []
    result = await _run_leaf(expr, frames)

    while frames:
        match result:
            case Error(_):
                # every remaining frame passes failures through unchanged
                return result
            case Ok(value):
                pass

        match frames.pop():
            case Map(transform=transform):
                try:
                    result = Ok(transform(value))
                except Exception as exc:
                    result = _callback_failed("map", exc)

            case Tap(effect=effect):
                try:
                    pending = effect(value)
                    if inspect.isawaitable(pending):
                        await pending
                except Exception as exc:
                    result = _callback_failed("side effect", exc)

            case Bind(continuation=continuation):
                try:
                    next_monad = continuation(value)
                except Exception as exc:
                    result = _callback_failed("bind", exc)
                    continue
                if not isinstance(next_monad, TaskMonad):
                    result = Error(
                        TypeError(
                            f"bind continuation must return TaskMonad, "
                            f"got {type(next_monad).__name__}"
                        )
                    )
                    continue
                # the continuation's own spine runs before the outer frames
                result = await _run_leaf(next_monad.expr, frames)

            case _ as unreachable:
                assert_never(unreachable)

    return result


__all__ = (
    "Bind",
    "Expr",
    "Fail",
    "Map",
    "Pure",
    "Tap",
    "evaluate",
)
