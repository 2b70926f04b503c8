"""TaskMonad

Lazily composed asynchronous computation:
- Lazy (nothing runs until get_result / await / to_result)
- Coro (asynchronous, host asyncio loop)
- Tree of expression nodes, evaluated depth-first

Built on top of kungfu Result for the failure channel."""

from __future__ import annotations

import asyncio
import logging
import typing
from collections.abc import Iterable

from kungfu import Error, LazyCoroResult, Ok, Result

from ._errors import ComputationError
from ._types import Continuation, Effect, Producer, Transform
from .expr import Bind, Expr, Fail, Map, Pure, evaluate

logger = logging.getLogger(__name__)


class TaskMonad[T]:
    """Deferred asynchronous computation.

    A handle is a recipe, not a result: composing it never runs or alters
    it, and every run re-executes the whole chain from the root.

    Monadic laws:
    - Left identity: unit(a).bind(f) ≡ f(a)
    - Right identity: m.bind(unit) ≡ m
    - Associativity: m.bind(f).bind(g) ≡ m.bind(x => f(x).bind(g))
    """

    __slots__ = ("_expr",)

    def __init__(self, expr: Expr[T], /) -> None:
        """Create TaskMonad from an expression node."""
        self._expr = expr

    @property
    def expr(self) -> Expr[T]:
        """The wrapped expression node."""
        return self._expr

    # Constructors

    @staticmethod
    def unit[V](value: V, /) -> TaskMonad[V]:
        """Lift a ready value into the monad."""
        return TaskMonad(Pure(value))

    @staticmethod
    def unit_from[V](producer: Producer[V], /) -> TaskMonad[V]:
        """
        Lift a zero-arg async producer into the monad.

        The producer is called on every run, not here.
        """
        return TaskMonad(Pure.deferred(producer))

    @staticmethod
    def fail(error: BaseException, /) -> TaskMonad[typing.Never]:
        """Create an always-failing computation. Dual of unit()."""
        if not isinstance(error, BaseException):
            raise TypeError(f"fail() expects an exception, got {type(error).__name__}")
        return TaskMonad(Fail(error))

    @staticmethod
    def from_lazy_coro_result[V, E](lazy: LazyCoroResult[V, E], /) -> TaskMonad[V]:
        """
        Convert kungfu LazyCoroResult to TaskMonad, staying lazy.

        Error payloads that are not exceptions are wrapped in ComputationError.
        """

        async def producer() -> V:
            match await lazy:
                case Ok(value):
                    return value
                case Error(err) if isinstance(err, BaseException):
                    raise err.with_traceback(None)
                case Error(err):
                    raise ComputationError(err)

        return TaskMonad.unit_from(producer)

    # Functor operations

    def map[U](self, f: Transform[T, U], /) -> TaskMonad[U]:
        """Functor fmap - apply function to the resolved value."""
        return TaskMonad(Map(self, f))

    def bind_pure(self, f: Transform[T, T], /) -> TaskMonad[T]:
        """Same-type bind; an alias of map() kept for call-site ergonomics."""
        return self.map(f)

    # Monad operations

    def bind[U](self, f: Continuation[T, U], /) -> TaskMonad[U]:
        """
        Monadic bind (>>=).

        - On success: calls f once with the value and runs the returned TaskMonad
        - On failure: short-circuit, f is never called
        """
        return TaskMonad(Bind(self, f))

    # Side effects

    def perform_side_effect(self, effect: Effect[T], /) -> TaskMonad[T]:
        """Run a sync or async side effect on the value, pass it through unchanged."""
        from .effects import perform_side_effect

        return perform_side_effect(self, effect=effect)

    def tap(self, effect: Effect[T], /) -> TaskMonad[T]:
        """Alias of perform_side_effect()."""
        return self.perform_side_effect(effect)

    # Running

    async def get_result(self) -> T:
        """Run the computation, returning its value or raising its error."""
        match await evaluate(self._expr):
            case Ok(value):
                return value
            case Error(err):
                raise err

    async def to_result(self) -> Result[T, Exception]:
        """Run the computation, returning Ok(value) or Error(exc) without raising."""
        return await evaluate(self._expr)

    def to_lazy_coro_result(self) -> LazyCoroResult[T, Exception]:
        """Convert to kungfu LazyCoroResult. Nothing runs until it is awaited."""
        return LazyCoroResult(self.to_result)

    # Static combinators

    @staticmethod
    async def flatten[V](monad: TaskMonad[TaskMonad[V]], /) -> TaskMonad[V]:
        """
        Run the outer computation and return the inner one, unrun.

        NOTE: yields a TaskMonad, not a value. The inner chain's work is
              still deferred until the caller runs it.
        """
        inner = await monad.get_result()
        logger.debug("flattened into %r", inner)
        return inner

    @staticmethod
    async def sequence[V](monads: Iterable[TaskMonad[V]], /) -> TaskMonad[list[V]]:
        """
        Run all concurrently, wait for all, collect results in input order.

        Raises if any computation failed. When several fail, which failure
        is surfaced is unspecified.
        """
        values = await _join(list(monads))
        return TaskMonad.unit(values)

    @staticmethod
    def parallel[V](*monads: TaskMonad[V]) -> TaskMonad[list[V]]:
        """Lazy sequence(): the concurrent join happens when the result runs."""

        async def producer() -> list[V]:
            return await _join(list(monads))

        return TaskMonad.unit_from(producer)

    # Protocol methods

    def __await__(self) -> typing.Generator[typing.Any, None, T]:
        """Allow direct await on the computation."""
        return self.get_result().__await__()

    def __repr__(self) -> str:
        return f"TaskMonad({type(self._expr).__name__})"


async def _join[V](monads: list[TaskMonad[V]]) -> list[V]:
    logger.debug("joining %d computations", len(monads))
    results: list[Result[V, Exception]] = await asyncio.gather(
        *(evaluate(m.expr) for m in monads)
    )

    values: list[V] = []
    for result in results:
        match result:
            case Ok(v):
                values.append(v)
            case Error(e):
                logger.debug("join failed: %s", type(e).__name__)
                raise e

    return values


# Convenience Constructors
def unit[T](value: T) -> TaskMonad[T]:
    """Module-level alias of TaskMonad.unit()."""
    return TaskMonad.unit(value)


def fail(error: BaseException) -> TaskMonad[typing.Never]:
    """Module-level alias of TaskMonad.fail()."""
    return TaskMonad.fail(error)


__all__ = (
    "TaskMonad",
    "fail",
    "unit",
)
