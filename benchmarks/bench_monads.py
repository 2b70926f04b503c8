"""Benchmarks for TaskMonad chains and the Maybe bridge.

Run with: pytest benchmarks/ --benchmark-only -v
"""

import asyncio
import contextlib

from taskmonad import AbsentValueError, Maybe, TaskMonad


# =============================================================================
# Chain benchmarks
# =============================================================================


class TestChains:
    """Benchmark composed chains."""

    def test_chain_5_binds(self, benchmark, loop):
        """Benchmark a five-step bind chain."""
        monad = TaskMonad.unit(10)
        chain = (
            monad.bind(lambda x: TaskMonad.unit(x + 1))
            .bind(lambda x: TaskMonad.unit(x * 2))
            .bind(lambda x: TaskMonad.unit(x - 3))
            .bind(lambda x: TaskMonad.unit(x // 2))
            .bind(lambda x: TaskMonad.unit(x + 10))
        )

        result = benchmark(lambda: loop.run_until_complete(chain.get_result()))
        assert result == 19

    def test_map_and_bind(self, benchmark, loop):
        """Benchmark map followed by bind."""
        chain = TaskMonad.unit(10).map(lambda x: x * 2).bind(lambda x: TaskMonad.unit(x + 1))

        result = benchmark(lambda: loop.run_until_complete(chain.get_result()))
        assert result == 21

    def test_async_side_effect(self, benchmark, loop):
        """Benchmark an awaited side effect."""

        async def effect(_):
            await asyncio.sleep(0)

        chain = TaskMonad.unit(10).perform_side_effect(effect)

        result = benchmark(lambda: loop.run_until_complete(chain.get_result()))
        assert result == 10

    def test_chain_construction(self, benchmark):
        """Benchmark building (not running) a chain."""

        def build():
            return TaskMonad.unit(1).map(lambda x: x + 1).bind(TaskMonad.unit).tap(lambda _: None)

        benchmark(build)


# =============================================================================
# Maybe bridge benchmarks
# =============================================================================


class TestMaybeBridge:
    """Benchmark Maybe -> TaskMonad."""

    def test_maybe_some(self, benchmark, loop):
        """Benchmark bridging a present value."""
        maybe = Maybe.some(42)

        result = benchmark(lambda: loop.run_until_complete(maybe.to_task_monad().get_result()))
        assert result == 42

    def test_maybe_none(self, benchmark, loop):
        """Benchmark bridging an absent value."""
        maybe = Maybe.none()

        def run():
            with contextlib.suppress(AbsentValueError):
                loop.run_until_complete(maybe.to_task_monad().get_result())

        benchmark(run)
