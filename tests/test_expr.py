"""Tests for expression nodes and the evaluate() interpreter."""

from __future__ import annotations

import dataclasses
import logging

import pytest
from kungfu import Error, Ok

from taskmonad import TaskMonad, evaluate
from taskmonad.expr import Bind, Fail, Map, Pure, Tap


def ok_value(result):
    match result:
        case Ok(value):
            return value
        case Error(err):
            pytest.fail(f"unexpected error {err!r}")


def error_value(result):
    match result:
        case Ok(value):
            pytest.fail(f"unexpected value {value!r}")
        case Error(err):
            return err


class TestNodes:
    """Node construction."""

    def test_nodes_are_frozen(self) -> None:
        """Nodes cannot be mutated after construction."""
        node = Pure(1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.value = 2  # type: ignore[misc]

    def test_combinators_wrap_expected_nodes(self) -> None:
        """Each combinator wraps the prior handle in a new node."""
        base = TaskMonad.unit(1)

        assert isinstance(base.expr, Pure)
        assert isinstance(base.map(str).expr, Map)
        assert isinstance(base.bind(TaskMonad.unit).expr, Bind)
        assert isinstance(base.tap(print).expr, Tap)
        assert isinstance(TaskMonad.fail(ValueError()).expr, Fail)
        assert base.map(str).expr.source is base

    def test_deferred_pure_keeps_producer(self) -> None:
        """Pure.deferred stores the producer without calling it."""

        async def producer() -> int:
            raise AssertionError("must not run")

        node = Pure.deferred(producer)
        assert node.producer is producer


class TestEvaluate:
    """evaluate() outcomes."""

    @pytest.mark.asyncio
    async def test_pure_value(self) -> None:
        """Ready value evaluates to Ok."""
        assert ok_value(await evaluate(Pure(3))) == 3

    @pytest.mark.asyncio
    async def test_fail_node(self) -> None:
        """Fail evaluates to Error with the same exception."""
        error = OSError("disk")
        assert error_value(await evaluate(Fail(error))) is error

    @pytest.mark.asyncio
    async def test_map_node(self) -> None:
        """Map applies the transform."""
        assert ok_value(await evaluate(Map(TaskMonad.unit(2), lambda x: x + 1))) == 3

    @pytest.mark.asyncio
    async def test_sync_throw_and_async_failure_look_the_same(self) -> None:
        """A raising callback and a failing producer both become Error."""

        def throw(_: int) -> int:
            raise ValueError("sync")

        async def reject() -> int:
            raise ValueError("async")

        sync_err = error_value(await evaluate(Map(TaskMonad.unit(1), throw)))
        async_err = error_value(await evaluate(Pure.deferred(reject)))

        assert type(sync_err) is type(async_err) is ValueError
        assert str(sync_err) == "sync"
        assert str(async_err) == "async"

    @pytest.mark.asyncio
    async def test_tap_returns_source_outcome(self) -> None:
        """Tap yields the source value."""
        assert ok_value(await evaluate(Tap(TaskMonad.unit("v"), lambda _: None))) == "v"

    @pytest.mark.asyncio
    async def test_callback_failure_is_logged_at_debug(self, caplog) -> None:
        """Converted callback failures leave a debug record."""

        def throw(_: int) -> int:
            raise ValueError("sync")

        with caplog.at_level(logging.DEBUG, logger="taskmonad"):
            await evaluate(Map(TaskMonad.unit(1), throw))

        assert any("map callback raised ValueError" in r.getMessage() for r in caplog.records)
