"""Tests for Maybe and its bridge into TaskMonad."""

from __future__ import annotations

import pytest

from taskmonad import AbsentValueError, Maybe, TaskMonad, to_task_monad


class TestMaybe:
    """Present/absent holder."""

    def test_some_has_value(self) -> None:
        """some() is present."""
        maybe = Maybe.some(42)
        assert maybe.has_value
        assert maybe.value_or_default() == 42

    def test_none_has_no_value(self) -> None:
        """none() is absent."""
        assert not Maybe.none().has_value

    def test_some_none_is_present(self) -> None:
        """Maybe.some(None) is not absent."""
        maybe = Maybe.some(None)
        assert maybe.has_value
        assert maybe.value_or_default() is None

    def test_value_or_default_on_absent_raises(self) -> None:
        """Extracting from absent is an error."""
        with pytest.raises(AbsentValueError):
            Maybe.none().value_or_default()

    @pytest.mark.parametrize(
        ("value", "present"),
        [(None, False), (0, True), ("", True), ([], True)],
    )
    def test_from_optional(self, value: object, present: bool) -> None:
        """Only None becomes absent."""
        assert Maybe.from_optional(value).has_value is present

    def test_equality(self) -> None:
        """Equal by tag and value."""
        assert Maybe.some(1) == Maybe.some(1)
        assert Maybe.some(1) != Maybe.some(2)
        assert Maybe.none() == Maybe.none()
        assert Maybe.some(None) != Maybe.none()

    def test_repr(self) -> None:
        """repr mirrors the constructors."""
        assert repr(Maybe.some(1)) == "Maybe.some(1)"
        assert repr(Maybe.none()) == "Maybe.none()"


class TestBridge:
    """to_task_monad()."""

    @pytest.mark.asyncio
    async def test_some_resolves(self) -> None:
        """Present value is yielded."""
        monad = Maybe.some(42).to_task_monad()

        assert isinstance(monad, TaskMonad)
        assert await monad.get_result() == 42

    @pytest.mark.asyncio
    async def test_none_fails_with_stable_message(self) -> None:
        """Absent fails with AbsentValueError("Maybe was None")."""
        monad = to_task_monad(Maybe.none())

        with pytest.raises(AbsentValueError) as excinfo:
            await monad.get_result()
        assert str(excinfo.value) == "Maybe was None"

    def test_none_does_not_raise_on_conversion(self) -> None:
        """The failure happens on run, not on conversion."""
        assert isinstance(Maybe.none().to_task_monad(), TaskMonad)

    @pytest.mark.asyncio
    async def test_custom_error(self) -> None:
        """error thunk overrides the absent failure."""
        monad = Maybe.none().to_task_monad(error=lambda: KeyError("user 7"))

        with pytest.raises(KeyError, match="user 7"):
            await monad.get_result()

    @pytest.mark.asyncio
    async def test_custom_error_not_built_when_present(self, log) -> None:
        """error thunk is only called for absent values."""

        def error() -> Exception:
            log.record("error")
            return KeyError("unused")

        assert await Maybe.some(1).to_task_monad(error=error).get_result() == 1
        assert log.calls == []

    @pytest.mark.asyncio
    async def test_bridge_composes(self) -> None:
        """Bridged handles compose like any other."""
        result = await (
            Maybe.some(20)
            .to_task_monad()
            .map(lambda x: x + 1)
            .bind(lambda x: Maybe.some(x * 2).to_task_monad())
            .get_result()
        )
        assert result == 42

    @pytest.mark.asyncio
    async def test_absent_short_circuits_chain(self, log) -> None:
        """Nothing after an absent bridge runs."""
        monad = Maybe.none().to_task_monad().map(lambda x: log.record("map"))

        with pytest.raises(AbsentValueError):
            await monad.get_result()
        assert log.calls == []
