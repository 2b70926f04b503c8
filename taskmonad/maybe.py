"""
Maybe - optional value and its bridge into TaskMonad.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from ._errors import AbsentValueError
from .monad import TaskMonad


class Maybe[T]:
    """
    Present/absent value holder.

    Maybe.some(None) is present: absence is a tag, not a None check.
    """

    __slots__ = ("_has_value", "_value")

    def __init__(self, has_value: bool, value: T | None = None, /) -> None:
        self._has_value = has_value
        self._value = value

    @staticmethod
    def some[V](value: V, /) -> Maybe[V]:
        return Maybe(True, value)

    @staticmethod
    def none() -> Maybe[typing.Any]:
        return Maybe(False)

    @staticmethod
    def from_optional[V](value: V | None, /) -> Maybe[V]:
        """None becomes absent, anything else present."""
        return Maybe(False) if value is None else Maybe(True, value)

    @property
    def has_value(self) -> bool:
        return self._has_value

    def value_or_default(self) -> T:
        """
        Extract the value.

        NOTE: only defined when present; callers check has_value first.
        """
        if not self._has_value:
            raise AbsentValueError()
        return typing.cast(T, self._value)

    def to_task_monad(self, *, error: Callable[[], BaseException] | None = None) -> TaskMonad[T]:
        """Bridge into TaskMonad. See to_task_monad()."""
        return to_task_monad(self, error=error)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        return self._has_value == other._has_value and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._has_value, self._value))

    def __repr__(self) -> str:
        return f"Maybe.some({self._value!r})" if self._has_value else "Maybe.none()"


def to_task_monad[T](
    maybe: Maybe[T],
    *,
    error: Callable[[], BaseException] | None = None,
) -> TaskMonad[T]:
    """
    Convert Maybe to TaskMonad.

    Present resolves with no suspension. Absent fails at run time with
    AbsentValueError("Maybe was None"), or with error() when given.

    NOTE: error is a thunk (zero-arg callable) so nothing is built while
          the value is present.
    """
    if maybe.has_value:
        return TaskMonad.unit(maybe.value_or_default())
    return TaskMonad.fail(error() if error is not None else AbsentValueError())


__all__ = ("Maybe", "to_task_monad")
