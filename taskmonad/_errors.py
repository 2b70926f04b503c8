from __future__ import annotations

import typing


class AbsentValueError(LookupError):
    """Maybe was bridged into a computation without a value."""

    def __init__(self, message: str = "Maybe was None") -> None:
        super().__init__(message)


class ComputationError(Exception):
    """Error payload from a LazyCoroResult that is not an exception itself."""

    error: typing.Any

    def __init__(self, error: typing.Any) -> None:
        self.error = error
        super().__init__(f"Computation failed with {error!r}")


__all__ = ("AbsentValueError", "ComputationError")
