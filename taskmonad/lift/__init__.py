"""
Lift helpers with semantic namespaces.

Supports three import styles:
    from taskmonad import lift as L   # Recommended
    from taskmonad import lift        # Explicit

Architecture:
- L.up.*    - lifting values into TaskMonad
- L.down.*  - running TaskMonad down into a value
- L.call()  - calling async functions with lifting

Examples:
    from taskmonad import lift as L

    user = L.up.pure(User(id=42))
    error = L.up.fail(NotFoundError())
    maybe = L.up.optional(db_result, error=NotFoundError)

    result = L.call(fetch_user, 42)

    value = await L.down.unsafe(result)
    outcome = await L.down.to_result(result)

    @L.lifted
    async def fetch(): ...
"""

from __future__ import annotations

from . import down as down_ns
from . import up as up_ns

from .up import (
    catching,
    catching_async,
    fail,
    from_lazy_coro_result,
    from_result,
    optional,
    pure,
)
from .call import call, lifted, wrap_async
from .down import or_else, to_result, unsafe

# L.up.* / L.down.*
up = up_ns
down = down_ns

__all__ = (
    # Namespaces
    "up",
    "down",
    # Up
    "pure",
    "fail",
    "from_result",
    "from_lazy_coro_result",
    "optional",
    "catching",
    "catching_async",
    # Call
    "call",
    "lifted",
    "wrap_async",
    # Down
    "to_result",
    "unsafe",
    "or_else",
)
