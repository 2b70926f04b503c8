from __future__ import annotations

import asyncio
import sys
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


class Failure(Exception):
    pass


@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str
    is_active: bool = True


def _empty_users() -> dict[int, User]:
    return {}


@dataclass(slots=True)
class FakeBackend:
    name: str
    delay_seconds: float = 0.0
    calls: int = 0

    async def fetch_user(self, user_id: int) -> User:
        self.calls += 1
        await asyncio.sleep(self.delay_seconds)
        if user_id < 0:
            raise Failure(f"{self.name}: no user {user_id}")
        return User(id=user_id, name=f"user:{user_id}@{self.name}")


@dataclass(slots=True)
class FakeStore:
    users: dict[int, User] = field(default_factory=_empty_users)

    def find(self, user_id: int) -> User | None:
        return self.users.get(user_id)

    async def put_user(self, user: User) -> None:
        self.users[user.id] = user


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
