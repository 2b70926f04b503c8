"""Shared fixtures for taskmonad tests."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest


@dataclass(slots=True)
class CallLog:
    """Records callback invocations in order."""

    calls: list[str] = field(default_factory=list)

    def record(self, name: str) -> None:
        self.calls.append(name)

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture
def log() -> CallLog:
    return CallLog()
