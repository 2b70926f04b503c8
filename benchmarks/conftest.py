"""Pytest configuration for taskmonad benchmarks."""

import asyncio

import pytest


def pytest_configure(config):
    """Configure pytest for benchmarks."""
    config.addinivalue_line("markers", "benchmark: mark test as a benchmark")


@pytest.fixture
def loop():
    """A private event loop for driving computations synchronously."""
    loop = asyncio.new_event_loop()
    yield loop
    loop.close()
