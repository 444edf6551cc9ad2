"""
Pytest configuration and shared fixtures for grand tests.
"""

import pytest
from grand.core.entropy import EntropySource
from grand.core.exceptions import EntropySourceError
from grand.core.rng import RandomSource
from grand.config.schema import GrandConfig


class CountingEntropySource(EntropySource):
    """Deterministic stub that records how often it was consulted."""

    def __init__(self, value: int = 12345):
        self.value = value
        self.calls = 0

    @property
    def name(self) -> str:
        return "counting"

    def draw_seed(self) -> int:
        self.calls += 1
        return self.value


class FailingEntropySource(EntropySource):
    """Stub standing in for an environment without an entropy pool."""

    def __init__(self):
        self.calls = 0

    @property
    def name(self) -> str:
        return "failing"

    def draw_seed(self) -> int:
        self.calls += 1
        raise EntropySourceError("no entropy available")


@pytest.fixture
def rng():
    """Provide seeded RandomSource for reproducible tests."""
    return RandomSource(42)


@pytest.fixture
def counting_entropy():
    """Provide entropy stub returning 12345."""
    return CountingEntropySource()


@pytest.fixture
def failing_entropy():
    """Provide entropy stub that always fails."""
    return FailingEntropySource()


@pytest.fixture
def default_config():
    """Provide default GrandConfig."""
    return GrandConfig()
