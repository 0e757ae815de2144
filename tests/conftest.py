"""Root conftest — shared test configuration and fixtures."""

import os

import pytest

# Ensure tests never reach a real database
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)

from statefacts.core.catalog import load_catalog  # noqa: E402


class FixedRandom:
    """Deterministic RandomSource: always picks the configured position (clamped)."""

    def __init__(self, position: int = 0):
        self.position = position
        self.calls: list[int] = []

    def randrange(self, stop: int) -> int:
        self.calls.append(stop)
        return min(self.position, stop - 1)


@pytest.fixture(scope="session")
def catalog():
    return load_catalog()


@pytest.fixture
def fixed_rng():
    return FixedRandom()
