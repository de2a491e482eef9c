from __future__ import annotations

from datetime import datetime

import pytest

from src.nexus_office.nexus_office.database.backends import MemoryBackend
from src.nexus_office.nexus_office.database.store import LocalStore


@pytest.fixture
def backend():
    return MemoryBackend()


@pytest.fixture
def store(backend):
    return LocalStore(backend)


class FixedClock:
    """Callable clock the tests can move by hand."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def clock():
    return FixedClock(datetime(2026, 2, 2, 8, 0, 0))
