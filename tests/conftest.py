"""
Pytest fixtures for the record core.

Every test gets its own in-memory repository and a clock it can move
forward, so timestamps are deterministic.
"""

from datetime import datetime, timedelta, timezone

import pytest

from organiks_api.app.services.record_service import RecordService
from organiks_api.app.store.repository import Repository


class FakeClock:
    """Clock returning a fixed time until advanced."""

    def __init__(self, start: datetime):
        self.current = start

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **kwargs) -> datetime:
        self.current += timedelta(**kwargs)
        return self.current


@pytest.fixture
def clock():
    return FakeClock(datetime(2024, 3, 1, 8, 0, tzinfo=timezone.utc))


@pytest.fixture
def repository(clock):
    repo = Repository(":memory:", clock=clock)
    yield repo
    repo.close()


@pytest.fixture
def service(repository):
    return RecordService(repository)
