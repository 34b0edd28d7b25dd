from datetime import datetime, timedelta, timezone

import pytest

from ui_analytics.runtime.store.event_log_store import EventLogStore


class FakeClock:
    """Manually advanced clock returning timezone-aware datetimes."""

    def __init__(self, start=None):
        self.now = start or datetime(2024, 11, 3, 10, 15, tzinfo=timezone.utc)

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now = self.now + timedelta(seconds=seconds)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    return EventLogStore(clock=clock)
