from datetime import datetime, timedelta, timezone

import pytest

from organizer_companion.domain.ports.clock import (
    Clock,
    get_default_clock,
    set_default_clock,
)

START = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


class ManualClock(Clock):
    """Clock that moves forward one second every time it is read."""

    def __init__(self, start: datetime = START, step: timedelta = timedelta(seconds=1)):
        self.current = start
        self.step = step

    def now(self) -> datetime:
        value = self.current
        self.current += self.step
        return value


@pytest.fixture()
def clock():
    """A fresh manual clock starting at START."""
    return ManualClock()


@pytest.fixture(autouse=True)
def default_clock(clock):
    """Entities built without an explicit clock use the manual one."""
    previous = get_default_clock()
    set_default_clock(clock)
    yield clock
    set_default_clock(previous)
