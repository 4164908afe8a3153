"""
Clock Port - Source of "now" for created/modified timestamps.
Implementation: SystemClock below; tests inject their own.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone


class Clock(ABC):
    @abstractmethod
    def now(self) -> datetime: ...


class SystemClock(Clock):
    def __init__(self, utc: bool = True):
        self._utc = utc

    def now(self) -> datetime:
        if self._utc:
            return datetime.now(timezone.utc)
        return datetime.now()


_default_clock: Clock = SystemClock()


def get_default_clock() -> Clock:
    return _default_clock


def set_default_clock(clock: Clock) -> None:
    """Replace the clock used by entities constructed without an explicit one."""
    global _default_clock
    _default_clock = clock
