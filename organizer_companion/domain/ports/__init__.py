"""
PORTS - Interfaces that outer layers implement
"""

from organizer_companion.domain.ports.clock import (
    Clock,
    SystemClock,
    get_default_clock,
    set_default_clock,
)

__all__ = ["Clock", "SystemClock", "get_default_clock", "set_default_clock"]
