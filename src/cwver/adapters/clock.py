"""Clocks for CWVER."""

from datetime import date

from cwver.interfaces.clock import Clock

# pylint: disable=too-few-public-methods


class SystemClock(Clock):
    """Clock reading the local date of the host system."""

    def today(self) -> date:
        """Return today's local date."""
        return date.today()


class FixedClock(Clock):
    """A clock that is stuck on a single day.

    Note:
        Not suitable for production use; primarily for testing and demos.
    """

    def __init__(self, day: date) -> None:
        self._day = day

    def today(self) -> date:
        """Return the fixed day."""
        return self._day
