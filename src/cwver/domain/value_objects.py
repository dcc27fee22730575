"""Module including value objects used across the domain layer."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import IntEnum

from .errors import WorkdayOutOfRangeError


class Weekday(IntEnum):
    """ISO-8601 weekday numbers (number from Monday)"""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7


@dataclass(frozen=True)
class CwVersion:
    """Value object holding the raw numeric groups of a ``YYwWW.D`` string.

    The groups are not range checked; a version only becomes meaningful once
    it is converted into a date.
    """

    year: int
    week: int
    weekday: int

    def __str__(self) -> str:
        return f"{self.year:02}w{self.week:02}.{self.weekday:01}"


@dataclass(frozen=True)
class WorkweekSet:
    """Value object representing the weekdays that count as workdays.

    Args:
        days: ISO weekday numbers (1=Monday ... 7=Sunday). Duplicates collapse.

    Raises:
        WorkdayOutOfRangeError: If any day is outside of [1-7].
    """

    days: frozenset[int] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        days = frozenset(self.days)
        for day in sorted(days):
            if day < Weekday.MONDAY or day > Weekday.SUNDAY:
                raise WorkdayOutOfRangeError(day)
        object.__setattr__(self, "days", days)

    @classmethod
    def of(cls, *days: int) -> "WorkweekSet":
        """Build a workweek from individual weekday numbers."""
        return cls(frozenset(days))

    def contains(self, day: int) -> bool:
        """Return True if the ISO weekday ``day`` is a workday."""
        return day in self.days

    @property
    def is_empty(self) -> bool:
        """True if no weekday counts as a workday."""
        return not self.days

    def __contains__(self, day: object) -> bool:
        return day in self.days

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self.days))

    def __len__(self) -> int:
        return len(self.days)

    def __str__(self) -> str:
        return ",".join(str(day) for day in self)


COMMERCIAL_WORKWEEK = WorkweekSet.of(1, 2, 3, 4, 5)
FULL_WORKWEEK = WorkweekSet.of(1, 2, 3, 4, 5, 6, 7)
