"""Parsing of workweek definitions."""

import re

from .errors import InvalidWorkdayError, WorkdayOutOfRangeError
from .value_objects import Weekday, WorkweekSet

# unsigned decimal, ASCII digits only, no blanks or underscores
WORKDAY_TOKEN = re.compile(r"\+?[0-9]+")


def parse_workweek(text: str) -> WorkweekSet:
    """Parse a comma separated list of ISO weekday numbers.

    Example: ``"1,2,3,4,5"`` is the Monday to Friday workweek.
    Duplicate days are dropped silently.

    Args:
        text: Comma separated weekday numbers (1=Monday ... 7=Sunday).

    Returns:
        The parsed WorkweekSet.

    Raises:
        InvalidWorkdayError: If a token is not an unsigned integer written
            in ASCII digits (this includes the single empty token of an
            empty string, blanks around a number and negative numbers).
        WorkdayOutOfRangeError: If a day is outside of [1-7].
    """
    days: set[int] = set()
    for token in text.split(","):
        if not WORKDAY_TOKEN.fullmatch(token):
            raise InvalidWorkdayError(token)
        day = int(token)
        if day < Weekday.MONDAY or day > Weekday.SUNDAY:
            raise WorkdayOutOfRangeError(day)
        days.add(day)
    return WorkweekSet(frozenset(days))
