"""Workday arithmetic over calendar dates."""

import logging
from datetime import date, timedelta

from .errors import NoWorkdaysDefinedError, UnorderedRangeError
from .value_objects import WorkweekSet

logger = logging.getLogger(__name__)

ONE_DAY = timedelta(days=1)


def count_workdays(workweek: WorkweekSet, from_date: date, till_date: date) -> int:
    """Count the workdays spanned by a regression range.

    The start day always counts as one, whether or not it is a workday. Every
    workday strictly between the two dates adds one. The end day is never
    tested. Bisection relies on exactly this counting rule.

    Args:
        workweek: Weekdays that count as workdays.
        from_date: First day of the range.
        till_date: Last day of the range.

    Returns:
        The number of workdays, 0 if both dates are equal.

    Raises:
        UnorderedRangeError: If `from_date` is after `till_date`.
    """
    if from_date > till_date:
        raise UnorderedRangeError(from_date, till_date)
    if from_date == till_date:
        return 0

    current, count = from_date, 1
    while True:
        current += ONE_DAY
        if current == till_date:
            logger.debug(
                "%s..%s spans %d workday(s) of [%s]",
                from_date,
                till_date,
                count,
                workweek,
            )
            return count
        if workweek.contains(current.isoweekday()):
            count += 1


def next_workday(workweek: WorkweekSet, from_date: date) -> date:
    """Return the first workday strictly after `from_date`.

    Raises:
        NoWorkdaysDefinedError: If `workweek` is empty.
    """
    if workweek.is_empty:
        raise NoWorkdaysDefinedError()
    current = from_date + ONE_DAY
    while not workweek.contains(current.isoweekday()):
        current += ONE_DAY
    return current


def advance_n_workdays(from_date: date, n: int, workweek: WorkweekSet) -> date:
    """Jump `n` workdays ahead of `from_date` (``n == 0`` returns `from_date`)."""
    current = from_date
    for _ in range(n):
        current = next_workday(workweek, current)
    return current
