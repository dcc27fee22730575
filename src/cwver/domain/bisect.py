"""Bisection of regression ranges on workday boundaries."""

import logging
from datetime import date

from .value_objects import WorkweekSet
from .workdays import advance_n_workdays, count_workdays

logger = logging.getLogger(__name__)

MIN_BISECTABLE_WORKDAYS = 2


def bisect_range(
    workweek: WorkweekSet, from_date: date, till_date: date
) -> tuple[date, ...]:
    """Find the workday(s) in the middle of a regression range.

    An even workday count has a single middle, an odd count has two equally
    good ones. Ranges shorter than two workdays are not worth bisecting.

    Args:
        workweek: Weekdays that count as workdays.
        from_date: Last known good day.
        till_date: First known bad day.

    Returns:
        The ascending midpoint dates: empty, one, or two of them.

    Raises:
        UnorderedRangeError: If `from_date` is after `till_date`.
    """
    total = count_workdays(workweek, from_date, till_date)
    if total < MIN_BISECTABLE_WORKDAYS:
        logger.debug("Range of %d workday(s) is too short to bisect", total)
        return ()

    # floor(total / 2) and floor(total / 2 + 0.5)
    low, high = total // 2, (total + 1) // 2
    midpoints = sorted(
        {
            advance_n_workdays(from_date, low, workweek),
            advance_n_workdays(from_date, high, workweek),
        }
    )
    logger.debug("Bisect points of %s..%s: %s", from_date, till_date, midpoints)
    return tuple(midpoints)
