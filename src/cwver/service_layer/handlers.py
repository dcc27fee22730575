"""Service layer handlers."""

import logging
from collections.abc import Callable
from typing import Any

from cwver.domain import (
    bisect_range,
    count_workdays,
    date_to_version,
    parse_version_string,
    parse_workweek,
)
from cwver.interfaces.clock import Clock

from . import queries
from .results import BisectReport, Conversion

logger = logging.getLogger(__name__)


def show_today(query: queries.ShowToday, clock: Clock) -> Conversion:  # pylint: disable=unused-argument
    """Return today's date along with its cw version string."""
    today = clock.today()
    return Conversion(version=date_to_version(today), day=today)


def convert_version(query: queries.ConvertVersion) -> Conversion:
    """Convert a cw version string into the date it stands for."""
    return Conversion(version=query.version, day=parse_version_string(query.version))


def bisect_versions(query: queries.BisectRange) -> BisectReport:
    """Compute the bisect starting point(s) between two cw versions."""

    workweek = parse_workweek(query.workdays)
    from_date = parse_version_string(query.from_version)
    till_date = parse_version_string(query.till_version)

    workdays = count_workdays(workweek, from_date, till_date)
    midpoints = bisect_range(workweek, from_date, till_date)
    logger.info(
        "Regression range %s..%s spans %d workday(s)", from_date, till_date, workdays
    )

    return BisectReport(
        from_date=from_date,
        till_date=till_date,
        workdays=workdays,
        midpoints=tuple(
            Conversion(version=date_to_version(day), day=day) for day in midpoints
        ),
    )


QUERY_HANDLERS: dict[type, Callable[..., Any]] = {
    queries.ShowToday: show_today,
    queries.ConvertVersion: convert_version,
    queries.BisectRange: bisect_versions,
}
