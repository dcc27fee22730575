"""Conversion between calendar week version strings and dates.

A calendar week version string has the form ``YYwWW.D``:

- ``YY``: the ISO week-year modulo 100 (always within 2000-2099)
- ``WW``: the ISO week number, zero padded
- ``D``: the ISO weekday, 1=Monday ... 7=Sunday

Example: ``21w45.7`` is Sunday of ISO week 45 of 2021, i.e. 2021-11-14.

Note that the ISO week-year can differ from the calendar year around January
1st (2022-01-02 is ``21w52.7``).
"""

import logging
import re
from datetime import date

from cwver.config import CENTURY_BASE

from .errors import MalformedVersionError, NoSuchWeekDateError, WeekdayOutOfRangeError
from .value_objects import CwVersion, Weekday

logger = logging.getLogger(__name__)

VERSION_PATTERN = re.compile(r"(\d{2})w(\d{2})\.(\d{1})", re.ASCII)


def parse_version(text: str) -> CwVersion:
    """Extract the numeric groups of a version string.

    The pattern is searched, not anchored, so surrounding text is tolerated
    (``"release-21w45.7"`` parses). Only ASCII digits count. The groups are
    not range checked.

    Args:
        text: Text containing a ``YYwWW.D`` version string.

    Returns:
        The parsed CwVersion.

    Raises:
        MalformedVersionError: If no version string is found in `text`.
    """
    if (match := VERSION_PATTERN.search(text)) is None:
        raise MalformedVersionError(text)
    year, week, weekday = (int(group) for group in match.groups())
    return CwVersion(year=year, week=week, weekday=weekday)


def version_to_date(version: CwVersion) -> date:
    """Resolve a version into the calendar date it names.

    Raises:
        WeekdayOutOfRangeError: If the weekday is outside of [1-7].
        NoSuchWeekDateError: If the ISO week date does not exist
            (e.g. week 0, or week 53 of a year with 52 weeks).
    """
    if version.weekday < Weekday.MONDAY or version.weekday > Weekday.SUNDAY:
        raise WeekdayOutOfRangeError(version.weekday)
    try:
        return date.fromisocalendar(
            CENTURY_BASE + version.year, version.week, version.weekday
        )
    except ValueError as e:
        raise NoSuchWeekDateError(str(version)) from e


def date_to_version(day: date) -> str:
    """Format a date as a ``YYwWW.D`` version string."""
    iso_year, iso_week, iso_weekday = day.isocalendar()
    return f"{iso_year % 100:02}w{iso_week:02}.{iso_weekday:01}"


def parse_version_string(text: str) -> date:
    """Parse a version string straight into a date.

    Raises:
        MalformedVersionError: If `text` holds no version string.
        WeekdayOutOfRangeError: If the weekday digit is outside of [1-7].
        NoSuchWeekDateError: If the ISO week date does not exist. The
            message quotes `text` as given.
    """
    version = parse_version(text)
    try:
        day = version_to_date(version)
    except NoSuchWeekDateError as e:
        raise NoSuchWeekDateError(text) from e
    logger.debug("Parsed %r as %s", text, day)
    return day
