"""Domain layer for CWVER.

Contains the calendar week rules: the version string codec, workweek
definitions, workday arithmetic and range bisection. Everything here is pure
and works on `datetime.date` values.

Dependency rule: do not import from `cwver.adapters`, `cwver.service_layer`
or `cwver.entrypoints`.
"""

from .bisect import bisect_range
from .codec import date_to_version, parse_version, parse_version_string, version_to_date
from .value_objects import COMMERCIAL_WORKWEEK, FULL_WORKWEEK, CwVersion, WorkweekSet
from .workdays import advance_n_workdays, count_workdays, next_workday
from .workweek import parse_workweek

__all__ = [
    "COMMERCIAL_WORKWEEK",
    "FULL_WORKWEEK",
    "CwVersion",
    "WorkweekSet",
    "advance_n_workdays",
    "bisect_range",
    "count_workdays",
    "date_to_version",
    "next_workday",
    "parse_version",
    "parse_version_string",
    "parse_workweek",
    "version_to_date",
]
