"""Module defining Queries."""

from dataclasses import dataclass

from cwver.config import DEFAULT_WORKDAYS


@dataclass(frozen=True)
class Query:
    """Base class for all queries."""


@dataclass(frozen=True)
class ShowToday(Query):
    """Query for today's date as a cw version string."""


@dataclass(frozen=True)
class ConvertVersion(Query):
    """Query to convert a cw version string into a date."""

    version: str


@dataclass(frozen=True)
class BisectRange(Query):
    """Query for the bisect starting point(s) of a regression range."""

    from_version: str
    till_version: str
    workdays: str = DEFAULT_WORKDAYS
