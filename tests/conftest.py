"""Global pytest fixtures for CWVER."""

from datetime import date

import pytest

from cwver.adapters.clock import FixedClock
from cwver.bootstrap import AppContainer, bootstrap
from cwver.domain import COMMERCIAL_WORKWEEK, FULL_WORKWEEK, WorkweekSet

# pylint: disable=redefined-outer-name

# A Sunday, written 21w45.7
FIXED_TODAY = date(2021, 11, 14)


@pytest.fixture
def commercial_workweek() -> WorkweekSet:
    """Monday to Friday."""
    return COMMERCIAL_WORKWEEK


@pytest.fixture
def full_workweek() -> WorkweekSet:
    """Every day of the week."""
    return FULL_WORKWEEK


@pytest.fixture
def fixed_clock() -> FixedClock:
    """A clock stuck on FIXED_TODAY."""
    return FixedClock(FIXED_TODAY)


@pytest.fixture
def app(fixed_clock: FixedClock) -> AppContainer:
    """Application container wired with the fixed clock."""
    return bootstrap(clock=fixed_clock)
