"""Configuration utilities for CWVER.

This module centralizes small helpers and constants related to application configuration.
"""

import os

CENTURY_BASE = 2000  # two-digit years are mapped into 2000-2099

WORKDAYS_ENV_VAR = "CWVER_WORKDAYS"  # pragma: no mutate
DEFAULT_WORKDAYS = "1,2,3,4,5"  # pragma: no mutate


def get_default_workdays() -> str:
    """Get the default workweek definition used for bisecting.

    Returns:
        The value of the `CWVER_WORKDAYS` environment variable if it is set
        and non-empty, otherwise ``"1,2,3,4,5"`` (Monday to Friday).

    Note:
        The value is returned unparsed; invalid definitions are reported when
        the workweek is parsed, like any other user input.
    """
    if not (workdays := os.environ.get(WORKDAYS_ENV_VAR)):
        return DEFAULT_WORKDAYS
    return workdays
