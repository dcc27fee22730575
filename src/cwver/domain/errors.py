"""Domain-layer error definitions."""

from datetime import date

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


# ============================================================================
#                           Parsing errors
# ============================================================================


class ParseError(DomainError):
    """Base class for errors raised while parsing user supplied text."""


class MalformedVersionError(ParseError):
    """Raised when text does not contain a ``YYwWW.D`` version string."""

    def __init__(self, text: str) -> None:
        super().__init__(f"failed to parse {text}")
        self.text = text


class InvalidWorkdayError(ParseError):
    """Raised when a workweek token is not an integer."""

    def __init__(self, token: str) -> None:
        super().__init__(f"failed to parse workday {token}")
        self.token = token


class WorkdayOutOfRangeError(ParseError):
    """Raised when a workweek day is outside of [1-7]."""

    def __init__(self, value: int) -> None:
        super().__init__(f"given workday {value} not in range [1-7]")
        self.value = value


# ============================================================================
#                           Conversion errors
# ============================================================================


class ConversionError(DomainError):
    """Base class for errors raised while converting a version into a date."""


class WeekdayOutOfRangeError(ConversionError):
    """Raised when the day-of-week digit of a version is outside of [1-7]."""

    def __init__(self, weekday: int) -> None:
        super().__init__(f"day of week {weekday} out-of-range [1-7]")
        self.weekday = weekday


class NoSuchWeekDateError(ConversionError):
    """Raised when a version names an ISO week date that does not exist."""

    def __init__(self, text: str) -> None:
        super().__init__(f"failed to calculate date of {text}")
        self.text = text


# ============================================================================
#                           Range errors
# ============================================================================


class RangeError(DomainError):
    """Base class for errors related to date ranges and workday arithmetic."""


class UnorderedRangeError(RangeError):
    """Raised when the start of a range lies after its end."""

    def __init__(self, from_date: date, till_date: date) -> None:
        super().__init__(f"{from_date} must be before {till_date} in time")
        self.from_date = from_date
        self.till_date = till_date


class NoWorkdaysDefinedError(RangeError):
    """Raised when advancing to a workday with an empty workweek."""

    def __init__(self) -> None:
        super().__init__("no workdays defined in workweek")
