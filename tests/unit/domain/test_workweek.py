"""Unit tests for workweek parsing and the WorkweekSet value object."""

import dataclasses

import pytest

from cwver.domain.errors import InvalidWorkdayError, WorkdayOutOfRangeError
from cwver.domain.value_objects import (
    COMMERCIAL_WORKWEEK,
    FULL_WORKWEEK,
    Weekday,
    WorkweekSet,
)
from cwver.domain.workweek import parse_workweek


class TestParseWorkweek:
    """Tests for parse_workweek."""

    @staticmethod
    def test_commercial_workweek() -> None:
        """The default definition is Monday to Friday."""
        assert parse_workweek("1,2,3,4,5") == COMMERCIAL_WORKWEEK

    @staticmethod
    def test_full_workweek() -> None:
        """All seven days may be workdays."""
        assert parse_workweek("7,6,5,4,3,2,1") == FULL_WORKWEEK

    @staticmethod
    def test_duplicates_collapse() -> None:
        """Repeated days are dropped silently."""
        assert parse_workweek("5,1,1,3,5") == WorkweekSet.of(1, 3, 5)

    @staticmethod
    def test_explicit_plus_sign() -> None:
        """A leading plus sign is still an unsigned number."""
        assert parse_workweek("+6,7") == WorkweekSet.of(6, 7)

    @staticmethod
    @pytest.mark.parametrize(
        ("text", "token"),
        [
            ("", ""),
            ("1,x", "x"),
            ("1,,2", ""),
            ("mon,tue", "mon"),
            ("1.5", "1.5"),
            (" 6, 7", " 6"),
            ("1, 2", " 2"),
            ("1_0", "1_0"),
            ("\u0663", "\u0663"),
            ("-1", "-1"),
        ],
    )
    def test_invalid_workday(text: str, token: str) -> None:
        """Anything but plain ASCII digits is reported as given, blanks included."""
        with pytest.raises(InvalidWorkdayError) as exc_info:
            parse_workweek(text)
        assert exc_info.value.token == token
        assert str(exc_info.value) == f"failed to parse workday {token}"

    @staticmethod
    @pytest.mark.parametrize(("text", "value"), [("0", 0), ("1,8", 8), ("10", 10)])
    def test_workday_out_of_range(text: str, value: int) -> None:
        """Integers outside of [1-7] are rejected."""
        with pytest.raises(WorkdayOutOfRangeError) as exc_info:
            parse_workweek(text)
        assert exc_info.value.value == value
        assert str(exc_info.value) == f"given workday {value} not in range [1-7]"

    @staticmethod
    def test_first_bad_token_wins() -> None:
        """Tokens are checked in order."""
        with pytest.raises(WorkdayOutOfRangeError):
            parse_workweek("9,x")
        with pytest.raises(InvalidWorkdayError):
            parse_workweek("x,9")


class TestWorkweekSet:
    """Tests for the WorkweekSet value object."""

    @staticmethod
    def test_contains() -> None:
        """Membership is tested on ISO weekday numbers."""
        assert COMMERCIAL_WORKWEEK.contains(Weekday.MONDAY)
        assert COMMERCIAL_WORKWEEK.contains(5)
        assert not COMMERCIAL_WORKWEEK.contains(Weekday.SATURDAY)
        assert 7 not in COMMERCIAL_WORKWEEK
        assert 7 in FULL_WORKWEEK

    @staticmethod
    def test_empty_workweek() -> None:
        """An empty workweek is allowed but has no workdays."""
        empty = WorkweekSet()
        assert empty.is_empty
        assert len(empty) == 0
        assert not COMMERCIAL_WORKWEEK.is_empty

    @staticmethod
    def test_out_of_range_days_are_rejected() -> None:
        """Construction validates every day."""
        with pytest.raises(WorkdayOutOfRangeError):
            WorkweekSet.of(1, 8)

    @staticmethod
    def test_str_and_iteration_are_sorted() -> None:
        """Days render in ascending order regardless of input order."""
        workweek = WorkweekSet.of(5, 3, 1)
        assert list(workweek) == [1, 3, 5]
        assert str(workweek) == "1,3,5"
        assert str(COMMERCIAL_WORKWEEK) == "1,2,3,4,5"

    @staticmethod
    def test_is_immutable_and_hashable() -> None:
        """WorkweekSet is a frozen value object."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            COMMERCIAL_WORKWEEK.days = frozenset({1})  # type: ignore[misc]
        assert hash(WorkweekSet.of(1, 2)) == hash(WorkweekSet.of(2, 1, 1))
