"""Read models returned by the query handlers."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Conversion:
    """A cw version string together with the date it stands for."""

    version: str
    day: date


@dataclass(frozen=True)
class BisectReport:
    """Outcome of bisecting a regression range.

    Attributes:
        from_date: Left side of the regression range.
        till_date: Right side of the regression range.
        workdays: Workdays spanned by the range.
        midpoints: Zero, one or two bisect starting points, ascending.
    """

    from_date: date
    till_date: date
    workdays: int
    midpoints: tuple[Conversion, ...]

    @property
    def needs_bisecting(self) -> bool:
        """False if the range is too short to have a middle."""
        return bool(self.midpoints)
