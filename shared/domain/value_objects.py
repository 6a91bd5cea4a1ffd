"""
Value objects shared across apps

- DateRange: an inclusive range of calendar days (booking start to end)

Value objects are immutable and compare equal when their fields are equal.
"""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class DateRange:
    """
    Date range value object

    Represents a closed interval of whole days: both start_date and
    end_date belong to the range. A single-day range has
    start_date == end_date.
    """
    start_date: date
    end_date: date

    def __post_init__(self):
        if self.end_date < self.start_date:
            raise ValueError(f"End date ({self.end_date}) cannot be before start date ({self.start_date})")

    def overlaps_with(self, other: 'DateRange') -> bool:
        """
        Check if this range shares at least one day with another

        Both ends are inclusive, so ranges that only touch on a boundary
        day overlap.

        Examples:
            - DateRange(1, 5) overlaps with DateRange(5, 8) -> True (touching)
            - DateRange(1, 5) overlaps with DateRange(6, 8) -> False
            - DateRange(1, 10) overlaps with DateRange(3, 5) -> True (contained)
        """
        if not isinstance(other, DateRange):
            raise TypeError("Can only check overlap with another DateRange")

        return self.start_date <= other.end_date and other.start_date <= self.end_date

    def __str__(self):
        return f"{self.start_date.isoformat()} - {self.end_date.isoformat()}"

    def __repr__(self):
        return f"DateRange({self.start_date}, {self.end_date})"
