from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone


def _check_month(month: int) -> None:
    if not (1 <= int(month) <= 12):
        raise ValueError(f"month must be between 1 and 12, got {month!r}.")


def day_of_year(year: int, month: int, day: int) -> int:
    """
    Ordinal day N of the date within its year (1 for Jan 1).

    Almanac formula:
      N1 = floor(275 * month / 9)
      N2 = floor((month + 9) / 12)
      N3 = 1 + floor((year - 4 * floor(year / 4) + 2) / 3)
      N  = N1 - N2 * N3 + day - 30

    The leap rule is "every 4th year", so 1900/2100 count as leap years.
    `day` is not range-checked.
    """
    _check_month(month)
    n1 = (275 * month) // 9
    n2 = (month + 9) // 12
    n3 = 1 + (year - 4 * (year // 4) + 2) // 3
    return n1 - n2 * n3 + day - 30


def midnight_utc(year: int, month: int, day: int) -> datetime:
    """
    00:00:00 UTC of the given date.

    Days outside the month roll over, e.g. (2024, 2, 30) -> 2024-03-01,
    (2024, 3, 0) -> 2024-02-29.
    """
    _check_month(month)
    return datetime(year, month, 1, tzinfo=timezone.utc) + timedelta(days=day - 1)


@dataclass(frozen=True)
class CalendarDate:
    year: int
    month: int
    day: int

    @classmethod
    def from_date(cls, d: date) -> "CalendarDate":
        return cls(year=d.year, month=d.month, day=d.day)

    def day_of_year(self) -> int:
        return day_of_year(self.year, self.month, self.day)

    def midnight_utc(self) -> datetime:
        return midnight_utc(self.year, self.month, self.day)
