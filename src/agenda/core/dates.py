"""Pure calendar arithmetic - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date as _date, timedelta


@dataclass(frozen=True, order=True)
class Date:
    """
    A wall-clock calendar date.

    Fields are ordered year, month, day so the generated comparisons are
    lexicographic. No validity checking: Feb 31 is a perfectly good Date.
    """

    year: int
    month: int
    day: int

    def __str__(self) -> str:
        return f"{self.year:04d}/{self.month:02d}/{self.day:02d}"

    @classmethod
    def from_date(cls, d: _date) -> "Date":
        return cls(d.year, d.month, d.day)


def compare_date(a: Date, b: Date) -> int:
    """Three-way comparison: -1, 0 or 1."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def today() -> Date:
    """Current local date."""
    return Date.from_date(_date.today())


def add_days(d: Date, n: int) -> Date:
    """
    Add n days with real calendar normalization.

    Out-of-range months and days are normalized first (month 13 is January
    of the next year, Feb 31 is early March), then the days are added.
    """
    year = d.year + (d.month - 1) // 12
    month = (d.month - 1) % 12 + 1
    result = _date(year, month, 1) + timedelta(days=d.day - 1 + n)
    return Date.from_date(result)


def add_months(d: Date, n: int) -> Date:
    """Add n months. The day is kept as-is, even if the target month is shorter."""
    total = d.year * 12 + (d.month - 1) + n
    return Date(total // 12, total % 12 + 1, d.day)


def add_years(d: Date, n: int) -> Date:
    return Date(d.year + n, d.month, d.day)


def approx_days_between(start: Date, end: Date) -> int:
    """Approximate day distance from start to end, counting every month as 30 days."""
    months = (end.year - start.year) * 12 + (end.month - start.month)
    return months * 30 + (end.day - start.day)


def is_within(d: Date | None, num: int, as_of: Date | None = None) -> bool:
    """
    Check whether a date is no more than num (approximate) days away.

    Past dates always qualify. Used for urgency only, not for recurrence.
    """
    if d is None:
        return False
    as_of = as_of or today()
    return approx_days_between(as_of, d) <= num
