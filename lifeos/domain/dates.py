"""
Calendar helpers shared by the engine and the storage boundary.

Dates cross the storage boundary as zero-padded ``YYYY-MM-DD`` strings and
months as ``YYYY-MM``; lexicographic order of these strings is chronological,
so range filters compare strings directly.
"""
import calendar
from datetime import date, timedelta
from typing import Iterator


def format_date(d: date) -> str:
    """date(2024, 1, 5) -> '2024-01-05'"""
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def parse_date(s: str) -> date:
    return date.fromisoformat(s.strip())


def format_month(year: int, month: int) -> str:
    return f"{year:04d}-{month:02d}"


def last_day_of_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def add_months(d: date, n: int) -> date:
    """Shift by n calendar months, clamping the day to the target month's length."""
    month = d.month - 1 + n
    year = d.year + month // 12
    month = month % 12 + 1
    last = last_day_of_month(year, month)
    day = min(d.day, last)
    return date(year, month, day)


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """First and last day of the month (inclusive)."""
    return date(year, month, 1), date(year, month, last_day_of_month(year, month))


def iter_days(start: date, end: date) -> Iterator[date]:
    """Every calendar day in [start, end]; empty when start > end."""
    d = start
    while d <= end:
        yield d
        d += timedelta(days=1)


def sunday_weekday(d: date) -> int:
    """Day of week numbered Sunday=0 .. Saturday=6 (track.day_of_week convention)."""
    return (d.weekday() + 1) % 7
