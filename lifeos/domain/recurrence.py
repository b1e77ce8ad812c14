"""
Deterministic due-date resolver for tracks.

Uses date only (no timezone, no clock reads).

Frequencies:
- daily: due every day (also the default when frequency is missing)
- weekly: due on track.day_of_week (Sunday=0..Saturday=6), Sunday if unset
- monthly: due on track.day_of_month clipped to the month's last day,
  last day of the month if unset
Anything else is never due.
"""
from datetime import date

from lifeos.domain.dates import iter_days, last_day_of_month, sunday_weekday
from lifeos.domain.track import Track, FREQ_DAILY, FREQ_WEEKLY, FREQ_MONTHLY

DEFAULT_WEEKDAY = 0  # Sunday


def _weekly(track: Track, d: date) -> bool:
    target = track.day_of_week if track.day_of_week is not None else DEFAULT_WEEKDAY
    return sunday_weekday(d) == target


def _monthly(track: Track, d: date) -> bool:
    last = last_day_of_month(d.year, d.month)
    if track.day_of_month is None:
        return d.day == last
    return d.day == min(track.day_of_month, last)


def is_due(track: Track, d: date) -> bool:
    """True if the track's recurrence rule asks for action on date d."""
    freq = track.frequency or FREQ_DAILY
    if freq == FREQ_DAILY:
        return True
    if freq == FREQ_WEEKLY:
        return _weekly(track, d)
    if freq == FREQ_MONTHLY:
        return _monthly(track, d)
    return False


def due_dates(track: Track, window_start: date, window_end: date) -> list[date]:
    """Dates in [window_start, window_end] (inclusive) on which the track is due, ascending."""
    return [d for d in iter_days(window_start, window_end) if is_due(track, d)]
