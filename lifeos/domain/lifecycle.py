"""
Track lifecycle: was a track alive on a given calendar day?

A track is active on day D iff it was created on or before D and either is
not deleted or was deleted on a later day than D. Instants are reduced to
calendar days in the given timezone (UTC by default) before comparing, so a
track created on day C and deleted on day X is active on exactly [C, X).

Rows written before tracks carried an explicit created_at recover the
creation instant from the identifier 'track_<epoch millis>_<random>'.
"""
import re
from datetime import date, datetime, timedelta, timezone, tzinfo

from lifeos.domain.track import Track, Deleted

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def creation_date_from_id(track_id: str) -> datetime:
    """Parse the millisecond timestamp in the second '_' segment; epoch if absent or unparseable."""
    parts = track_id.split("_")
    if len(parts) < 2:
        return EPOCH
    m = _LEADING_INT_RE.match(parts[1])
    if not m:
        return EPOCH
    try:
        return EPOCH + timedelta(milliseconds=int(m.group(1)))
    except OverflowError:
        return EPOCH


def get_creation_date(track: Track) -> datetime:
    if track.created_at is not None:
        return track.created_at
    return creation_date_from_id(track.id)


def instant_to_day(instant: datetime, tz: tzinfo | None = None) -> date:
    """
    Calendar day of an instant in tz; naive instants are taken as UTC.

    Instants whose shifted value falls outside the datetime range (ids
    carrying timestamps near year 1 or 9999) keep their own calendar day.
    """
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    try:
        return instant.astimezone(tz or timezone.utc).date()
    except OverflowError:
        return instant.date()


def is_active(track: Track, d: date, tz: tzinfo | None = None) -> bool:
    if instant_to_day(get_creation_date(track), tz) > d:
        return False
    if isinstance(track.lifecycle, Deleted):
        return instant_to_day(track.lifecycle.at, tz) > d
    return True
