"""
Track domain entity

A track is a recurring goal inside a category. Deletion is soft: the track
moves to the Deleted lifecycle state and its log history is kept so that
past calendar days still count it.
"""
from dataclasses import dataclass, field
from datetime import datetime


TRACK_TYPE_CHECKBOX = "checkbox"
TRACK_TYPE_MINUTES = "minutes"
TRACK_TYPE_COUNT = "count"
VALID_TRACK_TYPES = frozenset({TRACK_TYPE_CHECKBOX, TRACK_TYPE_MINUTES, TRACK_TYPE_COUNT})

FREQ_DAILY = "daily"
FREQ_WEEKLY = "weekly"
FREQ_MONTHLY = "monthly"
VALID_FREQUENCIES = frozenset({FREQ_DAILY, FREQ_WEEKLY, FREQ_MONTHLY})


@dataclass(frozen=True)
class Active:
    """Track is live; it has never been soft-deleted."""


@dataclass(frozen=True)
class Deleted:
    """Track was soft-deleted at the given instant."""
    at: datetime


Lifecycle = Active | Deleted


@dataclass(frozen=True)
class Track:
    id: str
    category_id: str | None
    name: str
    type: str = TRACK_TYPE_CHECKBOX
    frequency: str | None = FREQ_DAILY  # None -> treated as daily
    day_of_week: int | None = None  # weekly only, Sunday=0..Saturday=6
    day_of_month: int | None = None  # monthly only, 1..31
    created_at: datetime | None = None  # legacy rows: derived from id
    lifecycle: Lifecycle = field(default_factory=Active)

    @property
    def is_deleted(self) -> bool:
        return isinstance(self.lifecycle, Deleted)

    @property
    def deleted_at(self) -> datetime | None:
        if isinstance(self.lifecycle, Deleted):
            return self.lifecycle.at
        return None


def lifecycle_from_deleted_at(deleted_at: datetime | None) -> Lifecycle:
    return Deleted(at=deleted_at) if deleted_at is not None else Active()
