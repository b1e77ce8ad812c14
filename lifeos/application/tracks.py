"""Track use cases"""
import logging

from sqlalchemy.orm import Session

from lifeos.domain.ids import TRACK_ID_PREFIX, generate_entity_id, utc_now
from lifeos.domain.track import (
    Track,
    FREQ_DAILY,
    FREQ_MONTHLY,
    FREQ_WEEKLY,
    TRACK_TYPE_CHECKBOX,
    VALID_FREQUENCIES,
    VALID_TRACK_TYPES,
)
from lifeos.infrastructure.repository import TrackerRepository

logger = logging.getLogger(__name__)

DEFAULT_DAY_OF_WEEK = 0  # Sunday
DEFAULT_DAY_OF_MONTH = 1


class TrackValidationError(ValueError):
    pass


def normalize_schedule(
    frequency: str,
    day_of_week: int | None,
    day_of_month: int | None,
) -> tuple[int | None, int | None]:
    """
    Validate the schedule fields for a frequency

    Returns:
        (day_of_week, day_of_month) with the field the frequency does not use
        cleared and the one it uses defaulted
    """
    if frequency not in VALID_FREQUENCIES:
        raise TrackValidationError(f"Unknown frequency: {frequency}")

    if frequency == FREQ_WEEKLY:
        if day_of_week is None:
            day_of_week = DEFAULT_DAY_OF_WEEK
        if not 0 <= day_of_week <= 6:
            raise TrackValidationError("day_of_week must be between 0 (Sunday) and 6 (Saturday)")
        return day_of_week, None

    if frequency == FREQ_MONTHLY:
        if day_of_month is None:
            day_of_month = DEFAULT_DAY_OF_MONTH
        if not 1 <= day_of_month <= 31:
            raise TrackValidationError("day_of_month must be between 1 and 31")
        return None, day_of_month

    return None, None


class CreateTrackUseCase:
    """Use case: add a recurring goal to a category"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = TrackerRepository(db)

    def execute(
        self,
        category_id: str,
        name: str,
        type: str = TRACK_TYPE_CHECKBOX,
        frequency: str = FREQ_DAILY,
        day_of_week: int | None = None,
        day_of_month: int | None = None,
    ) -> str:
        name = (name or "").strip()
        if not name:
            raise TrackValidationError("Track name must not be empty")
        if type not in VALID_TRACK_TYPES:
            raise TrackValidationError(f"Unknown track type: {type}")
        if self.repo.get_category(category_id) is None:
            raise TrackValidationError(f"Category {category_id} not found")

        day_of_week, day_of_month = normalize_schedule(frequency, day_of_week, day_of_month)

        now = utc_now()
        track = Track(
            id=generate_entity_id(TRACK_ID_PREFIX, now),
            category_id=category_id,
            name=name,
            type=type,
            frequency=frequency,
            day_of_week=day_of_week,
            day_of_month=day_of_month,
            created_at=now,
        )
        self.repo.add_track(track)
        self.db.commit()
        return track.id


class DeleteTrackUseCase:
    """
    Use case: soft-delete a track

    The track stops being due from the deletion day on; logs are kept.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = TrackerRepository(db)

    def execute(self, track_id: str) -> Track:
        track = self.repo.get_track(track_id)
        if track is None:
            raise TrackValidationError(f"Track {track_id} not found")
        if track.is_deleted:
            raise TrackValidationError("Track is already deleted")

        track = self.repo.soft_delete_track(track_id, utc_now())
        self.db.commit()
        logger.info("Soft-deleted track %s", track_id)
        return track
