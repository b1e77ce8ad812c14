"""
Log use cases

A day may hold several logs for the same track (imports, legacy data);
SaveLogUseCase keeps the UI contract of one editable log per (track, day)
by updating the earliest one.
"""
from sqlalchemy.orm import Session

from lifeos.domain.dates import format_date, parse_date
from lifeos.domain.ids import LOG_ID_PREFIX, generate_entity_id
from lifeos.domain.log import Log
from lifeos.infrastructure.repository import TrackerRepository


class LogValidationError(ValueError):
    pass


def _validate_date(value: str) -> str:
    try:
        return format_date(parse_date(value))
    except ValueError:
        raise LogValidationError(f"Date must be YYYY-MM-DD, got: {value}")


def _validate_value(value: int) -> int:
    if value < 0:
        raise LogValidationError("Value must not be negative")
    return value


def _clean_note(note: str | None) -> str | None:
    if note is None:
        return None
    return note.strip() or None


class SaveLogUseCase:
    """Use case: record today's (or any day's) value for a track"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = TrackerRepository(db)

    def execute(self, track_id: str, date: str, value: int, note: str | None = None) -> Log:
        """
        Upsert the log for (track_id, date)

        Returns:
            The updated first existing log, or the newly created one
        """
        date = _validate_date(date)
        _validate_value(value)
        if self.repo.get_track(track_id) is None:
            raise LogValidationError(f"Track {track_id} not found")

        note = _clean_note(note)
        existing = self.repo.list_logs_for_track_date(track_id, date)
        if existing:
            log = self.repo.update_log(existing[0].id, value=value, note=note)
        else:
            log = Log(
                id=generate_entity_id(LOG_ID_PREFIX),
                date=date,
                track_id=track_id,
                value=value,
                note=note,
            )
            self.repo.add_log(log)
        self.db.commit()
        return log


class UpdateLogUseCase:
    def __init__(self, db: Session):
        self.db = db
        self.repo = TrackerRepository(db)

    def execute(self, log_id: str, value: int | None = None, note: str | None = None) -> Log:
        changes = {}
        if value is not None:
            changes["value"] = _validate_value(value)
        if note is not None:
            changes["note"] = _clean_note(note)

        log = self.repo.update_log(log_id, **changes)
        if log is None:
            raise LogValidationError(f"Log {log_id} not found")
        self.db.commit()
        return log


class DeleteLogUseCase:
    def __init__(self, db: Session):
        self.db = db
        self.repo = TrackerRepository(db)

    def execute(self, log_id: str) -> None:
        if not self.repo.delete_log(log_id):
            raise LogValidationError(f"Log {log_id} not found")
        self.db.commit()
