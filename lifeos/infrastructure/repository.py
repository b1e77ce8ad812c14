"""
Tracker Repository - data access for categories, tracks, logs, finance and records

Read methods return plain domain snapshots (frozen dataclasses), never ORM
rows, so the statistics engine never holds references back into the session.
Write methods flush but do not commit: the calling use case owns the
transaction.
"""
from datetime import datetime
from typing import Any, Optional, List

from sqlalchemy.orm import Session

from lifeos.domain.category import Category
from lifeos.domain.finance import FinanceRecord
from lifeos.domain.log import Log
from lifeos.domain.record import Record
from lifeos.domain.track import Track, lifecycle_from_deleted_at
from lifeos.infrastructure.db.models import (
    CategoryModel, TrackModel, LogModel, FinanceRecordModel, RecordModel,
)


# ── Row -> domain ────────────────────────────────────────────────────────────

def _category(row: CategoryModel) -> Category:
    return Category(
        id=row.id, name=row.name, icon=row.icon, color=row.color,
        weight=row.weight, status=row.status,
    )


def _track(row: TrackModel) -> Track:
    return Track(
        id=row.id,
        category_id=row.category_id,
        name=row.name,
        type=row.type,
        frequency=row.frequency,
        day_of_week=row.day_of_week,
        day_of_month=row.day_of_month,
        created_at=row.created_at,
        lifecycle=lifecycle_from_deleted_at(row.deleted_at),
    )


def _log(row: LogModel) -> Log:
    return Log(id=row.id, date=row.date, track_id=row.track_id, value=row.value, note=row.note)


def _finance(row: FinanceRecordModel) -> FinanceRecord:
    return FinanceRecord(
        id=row.id, month=row.month, income=row.income, expense=row.expense,
        sip_started=row.sip_started, learning_sessions=row.learning_sessions,
    )


def _record(row: RecordModel) -> Record:
    return Record(
        id=row.id, type=row.type, title=row.title, date=row.date,
        description=row.description, category_id=row.category_id, tags=row.tags or "",
    )


def _apply(row: Any, changes: dict[str, Any], allowed: tuple[str, ...]) -> None:
    for key in allowed:
        if key in changes:
            setattr(row, key, changes[key])


class TrackerRepository:
    """
    Repository over the tracker tables

    One instance per session; the session's lifetime (get_db / session_scope)
    bounds the repository's.
    """

    def __init__(self, db: Session):
        self.db = db

    # ── Categories ───────────────────────────────────────────────────────────

    def list_categories(self) -> List[Category]:
        """
        All categories, highest weight first

        Returns:
            List of Category, sorted by weight DESC then name
        """
        rows = (
            self.db.query(CategoryModel)
            .order_by(CategoryModel.weight.desc(), CategoryModel.name.asc())
            .all()
        )
        return [_category(r) for r in rows]

    def get_category(self, category_id: str) -> Optional[Category]:
        row = self.db.get(CategoryModel, category_id)
        return _category(row) if row else None

    def count_categories(self) -> int:
        return self.db.query(CategoryModel).count()

    def add_category(self, category: Category) -> None:
        self.db.add(CategoryModel(
            id=category.id, name=category.name, icon=category.icon,
            color=category.color, weight=category.weight, status=category.status,
        ))
        self.db.flush()

    def update_category(self, category_id: str, **changes: Any) -> Optional[Category]:
        row = self.db.get(CategoryModel, category_id)
        if row is None:
            return None
        _apply(row, changes, ("name", "icon", "color", "weight", "status"))
        self.db.flush()
        return _category(row)

    def delete_category(self, category_id: str) -> bool:
        row = self.db.get(CategoryModel, category_id)
        if row is None:
            return False
        self.db.delete(row)
        self.db.flush()
        return True

    # ── Tracks ───────────────────────────────────────────────────────────────

    def list_tracks(self, category_id: Optional[str] = None, include_deleted: bool = False) -> List[Track]:
        """
        Tracks, optionally for one category

        Args:
            category_id: Only tracks of this category (optional)
            include_deleted: Include soft-deleted tracks (needed for history views)

        Returns:
            List of Track in creation order
        """
        query = self.db.query(TrackModel)
        if category_id:
            query = query.filter(TrackModel.category_id == category_id)
        if not include_deleted:
            query = query.filter(TrackModel.deleted_at.is_(None))
        rows = query.order_by(TrackModel.created_at.asc(), TrackModel.id.asc()).all()
        return [_track(r) for r in rows]

    def get_track(self, track_id: str) -> Optional[Track]:
        row = self.db.get(TrackModel, track_id)
        return _track(row) if row else None

    def add_track(self, track: Track) -> None:
        self.db.add(TrackModel(
            id=track.id,
            category_id=track.category_id,
            name=track.name,
            type=track.type,
            frequency=track.frequency,
            day_of_week=track.day_of_week,
            day_of_month=track.day_of_month,
            created_at=track.created_at,
            deleted_at=track.deleted_at,
        ))
        self.db.flush()

    def soft_delete_track(self, track_id: str, at: datetime) -> Optional[Track]:
        row = self.db.get(TrackModel, track_id)
        if row is None:
            return None
        row.deleted_at = at
        self.db.flush()
        return _track(row)

    # ── Logs ─────────────────────────────────────────────────────────────────

    def list_logs(self, start_date: str, end_date: str) -> List[Log]:
        """
        Logs with start_date <= date <= end_date

        Args:
            start_date: YYYY-MM-DD (zero-padded, compared as string)
            end_date: YYYY-MM-DD (inclusive)

        Returns:
            List of Log ordered by date
        """
        rows = (
            self.db.query(LogModel)
            .filter(LogModel.date >= start_date, LogModel.date <= end_date)
            .order_by(LogModel.date.asc(), LogModel.created_at.asc(), LogModel.id.asc())
            .all()
        )
        return [_log(r) for r in rows]

    def list_logs_for_track_date(self, track_id: str, date: str) -> List[Log]:
        rows = (
            self.db.query(LogModel)
            .filter(LogModel.track_id == track_id, LogModel.date == date)
            .order_by(LogModel.created_at.asc(), LogModel.id.asc())
            .all()
        )
        return [_log(r) for r in rows]

    def get_log(self, log_id: str) -> Optional[Log]:
        row = self.db.get(LogModel, log_id)
        return _log(row) if row else None

    def add_log(self, log: Log) -> None:
        self.db.add(LogModel(
            id=log.id, date=log.date, track_id=log.track_id, value=log.value, note=log.note,
        ))
        self.db.flush()

    def update_log(self, log_id: str, **changes: Any) -> Optional[Log]:
        row = self.db.get(LogModel, log_id)
        if row is None:
            return None
        _apply(row, changes, ("value", "note"))
        self.db.flush()
        return _log(row)

    def delete_log(self, log_id: str) -> bool:
        row = self.db.get(LogModel, log_id)
        if row is None:
            return False
        self.db.delete(row)
        self.db.flush()
        return True

    # ── Finance ──────────────────────────────────────────────────────────────

    def list_finance_records(self, month: Optional[str] = None) -> List[FinanceRecord]:
        """
        Finance records, optionally for one month

        Args:
            month: YYYY-MM filter (optional)

        Returns:
            List of FinanceRecord ordered by month ASC
        """
        query = self.db.query(FinanceRecordModel)
        if month:
            query = query.filter(FinanceRecordModel.month == month)
        return [_finance(r) for r in query.order_by(FinanceRecordModel.month.asc()).all()]

    def add_finance_record(self, record: FinanceRecord) -> None:
        self.db.add(FinanceRecordModel(
            id=record.id, month=record.month, income=record.income, expense=record.expense,
            sip_started=record.sip_started, learning_sessions=record.learning_sessions,
        ))
        self.db.flush()

    def update_finance_record(self, finance_id: str, **changes: Any) -> Optional[FinanceRecord]:
        row = self.db.get(FinanceRecordModel, finance_id)
        if row is None:
            return None
        _apply(row, changes, ("income", "expense", "sip_started", "learning_sessions"))
        self.db.flush()
        return _finance(row)

    # ── Records ──────────────────────────────────────────────────────────────

    def list_records(self, category_id: Optional[str] = None, record_type: Optional[str] = None) -> List[Record]:
        """
        Memory vault entries, newest date first

        Args:
            category_id: Filter by category (optional)
            record_type: Filter by type, e.g. "book" (optional)
        """
        query = self.db.query(RecordModel)
        if category_id:
            query = query.filter(RecordModel.category_id == category_id)
        if record_type:
            query = query.filter(RecordModel.type == record_type)
        rows = query.order_by(RecordModel.date.desc(), RecordModel.id.desc()).all()
        return [_record(r) for r in rows]

    def get_record(self, record_id: str) -> Optional[Record]:
        row = self.db.get(RecordModel, record_id)
        return _record(row) if row else None

    def add_record(self, record: Record) -> None:
        self.db.add(RecordModel(
            id=record.id, type=record.type, title=record.title, description=record.description,
            date=record.date, category_id=record.category_id, tags=record.tags,
        ))
        self.db.flush()

    def update_record(self, record_id: str, **changes: Any) -> Optional[Record]:
        row = self.db.get(RecordModel, record_id)
        if row is None:
            return None
        _apply(row, changes, ("type", "title", "description", "date", "category_id", "tags"))
        self.db.flush()
        return _record(row)

    def delete_record(self, record_id: str) -> bool:
        row = self.db.get(RecordModel, record_id)
        if row is None:
            return False
        self.db.delete(row)
        self.db.flush()
        return True
