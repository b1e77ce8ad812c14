"""Memory vault use cases"""
from sqlalchemy.orm import Session

from lifeos.domain.dates import format_date, parse_date
from lifeos.domain.ids import RECORD_ID_PREFIX, generate_entity_id
from lifeos.domain.record import Record, RECORD_TYPES, DEFAULT_RECORD_TYPE, join_tags
from lifeos.infrastructure.repository import TrackerRepository


class RecordValidationError(ValueError):
    pass


def _validate_type(record_type: str) -> str:
    if record_type not in RECORD_TYPES:
        raise RecordValidationError(f"Unknown record type: {record_type}")
    return record_type


def _validate_date(value: str) -> str:
    try:
        return format_date(parse_date(value))
    except ValueError:
        raise RecordValidationError(f"Date must be YYYY-MM-DD, got: {value}")


def _validate_title(title: str) -> str:
    title = (title or "").strip()
    if not title:
        raise RecordValidationError("Title must not be empty")
    return title


class CreateRecordUseCase:
    def __init__(self, db: Session):
        self.db = db
        self.repo = TrackerRepository(db)

    def execute(
        self,
        title: str,
        date: str,
        type: str = DEFAULT_RECORD_TYPE,
        description: str | None = None,
        category_id: str | None = None,
        tags: list[str] | None = None,
    ) -> Record:
        if category_id and self.repo.get_category(category_id) is None:
            raise RecordValidationError(f"Category {category_id} not found")

        record = Record(
            id=generate_entity_id(RECORD_ID_PREFIX),
            type=_validate_type(type),
            title=_validate_title(title),
            date=_validate_date(date),
            description=(description or "").strip() or None,
            category_id=category_id or None,
            tags=join_tags(tags or []),
        )
        self.repo.add_record(record)
        self.db.commit()
        return record


class UpdateRecordUseCase:
    def __init__(self, db: Session):
        self.db = db
        self.repo = TrackerRepository(db)

    def execute(
        self,
        record_id: str,
        title: str | None = None,
        date: str | None = None,
        type: str | None = None,
        description: str | None = None,
        category_id: str | None = None,
        tags: list[str] | None = None,
    ) -> Record:
        changes = {}
        if title is not None:
            changes["title"] = _validate_title(title)
        if date is not None:
            changes["date"] = _validate_date(date)
        if type is not None:
            changes["type"] = _validate_type(type)
        if description is not None:
            changes["description"] = description.strip() or None
        if category_id is not None:
            if category_id and self.repo.get_category(category_id) is None:
                raise RecordValidationError(f"Category {category_id} not found")
            changes["category_id"] = category_id or None
        if tags is not None:
            changes["tags"] = join_tags(tags)

        record = self.repo.update_record(record_id, **changes)
        if record is None:
            raise RecordValidationError(f"Record {record_id} not found")
        self.db.commit()
        return record


class DeleteRecordUseCase:
    def __init__(self, db: Session):
        self.db = db
        self.repo = TrackerRepository(db)

    def execute(self, record_id: str) -> None:
        if not self.repo.delete_record(record_id):
            raise RecordValidationError(f"Record {record_id} not found")
        self.db.commit()
