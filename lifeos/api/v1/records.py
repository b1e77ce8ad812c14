"""
Memory vault API endpoints
"""
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, field_validator
from sqlalchemy.orm import Session

from lifeos.api.deps import get_db
from lifeos.application.records import CreateRecordUseCase, UpdateRecordUseCase, DeleteRecordUseCase
from lifeos.domain.record import Record, RECORD_TYPES, DEFAULT_RECORD_TYPE
from lifeos.infrastructure.repository import TrackerRepository


router = APIRouter(prefix="/api/v1/records", tags=["records"])


# === Request/Response models ===

def _check_type(v: str | None) -> str | None:
    if v is not None and v not in RECORD_TYPES:
        raise ValueError(f"type must be one of {sorted(RECORD_TYPES)}, got: {v}")
    return v


class CreateRecordRequest(BaseModel):
    title: str
    date: str  # YYYY-MM-DD
    type: str = DEFAULT_RECORD_TYPE
    description: str | None = None
    category_id: str | None = None
    tags: list[str] = []

    @field_validator("type")
    @classmethod
    def validate_type(cls, v: str) -> str:
        return _check_type(v)


class UpdateRecordRequest(BaseModel):
    title: str | None = None
    date: str | None = None
    type: str | None = None
    description: str | None = None
    category_id: str | None = None
    tags: list[str] | None = None

    @field_validator("type")
    @classmethod
    def validate_type(cls, v: str | None) -> str | None:
        return _check_type(v)


class RecordResponse(BaseModel):
    id: str
    type: str
    title: str
    date: str
    description: str | None
    category_id: str | None
    tags: list[str]


def record_response(r: Record) -> RecordResponse:
    return RecordResponse(
        id=r.id,
        type=r.type,
        title=r.title,
        date=r.date,
        description=r.description,
        category_id=r.category_id,
        tags=r.tag_list,
    )


# === Endpoints ===

@router.get("/", response_model=list[RecordResponse])
def list_records(
    db: Session = Depends(get_db),
    category_id: str | None = None,
    type: str | None = None,
):
    """Records, newest first"""
    records = TrackerRepository(db).list_records(category_id=category_id, record_type=type)
    return [record_response(r) for r in records]


@router.post("/", response_model=RecordResponse, status_code=201)
def create_record(req: CreateRecordRequest, db: Session = Depends(get_db)):
    try:
        record = CreateRecordUseCase(db).execute(
            title=req.title,
            date=req.date,
            type=req.type,
            description=req.description,
            category_id=req.category_id,
            tags=req.tags,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return record_response(record)


@router.patch("/{record_id}", response_model=RecordResponse)
def update_record(record_id: str, req: UpdateRecordRequest, db: Session = Depends(get_db)):
    if TrackerRepository(db).get_record(record_id) is None:
        raise HTTPException(status_code=404, detail="Record not found")

    try:
        record = UpdateRecordUseCase(db).execute(
            record_id,
            title=req.title,
            date=req.date,
            type=req.type,
            description=req.description,
            category_id=req.category_id,
            tags=req.tags,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return record_response(record)


@router.delete("/{record_id}")
def delete_record(record_id: str, db: Session = Depends(get_db)):
    if TrackerRepository(db).get_record(record_id) is None:
        raise HTTPException(status_code=404, detail="Record not found")

    DeleteRecordUseCase(db).execute(record_id)
    return {"status": "deleted"}
