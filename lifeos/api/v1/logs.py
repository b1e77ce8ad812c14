"""
Log API endpoints
"""
from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, field_validator
from sqlalchemy.orm import Session

from lifeos.api.deps import get_db
from lifeos.application.logs import SaveLogUseCase, UpdateLogUseCase, DeleteLogUseCase
from lifeos.domain.dates import format_date, parse_date
from lifeos.domain.log import Log
from lifeos.infrastructure.repository import TrackerRepository


router = APIRouter(prefix="/api/v1/logs", tags=["logs"])


# === Request/Response models ===

class SaveLogRequest(BaseModel):
    track_id: str
    date: str  # YYYY-MM-DD
    value: int
    note: str | None = None

    @field_validator("date")
    @classmethod
    def validate_date(cls, v: str) -> str:
        return format_date(parse_date(v))

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: int) -> int:
        if v < 0:
            raise ValueError("value must not be negative")
        return v


class UpdateLogRequest(BaseModel):
    value: int | None = None
    note: str | None = None


class LogResponse(BaseModel):
    id: str
    date: str
    track_id: str
    value: int
    note: str | None


def log_response(log: Log) -> LogResponse:
    return LogResponse(id=log.id, date=log.date, track_id=log.track_id, value=log.value, note=log.note)


# === Endpoints ===

@router.get("/", response_model=list[LogResponse])
def list_logs(
    start: str = Query(..., description="YYYY-MM-DD, inclusive"),
    end: str = Query(..., description="YYYY-MM-DD, inclusive"),
    db: Session = Depends(get_db),
):
    try:
        start, end = format_date(parse_date(start)), format_date(parse_date(end))
    except ValueError:
        raise HTTPException(status_code=400, detail="start and end must be YYYY-MM-DD")
    return [log_response(log) for log in TrackerRepository(db).list_logs(start, end)]


@router.post("/", response_model=LogResponse)
def save_log(req: SaveLogRequest, db: Session = Depends(get_db)):
    """Upsert the log of a track for a day"""
    if TrackerRepository(db).get_track(req.track_id) is None:
        raise HTTPException(status_code=404, detail="Track not found")

    try:
        log = SaveLogUseCase(db).execute(track_id=req.track_id, date=req.date, value=req.value, note=req.note)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return log_response(log)


@router.patch("/{log_id}", response_model=LogResponse)
def update_log(log_id: str, req: UpdateLogRequest, db: Session = Depends(get_db)):
    if TrackerRepository(db).get_log(log_id) is None:
        raise HTTPException(status_code=404, detail="Log not found")

    try:
        log = UpdateLogUseCase(db).execute(log_id, value=req.value, note=req.note)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return log_response(log)


@router.delete("/{log_id}")
def delete_log(log_id: str, db: Session = Depends(get_db)):
    if TrackerRepository(db).get_log(log_id) is None:
        raise HTTPException(status_code=404, detail="Log not found")

    DeleteLogUseCase(db).execute(log_id)
    return {"status": "deleted"}
