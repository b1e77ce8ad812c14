"""
Track API endpoints
"""
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, field_validator
from sqlalchemy.orm import Session

from lifeos.api.deps import get_db
from lifeos.application.tracks import CreateTrackUseCase, DeleteTrackUseCase
from lifeos.domain.lifecycle import get_creation_date
from lifeos.domain.track import Track, FREQ_DAILY, TRACK_TYPE_CHECKBOX, VALID_FREQUENCIES, VALID_TRACK_TYPES
from lifeos.infrastructure.repository import TrackerRepository


router = APIRouter(prefix="/api/v1/tracks", tags=["tracks"])


# === Request/Response models ===

class CreateTrackRequest(BaseModel):
    category_id: str
    name: str
    type: str = TRACK_TYPE_CHECKBOX
    frequency: str = FREQ_DAILY
    day_of_week: int | None = None  # 0=Sunday .. 6=Saturday
    day_of_month: int | None = None  # 1..31

    @field_validator("type")
    @classmethod
    def validate_type(cls, v: str) -> str:
        if v not in VALID_TRACK_TYPES:
            raise ValueError(f"type must be one of {sorted(VALID_TRACK_TYPES)}, got: {v}")
        return v

    @field_validator("frequency")
    @classmethod
    def validate_frequency(cls, v: str) -> str:
        if v not in VALID_FREQUENCIES:
            raise ValueError(f"frequency must be one of {sorted(VALID_FREQUENCIES)}, got: {v}")
        return v


class TrackResponse(BaseModel):
    id: str
    category_id: str | None
    name: str
    type: str
    frequency: str | None
    day_of_week: int | None
    day_of_month: int | None
    created_at: datetime
    deleted_at: datetime | None
    is_deleted: bool


def track_response(t: Track) -> TrackResponse:
    return TrackResponse(
        id=t.id,
        category_id=t.category_id,
        name=t.name,
        type=t.type,
        frequency=t.frequency,
        day_of_week=t.day_of_week,
        day_of_month=t.day_of_month,
        created_at=get_creation_date(t),
        deleted_at=t.deleted_at,
        is_deleted=t.is_deleted,
    )


# === Endpoints ===

@router.get("/", response_model=list[TrackResponse])
def list_tracks(
    db: Session = Depends(get_db),
    category_id: str | None = None,
    include_deleted: bool = False,
):
    tracks = TrackerRepository(db).list_tracks(category_id=category_id, include_deleted=include_deleted)
    return [track_response(t) for t in tracks]


@router.post("/", response_model=TrackResponse, status_code=201)
def create_track(req: CreateTrackRequest, db: Session = Depends(get_db)):
    repo = TrackerRepository(db)
    if repo.get_category(req.category_id) is None:
        raise HTTPException(status_code=404, detail="Category not found")

    try:
        track_id = CreateTrackUseCase(db).execute(
            category_id=req.category_id,
            name=req.name,
            type=req.type,
            frequency=req.frequency,
            day_of_week=req.day_of_week,
            day_of_month=req.day_of_month,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return track_response(repo.get_track(track_id))


@router.delete("/{track_id}", response_model=TrackResponse)
def delete_track(track_id: str, db: Session = Depends(get_db)):
    """Soft delete: the track leaves the checklist, its history stays"""
    if TrackerRepository(db).get_track(track_id) is None:
        raise HTTPException(status_code=404, detail="Track not found")

    try:
        track = DeleteTrackUseCase(db).execute(track_id)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return track_response(track)
