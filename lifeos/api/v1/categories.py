"""
Category API endpoints
"""
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, field_validator
from sqlalchemy.orm import Session

from lifeos.api.deps import get_db
from lifeos.application.categories import (
    CreateCategoryUseCase,
    UpdateCategoryUseCase,
    DeleteCategoryUseCase,
    SeedDefaultCategoriesUseCase,
)
from lifeos.domain.category import Category, HEX_COLOR_RE
from lifeos.infrastructure.repository import TrackerRepository


router = APIRouter(prefix="/api/v1/categories", tags=["categories"])


# === Request/Response models ===

def _check_color(v: str | None) -> str | None:
    if v is not None and not HEX_COLOR_RE.match(v):
        raise ValueError(f"color must be #RRGGBB, got: {v}")
    return v


class CreateCategoryRequest(BaseModel):
    name: str
    icon: str | None = None
    color: str | None = None
    weight: int | None = None

    @field_validator("color")
    @classmethod
    def validate_color(cls, v: str | None) -> str | None:
        return _check_color(v)


class UpdateCategoryRequest(BaseModel):
    name: str | None = None
    icon: str | None = None
    color: str | None = None
    weight: int | None = None

    @field_validator("color")
    @classmethod
    def validate_color(cls, v: str | None) -> str | None:
        return _check_color(v)


class CategoryResponse(BaseModel):
    id: str
    name: str
    icon: str
    color: str
    weight: int
    status: str


def category_response(c: Category) -> CategoryResponse:
    return CategoryResponse(id=c.id, name=c.name, icon=c.icon, color=c.color, weight=c.weight, status=c.status)


# === Endpoints ===

@router.get("/", response_model=list[CategoryResponse])
def list_categories(db: Session = Depends(get_db)):
    """All categories, highest weight first"""
    return [category_response(c) for c in TrackerRepository(db).list_categories()]


@router.post("/", response_model=CategoryResponse, status_code=201)
def create_category(req: CreateCategoryRequest, db: Session = Depends(get_db)):
    try:
        category_id = CreateCategoryUseCase(db).execute(
            name=req.name, icon=req.icon, color=req.color, weight=req.weight,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    category = TrackerRepository(db).get_category(category_id)
    if not category:
        raise HTTPException(status_code=500, detail="Category creation failed")
    return category_response(category)


@router.post("/seed")
def seed_default_categories(db: Session = Depends(get_db)):
    """Create the default categories when none exist yet"""
    created = SeedDefaultCategoriesUseCase(db).execute()
    return {"created": created}


@router.patch("/{category_id}", response_model=CategoryResponse)
def update_category(category_id: str, req: UpdateCategoryRequest, db: Session = Depends(get_db)):
    if TrackerRepository(db).get_category(category_id) is None:
        raise HTTPException(status_code=404, detail="Category not found")

    try:
        category = UpdateCategoryUseCase(db).execute(
            category_id, name=req.name, icon=req.icon, color=req.color, weight=req.weight,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return category_response(category)


@router.delete("/{category_id}")
def delete_category(category_id: str, db: Session = Depends(get_db)):
    """Delete a category; its tracks are soft-deleted and their logs kept"""
    if TrackerRepository(db).get_category(category_id) is None:
        raise HTTPException(status_code=404, detail="Category not found")

    deleted_tracks = DeleteCategoryUseCase(db).execute(category_id)
    return {"status": "deleted", "tracks_deleted": deleted_tracks}
