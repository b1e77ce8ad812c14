"""
Category use cases - create, edit, delete and first-run seeding

Deleting a category soft-deletes its tracks first, so their log history
keeps counting on past calendar days.
"""
import logging

from sqlalchemy.orm import Session

from lifeos.domain.category import (
    Category,
    CATEGORY_STATUS_ACTIVE,
    DEFAULT_CATEGORIES,
    DEFAULT_CATEGORY_COLOR,
    DEFAULT_CATEGORY_ICON,
    DEFAULT_CATEGORY_WEIGHT,
    HEX_COLOR_RE,
)
from lifeos.domain.ids import CATEGORY_ID_PREFIX, generate_entity_id, utc_now
from lifeos.infrastructure.repository import TrackerRepository

logger = logging.getLogger(__name__)


class CategoryValidationError(ValueError):
    pass


def _validate_color(color: str) -> str:
    if not HEX_COLOR_RE.match(color):
        raise CategoryValidationError(f"Color must be #RRGGBB, got: {color}")
    return color


def _validate_weight(weight: int) -> int:
    if weight < 0:
        raise CategoryValidationError("Weight must not be negative")
    return weight


class CreateCategoryUseCase:
    """Use case: create a category"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = TrackerRepository(db)

    def execute(
        self,
        name: str,
        icon: str | None = None,
        color: str | None = None,
        weight: int | None = None,
        commit: bool = True,
    ) -> str:
        name = (name or "").strip()
        if not name:
            raise CategoryValidationError("Category name must not be empty")

        category = Category(
            id=generate_entity_id(CATEGORY_ID_PREFIX),
            name=name,
            icon=(icon or "").strip() or DEFAULT_CATEGORY_ICON,
            color=_validate_color(color or DEFAULT_CATEGORY_COLOR),
            weight=_validate_weight(DEFAULT_CATEGORY_WEIGHT if weight is None else weight),
            status=CATEGORY_STATUS_ACTIVE,
        )
        self.repo.add_category(category)
        if commit:
            self.db.commit()
        return category.id


class UpdateCategoryUseCase:
    def __init__(self, db: Session):
        self.db = db
        self.repo = TrackerRepository(db)

    def execute(
        self,
        category_id: str,
        name: str | None = None,
        icon: str | None = None,
        color: str | None = None,
        weight: int | None = None,
    ) -> Category:
        changes = {}
        if name is not None:
            name = name.strip()
            if not name:
                raise CategoryValidationError("Category name must not be empty")
            changes["name"] = name
        if icon is not None:
            changes["icon"] = icon.strip() or DEFAULT_CATEGORY_ICON
        if color is not None:
            changes["color"] = _validate_color(color)
        if weight is not None:
            changes["weight"] = _validate_weight(weight)

        category = self.repo.update_category(category_id, **changes)
        if category is None:
            raise CategoryValidationError(f"Category {category_id} not found")
        self.db.commit()
        return category


class DeleteCategoryUseCase:
    """
    Use case: delete a category

    The category's live tracks are soft-deleted with the same timestamp;
    their logs stay in place.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = TrackerRepository(db)

    def execute(self, category_id: str) -> int:
        """Returns the number of tracks that were soft-deleted."""
        if self.repo.get_category(category_id) is None:
            raise CategoryValidationError(f"Category {category_id} not found")

        now = utc_now()
        tracks = self.repo.list_tracks(category_id=category_id)
        for track in tracks:
            self.repo.soft_delete_track(track.id, now)
        self.repo.delete_category(category_id)
        self.db.commit()

        logger.info("Deleted category %s (%d tracks soft-deleted)", category_id, len(tracks))
        return len(tracks)


class SeedDefaultCategoriesUseCase:
    """
    Use case: create the default categories on first start

    Does nothing when any category already exists.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = TrackerRepository(db)
        self.create_use_case = CreateCategoryUseCase(db)

    def execute(self) -> int:
        if self.repo.count_categories() > 0:
            return 0

        for name, icon, color, weight in DEFAULT_CATEGORIES:
            self.create_use_case.execute(name=name, icon=icon, color=color, weight=weight, commit=False)
        self.db.commit()

        logger.info("Seeded %d default categories", len(DEFAULT_CATEGORIES))
        return len(DEFAULT_CATEGORIES)
