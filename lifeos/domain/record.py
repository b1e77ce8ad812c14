"""Record ("memory vault") domain entity - free-form journal entry, not scheduled"""
from dataclasses import dataclass


RECORD_TYPES = frozenset({"book", "course", "movie", "achievement", "idea", "experience", "other"})
DEFAULT_RECORD_TYPE = "book"


@dataclass(frozen=True)
class Record:
    id: str
    type: str
    title: str
    date: str  # YYYY-MM-DD
    description: str | None = None
    category_id: str | None = None
    tags: str = ""  # comma-separated

    @property
    def tag_list(self) -> list[str]:
        return split_tags(self.tags)


def split_tags(tags: str | None) -> list[str]:
    if not tags:
        return []
    return [t.strip() for t in tags.split(",") if t.strip()]


def join_tags(tags: list[str]) -> str:
    return ",".join(t.strip() for t in tags if t.strip())
