"""
Category domain entity

Categories group tracks and records. They are ordered by weight, highest
first.
"""
import re
from dataclasses import dataclass


CATEGORY_STATUS_ACTIVE = "active"
DEFAULT_CATEGORY_WEIGHT = 5
DEFAULT_CATEGORY_ICON = "icon-folder"
DEFAULT_CATEGORY_COLOR = "#64748b"

HEX_COLOR_RE = re.compile(r"^#[0-9a-fA-F]{6}$")

# (name, icon, color, weight) seeded on first start
DEFAULT_CATEGORIES = [
    ("Career", "icon-briefcase", "#3b82f6", 10),
    ("Finance", "icon-wallet", "#10b981", 9),
    ("Coding / Content", "icon-code", "#8b5cf6", 8),
    ("Learning", "icon-book-open", "#f59e0b", 7),
    ("Self", "icon-user", "#ef4444", 6),
    ("Experiments & Opportunities", "icon-flask", "#06b6d4", 5),
    ("Volunteering / Contribution", "icon-heart", "#ec4899", 4),
]


@dataclass(frozen=True)
class Category:
    id: str
    name: str
    icon: str = DEFAULT_CATEGORY_ICON
    color: str = DEFAULT_CATEGORY_COLOR
    weight: int = DEFAULT_CATEGORY_WEIGHT
    status: str = CATEGORY_STATUS_ACTIVE


def sort_by_weight(categories: list[Category]) -> list[Category]:
    """Highest weight first; stable for equal weights."""
    return sorted(categories, key=lambda c: c.weight or 0, reverse=True)
