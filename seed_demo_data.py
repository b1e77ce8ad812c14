"""
Seed demo data: default categories, a handful of tracks and ~60 days of logs.
Run:  python seed_demo_data.py
"""
import random
from datetime import datetime, timedelta
from decimal import Decimal

from lifeos.config import get_settings
from lifeos.domain.dates import format_date, format_month, add_months
from lifeos.domain.recurrence import is_due
from lifeos.infrastructure.db.session import session_scope
from lifeos.infrastructure.db.models import TrackModel
from lifeos.infrastructure.repository import TrackerRepository
from lifeos.application.categories import SeedDefaultCategoriesUseCase
from lifeos.application.tracks import CreateTrackUseCase
from lifeos.application.logs import SaveLogUseCase
from lifeos.application.finance import SaveFinanceRecordUseCase
from lifeos.application.records import CreateRecordUseCase

DAYS_BACK = 60

# (category name, track name, type, frequency, day_of_week, day_of_month)
DEMO_TRACKS = [
    ("Learning", "Read", "checkbox", "daily", None, None),
    ("Self", "Gym", "checkbox", "weekly", 1, None),
    ("Coding / Content", "Side project", "minutes", "daily", None, None),
    ("Career", "Networking calls", "count", "weekly", 3, None),
    ("Finance", "Review budget", "checkbox", "monthly", None, 31),
]

rng = random.Random(42)
settings = get_settings()
today = datetime.now(settings.tz).date()


def seed(db) -> None:
    repo = TrackerRepository(db)

    # ── Phase 1: categories and tracks ───────────────────────────
    created = SeedDefaultCategoriesUseCase(db).execute()
    print(f"Categories seeded: {created}")

    if repo.list_tracks(include_deleted=True):
        print("Tracks already exist, nothing else to seed")
        return

    cats = {c.name: c.id for c in repo.list_categories()}
    track_ids = []
    for cat_name, name, type_, freq, dow, dom in DEMO_TRACKS:
        track_ids.append(CreateTrackUseCase(db).execute(
            category_id=cats[cat_name], name=name, type=type_,
            frequency=freq, day_of_week=dow, day_of_month=dom,
        ))
    print(f"Tracks created: {len(track_ids)}")

    # Backdate tracks so the history below falls inside their lifetime
    backdated = datetime.combine(today - timedelta(days=DAYS_BACK), datetime.min.time(), tzinfo=settings.tz)
    for track_id in track_ids:
        db.get(TrackModel, track_id).created_at = backdated
    db.commit()

    # ── Phase 2: logs ────────────────────────────────────────────
    log_count = 0
    tracks = repo.list_tracks()
    for i in range(DAYS_BACK, -1, -1):
        d = today - timedelta(days=i)
        for track in tracks:
            if not is_due(track, d) or rng.random() < 0.3:
                continue
            value = 1 if track.type == "checkbox" else rng.randint(1, 90 if track.type == "minutes" else 5)
            SaveLogUseCase(db).execute(track_id=track.id, date=format_date(d), value=value)
            log_count += 1
    print(f"Logs created: {log_count}")

    # ── Phase 3: finance and records ─────────────────────────────
    for i in range(3):
        m = add_months(today.replace(day=1), -i)
        SaveFinanceRecordUseCase(db).execute(
            month=format_month(m.year, m.month),
            income=Decimal(rng.randint(80, 120) * 1000),
            expense=Decimal(rng.randint(40, 90) * 1000),
            sip_started=i == 0,
            learning_sessions=rng.randint(2, 12),
        )

    CreateRecordUseCase(db).execute(
        title="Designing Data-Intensive Applications",
        date=format_date(today - timedelta(days=10)),
        type="book",
        category_id=cats["Learning"],
        tags=["databases", "distributed systems"],
    )
    CreateRecordUseCase(db).execute(
        title="First conference talk",
        date=format_date(today - timedelta(days=25)),
        type="achievement",
        category_id=cats["Career"],
    )
    print("Finance and records seeded")


with session_scope() as db:
    seed(db)
