"""
Completion statistics over tracks and logs.

Pure functions only: callers fetch tracks/logs/categories first, capture
"today" once, and pass everything in. Nothing here touches the database or
the clock, so results are reproducible for any snapshot.

  daily_stats / monthly_daily_series  - per-day due vs completed counts
  intensity                           - 0..4 heat-map bucket for a day
  track_stats                         - per-track adherence over a range
  monthly_report                      - both of the above for one month
  daily_checklist / day_detail        - what is due / what was logged on a day
  category_breakdown                  - per-category track stats + effort series
"""
from __future__ import annotations

import logging
import math
from collections import defaultdict
from dataclasses import dataclass, replace
from datetime import date, timedelta, tzinfo

from lifeos.domain.category import Category, sort_by_weight
from lifeos.domain.completion import is_completed
from lifeos.domain.dates import add_months, format_date, iter_days, month_bounds, parse_date
from lifeos.domain.lifecycle import is_active
from lifeos.domain.log import Log, logs_in_range
from lifeos.domain.recurrence import is_due
from lifeos.domain.track import Track, TRACK_TYPE_CHECKBOX

logger = logging.getLogger(__name__)

MAX_INTENSITY = 4
UNKNOWN_CATEGORY = "Unknown"
EFFORT_SCALE = 10  # minutes/count are divided by this in effort charts

TIME_RANGE_WEEK = "week"
TIME_RANGE_MONTH = "month"
TIME_RANGE_YEAR = "year"
TIME_RANGE_ALL = "all"
TIME_RANGE_PRESETS = (TIME_RANGE_WEEK, TIME_RANGE_MONTH, TIME_RANGE_YEAR, TIME_RANGE_ALL)
DEFAULT_ALL_TIME_YEARS = 2


# ── Result records ───────────────────────────────────────────────────────────

@dataclass(frozen=True)
class DailyStats:
    date: str
    day: int
    due_count: int
    completed_count: int
    completion_rate: float

    @property
    def intensity(self) -> int:
        return intensity(self.due_count, self.completed_count)


@dataclass(frozen=True)
class TrackStats:
    track_id: str
    track_name: str
    category_id: str | None
    total_logs: int
    days_logged: int
    completed_days: int
    total_due_days: int
    completion_rate: float
    total_effort: int | float
    category_name: str | None = None


@dataclass(frozen=True)
class MonthlySummary:
    avg_completion: float
    perfect_days: int
    missed_days: int
    days_with_logs: int
    total_days: int


@dataclass(frozen=True)
class MonthlyReport:
    year: int
    month: int
    daily_stats: list[DailyStats]
    track_stats: list[TrackStats]
    summary: MonthlySummary

    @property
    def intensities(self) -> list[int]:
        return [d.intensity for d in self.daily_stats]


@dataclass(frozen=True)
class ChecklistItem:
    track: Track
    logs: list[Log]
    completed: bool


@dataclass(frozen=True)
class ChecklistGroup:
    category: Category | None
    items: list[ChecklistItem]


@dataclass(frozen=True)
class DailyChecklist:
    date: str
    groups: list[ChecklistGroup]
    due_count: int
    completed_count: int


@dataclass(frozen=True)
class DayDetailEntry:
    log: Log
    track: Track | None
    category: Category | None


@dataclass(frozen=True)
class DayDetail:
    date: str
    entries: list[DayDetailEntry]
    stats: DailyStats


@dataclass(frozen=True)
class CategoryBreakdown:
    category: Category
    start: str
    end: str
    track_stats: list[TrackStats]
    total_logs: int
    total_effort: int | float
    daily_effort: list[tuple[str, float]]


# ── Helpers ──────────────────────────────────────────────────────────────────

def _rate(done: int, total: int) -> float:
    return done / total * 100 if total > 0 else 0.0


def _group_by_date(logs: list[Log]) -> dict[str, list[Log]]:
    out: dict[str, list[Log]] = defaultdict(list)
    for log in logs:
        out[log.date].append(log)
    return out


def intensity(due_count: int, completed_count: int) -> int:
    """Heat-map bucket 0..4; a day with nothing due is neutral (0), not a failure."""
    if due_count == 0:
        return 0
    level = math.floor(completed_count / due_count * MAX_INTENSITY)
    return max(0, min(MAX_INTENSITY, level))


def resolve_time_range(
    preset: str,
    today: date,
    all_time_years: int = DEFAULT_ALL_TIME_YEARS,
) -> tuple[date, date]:
    """Turn a range preset into inclusive (start, end) dates ending today."""
    if preset == TIME_RANGE_WEEK:
        return today - timedelta(days=6), today
    if preset == TIME_RANGE_MONTH:
        return add_months(today, -1), today
    if preset == TIME_RANGE_YEAR:
        return add_months(today, -12), today
    if preset == TIME_RANGE_ALL:
        return add_months(today, -12 * all_time_years), today
    raise ValueError(f"unknown time range: {preset}")


# ── Daily aggregation ────────────────────────────────────────────────────────

def _stats_for_day(d: date, tracks: list[Track], logs_today: list[Log], tz: tzinfo | None) -> DailyStats:
    due = [t for t in tracks if is_active(t, d, tz) and is_due(t, d)]
    completed = {t.id for t in due if is_completed(t, logs_today)}
    return DailyStats(
        date=format_date(d),
        day=d.day,
        due_count=len(due),
        completed_count=len(completed),
        completion_rate=_rate(len(completed), len(due)),
    )


def daily_stats(d: date, tracks: list[Track], logs: list[Log], tz: tzinfo | None = None) -> DailyStats:
    day_str = format_date(d)
    logs_today = [log for log in logs if log.date == day_str]
    return _stats_for_day(d, tracks, logs_today, tz)


def monthly_daily_series(
    year: int,
    month: int,
    tracks: list[Track],
    logs: list[Log],
    tz: tzinfo | None = None,
) -> list[DailyStats]:
    """One DailyStats per calendar day of the month, in day order."""
    start, end = month_bounds(year, month)
    by_date = _group_by_date(logs_in_range(logs, format_date(start), format_date(end)))
    return [
        _stats_for_day(d, tracks, by_date.get(format_date(d), []), tz)
        for d in iter_days(start, end)
    ]


def summarize_month(series: list[DailyStats]) -> MonthlySummary:
    avg = sum(d.completion_rate for d in series) / len(series) if series else 0.0
    return MonthlySummary(
        avg_completion=avg,
        perfect_days=sum(1 for d in series if d.completion_rate == 100),
        missed_days=sum(1 for d in series if d.completion_rate == 0 and d.due_count > 0),
        days_with_logs=sum(1 for d in series if d.completed_count > 0),
        total_days=sum(1 for d in series if d.due_count > 0),
    )


# ── Track aggregation ────────────────────────────────────────────────────────

def track_stats(
    track: Track,
    start: date,
    end: date,
    logs: list[Log],
    check_lifecycle: bool = False,
    tz: tzinfo | None = None,
) -> TrackStats:
    """
    Adherence of one track over [start, end].

    By default only the recurrence rule gates the denominator, so days after
    a soft delete still count as due. Pass check_lifecycle=True to also
    require the track to be active on each day, as daily_stats does.
    """
    start_str, end_str = format_date(start), format_date(end)
    track_logs = [
        log for log in logs
        if log.track_id == track.id and start_str <= log.date <= end_str
    ]
    by_date = _group_by_date(track_logs)

    total_due_days = 0
    completed_days = 0
    for d in iter_days(start, end):
        if not is_due(track, d):
            continue
        if check_lifecycle and not is_active(track, d, tz):
            continue
        total_due_days += 1
        if is_completed(track, by_date.get(format_date(d), [])):
            completed_days += 1

    return TrackStats(
        track_id=track.id,
        track_name=track.name,
        category_id=track.category_id,
        total_logs=len(track_logs),
        days_logged=len(by_date),
        completed_days=completed_days,
        total_due_days=total_due_days,
        completion_rate=_rate(completed_days, total_due_days),
        total_effort=sum(log.value for log in track_logs),
    )


# ── Monthly report ───────────────────────────────────────────────────────────

def monthly_report(
    year: int,
    month: int,
    tracks: list[Track],
    logs: list[Log],
    categories: list[Category],
    check_lifecycle: bool = False,
    tz: tzinfo | None = None,
) -> MonthlyReport:
    live_tracks = [t for t in tracks if not t.is_deleted]
    start, end = month_bounds(year, month)
    month_logs = logs_in_range(logs, format_date(start), format_date(end))

    series = monthly_daily_series(year, month, live_tracks, month_logs, tz)

    names = {c.id: c.name for c in categories}
    per_track = [
        replace(
            track_stats(t, start, end, month_logs, check_lifecycle=check_lifecycle, tz=tz),
            category_name=names.get(t.category_id, UNKNOWN_CATEGORY),
        )
        for t in live_tracks
    ]

    logger.debug(
        "Monthly report %04d-%02d: %d tracks, %d logs, intensities=%s",
        year, month, len(live_tracks), len(month_logs), [d.intensity for d in series],
    )
    return MonthlyReport(
        year=year,
        month=month,
        daily_stats=series,
        track_stats=per_track,
        summary=summarize_month(series),
    )


# ── Day views ────────────────────────────────────────────────────────────────

def daily_checklist(
    d: date,
    tracks: list[Track],
    logs: list[Log],
    categories: list[Category],
    tz: tzinfo | None = None,
) -> DailyChecklist:
    """Tracks active and due on d, grouped by category (highest weight first)."""
    day_str = format_date(d)
    logs_today = [log for log in logs if log.date == day_str]
    due = [t for t in tracks if is_active(t, d, tz) and is_due(t, d)]

    def _item(t: Track) -> ChecklistItem:
        return ChecklistItem(
            track=t,
            logs=[log for log in logs_today if log.track_id == t.id],
            completed=is_completed(t, logs_today),
        )

    groups: list[ChecklistGroup] = []
    known_ids = set()
    for category in sort_by_weight(categories):
        known_ids.add(category.id)
        items = [_item(t) for t in due if t.category_id == category.id]
        if items:
            groups.append(ChecklistGroup(category=category, items=items))
    orphans = [_item(t) for t in due if t.category_id not in known_ids]
    if orphans:
        groups.append(ChecklistGroup(category=None, items=orphans))

    completed_count = sum(1 for g in groups for i in g.items if i.completed)
    return DailyChecklist(date=day_str, groups=groups, due_count=len(due), completed_count=completed_count)


def day_detail(
    d: date,
    tracks: list[Track],
    logs: list[Log],
    categories: list[Category],
    tz: tzinfo | None = None,
) -> DayDetail:
    """Every log of the day joined to its track and category; deleted tracks included."""
    day_str = format_date(d)
    tracks_by_id = {t.id: t for t in tracks}
    categories_by_id = {c.id: c for c in categories}

    entries = []
    for log in logs:
        if log.date != day_str:
            continue
        track = tracks_by_id.get(log.track_id)
        category = categories_by_id.get(track.category_id) if track else None
        entries.append(DayDetailEntry(log=log, track=track, category=category))

    return DayDetail(date=day_str, entries=entries, stats=daily_stats(d, tracks, logs, tz))


def _effort(track: Track, value) -> float:
    if track.type == TRACK_TYPE_CHECKBOX:
        return value
    return value / EFFORT_SCALE


def category_breakdown(
    category: Category,
    tracks: list[Track],
    logs: list[Log],
    start: date,
    end: date,
    check_lifecycle: bool = False,
    tz: tzinfo | None = None,
) -> CategoryBreakdown:
    cat_tracks = [t for t in tracks if t.category_id == category.id]
    start_str, end_str = format_date(start), format_date(end)
    tracks_by_id = {t.id: t for t in cat_tracks}
    cat_logs = [log for log in logs_in_range(logs, start_str, end_str) if log.track_id in tracks_by_id]

    per_track = [
        replace(
            track_stats(t, start, end, cat_logs, check_lifecycle=check_lifecycle, tz=tz),
            category_name=category.name,
        )
        for t in cat_tracks
    ]

    effort_by_date: dict[str, float] = defaultdict(float)
    for log in cat_logs:
        effort_by_date[log.date] += _effort(tracks_by_id[log.track_id], log.value)

    daily_effort: list[tuple[str, float]] = []
    if effort_by_date:
        first, last = min(effort_by_date), max(effort_by_date)
        for d in iter_days(parse_date(first), parse_date(last)):
            key = format_date(d)
            daily_effort.append((key, effort_by_date.get(key, 0)))

    return CategoryBreakdown(
        category=category,
        start=start_str,
        end=end_str,
        track_stats=per_track,
        total_logs=len(cat_logs),
        total_effort=sum(s.total_effort for s in per_track),
        daily_effort=daily_effort,
    )
