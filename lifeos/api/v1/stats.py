"""
Statistics API endpoints - calendar heat map, day views, reports
"""
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Path, Query
from pydantic import BaseModel
from sqlalchemy.orm import Session

from lifeos.api.deps import get_db, get_today
from lifeos.api.v1.categories import CategoryResponse, category_response
from lifeos.api.v1.logs import LogResponse, log_response
from lifeos.api.v1.tracks import TrackResponse, track_response
from lifeos.application.analytics import DailyStats, TrackStats, TIME_RANGE_MONTH
from lifeos.application.stats import StatsService, StatsNotFoundError
from lifeos.domain.dates import parse_date


router = APIRouter(prefix="/api/v1/stats", tags=["stats"])


# === Response models ===

class DailyStatsResponse(BaseModel):
    date: str
    day: int
    due_count: int
    completed_count: int
    completion_rate: float
    intensity: int


class TrackStatsResponse(BaseModel):
    track_id: str
    track_name: str
    category_id: str | None
    category_name: str | None
    total_logs: int
    days_logged: int
    completed_days: int
    total_due_days: int
    completion_rate: float
    total_effort: float


class CalendarMonthResponse(BaseModel):
    year: int
    month: int
    days: list[DailyStatsResponse]


class MonthlySummaryResponse(BaseModel):
    avg_completion: float
    perfect_days: int
    missed_days: int
    days_with_logs: int
    total_days: int


class MonthlyReportResponse(BaseModel):
    year: int
    month: int
    daily_stats: list[DailyStatsResponse]
    track_stats: list[TrackStatsResponse]
    summary: MonthlySummaryResponse


class ChecklistItemResponse(BaseModel):
    track: TrackResponse
    logs: list[LogResponse]
    completed: bool


class ChecklistGroupResponse(BaseModel):
    category: CategoryResponse | None
    items: list[ChecklistItemResponse]


class ChecklistResponse(BaseModel):
    date: str
    groups: list[ChecklistGroupResponse]
    due_count: int
    completed_count: int


class DayDetailEntryResponse(BaseModel):
    log: LogResponse
    track: TrackResponse | None
    category: CategoryResponse | None


class DayDetailResponse(BaseModel):
    date: str
    entries: list[DayDetailEntryResponse]
    stats: DailyStatsResponse


class EffortPoint(BaseModel):
    date: str
    effort: float


class CategoryBreakdownResponse(BaseModel):
    category: CategoryResponse
    range: str
    start: str
    end: str
    track_stats: list[TrackStatsResponse]
    total_logs: int
    total_effort: float
    daily_effort: list[EffortPoint]


def daily_response(d: DailyStats) -> DailyStatsResponse:
    return DailyStatsResponse(
        date=d.date,
        day=d.day,
        due_count=d.due_count,
        completed_count=d.completed_count,
        completion_rate=d.completion_rate,
        intensity=d.intensity,
    )


def track_stats_response(s: TrackStats) -> TrackStatsResponse:
    return TrackStatsResponse(
        track_id=s.track_id,
        track_name=s.track_name,
        category_id=s.category_id,
        category_name=s.category_name,
        total_logs=s.total_logs,
        days_logged=s.days_logged,
        completed_days=s.completed_days,
        total_due_days=s.total_due_days,
        completion_rate=s.completion_rate,
        total_effort=s.total_effort,
    )


def _parse_day(value: str) -> date:
    try:
        return parse_date(value)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"date must be YYYY-MM-DD, got: {value}")


# === Endpoints ===

@router.get("/calendar/{year}/{month}", response_model=CalendarMonthResponse)
def calendar_month(
    year: int = Path(..., ge=1, le=9999),
    month: int = Path(..., ge=1, le=12),
    db: Session = Depends(get_db),
):
    """Per-day due/completed counts and heat-map intensity (0..4)"""
    days = StatsService(db).calendar_month(year, month)
    return CalendarMonthResponse(year=year, month=month, days=[daily_response(d) for d in days])


@router.get("/day/{day}", response_model=DailyStatsResponse)
def day_stats(day: str, db: Session = Depends(get_db)):
    return daily_response(StatsService(db).day(_parse_day(day)))


@router.get("/day/{day}/detail", response_model=DayDetailResponse)
def day_detail(day: str, db: Session = Depends(get_db)):
    """Every log of the day with its track and category"""
    detail = StatsService(db).day_detail(_parse_day(day))
    return DayDetailResponse(
        date=detail.date,
        entries=[
            DayDetailEntryResponse(
                log=log_response(e.log),
                track=track_response(e.track) if e.track else None,
                category=category_response(e.category) if e.category else None,
            )
            for e in detail.entries
        ],
        stats=daily_response(detail.stats),
    )


@router.get("/checklist", response_model=ChecklistResponse)
def checklist(
    day: str | None = Query(None, alias="date", description="YYYY-MM-DD, defaults to today"),
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    """Tracks due on the day grouped by category, with completion flags"""
    d = _parse_day(day) if day else today
    result = StatsService(db).checklist(d)
    return ChecklistResponse(
        date=result.date,
        groups=[
            ChecklistGroupResponse(
                category=category_response(g.category) if g.category else None,
                items=[
                    ChecklistItemResponse(
                        track=track_response(i.track),
                        logs=[log_response(log) for log in i.logs],
                        completed=i.completed,
                    )
                    for i in g.items
                ],
            )
            for g in result.groups
        ],
        due_count=result.due_count,
        completed_count=result.completed_count,
    )


@router.get("/monthly-report/{year}/{month}", response_model=MonthlyReportResponse)
def monthly_report(
    year: int = Path(..., ge=1, le=9999),
    month: int = Path(..., ge=1, le=12),
    db: Session = Depends(get_db),
):
    report = StatsService(db).monthly_report(year, month)
    s = report.summary
    return MonthlyReportResponse(
        year=report.year,
        month=report.month,
        daily_stats=[daily_response(d) for d in report.daily_stats],
        track_stats=[track_stats_response(t) for t in report.track_stats],
        summary=MonthlySummaryResponse(
            avg_completion=s.avg_completion,
            perfect_days=s.perfect_days,
            missed_days=s.missed_days,
            days_with_logs=s.days_with_logs,
            total_days=s.total_days,
        ),
    )


@router.get("/categories/{category_id}", response_model=CategoryBreakdownResponse)
def category_breakdown(
    category_id: str,
    time_range: str = Query(TIME_RANGE_MONTH, alias="range", description="week | month | year | all"),
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    try:
        breakdown = StatsService(db).category_breakdown(category_id, time_range, today)
    except StatsNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return CategoryBreakdownResponse(
        category=category_response(breakdown.category),
        range=time_range,
        start=breakdown.start,
        end=breakdown.end,
        track_stats=[track_stats_response(t) for t in breakdown.track_stats],
        total_logs=breakdown.total_logs,
        total_effort=breakdown.total_effort,
        daily_effort=[EffortPoint(date=d, effort=e) for d, e in breakdown.daily_effort],
    )
