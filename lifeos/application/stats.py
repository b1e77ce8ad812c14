"""
Stats service - read side over the tracker tables

Loads snapshots through TrackerRepository and hands them to the pure
functions in lifeos.application.analytics. No writes, no commits.

"Today" is never read here: callers capture it once (in the configured
timezone) and pass it in, so one request sees one consistent day.
"""
import logging
from datetime import date

from sqlalchemy.orm import Session

from lifeos.application import analytics
from lifeos.application.analytics import (
    CategoryBreakdown,
    DailyChecklist,
    DailyStats,
    DayDetail,
    MonthlyReport,
)
from lifeos.config import Settings, get_settings
from lifeos.domain.dates import format_date, month_bounds
from lifeos.infrastructure.repository import TrackerRepository

logger = logging.getLogger(__name__)


class StatsNotFoundError(LookupError):
    pass


class StatsService:
    def __init__(self, db: Session, settings: Settings | None = None):
        self.db = db
        self.repo = TrackerRepository(db)
        self.settings = settings or get_settings()

    @property
    def tz(self):
        return self.settings.tz

    def _month_logs(self, year: int, month: int):
        start, end = month_bounds(year, month)
        return self.repo.list_logs(format_date(start), format_date(end))

    def _day_logs(self, d: date):
        day_str = format_date(d)
        return self.repo.list_logs(day_str, day_str)

    # ------------------------------------------------------------------
    # Calendar
    # ------------------------------------------------------------------

    def calendar_month(self, year: int, month: int) -> list[DailyStats]:
        """
        Heat-map series for a month

        Deleted tracks are included: they still count on days before their
        deletion.
        """
        tracks = self.repo.list_tracks(include_deleted=True)
        return analytics.monthly_daily_series(year, month, tracks, self._month_logs(year, month), self.tz)

    def day(self, d: date) -> DailyStats:
        tracks = self.repo.list_tracks(include_deleted=True)
        return analytics.daily_stats(d, tracks, self._day_logs(d), self.tz)

    # ------------------------------------------------------------------
    # Day views
    # ------------------------------------------------------------------

    def checklist(self, d: date) -> DailyChecklist:
        tracks = self.repo.list_tracks(include_deleted=True)
        categories = self.repo.list_categories()
        return analytics.daily_checklist(d, tracks, self._day_logs(d), categories, self.tz)

    def day_detail(self, d: date) -> DayDetail:
        tracks = self.repo.list_tracks(include_deleted=True)
        categories = self.repo.list_categories()
        return analytics.day_detail(d, tracks, self._day_logs(d), categories, self.tz)

    # ------------------------------------------------------------------
    # Reports
    # ------------------------------------------------------------------

    def monthly_report(self, year: int, month: int) -> MonthlyReport:
        tracks = self.repo.list_tracks(include_deleted=True)
        categories = self.repo.list_categories()
        report = analytics.monthly_report(
            year,
            month,
            tracks,
            self._month_logs(year, month),
            categories,
            check_lifecycle=self.settings.TRACK_STATS_CHECK_LIFECYCLE,
            tz=self.tz,
        )
        logger.info(
            "Monthly report %04d-%02d: avg completion %.1f%%, %d perfect days",
            year, month, report.summary.avg_completion, report.summary.perfect_days,
        )
        return report

    def category_breakdown(self, category_id: str, time_range: str, today: date) -> CategoryBreakdown:
        """
        Per-track adherence and effort series for one category

        Raises:
            StatsNotFoundError: unknown category
            ValueError: unknown time range preset
        """
        category = self.repo.get_category(category_id)
        if category is None:
            raise StatsNotFoundError(f"Category {category_id} not found")

        start, end = analytics.resolve_time_range(time_range, today, self.settings.ALL_TIME_RANGE_YEARS)
        tracks = self.repo.list_tracks(category_id=category_id)
        logs = self.repo.list_logs(format_date(start), format_date(end))
        return analytics.category_breakdown(
            category,
            tracks,
            logs,
            start,
            end,
            check_lifecycle=self.settings.TRACK_STATS_CHECK_LIFECYCLE,
            tz=self.tz,
        )
