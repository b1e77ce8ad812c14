"""Tests for date helpers, finance arithmetic and record tags"""
from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from lifeos.domain.dates import add_months, format_date, iter_days, month_bounds, parse_date, sunday_weekday
from lifeos.domain.finance import (
    FinanceRecord, available_months, savings, savings_rate, year_to_date,
)
from lifeos.domain.ids import generate_entity_id
from lifeos.domain.lifecycle import creation_date_from_id
from lifeos.domain.record import Record, join_tags, split_tags


class TestDates:
    def test_format_date_zero_pads(self):
        assert format_date(date(2024, 1, 5)) == "2024-01-05"

    def test_add_months_clamps_day(self):
        assert add_months(date(2024, 3, 31), -1) == date(2024, 2, 29)
        assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
        assert add_months(date(2023, 3, 31), -1) == date(2023, 2, 28)

    def test_add_months_crosses_year(self):
        assert add_months(date(2024, 1, 15), -1) == date(2023, 12, 15)
        assert add_months(date(2024, 1, 15), -24) == date(2022, 1, 15)

    def test_month_bounds(self):
        assert month_bounds(2024, 2) == (date(2024, 2, 1), date(2024, 2, 29))

    def test_iter_days_empty_when_reversed(self):
        assert list(iter_days(date(2024, 1, 2), date(2024, 1, 1))) == []

    def test_sunday_is_zero(self):
        assert sunday_weekday(date(2024, 1, 7)) == 0  # Sunday
        assert sunday_weekday(date(2024, 1, 1)) == 1  # Monday
        assert sunday_weekday(date(2024, 1, 6)) == 6  # Saturday

    def test_parse_date_rejects_trailing_text(self):
        with pytest.raises(ValueError):
            parse_date("2024-01-05xyz")

    def test_parse_date_strips_whitespace(self):
        assert parse_date(" 2024-01-05\n") == date(2024, 1, 5)


class TestEntityIds:
    def test_id_carries_creation_time(self):
        now = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
        track_id = generate_entity_id("track", now)
        prefix, millis, suffix = track_id.split("_")
        assert prefix == "track"
        assert len(suffix) == 9
        assert creation_date_from_id(track_id) == now

    def test_ids_are_unique(self):
        assert len({generate_entity_id("log") for _ in range(50)}) == 50


class TestFinance:
    def _rec(self, month, income, expense) -> FinanceRecord:
        return FinanceRecord(id=f"finance_{month}", month=month, income=Decimal(income), expense=Decimal(expense))

    def test_savings_and_rate(self):
        r = self._rec("2024-01", "1000", "250")
        assert savings(r) == Decimal("750")
        assert savings_rate(r) == 75.0

    def test_rate_zero_without_income(self):
        assert savings_rate(self._rec("2024-01", "0", "100")) == 0.0

    def test_negative_savings(self):
        r = self._rec("2024-01", "100", "150")
        assert savings(r) == Decimal("-50")
        assert savings_rate(r) == -50.0

    def test_year_to_date(self):
        records = [
            self._rec("2023-12", "500", "500"),
            self._rec("2024-01", "1000", "400"),
            self._rec("2024-02", "1000", "600"),
        ]
        ytd = year_to_date(records, 2024)
        assert ytd.income == Decimal("2000")
        assert ytd.expense == Decimal("1000")
        assert ytd.savings == Decimal("1000")
        assert ytd.savings_rate == 50.0
        assert ytd.months == 2

    def test_year_to_date_empty(self):
        ytd = year_to_date([], 2024)
        assert ytd.income == 0
        assert ytd.savings_rate == 0.0

    def test_available_months(self):
        months = available_months(date(2024, 3, 31), [self._rec("2021-06", "1", "1")])
        assert months[0] == "2024-03"
        assert "2023-04" in months
        assert "2023-03" not in months
        assert months[-1] == "2021-06"
        assert len(months) == 13


class TestRecordTags:
    def test_tag_list_strips_blanks(self):
        r = Record(id="record_1", type="book", title="T", date="2024-01-01", tags=" a, b ,, c ")
        assert r.tag_list == ["a", "b", "c"]

    def test_empty_tags(self):
        assert split_tags("") == []
        assert split_tags(None) == []

    def test_join_tags(self):
        assert join_tags(["x ", "", " y"]) == "x,y"
