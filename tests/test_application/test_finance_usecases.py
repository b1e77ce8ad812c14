"""Tests for the monthly finance snapshot use case"""
from decimal import Decimal

import pytest

from lifeos.application.finance import SaveFinanceRecordUseCase, FinanceValidationError
from lifeos.infrastructure.repository import TrackerRepository


class TestSaveFinanceRecord:
    def test_create(self, db_session):
        record = SaveFinanceRecordUseCase(db_session).execute(
            month="2024-01", income=Decimal("1000"), expense=Decimal("400"), sip_started=True,
        )
        records = TrackerRepository(db_session).list_finance_records()

        assert record.id.startswith("finance_")
        assert len(records) == 1
        assert records[0].income == Decimal("1000")
        assert records[0].sip_started is True

    def test_upsert_by_month(self, db_session):
        uc = SaveFinanceRecordUseCase(db_session)
        first = uc.execute(month="2024-01", income=Decimal("1000"), expense=Decimal("400"))
        second = uc.execute(month="2024-01", income=Decimal("1200"), expense=Decimal("500"), learning_sessions=4)

        records = TrackerRepository(db_session).list_finance_records(month="2024-01")
        assert second.id == first.id
        assert len(records) == 1
        assert records[0].expense == Decimal("500")
        assert records[0].learning_sessions == 4

    def test_list_ordered_by_month(self, db_session):
        uc = SaveFinanceRecordUseCase(db_session)
        for month in ("2024-03", "2023-12", "2024-01"):
            uc.execute(month=month, income=Decimal("1"), expense=Decimal("1"))

        months = [r.month for r in TrackerRepository(db_session).list_finance_records()]
        assert months == ["2023-12", "2024-01", "2024-03"]

    @pytest.mark.parametrize("month,income,expense", [
        ("2024-1", "1", "1"),
        ("2024-13", "1", "1"),
        ("24-01", "1", "1"),
        ("2024-01", "-1", "1"),
        ("2024-01", "1", "-0.01"),
    ])
    def test_validation(self, db_session, month, income, expense):
        with pytest.raises(FinanceValidationError):
            SaveFinanceRecordUseCase(db_session).execute(
                month=month, income=Decimal(income), expense=Decimal(expense),
            )
