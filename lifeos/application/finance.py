"""Finance use cases - monthly income/expense snapshot"""
from decimal import Decimal

from sqlalchemy.orm import Session

from lifeos.domain.finance import FinanceRecord, MONTH_RE
from lifeos.domain.ids import FINANCE_ID_PREFIX, generate_entity_id
from lifeos.infrastructure.repository import TrackerRepository


class FinanceValidationError(ValueError):
    pass


class SaveFinanceRecordUseCase:
    """
    Use case: save the finance snapshot of a month

    One record per month: an existing record for the month is updated in
    place, otherwise a new one is created.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = TrackerRepository(db)

    def execute(
        self,
        month: str,
        income: Decimal,
        expense: Decimal,
        sip_started: bool = False,
        learning_sessions: int = 0,
    ) -> FinanceRecord:
        if not MONTH_RE.match(month or ""):
            raise FinanceValidationError(f"Month must be YYYY-MM, got: {month}")
        income = Decimal(income)
        expense = Decimal(expense)
        if income < 0 or expense < 0:
            raise FinanceValidationError("Income and expense must not be negative")
        if learning_sessions < 0:
            raise FinanceValidationError("learning_sessions must not be negative")

        existing = self.repo.list_finance_records(month=month)
        if existing:
            record = self.repo.update_finance_record(
                existing[0].id,
                income=income,
                expense=expense,
                sip_started=sip_started,
                learning_sessions=learning_sessions,
            )
        else:
            record = FinanceRecord(
                id=generate_entity_id(FINANCE_ID_PREFIX),
                month=month,
                income=income,
                expense=expense,
                sip_started=sip_started,
                learning_sessions=learning_sessions,
            )
            self.repo.add_finance_record(record)
        self.db.commit()
        return record
