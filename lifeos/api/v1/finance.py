"""
Finance API endpoints - monthly income/expense snapshots
"""
from datetime import date
from decimal import Decimal

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, field_validator
from sqlalchemy.orm import Session

from lifeos.api.deps import get_db, get_today
from lifeos.application.finance import SaveFinanceRecordUseCase
from lifeos.domain.finance import (
    FinanceRecord,
    MONTH_RE,
    available_months,
    savings,
    savings_rate,
    year_to_date,
)
from lifeos.infrastructure.repository import TrackerRepository


router = APIRouter(prefix="/api/v1/finance", tags=["finance"])


# === Request/Response models ===

class SaveFinanceRequest(BaseModel):
    income: Decimal = Decimal("0")
    expense: Decimal = Decimal("0")
    sip_started: bool = False
    learning_sessions: int = 0

    @field_validator("income", "expense")
    @classmethod
    def validate_amount(cls, v: Decimal) -> Decimal:
        if v < 0:
            raise ValueError("amount must not be negative")
        return v


class FinanceRecordResponse(BaseModel):
    id: str
    month: str
    income: str
    expense: str
    savings: str
    savings_rate: float
    sip_started: bool
    learning_sessions: int


class YearToDateResponse(BaseModel):
    year: int
    income: str
    expense: str
    savings: str
    savings_rate: float
    months: int


class FinanceOverviewResponse(BaseModel):
    month: str
    record: FinanceRecordResponse | None
    year_to_date: YearToDateResponse
    available_months: list[str]


def finance_response(r: FinanceRecord) -> FinanceRecordResponse:
    return FinanceRecordResponse(
        id=r.id,
        month=r.month,
        income=str(r.income),
        expense=str(r.expense),
        savings=str(savings(r)),
        savings_rate=savings_rate(r),
        sip_started=r.sip_started,
        learning_sessions=r.learning_sessions,
    )


def _check_month(month: str) -> None:
    if not MONTH_RE.match(month):
        raise HTTPException(status_code=400, detail=f"month must be YYYY-MM, got: {month}")


# === Endpoints ===

@router.get("/", response_model=list[FinanceRecordResponse])
def list_finance_records(db: Session = Depends(get_db)):
    return [finance_response(r) for r in TrackerRepository(db).list_finance_records()]


@router.get("/{month}", response_model=FinanceOverviewResponse)
def finance_overview(month: str, db: Session = Depends(get_db), today: date = Depends(get_today)):
    """
    Record of a month plus year-to-date totals of that month's year
    and the months selectable in the month picker
    """
    _check_month(month)
    records = TrackerRepository(db).list_finance_records()
    current = next((r for r in records if r.month == month), None)
    ytd = year_to_date(records, int(month[:4]))

    return FinanceOverviewResponse(
        month=month,
        record=finance_response(current) if current else None,
        year_to_date=YearToDateResponse(
            year=ytd.year,
            income=str(ytd.income),
            expense=str(ytd.expense),
            savings=str(ytd.savings),
            savings_rate=ytd.savings_rate,
            months=ytd.months,
        ),
        available_months=available_months(today, records),
    )


@router.put("/{month}", response_model=FinanceRecordResponse)
def save_finance_record(month: str, req: SaveFinanceRequest, db: Session = Depends(get_db)):
    """Create or overwrite the snapshot of a month"""
    _check_month(month)
    try:
        record = SaveFinanceRecordUseCase(db).execute(
            month=month,
            income=req.income,
            expense=req.expense,
            sip_started=req.sip_started,
            learning_sessions=req.learning_sessions,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return finance_response(record)
