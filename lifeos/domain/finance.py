"""
Finance domain entity and month-level savings arithmetic.

One FinanceRecord per month (YYYY-MM).
"""
import re
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from lifeos.domain.dates import add_months, format_month

MONTH_RE = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")
AVAILABLE_MONTHS_BACK = 12

_ZERO = Decimal("0")


@dataclass(frozen=True)
class FinanceRecord:
    id: str
    month: str  # YYYY-MM
    income: Decimal = _ZERO
    expense: Decimal = _ZERO
    sip_started: bool = False
    learning_sessions: int = 0


@dataclass(frozen=True)
class YearToDate:
    year: int
    income: Decimal
    expense: Decimal
    savings: Decimal
    savings_rate: float
    months: int


def savings(record: FinanceRecord) -> Decimal:
    return (record.income or _ZERO) - (record.expense or _ZERO)


def savings_rate(record: FinanceRecord) -> float:
    """Savings as % of income; 0 when there is no income."""
    income = record.income or _ZERO
    if income <= 0:
        return 0.0
    return float(savings(record) / income * 100)


def year_to_date(records: list[FinanceRecord], year: int) -> YearToDate:
    prefix = f"{year:04d}-"
    ytd = [r for r in records if r.month.startswith(prefix)]
    income = sum((r.income or _ZERO for r in ytd), _ZERO)
    expense = sum((r.expense or _ZERO for r in ytd), _ZERO)
    rate = float((income - expense) / income * 100) if income > 0 else 0.0
    return YearToDate(
        year=year,
        income=income,
        expense=expense,
        savings=income - expense,
        savings_rate=rate,
        months=len(ytd),
    )


def available_months(today: date, records: list[FinanceRecord]) -> list[str]:
    """Last 12 months up to today's month plus any month present in data, newest first."""
    first_of_month = today.replace(day=1)
    months = {
        format_month(m.year, m.month)
        for m in (add_months(first_of_month, -i) for i in range(AVAILABLE_MONTHS_BACK))
    }
    months.update(r.month for r in records)
    return sorted(months, reverse=True)
