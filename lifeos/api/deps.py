"""
FastAPI dependencies (DB session, request-scoped "today")
"""
from datetime import date, datetime

from lifeos.config import get_settings
from lifeos.infrastructure.db.session import get_db as _get_db


# Re-export get_db so routers depend on one symbol tests can override
get_db = _get_db


def get_today() -> date:
    """
    Current calendar day in the configured timezone

    Resolved once per request; every stats call of the request uses the same
    value even if the request straddles midnight.

    Usage:
        @router.get("/checklist")
        def checklist(today: date = Depends(get_today)):
            ...
    """
    return datetime.now(get_settings().tz).date()
