"""
Entity identifiers: '<prefix>_<epoch millis>_<9 random chars>'

e.g. 'track_1704067200000_k3j9x0abc'. Legacy track rows carry no created_at
column, so lifecycle.creation_date_from_id relies on this layout.
"""
import random
import string
from datetime import datetime, timezone

CATEGORY_ID_PREFIX = "cat"
TRACK_ID_PREFIX = "track"
LOG_ID_PREFIX = "log"
FINANCE_ID_PREFIX = "finance"
RECORD_ID_PREFIX = "record"

_SUFFIX_ALPHABET = string.ascii_lowercase + string.digits
_SUFFIX_LENGTH = 9


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def generate_entity_id(prefix: str, now: datetime | None = None) -> str:
    if now is None:
        now = utc_now()
    millis = int(now.timestamp() * 1000)
    suffix = "".join(random.choices(_SUFFIX_ALPHABET, k=_SUFFIX_LENGTH))
    return f"{prefix}_{millis}_{suffix}"
