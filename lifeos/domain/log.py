"""Log domain entity - one dated observation of effort on a track"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Log:
    id: str
    date: str  # YYYY-MM-DD
    track_id: str
    value: int | float  # 1/0 for checkbox, magnitude for minutes/count
    note: str | None = None


def logs_in_range(logs: list[Log], start: str, end: str) -> list[Log]:
    """Logs with start <= date <= end, compared as ISO strings."""
    return [log for log in logs if start <= log.date <= end]
