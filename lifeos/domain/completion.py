"""Completion matcher: does a day's set of logs complete a track?"""
from lifeos.domain.log import Log
from lifeos.domain.track import Track, TRACK_TYPE_CHECKBOX


def is_qualifying_value(track: Track, value) -> bool:
    """checkbox: exactly 1 (a 2 is not a tick); minutes/count: anything positive."""
    if track.type == TRACK_TYPE_CHECKBOX:
        return value == 1
    return value > 0


def is_completed(track: Track, logs_for_date: list[Log]) -> bool:
    # Duplicate logs for one (track, date) are allowed: any qualifying one wins.
    return any(
        log.track_id == track.id and is_qualifying_value(track, log.value)
        for log in logs_for_date
    )
