"""Tests for track lifecycle: creation date recovery and active-on-day checks"""
from datetime import date, datetime, timezone, timedelta
from zoneinfo import ZoneInfo

from lifeos.domain.lifecycle import EPOCH, creation_date_from_id, get_creation_date, is_active
from lifeos.domain.track import Track, Active, Deleted

JAN_1_2024_MS = 1704067200000  # 2024-01-01T00:00:00Z


def _track(track_id=f"track_{JAN_1_2024_MS}_abc123xyz", **kwargs) -> Track:
    return Track(id=track_id, category_id="cat_1", name="Read", **kwargs)


class TestCreationDateFromId:
    def test_parses_millis_segment(self):
        assert creation_date_from_id(f"track_{JAN_1_2024_MS}_abc") == datetime(2024, 1, 1, tzinfo=timezone.utc)

    def test_no_separator_falls_back_to_epoch(self):
        assert creation_date_from_id("track") == EPOCH

    def test_non_numeric_segment_falls_back_to_epoch(self):
        assert creation_date_from_id("track_abc_def") == EPOCH

    def test_leading_digits_are_used(self):
        assert creation_date_from_id("track_1000xyz_abc") == EPOCH + timedelta(seconds=1)

    def test_huge_number_falls_back_to_epoch(self):
        assert creation_date_from_id("track_" + "9" * 40 + "_abc") == EPOCH

    def test_explicit_created_at_wins(self):
        created = datetime(2023, 6, 1, 12, 0, tzinfo=timezone.utc)
        assert get_creation_date(_track(created_at=created)) == created

    def test_id_used_without_created_at(self):
        assert get_creation_date(_track()) == datetime(2024, 1, 1, tzinfo=timezone.utc)


class TestIsActive:
    def test_not_active_before_creation(self):
        assert not is_active(_track(), date(2023, 12, 31))

    def test_active_on_creation_day(self):
        assert is_active(_track(), date(2024, 1, 1))

    def test_active_forever_when_not_deleted(self):
        track = _track(lifecycle=Active())
        assert is_active(track, date(2030, 1, 1))

    def test_deleted_boundary(self):
        deleted = Deleted(at=datetime(2024, 1, 10, 15, 30, tzinfo=timezone.utc))
        track = _track(lifecycle=deleted)
        assert is_active(track, date(2024, 1, 9))
        assert not is_active(track, date(2024, 1, 10))
        assert not is_active(track, date(2024, 1, 11))

    def test_active_exactly_between_creation_and_deletion(self):
        track = _track(
            created_at=datetime(2024, 1, 5, 8, 0, tzinfo=timezone.utc),
            lifecycle=Deleted(at=datetime(2024, 1, 8, 9, 0, tzinfo=timezone.utc)),
        )
        active = [d for d in range(1, 15) if is_active(track, date(2024, 1, d))]
        assert active == [5, 6, 7]

    def test_created_and_deleted_same_day_never_active(self):
        track = _track(
            created_at=datetime(2024, 1, 5, 8, 0, tzinfo=timezone.utc),
            lifecycle=Deleted(at=datetime(2024, 1, 5, 20, 0, tzinfo=timezone.utc)),
        )
        assert not is_active(track, date(2024, 1, 5))

    def test_naive_instants_are_utc(self):
        track = _track(created_at=datetime(2024, 1, 5, 23, 0))
        assert not is_active(track, date(2024, 1, 4))
        assert is_active(track, date(2024, 1, 5))

    def test_timezone_shifts_creation_day(self):
        # 2024-01-05 23:00 UTC is already 2024-01-06 in Tokyo
        track = _track(created_at=datetime(2024, 1, 5, 23, 0, tzinfo=timezone.utc))
        tokyo = ZoneInfo("Asia/Tokyo")
        assert not is_active(track, date(2024, 1, 5), tokyo)
        assert is_active(track, date(2024, 1, 6), tokyo)

    def test_timestamp_near_datetime_limit_does_not_raise(self):
        # 9999-12-31T23:59:59Z: shifting to Tokyo leaves the datetime range
        track = _track(track_id="track_253402300799000_x")
        assert not is_active(track, date(2024, 1, 1), ZoneInfo("Asia/Tokyo"))
        assert is_active(track, date(9999, 12, 31), ZoneInfo("Asia/Tokyo"))

    def test_track_properties(self):
        at = datetime(2024, 2, 1, tzinfo=timezone.utc)
        assert _track(lifecycle=Deleted(at=at)).is_deleted
        assert _track(lifecycle=Deleted(at=at)).deleted_at == at
        assert not _track().is_deleted
        assert _track().deleted_at is None
