"""Tests for log use cases: upsert semantics, update, delete"""
import pytest

from lifeos.application.categories import CreateCategoryUseCase
from lifeos.application.logs import SaveLogUseCase, UpdateLogUseCase, DeleteLogUseCase, LogValidationError
from lifeos.application.tracks import CreateTrackUseCase
from lifeos.domain.log import Log
from lifeos.infrastructure.repository import TrackerRepository


@pytest.fixture
def track_id(db_session):
    cat_id = CreateCategoryUseCase(db_session).execute(name="Learning")
    return CreateTrackUseCase(db_session).execute(category_id=cat_id, name="Read", type="minutes")


class TestSaveLog:
    def test_creates_log(self, db_session, track_id):
        log = SaveLogUseCase(db_session).execute(track_id=track_id, date="2024-01-05", value=30, note=" ch. 3 ")

        assert log.id.startswith("log_")
        assert log.note == "ch. 3"
        assert TrackerRepository(db_session).list_logs("2024-01-05", "2024-01-05") == [log]

    def test_second_save_updates_same_log(self, db_session, track_id):
        first = SaveLogUseCase(db_session).execute(track_id=track_id, date="2024-01-05", value=30)
        second = SaveLogUseCase(db_session).execute(track_id=track_id, date="2024-01-05", value=45)

        logs = TrackerRepository(db_session).list_logs("2024-01-01", "2024-01-31")
        assert second.id == first.id
        assert [(log.id, log.value) for log in logs] == [(first.id, 45)]

    def test_updates_first_of_duplicates(self, db_session, track_id):
        repo = TrackerRepository(db_session)
        repo.add_log(Log(id="log_a", date="2024-01-05", track_id=track_id, value=10))
        repo.add_log(Log(id="log_b", date="2024-01-05", track_id=track_id, value=20))
        db_session.commit()

        saved = SaveLogUseCase(db_session).execute(track_id=track_id, date="2024-01-05", value=99)

        assert saved.id == "log_a"
        values = {log.id: log.value for log in repo.list_logs_for_track_date(track_id, "2024-01-05")}
        assert values == {"log_a": 99, "log_b": 20}

    def test_trailing_garbage_rejected(self, db_session, track_id):
        for bad in ("2024-01-05xyz", "2024-01-05T10:00:00"):
            with pytest.raises(LogValidationError):
                SaveLogUseCase(db_session).execute(track_id=track_id, date=bad, value=1)

    def test_surrounding_whitespace_ignored(self, db_session, track_id):
        log = SaveLogUseCase(db_session).execute(track_id=track_id, date=" 2024-01-05 ", value=1)
        assert log.date == "2024-01-05"

    @pytest.mark.parametrize("date,value", [("2024-13-01", 1), ("not a date", 1), ("2024-01-05", -1)])
    def test_validation(self, db_session, track_id, date, value):
        with pytest.raises(LogValidationError):
            SaveLogUseCase(db_session).execute(track_id=track_id, date=date, value=value)

    def test_unknown_track(self, db_session):
        with pytest.raises(LogValidationError):
            SaveLogUseCase(db_session).execute(track_id="track_nope", date="2024-01-05", value=1)


class TestUpdateDeleteLog:
    def test_update(self, db_session, track_id):
        log = SaveLogUseCase(db_session).execute(track_id=track_id, date="2024-01-05", value=30)
        updated = UpdateLogUseCase(db_session).execute(log.id, value=60, note="long session")

        assert updated.value == 60
        assert updated.note == "long session"
        assert updated.date == "2024-01-05"

    def test_update_missing(self, db_session):
        with pytest.raises(LogValidationError):
            UpdateLogUseCase(db_session).execute("log_nope", value=1)

    def test_delete(self, db_session, track_id):
        log = SaveLogUseCase(db_session).execute(track_id=track_id, date="2024-01-05", value=30)
        DeleteLogUseCase(db_session).execute(log.id)

        assert TrackerRepository(db_session).get_log(log.id) is None
        with pytest.raises(LogValidationError):
            DeleteLogUseCase(db_session).execute(log.id)
