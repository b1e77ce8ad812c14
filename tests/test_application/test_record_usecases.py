"""Tests for memory vault record use cases"""
import pytest

from lifeos.application.categories import CreateCategoryUseCase
from lifeos.application.records import (
    CreateRecordUseCase, UpdateRecordUseCase, DeleteRecordUseCase, RecordValidationError,
)
from lifeos.infrastructure.repository import TrackerRepository


class TestCreateRecord:
    def test_create_with_tags(self, db_session):
        record = CreateRecordUseCase(db_session).execute(
            title=" Dune ", date="2024-02-10", type="book", tags=["sci-fi", " classic ", ""],
        )
        assert record.title == "Dune"
        assert record.tags == "sci-fi,classic"
        assert record.tag_list == ["sci-fi", "classic"]
        assert TrackerRepository(db_session).get_record(record.id) == record

    @pytest.mark.parametrize("kwargs", [
        {"title": ""},
        {"date": "2024-02-30"},
        {"type": "podcast"},
        {"category_id": "cat_nope"},
    ])
    def test_validation(self, db_session, kwargs):
        params = {"title": "Dune", "date": "2024-02-10", **kwargs}
        with pytest.raises(RecordValidationError):
            CreateRecordUseCase(db_session).execute(**params)


class TestListRecords:
    def test_newest_first_and_filters(self, db_session):
        cat_id = CreateCategoryUseCase(db_session).execute(name="Learning")
        uc = CreateRecordUseCase(db_session)
        uc.execute(title="Old book", date="2023-05-01", type="book", category_id=cat_id)
        uc.execute(title="New idea", date="2024-05-01", type="idea")
        uc.execute(title="Course", date="2024-01-01", type="course", category_id=cat_id)

        repo = TrackerRepository(db_session)
        assert [r.title for r in repo.list_records()] == ["New idea", "Course", "Old book"]
        assert [r.title for r in repo.list_records(category_id=cat_id)] == ["Course", "Old book"]
        assert [r.title for r in repo.list_records(record_type="idea")] == ["New idea"]


class TestUpdateDeleteRecord:
    def test_update(self, db_session):
        record = CreateRecordUseCase(db_session).execute(title="Dune", date="2024-02-10")
        updated = UpdateRecordUseCase(db_session).execute(record.id, type="movie", tags=["film"])

        assert updated.type == "movie"
        assert updated.tag_list == ["film"]
        assert updated.title == "Dune"

    def test_clear_category(self, db_session):
        cat_id = CreateCategoryUseCase(db_session).execute(name="Learning")
        record = CreateRecordUseCase(db_session).execute(title="Dune", date="2024-02-10", category_id=cat_id)
        updated = UpdateRecordUseCase(db_session).execute(record.id, category_id="")
        assert updated.category_id is None

    def test_delete(self, db_session):
        record = CreateRecordUseCase(db_session).execute(title="Dune", date="2024-02-10")
        DeleteRecordUseCase(db_session).execute(record.id)

        assert TrackerRepository(db_session).get_record(record.id) is None
        with pytest.raises(RecordValidationError):
            DeleteRecordUseCase(db_session).execute(record.id)

    def test_update_missing(self, db_session):
        with pytest.raises(RecordValidationError):
            UpdateRecordUseCase(db_session).execute("record_nope", title="X")
