"""Tests for the SQLite resume store."""

import pytest

from resume_builder.models.resume import ResumeRecord
from resume_builder.store.resume_store import ResumeStore, default_title


@pytest.fixture
def store(tmp_path):
    return ResumeStore(db_path=tmp_path / "resumes.db")


class TestResumeStore:
    def test_create_and_get(self, store, sample_generated_resume):
        record = sample_generated_resume.to_record()
        resume_id = store.create("user-1", "Backend Engineer Resume - Acme", record)

        stored = store.get(resume_id)

        assert stored is not None
        assert stored.user_id == "user-1"
        assert stored.title == "Backend Engineer Resume - Acme"
        assert stored.is_published is True
        assert stored.record == record
        assert stored.record.to_resume() == sample_generated_resume

    def test_get_missing(self, store):
        assert store.get("does-not-exist") is None

    def test_create_unpublished(self, store):
        resume_id = store.create("user-1", "Draft", ResumeRecord(), is_published=False)
        assert store.get(resume_id).is_published is False

    def test_list_for_user_newest_first(self, store):
        first = store.create("user-1", "First", ResumeRecord())
        second = store.create("user-1", "Second", ResumeRecord())
        store.create("user-2", "Other", ResumeRecord())

        store.update(first, ResumeRecord(summary="touched"))

        items = store.list_for_user("user-1")
        assert [item.id for item in items] == [first, second]

    def test_list_for_unknown_user(self, store):
        assert store.list_for_user("nobody") == []

    def test_update_record_and_title(self, store):
        resume_id = store.create("user-1", "Old", ResumeRecord(summary="old"))

        store.update(resume_id, ResumeRecord(summary="new"), title="New")

        stored = store.get(resume_id)
        assert stored.record.summary == "new"
        assert stored.title == "New"
        assert stored.updated_at >= stored.created_at

    def test_update_keeps_title(self, store):
        resume_id = store.create("user-1", "Keep", ResumeRecord())
        store.update(resume_id, ResumeRecord(summary="new"))
        assert store.get(resume_id).title == "Keep"

    def test_update_missing_raises(self, store):
        with pytest.raises(KeyError):
            store.update("does-not-exist", ResumeRecord())

    def test_delete(self, store):
        resume_id = store.create("user-1", "Gone", ResumeRecord())
        assert store.delete(resume_id) is True
        assert store.get(resume_id) is None
        assert store.delete(resume_id) is False

    def test_persists_across_instances(self, tmp_path):
        db_path = tmp_path / "resumes.db"
        resume_id = ResumeStore(db_path=db_path).create("user-1", "Saved", ResumeRecord())
        assert ResumeStore(db_path=db_path).get(resume_id).title == "Saved"


class TestDefaultTitle:
    def test_with_company(self):
        assert default_title("Backend Engineer", "Acme") == "Backend Engineer Resume - Acme"

    def test_without_company(self):
        assert default_title("Backend Engineer", "") == "Backend Engineer Resume"
