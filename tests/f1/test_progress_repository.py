"""Tests for user_progress repository (F1)."""

import sqlite3

import pytest

from interview_prep.core.models import ProgressStatus, UserProgress
from interview_prep.db import progress_repository
from interview_prep.db.database import get_db


def _progress(user, status=ProgressStatus.IN_PROGRESS, notes="draft", completed_at=None):
    return UserProgress(
        user_id=user.id,
        question_id="q1",
        status=status,
        notes=notes,
        completed_at=completed_at,
    )


class TestGetProgress:
    def test_none_when_never_saved(self, catalog, user):
        assert progress_repository.get_progress(user.id, "q1") is None

    def test_returns_inserted_row(self, catalog, user):
        inserted = progress_repository.insert_progress(_progress(user))

        stored = progress_repository.get_progress(user.id, "q1")
        assert stored is not None
        assert stored.id == inserted.id
        assert stored.status is ProgressStatus.IN_PROGRESS
        assert stored.notes == "draft"


class TestInsertProgress:
    def test_assigns_id(self, catalog, user):
        inserted = progress_repository.insert_progress(_progress(user))
        assert inserted.id

    def test_second_insert_for_same_pair_rejected(self, catalog, user):
        progress_repository.insert_progress(_progress(user))
        with pytest.raises(sqlite3.IntegrityError):
            progress_repository.insert_progress(_progress(user))

    def test_invalid_status_rejected_by_schema(self, catalog, user):
        progress_repository.insert_progress(_progress(user))
        with pytest.raises(sqlite3.IntegrityError):
            with get_db() as conn:
                conn.execute("UPDATE user_progress SET status = 'bogus'")


class TestUpdateProgress:
    def test_updates_in_place(self, catalog, user):
        inserted = progress_repository.insert_progress(_progress(user))

        updated = progress_repository.update_progress(
            inserted.id,
            _progress(
                user,
                status=ProgressStatus.COMPLETED,
                notes="final",
                completed_at="2024-01-02T00:00:00+00:00",
            ),
        )

        assert updated is not None
        assert updated.id == inserted.id
        assert updated.status is ProgressStatus.COMPLETED
        assert updated.notes == "final"
        assert updated.completed_at == "2024-01-02T00:00:00+00:00"

    def test_unknown_id_returns_none(self, catalog, user):
        assert progress_repository.update_progress("missing", _progress(user)) is None


class TestUpsertProgress:
    def test_inserts_when_absent(self, catalog, user):
        stored = progress_repository.upsert_progress(_progress(user))
        assert stored.id
        assert stored.status is ProgressStatus.IN_PROGRESS

    def test_updates_existing_row_keeping_id(self, catalog, user):
        first = progress_repository.upsert_progress(_progress(user))
        second = progress_repository.upsert_progress(
            _progress(user, status=ProgressStatus.COMPLETED, notes="done")
        )

        assert second.id == first.id
        assert second.status is ProgressStatus.COMPLETED
        assert second.notes == "done"
        assert len(progress_repository.list_progress_for_user(user.id)) == 1
