"""SQLite store for saved resumes, keyed by user."""

from __future__ import annotations

import sqlite3
import uuid
from datetime import datetime
from pathlib import Path

from pydantic import BaseModel

from resume_builder.models.resume import ResumeRecord

DEFAULT_DB_PATH = Path.home() / ".resume-builder" / "resumes.db"


class StoredResume(BaseModel):
    id: str
    user_id: str
    title: str
    record: ResumeRecord
    is_published: bool = True
    created_at: datetime
    updated_at: datetime


class ResumeStore:
    """SQLite-backed resume documents with per-user listing."""

    def __init__(self, db_path: str | Path = DEFAULT_DB_PATH):
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _init_db(self) -> None:
        with self._connect() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS resumes (
                    id TEXT PRIMARY KEY,
                    user_id TEXT NOT NULL,
                    title TEXT NOT NULL,
                    record_json TEXT NOT NULL,
                    is_published INTEGER NOT NULL DEFAULT 1,
                    created_at TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            """)
            conn.execute(
                "CREATE INDEX IF NOT EXISTS idx_resumes_user ON resumes (user_id, updated_at)"
            )

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(str(self.db_path))

    def create(
        self,
        user_id: str,
        title: str,
        record: ResumeRecord,
        *,
        is_published: bool = True,
    ) -> str:
        """Insert a resume and return its id."""
        resume_id = str(uuid.uuid4())
        now = datetime.now().isoformat()
        with self._connect() as conn:
            conn.execute(
                """INSERT INTO resumes
                   (id, user_id, title, record_json, is_published, created_at, updated_at)
                   VALUES (?, ?, ?, ?, ?, ?, ?)""",
                (
                    resume_id,
                    user_id,
                    title,
                    record.model_dump_json(),
                    1 if is_published else 0,
                    now,
                    now,
                ),
            )
        return resume_id

    def get(self, resume_id: str) -> StoredResume | None:
        """Get a resume by id, or None if it does not exist."""
        with self._connect() as conn:
            row = conn.execute(
                """SELECT id, user_id, title, record_json, is_published, created_at, updated_at
                   FROM resumes WHERE id = ?""",
                (resume_id,),
            ).fetchone()
        return self._row_to_resume(row) if row else None

    def list_for_user(self, user_id: str) -> list[StoredResume]:
        """List a user's resumes, most recently updated first."""
        with self._connect() as conn:
            rows = conn.execute(
                """SELECT id, user_id, title, record_json, is_published, created_at, updated_at
                   FROM resumes WHERE user_id = ? ORDER BY updated_at DESC""",
                (user_id,),
            ).fetchall()
        return [self._row_to_resume(row) for row in rows]

    def update(self, resume_id: str, record: ResumeRecord, title: str | None = None) -> None:
        """Replace a resume's document (and optionally its title).

        Raises:
            KeyError: If no resume has this id.
        """
        with self._connect() as conn:
            if title is None:
                cursor = conn.execute(
                    "UPDATE resumes SET record_json = ?, updated_at = ? WHERE id = ?",
                    (record.model_dump_json(), datetime.now().isoformat(), resume_id),
                )
            else:
                cursor = conn.execute(
                    "UPDATE resumes SET record_json = ?, title = ?, updated_at = ? WHERE id = ?",
                    (record.model_dump_json(), title, datetime.now().isoformat(), resume_id),
                )
            if cursor.rowcount == 0:
                raise KeyError(resume_id)

    def delete(self, resume_id: str) -> bool:
        """Delete a resume. Returns False if it did not exist."""
        with self._connect() as conn:
            cursor = conn.execute("DELETE FROM resumes WHERE id = ?", (resume_id,))
            return cursor.rowcount > 0

    @staticmethod
    def _row_to_resume(row: tuple) -> StoredResume:
        return StoredResume(
            id=row[0],
            user_id=row[1],
            title=row[2],
            record=ResumeRecord.model_validate_json(row[3]),
            is_published=bool(row[4]),
            created_at=datetime.fromisoformat(row[5]),
            updated_at=datetime.fromisoformat(row[6]),
        )


def default_title(job_title: str, company_name: str) -> str:
    """Title used when saving a generated resume."""
    if company_name:
        return f"{job_title} Resume - {company_name}"
    return f"{job_title} Resume"
