from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Submission
from .repository import SubmissionRepository

_COLUMNS = "submission_id, user_id, work_date, attendance, seconds_done, remarks, submitted_at"


def _to_submission(row: dict) -> Submission:
    seconds = row.get("seconds_done")
    return Submission(
        submission_id=str(row["submission_id"]),
        user_id=str(row["user_id"]),
        work_date=row["work_date"],
        attendance=AttendanceStatus(row["attendance"]),
        seconds_done=int(seconds) if seconds is not None else None,
        remarks=row.get("remarks"),
        timestamp=row["submitted_at"],
    )


class MySQLSubmissionRepository(SubmissionRepository):
    """Submissions table with a unique (user_id, work_date) key.

    The upsert is a single ``INSERT ... ON DUPLICATE KEY UPDATE`` so concurrent
    writers for the same key still end up with one row.
    """

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Submission]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM submissions ORDER BY work_date, submitted_at")
            return [_to_submission(r) for r in fetchall(cur)]

    def get_for_user_and_date(self, user_id: str, work_date: date) -> Optional[Submission]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM submissions WHERE user_id=%s AND work_date=%s",
                (str(user_id), work_date),
            )
            row = fetchone(cur)
            return _to_submission(row) if row else None

    def upsert(self, submission: Submission) -> Submission:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO submissions(submission_id, user_id, work_date, attendance, seconds_done, remarks, submitted_at)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    attendance=VALUES(attendance),
                    seconds_done=VALUES(seconds_done),
                    remarks=VALUES(remarks),
                    submitted_at=VALUES(submitted_at)
                """,
                (
                    submission.submission_id,
                    submission.user_id,
                    submission.work_date,
                    submission.attendance.value,
                    submission.seconds_done,
                    submission.remarks,
                    submission.timestamp,
                ),
            )
            cur.execute(
                f"SELECT {_COLUMNS} FROM submissions WHERE user_id=%s AND work_date=%s",
                (submission.user_id, submission.work_date),
            )
            row = fetchone(cur)
            return _to_submission(row) if row else submission
