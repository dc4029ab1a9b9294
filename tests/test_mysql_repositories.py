from __future__ import annotations

from datetime import date, datetime

from worktrack.core.enums import AttendanceStatus, Role
from worktrack.submissions.model import Submission
from worktrack.submissions.mysql_submission_repository import MySQLSubmissionRepository
from worktrack.users.mysql_user_repository import MySQLUserRepository


class FakeCursor:
    def __init__(self, rows):
        self._rows = list(rows)
        self.executed = []
        self.rowcount = 0

    def execute(self, sql, params=None):
        self.executed.append((" ".join(sql.split()), params))
        self.rowcount = 1

    def fetchone(self):
        return self._rows.pop(0) if self._rows else None

    def fetchall(self):
        rows, self._rows = self._rows, []
        return rows

    def close(self):
        pass


class FakeConnection:
    def __init__(self, cursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False

    def cursor(self, dictionary=True):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        pass


class FakeConnFactory:
    def __init__(self, rows=()):
        self.cursor = FakeCursor(rows)
        self.connection = FakeConnection(self.cursor)

    def connect(self, *, with_database=True):
        return self.connection


def test_submission_upsert_uses_unique_key_update():
    stored_row = {
        "submission_id": "old-id",
        "user_id": "2",
        "work_date": date(2024, 1, 10),
        "attendance": "absent",
        "seconds_done": None,
        "remarks": None,
        "submitted_at": datetime(2024, 1, 10, 12, 0),
    }
    factory = FakeConnFactory([stored_row])
    repo = MySQLSubmissionRepository(factory)

    result = repo.upsert(
        Submission(
            submission_id="new-id",
            user_id="2",
            work_date=date(2024, 1, 10),
            attendance=AttendanceStatus.ABSENT,
            seconds_done=None,
            remarks=None,
            timestamp=datetime(2024, 1, 10, 12, 0),
        )
    )

    insert_sql, params = factory.cursor.executed[0]
    assert "ON DUPLICATE KEY UPDATE" in insert_sql
    assert params[:4] == ("new-id", "2", date(2024, 1, 10), "absent")
    assert result.submission_id == "old-id"
    assert factory.connection.committed


def test_user_lookup_by_email_or_mobile():
    factory = FakeConnFactory(
        [{"user_id": "2", "email": "john@company.com", "name": "John Smith", "role": "employee", "mobile": "9876543211"}]
    )
    repo = MySQLUserRepository(factory)

    user = repo.get_by_identifier("9876543211")

    sql, params = factory.cursor.executed[0]
    assert "WHERE email=%s OR mobile=%s" in sql
    assert params == ("9876543211", "9876543211")
    assert user.role == Role.EMPLOYEE and user.name == "John Smith"


def test_user_delete_reports_rowcount():
    factory = FakeConnFactory()

    assert MySQLUserRepository(factory).delete_by_id("3") is True
    assert factory.cursor.executed[0] == ("DELETE FROM users WHERE user_id=%s", ("3",))
