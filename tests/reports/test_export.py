from __future__ import annotations

from datetime import date, datetime

from worktrack.core.enums import AttendanceStatus, Role
from worktrack.reports.export import export_csv
from worktrack.submissions.model import Submission
from worktrack.users.model import User

JOHN = User(user_id="2", email="john@company.com", name="John Smith", role=Role.EMPLOYEE)


def test_export_single_row():
    subs = [
        Submission(
            submission_id="a",
            user_id="2",
            work_date=date(2024, 1, 1),
            attendance=AttendanceStatus.PRESENT,
            seconds_done=100,
            remarks="ok",
            timestamp=datetime(2024, 1, 1, 9, 0),
        )
    ]

    lines = export_csv(subs, [JOHN]).split("\n")

    assert lines == ["Date,User,Attendance,Seconds Done,Remarks", "2024-01-01,John Smith,present,100,ok"]


def test_export_blanks_and_unknown_user():
    subs = [
        Submission(
            submission_id="b",
            user_id="2",
            work_date=date(2024, 1, 2),
            attendance=AttendanceStatus.ABSENT,
            seconds_done=None,
            remarks=None,
            timestamp=datetime(2024, 1, 2, 9, 0),
        ),
        Submission(
            submission_id="c",
            user_id="77",
            work_date=date(2024, 1, 2),
            attendance=AttendanceStatus.PRESENT,
            seconds_done=0,
            remarks=None,
            timestamp=datetime(2024, 1, 2, 9, 0),
        ),
    ]

    lines = export_csv(subs, [JOHN]).split("\n")

    assert lines[1] == "2024-01-02,John Smith,absent,,"
    assert lines[2] == "2024-01-02,Unknown User,present,0,"


def test_export_header_only_when_empty():
    assert export_csv([], [JOHN]) == "Date,User,Attendance,Seconds Done,Remarks"
