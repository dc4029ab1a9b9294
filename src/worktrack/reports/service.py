from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

from ..core.constants import UNKNOWN_USER_NAME
from ..core.enums import Role
from ..submissions.model import Submission
from ..submissions.repository import SubmissionRepository
from ..users.model import User
from ..users.repository import UserRepository
from . import aggregation as agg
from .export import export_csv


def submission_row(s: Submission, user_name: str) -> dict:
    """Read-model for tables and JSON responses."""
    return {
        "id": s.submission_id,
        "user_id": s.user_id,
        "user_name": user_name,
        "date": s.work_date.isoformat(),
        "attendance": s.attendance.value,
        "seconds_done": s.seconds_done,
        "duration": agg.format_seconds(s.seconds_done) if s.seconds_done else "-",
        "remarks": s.remarks or "",
        "timestamp": s.timestamp.isoformat(),
    }


@dataclass(frozen=True)
class EmployeeDashboard:
    user_id: str
    name: str
    today: str
    today_submission: Optional[dict]
    form_locked: bool
    weekly_average_seconds: int
    monthly_average_seconds: int
    total_present_seconds: int
    attendance_rate: int

    kind = Role.EMPLOYEE


@dataclass(frozen=True)
class AdminDashboard:
    name: str
    filters: dict
    total_submissions: int
    present_days: int
    total_seconds: int
    total_duration: str
    average_attendance: int
    weekly_average_seconds: int
    monthly_average_seconds: int
    user_stats: list
    attendance_breakdown: list
    recent_submissions: list
    users: list

    kind = Role.ADMIN


Dashboard = Union[EmployeeDashboard, AdminDashboard]


class DashboardService:
    def __init__(self, submissions: SubmissionRepository, users: UserRepository):
        self._submissions = submissions
        self._users = users

    def for_user(
        self,
        user: User,
        *,
        today: date,
        user_filter: Optional[str] = None,
        date_filter: Optional[date] = None,
    ) -> Dashboard:
        """Pick the dashboard variant for the logged-in role (the only role branch)."""
        if user.role == Role.ADMIN:
            return self.admin_dashboard(user, today=today, user_filter=user_filter, date_filter=date_filter)
        return self.employee_dashboard(user, today=today)

    def employee_dashboard(self, user: User, *, today: date) -> EmployeeDashboard:
        mine = agg.for_user(self._submissions.list_all(), user.user_id)
        todays = next((s for s in mine if s.work_date == today), None)
        return EmployeeDashboard(
            user_id=user.user_id,
            name=user.name,
            today=today.isoformat(),
            today_submission=submission_row(todays, user.name) if todays else None,
            form_locked=todays is not None,
            weekly_average_seconds=agg.weekly_average(mine, today),
            monthly_average_seconds=agg.monthly_average(mine, today),
            total_present_seconds=agg.total_present_seconds(mine),
            attendance_rate=agg.attendance_rate(mine),
        )

    def admin_dashboard(
        self,
        user: User,
        *,
        today: date,
        user_filter: Optional[str] = None,
        date_filter: Optional[date] = None,
    ) -> AdminDashboard:
        everything = list(self._submissions.list_all())
        users = list(self._users.list_all())
        names = {u.user_id: u.name for u in users}
        filtered = agg.filter_submissions(everything, user_id=user_filter, on_date=date_filter)
        total_seconds = agg.total_present_seconds(filtered)

        return AdminDashboard(
            name=user.name,
            filters={
                "user_id": user_filter or "all",
                "date": date_filter.isoformat() if date_filter else "",
            },
            total_submissions=len(filtered),
            present_days=len(agg.present_only(filtered)),
            total_seconds=total_seconds,
            total_duration=agg.format_seconds(total_seconds),
            average_attendance=agg.attendance_rate(filtered),
            weekly_average_seconds=agg.weekly_average(filtered, today),
            monthly_average_seconds=agg.monthly_average(filtered, today),
            # charts cover every submission, the table and totals follow the filters
            user_stats=agg.user_stats(everything, users),
            attendance_breakdown=agg.attendance_breakdown(everything),
            recent_submissions=[
                submission_row(s, names.get(s.user_id, UNKNOWN_USER_NAME)) for s in agg.recent_submissions(filtered)
            ],
            users=[u.to_dict() for u in users],
        )

    def chart_data(self) -> dict:
        everything = list(self._submissions.list_all())
        stats = agg.user_stats(everything, self._users.list_all())
        return {
            "bar": {
                "labels": [r["name"] for r in stats],
                "data": [r["total_seconds"] for r in stats],
            },
            "pie": {r["name"].lower(): r["value"] for r in agg.attendance_breakdown(everything)},
        }

    def export(self, *, user_filter: Optional[str] = None, date_filter: Optional[date] = None) -> str:
        filtered = agg.filter_submissions(self._submissions.list_all(), user_id=user_filter, on_date=date_filter)
        return export_csv(filtered, self._users.list_all())
