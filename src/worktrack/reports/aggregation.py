"""Pure aggregation over submission lists (dashboards and charts).

Nothing here mutates its input.
"""
from __future__ import annotations

import math
from datetime import date
from typing import Dict, Iterable, List, Optional, Sequence

from ..common.datetime_utils import one_month_back, one_week_back
from ..core.constants import DEFAULT_RECENT_LIMIT
from ..submissions.model import Submission
from ..users.model import User


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def present_only(submissions: Iterable[Submission]) -> List[Submission]:
    return [s for s in submissions if s.is_present]


def for_user(submissions: Iterable[Submission], user_id: str) -> List[Submission]:
    return [s for s in submissions if s.user_id == str(user_id)]


def filter_submissions(
    submissions: Iterable[Submission],
    *,
    user_id: Optional[str] = None,
    on_date: Optional[date] = None,
) -> List[Submission]:
    out = list(submissions)
    if user_id:
        out = for_user(out, user_id)
    if on_date:
        out = [s for s in out if s.work_date == on_date]
    return out


def total_present_seconds(submissions: Iterable[Submission]) -> int:
    return sum(s.seconds_done or 0 for s in present_only(submissions))


def attendance_rate(submissions: Sequence[Submission]) -> int:
    """Percentage of present entries, 0 for an empty list."""
    total = len(submissions)
    if total == 0:
        return 0
    return round_half_up(100 * len(present_only(submissions)) / total)


def window_average(submissions: Iterable[Submission], window_start: date) -> int:
    """Mean seconds over present entries dated on/after ``window_start``; 0 when none."""
    qualifying = [s for s in present_only(submissions) if s.work_date >= window_start]
    if not qualifying:
        return 0
    return round_half_up(sum(s.seconds_done or 0 for s in qualifying) / len(qualifying))


def weekly_average(submissions: Iterable[Submission], today: date) -> int:
    return window_average(submissions, one_week_back(today))


def monthly_average(submissions: Iterable[Submission], today: date) -> int:
    return window_average(submissions, one_month_back(today))


def user_stats(submissions: Sequence[Submission], users: Iterable[User]) -> List[Dict]:
    rows = []
    for u in users:
        mine = for_user(submissions, u.user_id)
        rows.append(
            {
                "user_id": u.user_id,
                "name": u.name,
                "total_seconds": total_present_seconds(mine),
                "present_days": len(present_only(mine)),
                "total_days": len(mine),
                "attendance_rate": attendance_rate(mine),
            }
        )
    return rows


def attendance_breakdown(submissions: Sequence[Submission]) -> List[Dict]:
    present = len(present_only(submissions))
    return [
        {"name": "Present", "value": present},
        {"name": "Absent", "value": len(submissions) - present},
    ]


def recent_submissions(submissions: Iterable[Submission], *, limit: int = DEFAULT_RECENT_LIMIT) -> List[Submission]:
    return sorted(submissions, key=lambda s: s.work_date, reverse=True)[:limit]


def format_seconds(seconds: int) -> str:
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    return f"{hours}h {minutes}m"
