from __future__ import annotations

import csv
import io
from typing import Iterable

from ..core.constants import EXPORT_HEADER, UNKNOWN_USER_NAME
from ..submissions.model import Submission
from ..users.model import User


def export_csv(submissions: Iterable[Submission], users: Iterable[User]) -> str:
    """Header row, then date, user name, attendance, seconds (or blank), remarks (or blank)."""
    names = {u.user_id: u.name for u in users}

    out = io.StringIO()
    writer = csv.writer(out, lineterminator="\n")
    writer.writerow(EXPORT_HEADER)
    for s in submissions:
        writer.writerow(
            [
                s.work_date.isoformat(),
                names.get(s.user_id, UNKNOWN_USER_NAME),
                s.attendance.value,
                "" if s.seconds_done is None else s.seconds_done,
                s.remarks or "",
            ]
        )
    return out.getvalue().rstrip("\n")
