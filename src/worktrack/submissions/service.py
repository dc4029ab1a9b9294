from __future__ import annotations

import uuid
from datetime import date, datetime
from typing import Callable, Optional, Union

from ..common.validators import optional_text, require_non_empty, require_non_negative_int
from ..core.enums import AttendanceStatus
from ..core.exceptions import SubmissionLockedError, ValidationError
from .model import Submission
from .repository import SubmissionRepository


class SubmissionService:
    """Use case: the daily work entry (one per user per day, upsert)."""

    def __init__(
        self,
        submissions: SubmissionRepository,
        *,
        id_factory: Optional[Callable[[], str]] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._submissions = submissions
        self._new_id = id_factory or (lambda: uuid.uuid4().hex)
        self._clock = clock or datetime.now

    def get_today(self, user_id: str, today: date) -> Optional[Submission]:
        return self._submissions.get_for_user_and_date(str(user_id), today)

    def has_submitted_today(self, user_id: str, today: date) -> bool:
        return self.get_today(user_id, today) is not None

    def submit(
        self,
        user_id: str,
        work_date: date,
        attendance: Union[AttendanceStatus, str, None],
        seconds_done: Union[int, str, None] = None,
        remarks: Optional[str] = None,
        *,
        now: Optional[datetime] = None,
    ) -> Submission:
        user_id = require_non_empty(str(user_id) if user_id is not None else "", "User")
        if not attendance:
            raise ValidationError("Please select attendance status")
        try:
            status = AttendanceStatus(attendance)
        except ValueError:
            raise ValidationError("Invalid attendance status")

        if status == AttendanceStatus.PRESENT:
            seconds = require_non_negative_int(seconds_done, "Seconds done")
            note = optional_text(remarks)
        else:
            # absent discards work fields whatever was sent
            seconds = None
            note = None

        submission = Submission(
            submission_id=self._new_id(),
            user_id=user_id,
            work_date=work_date,
            attendance=status,
            seconds_done=seconds,
            remarks=note,
            timestamp=now or self._clock(),
        )
        return self._submissions.upsert(submission)

    def submit_today(
        self,
        user_id: str,
        attendance: Union[AttendanceStatus, str, None],
        seconds_done: Union[int, str, None] = None,
        remarks: Optional[str] = None,
        *,
        now: Optional[datetime] = None,
    ) -> Submission:
        """The employee form: locked once today's entry exists."""
        now = now or self._clock()
        if self.has_submitted_today(user_id, now.date()):
            raise SubmissionLockedError("You have already submitted your work entry for today")
        return self.submit(user_id, now.date(), attendance, seconds_done, remarks, now=now)
