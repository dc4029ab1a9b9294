from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Optional

from ..common.datetime_utils import parse_iso_date
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class Submission:
    """Domain entity: one user's attendance/work record for one calendar day.

    Invariants enforced at construction:
    - present requires a non-negative integer ``seconds_done``;
    - absent carries neither ``seconds_done`` nor ``remarks``.
    """

    submission_id: str
    user_id: str
    work_date: date
    attendance: AttendanceStatus
    seconds_done: Optional[int]
    remarks: Optional[str]
    timestamp: datetime

    def __post_init__(self):
        if not isinstance(self.attendance, AttendanceStatus):
            raise ValidationError("Invalid attendance status")

        if self.attendance == AttendanceStatus.PRESENT:
            if self.seconds_done is None:
                raise ValidationError("Seconds done is required when present")
            if isinstance(self.seconds_done, bool) or not isinstance(self.seconds_done, int):
                raise ValidationError("Seconds done must be a whole number")
            if self.seconds_done < 0:
                raise ValidationError("Seconds done must not be negative")
        elif self.seconds_done is not None or self.remarks is not None:
            raise ValidationError("An absent entry cannot carry seconds done or remarks")

    @property
    def is_present(self) -> bool:
        return self.attendance == AttendanceStatus.PRESENT

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.submission_id,
            "user_id": self.user_id,
            "date": self.work_date.isoformat(),
            "attendance": self.attendance.value,
            "seconds_done": self.seconds_done,
            "remarks": self.remarks,
            "timestamp": self.timestamp.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Submission":
        return cls(
            submission_id=str(data["id"]),
            user_id=str(data["user_id"]),
            work_date=parse_iso_date(data["date"]),
            attendance=AttendanceStatus(data["attendance"]),
            seconds_done=data.get("seconds_done"),
            remarks=data.get("remarks"),
            timestamp=datetime.fromisoformat(data["timestamp"]),
        )
