from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role, dispatched once after login."""

    EMPLOYEE = "employee"
    ADMIN = "admin"


class AttendanceStatus(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"
