from __future__ import annotations

from ..core.enums import Role
from .model import User

# Demo directory used when no directory has been persisted yet
DEFAULT_USERS = (
    User(user_id="1", email="admin@company.com", mobile="9876543210", role=Role.ADMIN, name="Admin User"),
    User(user_id="2", email="john@company.com", mobile="9876543211", role=Role.EMPLOYEE, name="John Smith"),
    User(user_id="3", email="jane@company.com", mobile="9876543212", role=Role.EMPLOYEE, name="Jane Doe"),
)
