from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..common.validators import require_non_empty
from ..core.enums import Role
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class User:
    """Domain entity: an identity in the directory.

    Note: plain data object, no storage access here.
    """

    user_id: str
    email: str
    name: str
    role: Role
    mobile: Optional[str] = None

    def __post_init__(self):
        require_non_empty(self.user_id, "User id")
        require_non_empty(self.email, "Email")
        require_non_empty(self.name, "Name")
        if not isinstance(self.role, Role):
            raise ValidationError("Invalid role")

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.user_id,
            "email": self.email,
            "name": self.name,
            "role": self.role.value,
            "mobile": self.mobile,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        return cls(
            user_id=str(data["id"]),
            email=data["email"],
            name=data["name"],
            role=Role(data["role"]),
            mobile=data.get("mobile"),
        )
