from __future__ import annotations

import uuid
from typing import Callable, Optional, Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..auth.session_store import SessionStore
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_SHARED_PASSWORD
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, ValidationError
from .model import User
from .repository import UserRepository

INVALID_CREDENTIALS = "Invalid credentials"


class AuthService:
    """Use case: log in / log out against the directory.

    Every identity shares one development password; this is a stand-in for
    real credential verification, not a security mechanism.
    """

    def __init__(self, users: UserRepository, sessions: SessionStore, *, shared_password: str = DEFAULT_SHARED_PASSWORD):
        self._users = users
        self._sessions = sessions
        self._password_hash = generate_password_hash(shared_password)

    def authenticate(self, identifier: str, password: str) -> User:
        if not isinstance(identifier, str) or not isinstance(password, str):
            raise AuthenticationError(INVALID_CREDENTIALS)

        identifier = identifier.strip()
        user = self._users.get_by_identifier(identifier) if identifier else None
        if not user:
            raise AuthenticationError(INVALID_CREDENTIALS)

        if not password or not check_password_hash(self._password_hash, password):
            raise AuthenticationError(INVALID_CREDENTIALS)

        return user

    def login(self, identifier: str, password: str, remember: bool = False) -> User:
        user = self.authenticate(identifier, password)
        self._sessions.save(user, remember=bool(remember))
        return user

    def logout(self) -> None:
        self._sessions.clear()

    def current_user(self) -> Optional[User]:
        return self._sessions.load()

    def require_admin(self, user: User) -> User:
        if user.role != Role.ADMIN:
            raise AuthorizationError("Admins only")
        return user


class UserService:
    """Use case: manage the directory (admin)."""

    def __init__(self, users: UserRepository, *, id_factory: Optional[Callable[[], str]] = None):
        self._users = users
        self._new_id = id_factory or (lambda: uuid.uuid4().hex)

    def list_users(self) -> Sequence[User]:
        return self._users.list_all()

    def get_user(self, user_id: str) -> Optional[User]:
        return self._users.get_by_id(user_id)

    def add_user(self, name: str, email: str, role) -> User:
        name = require_non_empty(name, "Name")
        email = require_non_empty(email, "Email")
        try:
            role = Role(role)
        except ValueError:
            raise ValidationError("Invalid role")

        if self._users.get_by_email(email):
            raise ValidationError("User with this email already exists")

        user = User(user_id=self._new_id(), email=email, name=name, role=role)
        self._users.add(user)
        return user

    def remove_user(self, user_id: str) -> User:
        user = self._users.get_by_id(user_id)
        if not user:
            raise ValidationError("User not found")

        if user.is_admin:
            admins = [u for u in self._users.list_all() if u.is_admin]
            if len(admins) <= 1:
                raise ValidationError("Cannot remove the last admin user")

        if not self._users.delete_by_id(user.user_id):
            raise ValidationError("Failed to remove user")
        return user
