from __future__ import annotations

from typing import List, Optional, Protocol, Sequence

from ..core.constants import USERS_KEY
from ..storage.base import KeyValueStorage, read_json, write_json
from .defaults import DEFAULT_USERS
from .model import User


class UserRepository(Protocol):
    """Repository interface for the user directory.

    Note (DIP): the service layer depends on this interface, not on a concrete backend.
    """

    def list_all(self) -> Sequence[User]:
        raise NotImplementedError

    def get_by_id(self, user_id: str) -> Optional[User]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def get_by_identifier(self, identifier: str) -> Optional[User]:
        """Look up by email or mobile number (exact match)."""
        raise NotImplementedError

    def add(self, user: User) -> None:
        raise NotImplementedError

    def delete_by_id(self, user_id: str) -> bool:
        raise NotImplementedError


class StorageUserRepository(UserRepository):
    """Directory kept as a JSON list under one storage key.

    The list is seeded with the demo users on first access.
    """

    def __init__(self, storage: KeyValueStorage, *, defaults: Sequence[User] = DEFAULT_USERS):
        self._storage = storage
        self._defaults = tuple(defaults)

    def _load(self) -> List[User]:
        raw = read_json(self._storage, USERS_KEY)
        if raw is None:
            users = list(self._defaults)
            self._save(users)
            return users
        return [User.from_dict(item) for item in raw]

    def _save(self, users: Sequence[User]) -> None:
        write_json(self._storage, USERS_KEY, [u.to_dict() for u in users])

    def list_all(self) -> Sequence[User]:
        return self._load()

    def get_by_id(self, user_id: str) -> Optional[User]:
        return next((u for u in self._load() if u.user_id == str(user_id)), None)

    def get_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self._load() if u.email == email), None)

    def get_by_identifier(self, identifier: str) -> Optional[User]:
        return next(
            (u for u in self._load() if u.email == identifier or (u.mobile and u.mobile == identifier)),
            None,
        )

    def add(self, user: User) -> None:
        users = self._load()
        users.append(user)
        self._save(users)

    def delete_by_id(self, user_id: str) -> bool:
        users = self._load()
        kept = [u for u in users if u.user_id != str(user_id)]
        if len(kept) == len(users):
            return False
        self._save(kept)
        return True
