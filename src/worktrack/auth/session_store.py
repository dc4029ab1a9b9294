from __future__ import annotations

import json
from typing import Optional

from ..core.constants import SESSION_KEY
from ..storage.base import KeyValueStorage
from ..users.model import User


class SessionStore:
    """The authenticated identity, kept in one of two storage locations.

    ``durable`` survives a browser restart ("remember me"), ``ephemeral`` does
    not. At most one location holds the identity at any time.
    """

    def __init__(self, durable: KeyValueStorage, ephemeral: KeyValueStorage, *, key: str = SESSION_KEY):
        self._durable = durable
        self._ephemeral = ephemeral
        self._key = key

    def save(self, user: User, *, remember: bool) -> None:
        target, other = (self._durable, self._ephemeral) if remember else (self._ephemeral, self._durable)
        # clear first: both locations may share one backing store
        other.remove_item(self._key)
        target.set_item(self._key, json.dumps(user.to_dict()))

    def load(self) -> Optional[User]:
        for location in (self._durable, self._ephemeral):
            raw = location.get_item(self._key)
            if not raw:
                continue
            try:
                return User.from_dict(json.loads(raw))
            except (ValueError, KeyError, TypeError):
                # Corrupted record: treat as logged out
                continue
        return None

    def clear(self) -> None:
        self._durable.remove_item(self._key)
        self._ephemeral.remove_item(self._key)
