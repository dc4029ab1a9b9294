from __future__ import annotations

from typing import Optional

from flask import session

from .base import KeyValueStorage


class FlaskSessionStorage(KeyValueStorage):
    """Adapter over the Flask session cookie for the current request.

    Two instances share one cookie: ``permanent=True`` is the durable
    ("remember me") location, ``permanent=False`` the browser-session one.
    Writing flips ``session.permanent`` so only one of them is in effect.
    """

    def __init__(self, *, permanent: bool):
        self._permanent = permanent

    def get_item(self, key: str) -> Optional[str]:
        if bool(session.permanent) != self._permanent:
            return None
        return session.get(key)

    def set_item(self, key: str, value: str) -> None:
        session.permanent = self._permanent
        session[key] = value

    def remove_item(self, key: str) -> None:
        if bool(session.permanent) == self._permanent:
            session.pop(key, None)
