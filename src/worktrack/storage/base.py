from __future__ import annotations

import json
from typing import Any, Optional, Protocol


class KeyValueStorage(Protocol):
    """Storage collaborator interface.

    Note (DIP): repositories and the session store depend on this interface,
    not on a concrete backend.
    """

    def get_item(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set_item(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove_item(self, key: str) -> None:
        raise NotImplementedError


def read_json(storage: KeyValueStorage, key: str, default: Any = None) -> Any:
    raw = storage.get_item(key)
    if raw is None:
        return default
    return json.loads(raw)


def write_json(storage: KeyValueStorage, key: str, value: Any) -> None:
    storage.set_item(key, json.dumps(value, ensure_ascii=False))
