"""Key/value storage backends.

Values are JSON text, the same shape a browser's localStorage would hold.
"""
from .base import KeyValueStorage, read_json, write_json
from .file_storage import JsonFileStorage
from .flask_session import FlaskSessionStorage
from .memory import InMemoryStorage

__all__ = [
    "KeyValueStorage",
    "InMemoryStorage",
    "JsonFileStorage",
    "FlaskSessionStorage",
    "read_json",
    "write_json",
]
