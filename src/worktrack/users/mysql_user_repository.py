from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import User
from .repository import UserRepository

_COLUMNS = "user_id, email, name, role, mobile"


def _to_user(row: dict) -> User:
    return User(
        user_id=str(row["user_id"]),
        email=row["email"],
        name=row["name"],
        role=Role(row["role"]),
        mobile=row.get("mobile"),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users ORDER BY created_at, user_id")
            return [_to_user(r) for r in fetchall(cur)]

    def get_by_id(self, user_id: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE user_id=%s", (str(user_id),))
            row = fetchone(cur)
            return _to_user(row) if row else None

    def get_by_email(self, email: str) -> Optional[User]:
        # users.email uses a binary collation, so this is an exact match
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE email=%s", (email,))
            row = fetchone(cur)
            return _to_user(row) if row else None

    def get_by_identifier(self, identifier: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM users
                WHERE email=%s OR mobile=%s
                ORDER BY created_at
                LIMIT 1
                """,
                (identifier, identifier),
            )
            row = fetchone(cur)
            return _to_user(row) if row else None

    def add(self, user: User) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO users(user_id, email, name, role, mobile)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (user.user_id, user.email, user.name, user.role.value, user.mobile),
            )

    def delete_by_id(self, user_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM users WHERE user_id=%s", (str(user_id),))
            return cur.rowcount > 0
