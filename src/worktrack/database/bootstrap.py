"""Schema creation and demo seed for the MySQL backend.

All statements are idempotent (CREATE ... IF NOT EXISTS, INSERT IGNORE).
"""
from __future__ import annotations

from typing import Iterable, List

from ..users.defaults import DEFAULT_USERS
from .connection import DatabaseConnection
from .mysql_base import db_cursor, fetchall

SCHEMA_STATEMENTS = (
    """
    CREATE TABLE IF NOT EXISTS users (
        user_id VARCHAR(64) NOT NULL PRIMARY KEY,
        email VARCHAR(191) NOT NULL,
        name VARCHAR(191) NOT NULL,
        role VARCHAR(20) NOT NULL DEFAULT 'employee',
        mobile VARCHAR(32) NULL,
        created_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP,
        UNIQUE KEY uq_users_email (email)
    ) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4 COLLATE=utf8mb4_bin
    """,
    """
    CREATE TABLE IF NOT EXISTS submissions (
        submission_id VARCHAR(64) NOT NULL PRIMARY KEY,
        user_id VARCHAR(64) NOT NULL,
        work_date DATE NOT NULL,
        attendance VARCHAR(10) NOT NULL,
        seconds_done INT UNSIGNED NULL,
        remarks TEXT NULL,
        submitted_at DATETIME NOT NULL,
        UNIQUE KEY uq_submissions_user_date (user_id, work_date)
    ) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4
    """,
)


def ensure_database_exists(conn_factory: DatabaseConnection) -> None:
    name = conn_factory.config.database
    conn = conn_factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        try:
            cur.execute(f"CREATE DATABASE IF NOT EXISTS `{name}` CHARACTER SET utf8mb4")
            conn.commit()
        finally:
            cur.close()
    finally:
        conn.close()


def _exec_all(cur, statements: Iterable[str]) -> None:
    for stmt in statements:
        cur.execute(stmt)


def apply_schema(conn_factory: DatabaseConnection) -> None:
    ensure_database_exists(conn_factory)
    with db_cursor(conn_factory) as (_, cur):
        _exec_all(cur, SCHEMA_STATEMENTS)


def seed_default_users(conn_factory: DatabaseConnection) -> int:
    """Insert the demo directory when the users table is empty. Returns rows inserted."""
    with db_cursor(conn_factory) as (_, cur):
        cur.execute("SELECT COUNT(*) AS total FROM users")
        row = cur.fetchone()
        if row and int(row["total"]) > 0:
            return 0

        for u in DEFAULT_USERS:
            cur.execute(
                """
                INSERT IGNORE INTO users(user_id, email, name, role, mobile)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (u.user_id, u.email, u.name, u.role.value, u.mobile),
            )
        return len(DEFAULT_USERS)


def list_tables(conn_factory: DatabaseConnection) -> List[str]:
    with db_cursor(conn_factory, dictionary=False) as (_, cur):
        cur.execute("SHOW TABLES")
        return [str(r[0]) for r in fetchall(cur)]
