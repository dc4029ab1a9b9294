from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .auth.session_store import SessionStore
from .core.constants import DEFAULT_SHARED_PASSWORD
from .database.connection import DBConfig, DatabaseConnection
from .reports.service import DashboardService
from .storage.base import KeyValueStorage
from .storage.file_storage import JsonFileStorage
from .storage.flask_session import FlaskSessionStorage
from .storage.memory import InMemoryStorage
from .submissions.mysql_submission_repository import MySQLSubmissionRepository
from .submissions.repository import StorageSubmissionRepository, SubmissionRepository
from .submissions.service import SubmissionService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import StorageUserRepository, UserRepository
from .users.service import AuthService, UserService

STORAGE_BACKENDS = ("memory", "file", "mysql")


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    users_repo: UserRepository
    submissions_repo: SubmissionRepository
    session_store: SessionStore

    auth_service: AuthService
    user_service: UserService
    submission_service: SubmissionService
    dashboard_service: DashboardService


def build_container(
    *,
    storage_backend: str = "memory",
    storage_path: Optional[str] = None,
    db_config: Optional[dict] = None,
    shared_password: str = DEFAULT_SHARED_PASSWORD,
    durable_session: Optional[KeyValueStorage] = None,
    ephemeral_session: Optional[KeyValueStorage] = None,
) -> Container:
    """Wire repositories and services for one application instance.

    Session locations default to the Flask session cookie; pass explicit
    storages to use the services outside a request (scripts, tests).
    """
    backend = (storage_backend or "memory").lower()
    if backend not in STORAGE_BACKENDS:
        raise ValueError(f"Unknown STORAGE_BACKEND {storage_backend!r} (expected one of {', '.join(STORAGE_BACKENDS)})")

    conn: Optional[DatabaseConnection] = None
    if backend == "mysql":
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config or {}))
        users_repo: UserRepository = MySQLUserRepository(conn)
        submissions_repo: SubmissionRepository = MySQLSubmissionRepository(conn)
    else:
        if backend == "file":
            storage: KeyValueStorage = JsonFileStorage(Path(storage_path or "instance/worktrack.json"))
        else:
            storage = InMemoryStorage()
        users_repo = StorageUserRepository(storage)
        submissions_repo = StorageSubmissionRepository(storage)

    session_store = SessionStore(
        durable_session or FlaskSessionStorage(permanent=True),
        ephemeral_session or FlaskSessionStorage(permanent=False),
    )

    return Container(
        conn=conn,
        users_repo=users_repo,
        submissions_repo=submissions_repo,
        session_store=session_store,
        auth_service=AuthService(users_repo, session_store, shared_password=shared_password),
        user_service=UserService(users_repo),
        submission_service=SubmissionService(submissions_repo),
        dashboard_service=DashboardService(submissions_repo, users_repo),
    )
