from __future__ import annotations

import importlib
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .config import get_settings_module
from .container import Container, build_container
from .core.constants import DEFAULT_SHARED_PASSWORD
from .database.bootstrap import apply_schema, list_tables, seed_default_users
from .reports.controller import register as register_reports
from .submissions.controller import register as register_submissions
from .users.controller import register as register_users


def create_app(settings_module: Optional[str] = None, *, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    backend = str(getattr(settings, "STORAGE_BACKEND", "memory")).lower()
    db_config = dict(getattr(settings, "DB_CONFIG", {}))

    if app.config["DEBUG"]:
        print("[worktrack] settings=", settings_module, " storage=", backend)

    if container is None:
        container = build_container(
            storage_backend=backend,
            storage_path=getattr(settings, "STORAGE_PATH", None),
            db_config=db_config,
            shared_password=getattr(settings, "SHARED_PASSWORD", DEFAULT_SHARED_PASSWORD),
        )

    if container.conn is not None and bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(container.conn)
        seed_default_users(container.conn)
        if app.config["DEBUG"]:
            print(f"[worktrack] schema ready (tables={len(list_tables(container.conn))})")

    app.extensions["worktrack"] = container

    register_users(app, container, session_days=int(getattr(settings, "SESSION_DAYS", 7)))
    register_submissions(app, container)
    register_reports(app, container)

    return app
