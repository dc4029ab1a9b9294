"""Create the MySQL schema and seed the demo directory.

Reads DB_CONFIG from the settings module selected by APP_ENV.
"""
from __future__ import annotations

import importlib

from dotenv import load_dotenv

from worktrack.config import get_settings_module
from worktrack.database.bootstrap import apply_schema, list_tables, seed_default_users
from worktrack.database.connection import DBConfig, DatabaseConnection


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    config = DBConfig.from_dict(dict(settings.DB_CONFIG))
    conn = DatabaseConnection.get_instance(config)

    apply_schema(conn)
    seeded = seed_default_users(conn)
    tables = list_tables(conn)
    print(
        "OK: Applied schema -> "
        f"{config.user}@{config.host}:{config.port}/{config.database} "
        f"(tables={len(tables)}, seeded users={seeded})"
    )


if __name__ == "__main__":
    main()
