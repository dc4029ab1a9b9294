import os


def get_settings_module() -> str:
    # APP_ENV selects the settings module, 'development' by default
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "worktrack.config.production"

    if env in {"test", "testing"}:
        return "worktrack.config.testing"

    return "worktrack.config.development"
