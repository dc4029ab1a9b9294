import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# memory | file | mysql
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "file")
STORAGE_PATH = os.getenv("STORAGE_PATH", "instance/worktrack.json")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "worktrack_db"),
}

# Development stand-in for real credential verification
SHARED_PASSWORD = os.getenv("SHARED_PASSWORD", "password123")
SESSION_DAYS = int(os.getenv("SESSION_DAYS", "7"))

DEBUG = True

# If enabled and STORAGE_BACKEND=mysql, the schema is created on startup (CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
