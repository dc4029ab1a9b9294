SECRET_KEY = "test-secret"

STORAGE_BACKEND = "memory"
STORAGE_PATH = ""

DB_CONFIG = {
    "host": "localhost",
    "port": 3306,
    "user": "root",
    "password": "",
    "database": "worktrack_test",
}

SHARED_PASSWORD = "password123"
SESSION_DAYS = 7

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
