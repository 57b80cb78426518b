import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "office_records_test"),
    "pool_size": 2,
}

DEBUG = False
TESTING = True

SESSION_HOURS = 8

SMTP_HOST = "127.0.0.1"
SMTP_PORT = 1025
MAIL_SENDER = "Office Management <no-reply@localhost>"
MAIL_ENABLED = False
APP_BASE_URL = "http://localhost:5000"

LOGGING_CONFIG = ""

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
