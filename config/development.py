import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "office_records"),
    "pool_size": int(os.getenv("DB_POOL_SIZE", "10")),
}

DEBUG = True

# Session cookie lifetime (hours)
SESSION_HOURS = int(os.getenv("SESSION_HOURS", "8"))

# Outgoing mail (credentials and leave decisions)
SMTP_HOST = os.getenv("SMTP_HOST", "127.0.0.1")
SMTP_PORT = int(os.getenv("SMTP_PORT", "1025"))
MAIL_SENDER = os.getenv("MAIL_SENDER", "Office Management <no-reply@localhost>")
MAIL_ENABLED = bool(int(os.getenv("MAIL_ENABLED", "0")))
APP_BASE_URL = os.getenv("APP_BASE_URL", "http://localhost:5000")

# Optional YAML file for logging.config.dictConfig
LOGGING_CONFIG = os.getenv("LOGGING_CONFIG", "")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo data on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
