import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "jornada_db"),
}

# Without GMAIL_USER / GMAIL_APP_PASSWORD confirmation e-mails are only logged
MAIL_CONFIG = {
    "host": os.getenv("SMTP_HOST", "smtp.gmail.com"),
    "port": int(os.getenv("SMTP_PORT", "587")),
    "user": os.getenv("GMAIL_USER", ""),
    "password": os.getenv("GMAIL_APP_PASSWORD", ""),
    "sender_name": os.getenv("MAIL_SENDER_NAME", "SEMED Tuntum"),
}

DEFAULT_ADMIN = {
    "full_name": os.getenv("DEFAULT_ADMIN_NAME", "Administrador SEMED"),
    "email": os.getenv("DEFAULT_ADMIN_EMAIL", "admin@semed.local"),
    "password": os.getenv("DEFAULT_ADMIN_PASSWORD", "admin2026"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
SESSION_HOURS = 8

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed default settings and the bootstrap admin
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "1")))
