import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# file | memory | mysql
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "file")
DATA_DIR = os.getenv("DATA_DIR", "data")

# Only used when STORAGE_BACKEND=mysql
DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_db"),
}

PERIODS_PER_DAY = int(os.getenv("PERIODS_PER_DAY", "5"))

# Artificial delay on the mock sign-in, in seconds
AUTH_LATENCY_SECONDS = float(os.getenv("AUTH_LATENCY_SECONDS", "0"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
