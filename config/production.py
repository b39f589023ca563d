import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "file")
DATA_DIR = os.getenv("DATA_DIR", "/var/lib/gasc-attendance")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_db"),
}

PERIODS_PER_DAY = int(os.getenv("PERIODS_PER_DAY", "5"))
AUTH_LATENCY_SECONDS = float(os.getenv("AUTH_LATENCY_SECONDS", "0"))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
