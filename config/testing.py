SECRET_KEY = "test-secret"

STORAGE_BACKEND = "memory"
DATA_DIR = None
DB_CONFIG = None

PERIODS_PER_DAY = 5
AUTH_LATENCY_SECONDS = 0.0

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
