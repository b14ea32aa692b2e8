import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "keyon_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

LATE_CUTOFF = "07:15"
TIME_ON_CAMPUS_DAYS = 7
FANOUT_WORKERS = 4

AUTO_INIT_DB = False
AUTO_SEED_DB = False
