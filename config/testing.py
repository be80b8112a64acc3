import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "payroll_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

STANDARD_WORK_HOURS = 8
OVERTIME_PREMIUM = "1.5"
WORKING_DAYS_PER_MONTH = 22
PAYROLL_MAX_WORKERS = 1

AUTO_INIT_DB = False
AUTO_SEED_DB = False
