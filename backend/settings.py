# File: settings.py

import os
from datetime import date
from pathlib import Path

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent

class GenerationConfig:
    MIN_RECORDS = 1
    MAX_RECORDS = 100  # caller-side clamp, the engine itself accepts any count
    NUMBER_MIN = 1
    NUMBER_MAX = 1000
    ARRAY_MIN_ITEMS = 1
    ARRAY_MAX_ITEMS = 3
    DEFAULT_DATE_MIN = date(2000, 1, 1)
    DEFAULT_DATE_MAX = date(2030, 12, 31)
    PRIMARY_KEY_PAD_WIDTH = 3

class DatabaseConfig:
    TEMPLATE_DB_PATH = BASE_DIR / "templates.db"
    DATABASE_URL = os.getenv(
        "DATABASE_URL",
        f"sqlite:///{TEMPLATE_DB_PATH}"
    )
