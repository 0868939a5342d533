
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parents[1] / ".env")


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///local.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    AUTO_CREATE_SCHEMA = _env_flag("AUTO_CREATE_SCHEMA", False)

    # "sql" or "json"
    RESERVATION_STORE = os.getenv("RESERVATION_STORE", "sql")
    RESERVATIONS_FILE = os.getenv("RESERVATIONS_FILE", "reservations.json")

    TOTAL_TABLES = int(os.getenv("TOTAL_TABLES", "25"))
    SLOT_MINUTES = int(os.getenv("SLOT_MINUTES", "90"))
    RESET_INTERVAL_SECONDS = int(os.getenv("RESET_INTERVAL_SECONDS", "3600"))
    RESET_SCHEDULER_ENABLED = _env_flag("RESET_SCHEDULER_ENABLED", True)

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
