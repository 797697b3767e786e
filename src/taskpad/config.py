# src/taskpad/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing required at import time; every value has a default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

ENV_PREFIX = "TASKPAD"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


# Local .env (gitignored); variables already set in the environment win.
load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_optional_path(name: str) -> Optional[Path]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_to_file: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    storage_db_path: Path

    # ---- Task list persistence ----
    storage_key: str
    fixture_path: Optional[Path]

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskpad").strip() or "taskpad"
        log_level = _env(_k("LOG_LEVEL"), "INFO")
        log_to_file = _env_bool(_k("LOG_TO_FILE"), True)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskpad"))
        storage_db_path = _env_path(_k("STORAGE_DB_PATH"), data_dir / "storage.sqlite3")

        storage_key = _env(_k("STORAGE_KEY"), "tasks").strip() or "tasks"
        fixture_path = _env_optional_path(_k("FIXTURE_PATH"))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_to_file=log_to_file,
            data_dir=data_dir,
            storage_db_path=storage_db_path,
            storage_key=storage_key,
            fixture_path=fixture_path,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
