"""
app/config.py

Application-level configuration helpers.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]


def load_env_files(project_root: Path | None = None) -> None:
    """
    Load simple KEY=VALUE pairs from `.env` and `.env.local` (if present).
    Existing process environment variables are not overwritten.
    """

    root = project_root or _PROJECT_ROOT
    for filename in (".env", ".env.local"):
        env_path = root / filename
        if not env_path.exists():
            continue

        for raw_line in env_path.read_text(encoding="utf-8").splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue

            key, value = line.split("=", 1)
            key = key.strip()
            value = value.strip().strip('"').strip("'")
            if key and key not in os.environ:
                os.environ[key] = value


@lru_cache(maxsize=1)
def _load_env_once() -> None:
    """
    Ensure project `.env` files are loaded once before reading app settings.
    """

    load_env_files()


def _get_bool_env(name: str, default: bool) -> bool:
    """
    Read a boolean from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    return raw_value.strip().lower() in {"1", "true", "yes", "on"}


def _get_int_env(name: str, default: int) -> int:
    """
    Read an integer from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return int(raw_value)
    except ValueError:
        return default


def _get_str_env(name: str, default: str) -> str:
    """
    Read a string from environment variables with fallback.
    """

    _load_env_once()
    value = os.getenv(name)
    if value is None:
        return default
    stripped = value.strip()
    return stripped if stripped else default


@dataclass(frozen=True)
class UploadSettings:
    """
    Runtime settings for the upload -> validate -> aggregate pipeline.
    """

    max_validation_errors: int = 50
    log_validation_errors: bool = True
    collect_all_row_errors: bool = False


@dataclass(frozen=True)
class UISettings:
    """
    Settings for the Streamlit page.
    """

    page_title: str = "CSV Metrics"
    preview_rows: int = 20


@lru_cache(maxsize=1)
def get_upload_settings() -> UploadSettings:
    """
    Return cached upload pipeline settings from environment variables.
    """

    return UploadSettings(
        max_validation_errors=max(1, _get_int_env("CSV_METRICS_MAX_VALIDATION_ERRORS", 50)),
        log_validation_errors=_get_bool_env("CSV_METRICS_LOG_VALIDATION_ERRORS", True),
        collect_all_row_errors=_get_bool_env("CSV_METRICS_COLLECT_ALL_ROW_ERRORS", False),
    )


@lru_cache(maxsize=1)
def get_ui_settings() -> UISettings:
    """
    Return cached UI settings from environment variables.
    """

    return UISettings(
        page_title=_get_str_env("CSV_METRICS_PAGE_TITLE", "CSV Metrics"),
        preview_rows=max(1, _get_int_env("CSV_METRICS_PREVIEW_ROWS", 20)),
    )


def get_log_level() -> str:
    """
    Return the configured root log level name.
    """

    return _get_str_env("LOG_LEVEL", "INFO").upper()
