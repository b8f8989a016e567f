"""
tests/test_config.py

Env-driven settings and .env loading.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from app.config import (
    UISettings,
    UploadSettings,
    get_log_level,
    get_ui_settings,
    get_upload_settings,
    load_env_files,
)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_upload_settings.cache_clear()
    get_ui_settings.cache_clear()
    yield
    get_upload_settings.cache_clear()
    get_ui_settings.cache_clear()


def test_upload_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "CSV_METRICS_MAX_VALIDATION_ERRORS",
        "CSV_METRICS_LOG_VALIDATION_ERRORS",
        "CSV_METRICS_COLLECT_ALL_ROW_ERRORS",
    ):
        monkeypatch.delenv(name, raising=False)

    assert get_upload_settings() == UploadSettings()


def test_upload_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CSV_METRICS_MAX_VALIDATION_ERRORS", "5")
    monkeypatch.setenv("CSV_METRICS_LOG_VALIDATION_ERRORS", "off")
    monkeypatch.setenv("CSV_METRICS_COLLECT_ALL_ROW_ERRORS", "yes")

    assert get_upload_settings() == UploadSettings(
        max_validation_errors=5,
        log_validation_errors=False,
        collect_all_row_errors=True,
    )


@pytest.mark.parametrize("raw, expected", [("0", 1), ("-3", 1), ("abc", 50)])
def test_max_validation_errors_fallbacks(monkeypatch: pytest.MonkeyPatch, raw: str, expected: int) -> None:
    monkeypatch.setenv("CSV_METRICS_MAX_VALIDATION_ERRORS", raw)
    assert get_upload_settings().max_validation_errors == expected


def test_ui_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CSV_METRICS_PAGE_TITLE", "  Team Scores ")
    monkeypatch.setenv("CSV_METRICS_PREVIEW_ROWS", "0")

    assert get_ui_settings() == UISettings(page_title="Team Scores", preview_rows=1)


def test_blank_title_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CSV_METRICS_PAGE_TITLE", "   ")
    assert get_ui_settings().page_title == "CSV Metrics"


def test_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert get_log_level() == "DEBUG"


def test_load_env_files_does_not_override(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CSV_METRICS_PAGE_TITLE", "From process")
    monkeypatch.delenv("CSV_METRICS_PREVIEW_ROWS", raising=False)
    (tmp_path / ".env").write_text(
        "# comment\nCSV_METRICS_PAGE_TITLE=From file\nCSV_METRICS_PREVIEW_ROWS='7'\nnot a pair\n",
        encoding="utf-8",
    )

    load_env_files(tmp_path)
    try:
        assert os.environ["CSV_METRICS_PAGE_TITLE"] == "From process"
        assert os.environ["CSV_METRICS_PREVIEW_ROWS"] == "7"
    finally:
        os.environ.pop("CSV_METRICS_PREVIEW_ROWS", None)
