"""Structured Logging & Settings — JSON formatter fields and config defaults."""

import json
import logging

import pytest
from pydantic import ValidationError

from taskboard.config import Settings
from taskboard.infrastructure.observability import (
    JSONFormatter, TextFormatter, setup_logging,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "taskboard.core.task_store", logging.INFO, __file__, 1,
        "Task created", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_base_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "taskboard.core.task_store"
    assert payload["message"] == "Task created"
    assert "timestamp" in payload


def test_json_formatter_surfaces_ids():
    payload = json.loads(JSONFormatter().format(_record(board_id="0", task_id="3")))
    assert payload["board_id"] == "0"
    assert payload["task_id"] == "3"
    assert "error_code" not in payload


def test_settings_defaults(monkeypatch):
    for var in ("PORT", "HOST", "SEED_DEMO_DATA", "LOG_FORMAT"):
        monkeypatch.delenv(var, raising=False)
    settings = Settings(_env_file=None)
    assert settings.port == 3000
    assert settings.seed_demo_data is True
    assert settings.cors_origins == ["*"]


def test_settings_read_port_from_env(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    assert Settings(_env_file=None).port == 8080


def test_settings_reject_unknown_log_format():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_format="xml")


def test_text_formatter_appends_extras():
    line = TextFormatter().format(_record(board_id="0", error_code="BOARD_NOT_FOUND"))
    assert line.endswith("Task created [board_id=0 error_code=BOARD_NOT_FOUND]")


def test_setup_logging_does_not_stack_handlers():
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    try:
        setup_logging("INFO", "text")
        setup_logging("DEBUG", "json")
        ours = [h for h in root.handlers if h.get_name() == "taskboard"]
        assert len(ours) == 1
        assert isinstance(ours[0].formatter, JSONFormatter)
        assert root.level == logging.DEBUG
    finally:
        for handler in list(root.handlers):
            if handler not in before:
                root.removeHandler(handler)
        root.setLevel(level)
