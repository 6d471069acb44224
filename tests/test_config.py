"""Configuration — defaults and env overrides."""

import pytest
from pydantic import ValidationError

from assignment_api.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("LOG_FORMAT", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    settings = Settings(_env_file=None)
    assert settings.log_level == "INFO"
    assert settings.log_format == "json"
    assert settings.max_input_length == 100_000


def test_env_override(monkeypatch):
    monkeypatch.setenv("MAX_INPUT_LENGTH", "50")
    monkeypatch.setenv("LOG_FORMAT", "TEXT")
    settings = Settings(_env_file=None)
    assert settings.max_input_length == 50
    assert settings.log_format == "text"


def test_rejects_unknown_log_format():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_format="xml")
