from __future__ import annotations

import logging

from app.config import DEFAULT_STATIC_DIR, get_settings
from app.utils.logger import get_logger


def test_defaults(monkeypatch) -> None:
    for name in ("ENVIRONMENT", "HOST", "PORT", "SERVER_URL", "ALLOWED_ORIGINS", "STATIC_DIR", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.environment == "development"
    assert settings.is_development
    assert settings.port == 5000
    assert settings.server_url == "http://localhost:5000"
    assert settings.allowed_origins == ["https://chat.openai.com"]
    assert settings.static_dir == DEFAULT_STATIC_DIR
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("SERVER_URL", "https://todo.example.com")
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://chat.openai.com, https://chatgpt.com,")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = get_settings()

    assert not settings.is_development
    assert settings.port == 8080
    assert settings.server_url == "https://todo.example.com"
    assert settings.allowed_origins == ["https://chat.openai.com", "https://chatgpt.com"]
    assert settings.log_level == "DEBUG"


def test_structured_logger_emits_json(caplog) -> None:
    logger = get_logger("todo-plugin-test")

    with caplog.at_level(logging.INFO, logger="todo-plugin-test"):
        logger.info("todo_added", username="alice", index=0)

    (record,) = caplog.records
    assert '"message": "todo_added"' in record.getMessage()
    assert '"service": "todo-plugin-test"' in record.getMessage()
    assert '"username": "alice"' in record.getMessage()
