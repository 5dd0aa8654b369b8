"""
Tests for settings and logging setup.
"""
import logging
from logging.handlers import RotatingFileHandler
from unittest.mock import patch

from dfwconf.core.config import Settings, get_settings
from dfwconf.core.logging_config import setup_logging


def test_default_settings(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_FILE", raising=False)
    settings = Settings(_env_file=None)
    assert settings.APP_NAME == "dfwconf"
    assert settings.LOG_LEVEL == "INFO"
    assert settings.LOG_FILE is None


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_FILE", "")
    settings = Settings(_env_file=None)
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.LOG_FILE is None


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_setup_logging_console_only(restore_root_logger):
    with patch("dfwconf.core.logging_config.settings.LOG_LEVEL", "WARNING"), \
            patch("dfwconf.core.logging_config.settings.LOG_FILE", None):
        setup_logging()

    root = restore_root_logger
    assert root.level == logging.WARNING
    new_handlers = root.handlers[-1:]
    assert isinstance(new_handlers[0], logging.StreamHandler)
    assert not any(isinstance(handler, RotatingFileHandler) for handler in root.handlers)


def test_setup_logging_with_file(restore_root_logger, tmp_path):
    log_file = tmp_path / "logs" / "dfwconf.log"
    with patch("dfwconf.core.logging_config.settings.LOG_LEVEL", "INFO"), \
            patch("dfwconf.core.logging_config.settings.LOG_FILE", str(log_file)):
        setup_logging()

    logging.getLogger("dfwconf.test").info("written to file")
    file_handlers = [
        handler for handler in restore_root_logger.handlers
        if isinstance(handler, RotatingFileHandler)
    ]
    assert len(file_handlers) == 1
    file_handlers[0].flush()
    assert "written to file" in log_file.read_text()
