"""
Tests for configuration and logging setup.
"""
import logging

import pytest

from folio.utils.config import Config
from folio.utils.logger import setup_logger


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("FOLIO_STORAGE_DIR", "FOLIO_REMOTE_PATH", "FOLIO_REMOTE_PERSIST",
                "FOLIO_MAX_BACKUPS", "FOLIO_LOG_LEVEL", "FOLIO_LOG_FILE"):
        monkeypatch.delenv(key, raising=False)


def test_defaults():
    config = Config()
    assert config.storage_dir == "data/local"
    assert config.remote_path is None
    assert config.remote_persist is True
    assert config.max_backups == 5
    assert config.log_level == logging.INFO
    assert config.log_file is None


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("FOLIO_REMOTE_PATH", "remote.json")
    monkeypatch.setenv("FOLIO_REMOTE_PERSIST", "no")
    monkeypatch.setenv("FOLIO_LOG_LEVEL", "debug")
    monkeypatch.setenv("FOLIO_MAX_BACKUPS", "2")

    config = Config()
    assert config.remote_path == "remote.json"
    assert config.remote_persist is False
    assert config.log_level == logging.DEBUG
    assert config.max_backups == 2


def test_env_file(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text("FOLIO_STORAGE_DIR=/srv/folio\n")
    # Recorded so the value loaded from the file is undone afterwards
    monkeypatch.setenv("FOLIO_STORAGE_DIR", "unset")
    monkeypatch.delenv("FOLIO_STORAGE_DIR")

    config = Config(str(env_file))
    assert config.storage_dir == "/srv/folio"
    assert config.get("FOLIO_UNKNOWN", "fallback") == "fallback"


def test_bad_integer(monkeypatch):
    monkeypatch.setenv("FOLIO_MAX_BACKUPS", "many")
    with pytest.raises(ValueError):
        Config().max_backups


def test_unknown_log_level(monkeypatch):
    monkeypatch.setenv("FOLIO_LOG_LEVEL", "chatty")
    assert Config().log_level == logging.INFO


def test_setup_logger_with_file(tmp_path):
    log_file = tmp_path / "logs" / "folio.log"
    logger = setup_logger("folio.test", log_file=str(log_file), level=logging.DEBUG)
    logger.debug("hello")
    for handler in logger.handlers:
        handler.flush()

    assert len(logger.handlers) == 2
    assert "hello" in log_file.read_text(encoding="utf-8")

    # Calling again replaces the handlers instead of stacking them
    logger = setup_logger("folio.test")
    assert len(logger.handlers) == 1
