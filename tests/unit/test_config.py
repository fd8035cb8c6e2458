"""
Unit tests for settings, engine construction and logging setup.
"""

import logging

from notesync.core.config import Settings
from notesync.core.db import create_engine
from notesync.core.logging import configure_logging


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("NOTESYNC_DATABASE_URL", raising=False)
        config = Settings(_env_file=None)

        assert config.database_url.startswith("sqlite+aiosqlite://")
        assert config.log_level == "INFO"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("NOTESYNC_DATABASE_URL", "sqlite+aiosqlite:///:memory:")
        monkeypatch.setenv("NOTESYNC_LOG_LEVEL", "debug")
        monkeypatch.setenv("NOTESYNC_EVENT_ORIGIN", "revisions")

        config = Settings(_env_file=None)

        assert config.database_url == "sqlite+aiosqlite:///:memory:"
        assert config.log_level == "debug"
        assert config.event_origin == "revisions"


class TestEngine:
    def test_create_engine_uses_settings(self):
        engine = create_engine(Settings(_env_file=None, database_url="sqlite+aiosqlite:///:memory:"))

        assert engine.url.drivername == "sqlite+aiosqlite"
        assert engine.url.database == ":memory:"


class TestConfigureLogging:
    def test_sets_level_and_single_handler(self):
        logger = logging.getLogger("notesync")
        previous_handlers = list(logger.handlers)
        try:
            configure_logging(Settings(_env_file=None, log_level="debug"))
            configure_logging(Settings(_env_file=None, log_level="warning"))

            assert logger.level == logging.WARNING
            assert len(logger.handlers) == max(1, len(previous_handlers))
        finally:
            logger.handlers = previous_handlers
            logger.setLevel(logging.NOTSET)
