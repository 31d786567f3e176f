"""Unit tests for logging setup."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import logging
from logging.handlers import RotatingFileHandler
from app.config import settings
from app.utils.logger import LOG_DIR, get_logger


class TestLogger:
    def test_rotating_file_follows_settings(self):
        get_logger("tests.logger")
        handlers = [h for h in logging.getLogger().handlers if isinstance(h, RotatingFileHandler)]
        assert len(handlers) == 1
        assert handlers[0].baseFilename == os.path.abspath(os.path.join(LOG_DIR, settings.LOG_FILE))
        assert handlers[0].maxBytes == settings.LOG_MAX_BYTES
        assert handlers[0].backupCount == settings.LOG_BACKUP_COUNT

    def test_configured_once(self):
        get_logger("a")
        get_logger("b")
        assert sum(isinstance(h, RotatingFileHandler) for h in logging.getLogger().handlers) == 1
