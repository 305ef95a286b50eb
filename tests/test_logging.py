"""Tests for the dsdoc logger"""

import logging
from pathlib import Path

import pytest

import dsdoc
from dsdoc.utils.logging import DSDocLogger

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture(autouse=True)
def clean_logger():
    yield
    DSDocLogger.cleanup()


class TestDSDocLogger:
    """Silent by default, file output on request"""

    def test_silent_until_setup(self):
        assert DSDocLogger.get_logger() is None
        DSDocLogger.info("nobody is listening")

    def test_log_file_receives_codec_messages(self, tmp_path):
        log_file = tmp_path / "logs" / "dsdoc.log"
        DSDocLogger.setup_logger(log_level=logging.DEBUG, log_file=log_file)

        dsdoc.load(DATA_DIR / "wght.designspace")

        assert DSDocLogger.get_log_file_path() == log_file
        content = log_file.read_text(encoding="utf-8")
        assert "dsdoc - DEBUG - Parsed" in content
        assert "1 axes, 2 sources, 2 instances" in content

    def test_load_errors_are_logged(self, tmp_path):
        log_file = tmp_path / "dsdoc.log"
        DSDocLogger.setup_logger(log_file=log_file)

        with pytest.raises(dsdoc.DesignSpaceReadError):
            dsdoc.load(tmp_path / "missing.designspace")

        assert "ERROR - Failed to load designspace" in log_file.read_text(encoding="utf-8")

    def test_cleanup_removes_handlers(self, tmp_path):
        logger = DSDocLogger.setup_logger(log_file=tmp_path / "dsdoc.log")
        assert len(logger.handlers) == 2

        DSDocLogger.cleanup()

        assert logger.handlers == []
        assert DSDocLogger.get_logger() is None
        assert DSDocLogger.get_log_file_path() is None
