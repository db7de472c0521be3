"""
Tests for logging setup.
"""

import logging
from pathlib import Path

import pytest

from voschema.core.observability.logging_config import PACKAGE_LOGGER, _parse_level, setup_logging


@pytest.fixture(autouse=True)
def _restore_package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers, level = list(logger.handlers), logger.level
    yield
    for h in logger.handlers:
        if h not in handlers:
            h.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)


class TestParseLevel:
    @pytest.mark.parametrize(
        ("name", "level"),
        [("DEBUG", logging.DEBUG), ("info", logging.INFO), ("", logging.WARNING),
         (None, logging.WARNING), ("bogus", logging.WARNING)],
    )
    def test_levels(self, name, level):
        assert _parse_level(name) == level


class TestSetupLogging:
    def test_console_level(self):
        logger = setup_logging("INFO")
        assert logger.name == PACKAGE_LOGGER
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1

    def test_repeat_does_not_stack_handlers(self):
        setup_logging("INFO")
        logger = setup_logging("DEBUG")
        assert len(logger.handlers) == 1

    def test_file_handler(self, tmp_path: Path):
        log_file = tmp_path / "voschema.log"
        logger = setup_logging("WARNING", log_file=str(log_file), log_file_level="DEBUG")
        assert logger.level == logging.DEBUG
        logging.getLogger("voschema.test").debug("hello file")
        for h in logger.handlers:
            h.flush()
        assert "hello file" in log_file.read_text()
