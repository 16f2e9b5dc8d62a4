"""
Тесты для настройки логирования
"""

import logging

import pytest

from src.core.logging_config import LOGGER_NAMESPACE, setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger(LOGGER_NAMESPACE)
    yield logger
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


class TestSetupLogging:
    """Тесты setup_logging"""

    def test_console_handler(self, package_logger) -> None:
        logger = setup_logging(logging.DEBUG)
        assert logger is package_logger
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)

    def test_repeated_setup_no_duplicates(self, package_logger) -> None:
        setup_logging()
        setup_logging()
        assert len(package_logger.handlers) == 1

    def test_file_handler(self, package_logger, tmp_path) -> None:
        log_file = tmp_path / "matrix.log"
        setup_logging(logging.DEBUG, log_file=str(log_file))
        assert len(package_logger.handlers) == 2

        logging.getLogger("src.core.builder").debug("probe message")
        for handler in package_logger.handlers:
            handler.flush()

        assert "probe message" in log_file.read_text(encoding="utf-8")

    def test_module_loggers_are_children(self, package_logger) -> None:
        setup_logging(logging.WARNING)
        child = logging.getLogger("src.operations.add")
        assert child.getEffectiveLevel() == logging.WARNING
