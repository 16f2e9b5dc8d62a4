"""
Logging Configuration

Настройка логгера пакета. Библиотека сама логирование не включает:
модули пишут в logging.getLogger(__name__), вывод настраивает приложение.
"""

import logging
import sys
from typing import Final, Optional

# Корневой namespace логгеров пакета (src.core.*, src.operations.*)
LOGGER_NAMESPACE: Final[str] = "src"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Настройка логгера пакета.

    Args:
        level: Уровень логирования (например, logging.DEBUG)
        log_file: Опциональный путь к файлу логов

    Returns:
        Настроенный логгер пакета
    """
    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(level)

    # Повторный вызов не дублирует handlers
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger
