"""
Logging Configuration

Настройка логгера пространства имён 'src'. Библиотека не конфигурирует
логирование при импорте: setup_logging вызывается приложением явно.
"""

import logging
import sys
from typing import Final, Optional

# Корневой логгер пакета (все модули используют logging.getLogger(__name__))
LOGGER_NAMESPACE: Final[str] = "src"

LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT: Final[str] = "%H:%M:%S"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Настройка логгера пакета.

    Повторный вызов заменяет ранее установленные handlers (без дублирования
    сообщений).

    Args:
        level: Уровень логирования (например, logging.DEBUG)
        log_file: Путь к файлу лога (optional)

    Returns:
        Настроенный логгер пространства имён пакета
    """
    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(level)

    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logging initialized.")
    return logger
