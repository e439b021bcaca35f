"""
Настройка логирования с ротацией файлов.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(
    name: str,
    log_file: Optional[str] = None,
    level: Union[int, str] = logging.INFO,
    max_bytes: int = 5 * 1024 * 1024,
    backup_count: int = 3,
) -> logging.Logger:
    """
    Создать именованный логгер.

    Args:
        name: Имя логгера
        log_file: Путь к файлу логов (если не указан, только консоль)
        level: Уровень логирования
        max_bytes: Максимальный размер файла до ротации
        backup_count: Количество архивных файлов

    Returns:
        Настроенный logging.Logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Повторный вызов не должен дублировать обработчики
    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        directory = os.path.dirname(log_file)
        if directory:
            os.makedirs(directory, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
