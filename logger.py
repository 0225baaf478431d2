"""
Логирование пакета

Уровень и файл задаются переменными окружения:
    ROSETTA_KEYS_LOG_LEVEL - имя уровня (по умолчанию WARNING)
    ROSETTA_KEYS_LOG_FILE  - путь к файлу для дополнительного вывода
"""

import json
import logging
import os
import sys
import time
import warnings
from typing import Optional, Union

LOGGER_NAME = "rosetta_keys"
LOG_LEVEL_ENV = "ROSETTA_KEYS_LOG_LEVEL"
LOG_FILE_ENV = "ROSETTA_KEYS_LOG_FILE"
DEFAULT_LOG_LEVEL = "WARNING"


def level_from_env() -> int:
    """
    Возвращает уровень логирования из окружения

    Неизвестное имя уровня заменяется на DEFAULT_LOG_LEVEL с предупреждением.
    """
    name = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        warnings.warn(
            f"{LOG_LEVEL_ENV}: unknown log level {name!r}, using {DEFAULT_LOG_LEVEL}",
            RuntimeWarning,
        )
        level = logging.getLevelName(DEFAULT_LOG_LEVEL)
    return level


def get_logger(
    name: str = LOGGER_NAME,
    level: Optional[Union[int, str]] = None,
    to_file: Optional[str] = None
) -> logging.Logger:
    """Структурированный логгер (одна JSON строка на запись, время в UTC)"""
    logger = logging.getLogger(name)

    if not logger.handlers:
        logger.setLevel(level if level is not None else level_from_env())

        formatter = logging.Formatter(
            fmt=json.dumps({
                "ts": "%(asctime)s",
                "level": "%(levelname)s",
                "name": "%(name)s",
                "msg": "%(message)s"
            }),
            datefmt="%Y-%m-%dT%H:%M:%SZ",
        )
        formatter.converter = time.gmtime

        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

        to_file = to_file or os.environ.get(LOG_FILE_ENV)
        if to_file:
            directory = os.path.dirname(to_file)
            if directory:
                os.makedirs(directory, exist_ok=True)
            file_handler = logging.FileHandler(to_file)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
