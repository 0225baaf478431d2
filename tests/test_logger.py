"""
Тесты для логгера и его настройки через окружение
"""

import json
import logging
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

# Добавляем родительскую директорию в путь для импорта
parent_dir = Path(__file__).parent.parent
if str(parent_dir) not in sys.path:
    sys.path.insert(0, str(parent_dir))

# Настраиваем sys.modules для относительных импортов
import importlib.util

if "rosetta_keys.keys" not in sys.modules:
    sys.modules["rosetta_keys"] = type(sys)("rosetta_keys")
    for module_name in ("errors", "curves", "utils", "logger", "keys"):
        module_spec = importlib.util.spec_from_file_location(
            f"rosetta_keys.{module_name}", parent_dir / f"{module_name}.py"
        )
        module = importlib.util.module_from_spec(module_spec)
        sys.modules[f"rosetta_keys.{module_name}"] = module
        module_spec.loader.exec_module(module)

logger_module = sys.modules["rosetta_keys.logger"]

LOG_LEVEL_ENV = logger_module.LOG_LEVEL_ENV
LOG_FILE_ENV = logger_module.LOG_FILE_ENV
get_logger = logger_module.get_logger
level_from_env = logger_module.level_from_env


def release(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


class TestLevelFromEnv(unittest.TestCase):
    """Тесты уровня логирования из ROSETTA_KEYS_LOG_LEVEL"""

    def test_default_level(self):
        with mock.patch.dict(os.environ):
            os.environ.pop(LOG_LEVEL_ENV, None)
            self.assertEqual(level_from_env(), logging.WARNING)

    def test_level_name_case_insensitive(self):
        with mock.patch.dict(os.environ, {LOG_LEVEL_ENV: " debug "}):
            self.assertEqual(level_from_env(), logging.DEBUG)

    def test_unknown_level_falls_back(self):
        """Опечатка в имени уровня не ломает импорт пакета"""
        with mock.patch.dict(os.environ, {LOG_LEVEL_ENV: "verbose"}):
            with self.assertWarns(RuntimeWarning):
                level = level_from_env()
        self.assertEqual(level, logging.WARNING)


class TestGetLogger(unittest.TestCase):
    """Тесты get_logger"""

    def test_level_from_env(self):
        name = "rosetta_keys.test.env_level"
        with mock.patch.dict(os.environ, {LOG_LEVEL_ENV: "ERROR"}):
            logger = get_logger(name)
        self.addCleanup(release, logger)

        self.assertEqual(logger.level, logging.ERROR)

    def test_explicit_level_overrides_env(self):
        name = "rosetta_keys.test.explicit_level"
        with mock.patch.dict(os.environ, {LOG_LEVEL_ENV: "ERROR"}):
            logger = get_logger(name, level=logging.INFO)
        self.addCleanup(release, logger)

        self.assertEqual(logger.level, logging.INFO)

    def test_handlers_added_once(self):
        name = "rosetta_keys.test.once"
        logger = get_logger(name)
        self.addCleanup(release, logger)
        count = len(logger.handlers)

        self.assertIs(get_logger(name), logger)
        self.assertEqual(len(logger.handlers), count)

    def test_file_handler_writes_json_lines(self):
        """ROSETTA_KEYS_LOG_FILE добавляет файловый вывод в JSON формате"""
        name = "rosetta_keys.test.file"
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "logs", "keys.log")
            with mock.patch.dict(os.environ, {LOG_FILE_ENV: path}):
                logger = get_logger(name, level="INFO")

            self.assertTrue(
                any(isinstance(h, logging.FileHandler) for h in logger.handlers)
            )
            logger.info("generated %s keypair", "edwards25519")
            release(logger)

            with open(path) as f:
                lines = f.read().splitlines()

        self.assertEqual(len(lines), 1)
        record = json.loads(lines[0])
        self.assertEqual(set(record), {"ts", "level", "name", "msg"})
        self.assertEqual(record["level"], "INFO")
        self.assertEqual(record["name"], name)
        self.assertEqual(record["msg"], "generated edwards25519 keypair")
        self.assertTrue(record["ts"].endswith("Z"))


if __name__ == "__main__":
    unittest.main()
