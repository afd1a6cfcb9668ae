import logging
import tempfile
import unittest
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from lua_sources.config.models import FileLoggingSettings, FileRotationSettings, LoggingSettings
from lua_sources.logging import init_logging


class InitLoggingTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.root = Path(self._tmp.name)

        root_logger = logging.getLogger()
        saved_handlers, saved_level = list(root_logger.handlers), root_logger.level

        def restore() -> None:
            for handler in list(root_logger.handlers):
                root_logger.removeHandler(handler)
                if handler not in saved_handlers:
                    handler.close()
            for handler in saved_handlers:
                root_logger.addHandler(handler)
            root_logger.setLevel(saved_level)

        self.addCleanup(restore)

    def _settings(self, path: str, *, backup_count: int = 5, level: str = "INFO") -> LoggingSettings:
        return LoggingSettings(
            level=level,
            file=FileLoggingSettings(path=path, rotation=FileRotationSettings(backup_count=backup_count)),
        )

    @staticmethod
    def _handlers(kind: type) -> list:
        return [h for h in logging.getLogger().handlers if type(h) is kind]

    def test_repeated_calls_do_not_duplicate_handlers(self) -> None:
        settings = self._settings("")
        init_logging(settings)
        init_logging(settings)

        self.assertEqual(len(logging.getLogger().handlers), 1)
        self.assertEqual(len(self._handlers(logging.StreamHandler)), 1)

    def test_file_path_adds_rotating_handler(self) -> None:
        log_path = self.root / "logs" / "lua-sources.log"
        init_logging(self._settings(str(log_path), backup_count=3, level="debug"))

        file_handlers = self._handlers(TimedRotatingFileHandler)
        self.assertEqual(len(file_handlers), 1)
        self.assertEqual(file_handlers[0].backupCount, 3)
        self.assertEqual(file_handlers[0].when, "MIDNIGHT")
        self.assertTrue(log_path.parent.is_dir())
        self.assertEqual(logging.getLogger().level, logging.DEBUG)

    def test_empty_path_adds_no_file_handler(self) -> None:
        init_logging(self._settings(""))

        self.assertEqual(self._handlers(TimedRotatingFileHandler), [])
        self.assertFalse(any(isinstance(h, logging.FileHandler) for h in logging.getLogger().handlers))


if __name__ == "__main__":
    unittest.main()
