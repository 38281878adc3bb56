import json
import logging
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from xmastree_core.logging_setup import JsonFormatter, configure_logging, get_logger


class LoggingSetupTests(unittest.TestCase):
    def _record(self, **extra):
        record = logging.LogRecord("xmastree.store", logging.INFO, __file__, 1, "scale %s", (2.5,), None)
        for k, v in extra.items():
            setattr(record, k, v)
        return record

    def test_json_formatter_fields(self):
        payload = json.loads(JsonFormatter().format(self._record(event="parameter_changed")))
        self.assertEqual(payload["level"], "INFO")
        self.assertEqual(payload["logger"], "xmastree.store")
        self.assertEqual(payload["msg"], "scale 2.5")
        self.assertEqual(payload["event"], "parameter_changed")
        self.assertIn("ts_utc", payload)

    def test_json_formatter_without_event(self):
        payload = json.loads(JsonFormatter().format(self._record()))
        self.assertNotIn("event", payload)
        self.assertNotIn("exc", payload)


class ConfigureLoggingTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.directory = Path(self._tmp.name)
        self.addCleanup(self._tmp.cleanup)
        self._reset()
        self.addCleanup(self._reset)

    def _reset(self):
        logger = get_logger()
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

    def _handlers(self):
        return {type(h).__name__: h for h in get_logger().handlers}

    def test_later_call_applies_window_settings(self):
        # Quiet command-line setup first, then the window's settings.
        configure_logging(console=False, directory=self.directory)
        configure_logging(keep_files=30, console=True, directory=self.directory)

        handlers = self._handlers()
        self.assertIn("StreamHandler", handlers)
        self.assertEqual(handlers["TimedRotatingFileHandler"].backupCount, 30)
        self.assertEqual(len(get_logger().handlers), 2)

    def test_console_can_be_switched_off_again(self):
        configure_logging(console=True, directory=self.directory)
        configure_logging(console=False, directory=self.directory)
        self.assertEqual(list(self._handlers()), ["TimedRotatingFileHandler"])

    def test_repeat_call_keeps_single_file_handler(self):
        configure_logging(keep_files=5, console=False, directory=self.directory)
        first = get_logger().handlers[0]
        configure_logging(keep_files=5, console=False, directory=self.directory)
        self.assertEqual(get_logger().handlers, [first])
        self.assertTrue((self.directory / "xmastree.log").exists())


if __name__ == "__main__":
    unittest.main()
