"""Logging for the configurator: JSON log file, optional console echo, crash hooks.

``configure_logging`` may run more than once per process (the CLI configures a
quiet logger before the window loads its settings). Each call brings the
handlers it owns in line with its arguments instead of keeping the first set.
"""

from __future__ import annotations

import faulthandler
import json
import logging
import logging.handlers
import os
import sys
import threading
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from .config import config_root


_LOGGER_NAME = "xmastree"
_FILE_HANDLER = "xmastree.file"
_CONSOLE_HANDLER = "xmastree.console"
_RECORD_EXTRAS = ("event", "crash_id", "exit_code")

_fault_file = None


def log_dir() -> Path:
    path = config_root() / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts_utc": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        for key in _RECORD_EXTRAS:
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        return json.dumps(payload, ensure_ascii=True)


def _owned(logger: logging.Logger, name: str) -> logging.Handler | None:
    for handler in logger.handlers:
        if handler.get_name() == name:
            return handler
    return None


def _drop(logger: logging.Logger, handler: logging.Handler | None) -> None:
    if handler is not None:
        logger.removeHandler(handler)
        handler.close()


def _file_handler(path: Path, keep_files: int) -> logging.Handler:
    handler = logging.handlers.TimedRotatingFileHandler(
        filename=str(path),
        when="midnight",
        backupCount=keep_files,
        encoding="utf-8",
    )
    handler.set_name(_FILE_HANDLER)
    handler.setFormatter(JsonFormatter())
    return handler


def configure_logging(
    keep_files: int = 7,
    console: bool = True,
    directory: Path | None = None,
    level: int = logging.INFO,
) -> logging.Logger:
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    keep_files = max(2, keep_files)
    path = (directory or log_dir()) / "xmastree.log"

    current = _owned(logger, _FILE_HANDLER)
    if not (
        isinstance(current, logging.handlers.TimedRotatingFileHandler)
        and current.baseFilename == os.path.abspath(path)
        and current.backupCount == keep_files
    ):
        _drop(logger, current)
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.addHandler(_file_handler(path, keep_files))

    echo = _owned(logger, _CONSOLE_HANDLER)
    if console and echo is None:
        echo = logging.StreamHandler()
        echo.set_name(_CONSOLE_HANDLER)
        echo.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
        logger.addHandler(echo)
    elif not console:
        _drop(logger, echo)

    logger.info(
        f"logging configured keep_files={keep_files} console={console}",
        extra={"event": "logging_configured"},
    )
    return logger


def get_logger() -> logging.Logger:
    return logging.getLogger(_LOGGER_NAME)


def _install_fault_handler(logger: logging.Logger) -> None:
    global _fault_file
    if _fault_file is None:
        _fault_file = (log_dir() / "fault.log").open("a", encoding="utf-8")
    faulthandler.enable(file=_fault_file, all_threads=True)
    logger.info("fault handler enabled", extra={"event": "fault_handler_enabled"})


def _log_crash(message: str, event: str, exc_info) -> None:
    crash_id = str(uuid.uuid4())
    get_logger().critical(
        f"{message} crash_id={crash_id}",
        exc_info=exc_info,
        extra={"event": event, "crash_id": crash_id},
    )


def install_crash_hooks() -> None:
    def _uncaught(exc_type, exc_value, exc_tb) -> None:
        _log_crash("uncaught exception", "uncaught_exception", (exc_type, exc_value, exc_tb))

    def _thread(args: threading.ExceptHookArgs) -> None:
        _log_crash("thread exception", "thread_exception", (args.exc_type, args.exc_value, args.exc_traceback))

    sys.excepthook = _uncaught
    threading.excepthook = _thread
    _install_fault_handler(get_logger())
