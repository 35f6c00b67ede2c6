# demoshop_e2e/utils/logging_config.py

import json
import logging
import os
import sys
from datetime import datetime
from typing import Optional

from demoshop_e2e.config.config import LOG_DIR, LOG_FILE_NAME, LOG_LEVEL

# Logger every module of the suite logs under (module loggers are children of it)
SUITE_LOGGER_NAME = "demoshop_e2e"

# Custom levels between INFO (20) and WARNING (30)
STEP = 21
SUCCESS = 25
logging.addLevelName(STEP, "STEP")
logging.addLevelName(SUCCESS, "SUCCESS")

logger = logging.getLogger(__name__)


class JsonFormatter(logging.Formatter):
    """Custom JSON formatter for the execution log file."""
    def format(self, record):
        log_record = {
            "timestamp": datetime.fromtimestamp(record.created).astimezone().isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "module": record.name,
            "funcName": record.funcName,
            "lineno": record.lineno,
            "service": "demoshop-e2e",
        }

        # logger.info("message", extra={'extra_context': {'test': 'test_login'}})
        if hasattr(record, 'extra_context') and isinstance(record.extra_context, dict):
            log_record.update(record.extra_context)

        if record.exc_info:
            log_record['exc_info'] = self.formatException(record.exc_info)

        if record.stack_info:
            log_record['stack_info'] = self.formatStack(record.stack_info)

        return json.dumps(log_record, default=str)


class ConsoleFormatter(logging.Formatter):
    """Human-readable console lines: 'LEVEL: message'."""
    def __init__(self):
        super().__init__("%(levelname)s: %(message)s")

    def format(self, record):
        message = super().format(record)
        context = getattr(record, 'extra_context', None) or {}
        test_name = context.get('test')
        if test_name:
            return f"[{test_name}] {message}"
        return message


def _log_file_path(log_dir: str, file_name: str) -> str:
    os.makedirs(log_dir, exist_ok=True)
    return os.path.join(log_dir, file_name)


def setup_logging(log_dir: str = LOG_DIR, file_name: str = LOG_FILE_NAME,
                  level: str = LOG_LEVEL, console: bool = True) -> str:
    """Configures the suite logger with a console handler and an append-only JSON file handler.

    Returns the path of the log file.
    """
    suite_logger = logging.getLogger(SUITE_LOGGER_NAME)
    suite_logger.setLevel(level)

    # Remove existing handlers to avoid duplicate logs when called again
    for handler in list(suite_logger.handlers):
        suite_logger.removeHandler(handler)
        handler.close()

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(ConsoleFormatter())
        suite_logger.addHandler(console_handler)

    log_path = _log_file_path(log_dir, file_name)
    file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(JsonFormatter())
    suite_logger.addHandler(file_handler)

    logger.debug(f"Logging configured, writing to {log_path}")
    return log_path


def current_log_file() -> Optional[str]:
    """Path of the file the suite logger currently appends to, if any."""
    for handler in logging.getLogger(SUITE_LOGGER_NAME).handlers:
        if isinstance(handler, logging.FileHandler):
            return handler.baseFilename
    return None


def new_log_file(log_dir: str = LOG_DIR, level: str = LOG_LEVEL, console: bool = True) -> str:
    """Switches logging to a fresh timestamped file, e.g. logs/test-execution_2025-01-31T10-15-00.log."""
    timestamp = datetime.now().strftime("%Y-%m-%dT%H-%M-%S")
    return setup_logging(log_dir, f"test-execution_{timestamp}.log", level, console)


def clear_log():
    """Deletes the current log file. The handler reopens it on the next record."""
    path = current_log_file()
    if path is None:
        return
    for handler in logging.getLogger(SUITE_LOGGER_NAME).handlers:
        if isinstance(handler, logging.FileHandler):
            handler.close()
    if os.path.exists(path):
        os.remove(path)


class JourneyLogger(logging.LoggerAdapter):
    """Logger used by test scripts and journeys.

    Adds the STEP and SUCCESS levels plus test start/end banners, and tags every
    record with the current test name.
    """

    def __init__(self, test_name: str = "", logger_name: str = f"{SUITE_LOGGER_NAME}.journey"):
        super().__init__(logging.getLogger(logger_name), {"test": test_name})

    @property
    def test_name(self) -> str:
        return self.extra["test"]

    def process(self, msg, kwargs):
        extra = kwargs.setdefault("extra", {})
        context = dict(extra.get("extra_context", {}))
        if self.extra.get("test"):
            context.setdefault("test", self.extra["test"])
        extra["extra_context"] = context
        return msg, kwargs

    def step(self, message, *args, **kwargs):
        self.log(STEP, message, *args, **kwargs)

    def success(self, message, *args, **kwargs):
        self.log(SUCCESS, message, *args, **kwargs)

    def test_start(self, test_name: Optional[str] = None):
        self.info(f"========== TEST STARTED: {test_name or self.test_name} ==========")

    def test_end(self, status: str, test_name: Optional[str] = None):
        level = logging.ERROR if status.upper() == "FAILED" else logging.INFO
        self.log(level, f"========== TEST {status.upper()}: {test_name or self.test_name} ==========")
