# tests/unit/test_logging_config.py

import json
import logging
import os

import pytest

from demoshop_e2e.utils import logging_config
from demoshop_e2e.utils.logging_config import SUCCESS, SUITE_LOGGER_NAME, JourneyLogger


@pytest.fixture
def suite_logger():
    # Tests reconfigure the suite logger; put the session's handlers back afterwards
    suite = logging.getLogger(SUITE_LOGGER_NAME)
    saved_handlers, saved_level = list(suite.handlers), suite.level
    yield suite
    for handler in list(suite.handlers):
        suite.removeHandler(handler)
        handler.close()
    for handler in saved_handlers:
        suite.addHandler(handler)
    suite.setLevel(saved_level)


def _read_records(path):
    for handler in logging.getLogger(SUITE_LOGGER_NAME).handlers:
        handler.flush()
    with open(path, encoding="utf-8") as f:
        return [json.loads(line) for line in f if line.strip()]


def test_custom_levels_are_registered():
    assert logging.getLevelName(logging_config.STEP) == "STEP"
    assert logging.getLevelName(SUCCESS) == "SUCCESS"
    assert logging.INFO < logging_config.STEP < SUCCESS < logging.WARNING


def test_file_gets_one_json_object_per_record(suite_logger, tmp_path):
    # Arrange
    path = logging_config.setup_logging(str(tmp_path), "run.log", "DEBUG", console=False)
    log = JourneyLogger("test_checkout")

    # Act
    log.step("Adding products")
    log.success("Order placed")

    # Assert
    records = _read_records(path)
    assert [r["level"] for r in records[-2:]] == ["STEP", "SUCCESS"]
    assert records[-1]["message"] == "Order placed"
    assert records[-1]["test"] == "test_checkout"
    assert records[-1]["service"] == "demoshop-e2e"


def test_setup_logging_appends_and_does_not_duplicate_handlers(suite_logger, tmp_path):
    logging_config.setup_logging(str(tmp_path), "run.log", "INFO", console=True)
    path = logging_config.setup_logging(str(tmp_path), "run.log", "INFO", console=True)

    assert len(suite_logger.handlers) == 2
    assert logging_config.current_log_file() == os.path.abspath(path)


def test_test_end_logs_failures_at_error_level(suite_logger, tmp_path):
    path = logging_config.setup_logging(str(tmp_path), "run.log", "INFO", console=False)
    log = JourneyLogger("test_login")

    log.test_start()
    log.test_end("failed")

    records = _read_records(path)
    assert "TEST STARTED: test_login" in records[-2]["message"]
    assert records[-1]["level"] == "ERROR"
    assert "TEST FAILED: test_login" in records[-1]["message"]


def test_exceptions_are_serialized(suite_logger, tmp_path):
    path = logging_config.setup_logging(str(tmp_path), "run.log", "INFO", console=False)

    try:
        raise RuntimeError("cart total mismatch")
    except RuntimeError:
        logging.getLogger(f"{SUITE_LOGGER_NAME}.tests").exception("Step failed")

    record = _read_records(path)[-1]
    assert "RuntimeError: cart total mismatch" in record["exc_info"]


def test_new_log_file_and_clear_log(suite_logger, tmp_path):
    # Arrange
    path = logging_config.new_log_file(str(tmp_path), console=False)
    logging.getLogger(SUITE_LOGGER_NAME).info("something")

    # Act
    logging_config.clear_log()

    # Assert
    assert os.path.basename(path).startswith("test-execution_")
    assert not os.path.exists(path)


def test_console_formatter_prefixes_test_name():
    record = logging.LogRecord(SUITE_LOGGER_NAME, logging.INFO, __file__, 1, "Cart validated", None, None)
    record.extra_context = {"test": "test_cart"}

    assert logging_config.ConsoleFormatter().format(record) == "[test_cart] INFO: Cart validated"
