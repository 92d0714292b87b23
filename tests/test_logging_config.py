"""
Tests for the logging setup.

pytest attaches its own capture handlers to the root logger while a test
runs, so each test strips the root logger inside its body and restores
it on exit.
"""
import logging
from contextlib import contextmanager

from catalog_api.app.core.logging_config import SQL_LOGGER, setup_logging


@contextmanager
def bare_root():
    root = logging.getLogger()
    sql_logger = logging.getLogger(SQL_LOGGER)
    saved = (root.handlers[:], root.level, sql_logger.level)
    root.handlers = []
    try:
        yield root
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers, level, sql_level = saved
        root.setLevel(level)
        sql_logger.setLevel(sql_level)


def test_console_and_file_handlers_use_given_format(tmp_path):
    logfile = tmp_path / "catalog.log"

    with bare_root() as root:
        setup_logging("debug", str(logfile), fmt="%(levelname)s|%(message)s", sql_level="ERROR")
        logging.getLogger("catalog.test").warning("stock low")

        assert root.level == logging.DEBUG
        assert logging.getLogger(SQL_LOGGER).level == logging.ERROR
        assert len(root.handlers) == 2
        for handler in root.handlers:
            handler.flush()

    assert logfile.read_text(encoding="utf-8").strip() == "WARNING|stock low"


def test_second_call_does_not_add_handlers():
    with bare_root() as root:
        setup_logging("INFO")
        setup_logging("WARNING")

        assert len(root.handlers) == 1
        assert root.level == logging.WARNING


def test_unknown_level_falls_back_to_info():
    with bare_root() as root:
        setup_logging("chatty")

        assert root.level == logging.INFO
