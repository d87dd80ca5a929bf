"""setup_logging: handlers are installed once, levels follow the settings."""

import logging

from user_directory_api.app.core.logging_config import LOG_FORMAT, setup_logging


def test_setup_logging_leaves_configured_root_alone():
    root = logging.getLogger()
    sentinel = logging.NullHandler()
    root.addHandler(sentinel)
    before = list(root.handlers)
    try:
        assert setup_logging("DEBUG") is False
        assert root.handlers == before
    finally:
        root.removeHandler(sentinel)


def test_setup_logging_installs_console_and_file_handlers(tmp_path):
    root = logging.getLogger()
    httpx_logger = logging.getLogger("httpx")
    old_root_level, old_httpx_level = root.level, httpx_logger.level
    saved = root.handlers[:]
    root.handlers.clear()
    logfile = tmp_path / "api.log"
    try:
        assert setup_logging("warning", str(logfile)) is True

        assert root.level == logging.WARNING
        assert [type(handler) for handler in root.handlers] == [logging.StreamHandler, logging.FileHandler]
        assert all(handler.formatter._fmt == LOG_FORMAT for handler in root.handlers)
        assert httpx_logger.level == logging.WARNING
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers[:] = saved
        root.setLevel(old_root_level)
        httpx_logger.setLevel(old_httpx_level)


def test_setup_logging_unknown_level_falls_back_to_info():
    root = logging.getLogger()
    httpx_logger = logging.getLogger("httpx")
    old_level, old_httpx_level = root.level, httpx_logger.level
    saved = root.handlers[:]
    root.handlers.clear()
    try:
        setup_logging("chatty")

        assert root.level == logging.INFO
    finally:
        root.handlers[:] = saved
        root.setLevel(old_level)
        httpx_logger.setLevel(old_httpx_level)
