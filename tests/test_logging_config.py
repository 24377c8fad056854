"""
Tests for the package logging setup.
"""

import logging

import pytest

from organiks_api.app.core.logging_config import PACKAGE_LOGGER, setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    saved = (logger.level, list(logger.handlers), logger.propagate)
    access = logging.getLogger("uvicorn.access")
    access_level = access.level
    logger.handlers.clear()
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.setLevel(saved[0])
    logger.handlers[:] = saved[1]
    logger.propagate = saved[2]
    access.setLevel(access_level)


def test_handlers_are_attached_once(package_logger):
    assert setup_logging("INFO") is package_logger
    handlers = list(package_logger.handlers)

    setup_logging("DEBUG")

    assert package_logger.handlers == handlers
    assert package_logger.level == logging.DEBUG
    assert package_logger.propagate is False


def test_module_loggers_share_package_handlers(package_logger):
    setup_logging("WARNING")
    child = logging.getLogger("organiks_api.app.services.egg_order_service")
    assert child.getEffectiveLevel() == logging.WARNING
    assert not child.handlers


def test_access_log_is_quiet_unless_debugging(package_logger):
    setup_logging("INFO")
    assert logging.getLogger("uvicorn.access").level == logging.WARNING
    setup_logging("DEBUG")
    assert logging.getLogger("uvicorn.access").level == logging.DEBUG


def test_unknown_level_falls_back_to_info(package_logger):
    setup_logging("chatty")
    assert package_logger.level == logging.INFO


def test_log_file(package_logger, tmp_path):
    logfile = tmp_path / "api.log"
    setup_logging("INFO", str(logfile))

    logging.getLogger("organiks_api.app.main").info("Serving records")
    for handler in package_logger.handlers:
        handler.flush()

    assert "[INFO] organiks_api.app.main: Serving records" in logfile.read_text(encoding="utf-8")
