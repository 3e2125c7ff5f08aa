import logging

import pytest

from rastervis.logging_config import resolve_level, setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("rastervis")
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.mark.parametrize("value, expected", [
    (None, logging.INFO),
    (logging.DEBUG, logging.DEBUG),
    ("warning", logging.WARNING),
    (" 10 ", 10),
    ("chatty", logging.INFO),
])
def test_resolve_level(value, expected):
    assert resolve_level(value) == expected


def test_repeated_setup_does_not_stack_handlers(package_logger):
    setup_logging(environ={})
    setup_logging(environ={})
    assert len(package_logger.handlers) == 1


def test_environment_selects_level_and_file(package_logger, tmp_path):
    log_file = tmp_path / "rastervis.log"
    setup_logging(level=logging.INFO, environ={
        "RASTERVIS_LOG_LEVEL": "DEBUG",
        "RASTERVIS_LOG_FILE": str(log_file),
    })
    assert package_logger.level == logging.DEBUG
    assert len(package_logger.handlers) == 2

    logging.getLogger("rastervis.model.rasterization").debug("probe message")
    for handler in package_logger.handlers:
        handler.flush()
    assert "probe message" in log_file.read_text(encoding="utf-8")
