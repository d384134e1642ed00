"""Test logging setup for the pointgeometry namespace.

Tests for pointgeometry.logging_config:
    - Importing the package leaves only a NullHandler
    - Repeated setup replaces its own handlers, never the host's
    - Level accepted by name; unknown names rejected
    - Log file is appended to, not truncated

Run:
    pytest tests/test_logging_config.py -v
"""
import logging

import pytest

import pointgeometry
from pointgeometry.logging_config import setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("pointgeometry")
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    saved_propagate = logger.propagate
    yield logger
    for handler in list(logger.handlers):
        if handler not in saved_handlers:
            handler.close()
            logger.removeHandler(handler)
    for handler in saved_handlers:
        if handler not in logger.handlers:
            logger.addHandler(handler)
    logger.setLevel(saved_level)
    logger.propagate = saved_propagate


def test_import_installs_null_handler(package_logger):
    assert pointgeometry.__version__
    assert any(isinstance(h, logging.NullHandler) for h in package_logger.handlers)


def test_setup_logging_keeps_host_handlers(package_logger):
    host_handler = logging.StreamHandler()
    package_logger.addHandler(host_handler)

    setup_logging()
    logger = setup_logging()

    assert logger is package_logger
    assert host_handler in package_logger.handlers
    owned = [h for h in package_logger.handlers if getattr(h, "_pointgeometry_owned", False)]
    assert len(owned) == 1
    assert package_logger.level == logging.WARNING


def test_setup_logging_level_by_name(package_logger):
    setup_logging("debug", propagate=False)

    assert package_logger.level == logging.DEBUG
    assert package_logger.propagate is False


def test_setup_logging_rejects_unknown_level(package_logger):
    with pytest.raises(ValueError):
        setup_logging("LOUD")


def test_setup_logging_appends_to_file(package_logger, tmp_path):
    log_file = tmp_path / "host.log"
    log_file.write_text("host line\n", encoding="utf-8")

    setup_logging(level=logging.DEBUG, log_file=str(log_file))
    logging.getLogger("pointgeometry.model.bezier").debug("refinement capped")
    for handler in package_logger.handlers:
        handler.flush()

    text = log_file.read_text(encoding="utf-8")
    assert text.startswith("host line")
    assert "appending to" in text
    assert "refinement capped" in text
