import logging

import pytest

from deepdrop.logging_config import setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("deepdrop")
    yield logger
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


def test_setup_logging_does_not_stack_handlers(package_logger):
    setup_logging(level=logging.DEBUG)
    setup_logging(level=logging.DEBUG)

    assert len(package_logger.handlers) == 1
    assert package_logger.level == logging.DEBUG


def test_setup_logging_writes_to_file(package_logger, tmp_path):
    log_file = tmp_path / "deepdrop.log"
    setup_logging(level=logging.INFO, log_file=str(log_file))

    logging.getLogger("deepdrop.physics.solver").warning("probe message")
    for handler in package_logger.handlers:
        handler.flush()

    text = log_file.read_text(encoding="utf-8")
    assert "Logging initialized." in text
    assert "deepdrop.physics.solver - WARNING - probe message" in text
