import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """The CLI installs its own handler and stops propagation; undo that per test."""
    yield
    logger = logging.getLogger("str_helpers")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
