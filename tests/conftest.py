import logging

import pytest

from path_pattern import Options


@pytest.fixture
def options():
    """Default options."""
    return Options()


@pytest.fixture
def package_logger():
    """Package logger, restored to its original state after the test."""
    log = logging.getLogger("path_pattern")
    handlers = list(log.handlers)
    level = log.level
    propagate = log.propagate
    yield log
    log.handlers = handlers
    log.setLevel(level)
    log.propagate = propagate
