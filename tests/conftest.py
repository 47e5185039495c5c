# Headless Qt for the signal bridge tests; everything else is Qt-free.

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(autouse=True)
def _reset_sparkles_logger():
    import logging

    logger = logging.getLogger("sparkles")
    level = logger.level
    yield
    logger.setLevel(level)
