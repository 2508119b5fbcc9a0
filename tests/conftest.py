import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_tesscad_logger():
    """Undo handlers installed by CLI runs so later tests log cleanly."""
    yield
    logger = logging.getLogger("tesscad")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
