import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_nucfreq_logger():
    """Drop handlers main() attached so they don't outlive the captured streams."""
    yield
    logger = logging.getLogger("nucfreq")
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
