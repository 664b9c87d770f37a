import logging

import pytest


@pytest.fixture(autouse=True)
def reset_autogrid_logger():
    """Drop handlers left on the shared "autogrid" logger by setup_logging."""
    logger = logging.getLogger("autogrid")

    def _clear():
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

    _clear()
    yield
    _clear()
