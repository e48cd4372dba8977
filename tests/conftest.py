import logging

import pytest


@pytest.fixture(autouse=True)
def reset_app_logger():
    """Undo the handlers installed by the application bootstrap."""
    yield
    logger = logging.getLogger("xfce_terminal_themes")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
