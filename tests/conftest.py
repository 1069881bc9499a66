import pytest
from hostdash.logger_setup import logger


@pytest.fixture(autouse=True)
def _restore_logger_handlers():
    saved = list(logger.handlers)
    level = logger.level
    yield
    for h in logger.handlers:
        if h not in saved:
            h.close()
    logger.handlers[:] = saved
    logger.setLevel(level)
