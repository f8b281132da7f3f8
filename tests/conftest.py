"""Root pytest configuration for all tests."""

import logging

import pytest

# The Notion SDK and HTTP stack log every request at DEBUG/INFO; keep test
# output focused on this project's loggers.
for noisy_logger in ("notion_client", "httpx", "urllib3"):
    logging.getLogger(noisy_logger).setLevel(logging.WARNING)


@pytest.fixture(autouse=True)
def reset_app_logger():
    """Undo CLI logging configuration between tests."""
    app_logger = logging.getLogger("src")
    yield
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()
    app_logger.setLevel(logging.NOTSET)
