import logging
import pytest


@pytest.fixture(autouse=True)
def reset_loggers():
    """Drop handlers the CLI binds to captured streams."""
    yield
    for name in ("arena", "arena_runtime"):
        logging.getLogger(name).handlers.clear()
