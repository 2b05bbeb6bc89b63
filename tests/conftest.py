from __future__ import annotations

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_loguru():
    """Drop any sinks a test installed so they don't outlive its captured streams."""
    yield
    logger.remove()
