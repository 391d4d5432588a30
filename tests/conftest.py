from __future__ import annotations

from typing import Iterator, List

import pytest
from loguru import logger


@pytest.fixture
def log_messages() -> Iterator[List[str]]:
    """Warnings and errors emitted through loguru while the test runs."""
    messages: List[str] = []
    handler_id = logger.add(messages.append, level="WARNING", format="{level}: {message}")
    yield messages
    logger.remove(handler_id)
